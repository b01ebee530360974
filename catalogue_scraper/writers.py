"""
Output side of the pipeline, everything here overwrites whatever was there before.
"""
from pathlib import Path
from typing import Any, Iterable
import logging
import orjson

from catalogue_scraper.models import ScrapedCourse

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "url",
    "title",
    "Units",
    "Terms Offered",
    "Registration Restriction",
    "Instruction Mode",
    "Grading Option",
    "GE satisfied",
    "Max Units",
]

def write_json(path: Path, data: Any) -> None:
    """
    Writes 'data' as 2-space indented UTF-8 JSON. Pydantic models are dumped first.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as fh:
        fh.write(orjson.dumps(data, option=orjson.OPT_INDENT_2, default=_dump_model))

def _dump_model(value: Any) -> Any:
    # orjson calls this for anything it can't serialize natively
    if hasattr(value, "to_record"):
        return value.to_record()
    if hasattr(value, "model_dump"):
        return value.model_dump()
    raise TypeError(f"Type is not JSON serializable: {type(value).__name__}")

def quote_csv_value(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'

def format_csv(courses: Iterable[ScrapedCourse]) -> str:
    # Header is left unquoted, every value is quoted
    lines = [",".join(CSV_COLUMNS)]
    for course in courses:
        lines.append(",".join(quote_csv_value(course.details.get(column)) for column in CSV_COLUMNS))
    return "\n".join(lines) + "\n"

def write_csv(path: Path, courses: Iterable[ScrapedCourse]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" so \n isn't turned into \r\n on Windows
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(format_csv(courses))
