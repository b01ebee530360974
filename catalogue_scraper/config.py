from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from catalogue_scraper.errors import ValidationError

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/128.0.0.0 Safari/537.36"
)

class ScraperConfig(BaseModel):
    """
    Run-wide knobs. Anything catalogue specific (host, catoid, navoid) lives on the provider instead.
    """
    model_config = ConfigDict(frozen=True)

    max_pages: int = Field(default=2, ge=1)
    # Seconds to wait after every request, be nice to the catalogue server
    request_delay: float = Field(default=1.0, ge=0)
    timeout: float = Field(default=15, gt=0)
    output_dir: Path = Path(".")
    progress_every: int = Field(default=10, ge=1)
    preview_count: int = Field(default=3, ge=0)
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def build(cls, **overrides) -> "ScraperConfig":
        """
        Builds a config from keyword overrides, None values are ignored so CLI
        arguments that weren't given fall back to the defaults.
        """
        values = {key: value for key, value in overrides.items() if value is not None}
        try:
            return cls(**values)
        except PydanticValidationError as error:
            raise ValidationError(f"Invalid configuration: {error}") from error

    @property
    def course_ids_path(self) -> Path:
        return self.output_dir / "course_ids.json"

    @property
    def course_details_path(self) -> Path:
        return self.output_dir / "course_details.json"

    @property
    def course_csv_path(self) -> Path:
        return self.output_dir / "course_details.csv"
