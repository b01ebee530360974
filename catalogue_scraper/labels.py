"""
Catalogue labels are free text, a few of them get renamed to something
shorter/stabler before they are stored.
"""

# Raw label as it appears on the catalogue page -> the name we store it under
LABEL_ALIASES = {
    "Satisfies New General Education": "GE satisfied",
}

# Labels that always exist on a CourseDetail, even if the page never mentioned them
DEFAULT_FIELDS = {
    "GE satisfied": "",
}

def normalize_label(label: str) -> str:
    return LABEL_ALIASES.get(label, label)

def split_label(text: str) -> tuple[str, str] | None:
    """
    Splits 'Label: value' on the first colon. Returns None when there is no colon
    or either side ends up empty after trimming.
    """
    text = text.strip()
    if ":" not in text:
        return None
    label, _, value = text.partition(":")
    label, value = label.strip(), value.strip()
    if not label or not value:
        return None
    return normalize_label(label), value

def apply_defaults(fields: dict[str, str]) -> dict[str, str]:
    for label, default in DEFAULT_FIELDS.items():
        fields.setdefault(label, default)
    return fields
