import re
from typing import Any

CATEGORIES = ("top", "bottom", "shoes", "outerwear", "accessory")
REQUIRED_CATEGORIES = ("top", "bottom", "shoes")
OPTIONAL_CATEGORIES = ("outerwear", "accessory")
WARMTH_LEVELS = ("light", "medium", "heavy")
FORMALITY_LEVELS = ("casual", "smart", "business")

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9._-]")


def is_category(value: Any) -> bool:
    return isinstance(value, str) and value in CATEGORIES


def is_warmth(value: Any) -> bool:
    return isinstance(value, str) and value in WARMTH_LEVELS


def is_formality(value: Any) -> bool:
    return isinstance(value, str) and value in FORMALITY_LEVELS


def parse_colors(raw: str | None) -> list[str]:
    """Split a comma separated color field, e.g. "navy, white" -> ["navy", "white"]."""
    return [c.strip() for c in (raw or "").split(",") if c.strip()]


def sanitize_filename(filename: str) -> str:
    return _UNSAFE_FILENAME_CHARS.sub("_", filename)
