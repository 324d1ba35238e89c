"""Pydantic models for boxtable configuration and styles."""

from .config import GLYPH_FIELDS, TableConfiguration
from .styles import (
    STYLE_PRESETS,
    Alignment,
    TableStyle,
    get_style_overrides,
    list_styles,
)

__all__ = [
    "Alignment",
    "GLYPH_FIELDS",
    "STYLE_PRESETS",
    "TableConfiguration",
    "TableStyle",
    "get_style_overrides",
    "list_styles",
]
