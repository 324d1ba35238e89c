"""Border style presets and cell alignment."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

TableStyle = Literal[
    "default",
    "markdown",
    "mysql",
    "mysql_simple",
    "simple",
    "unicode",
    "unicode_alt",
]


class Alignment(str, Enum):
    """Horizontal placement of text inside a cell."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


_UNICODE_SINGLE: dict[str, Any] = {
    "inner_column_delimiter": "│",
    "outer_column_delimiter": "│",
    "header_row_divider": "─",
    "inner_row_divider": "─",
    "outer_row_divider": "─",
    "header_top_intersection": "┬",
    "header_bottom_intersection": "┼",
    "inner_intersection": "┼",
    "outer_bottom_horizontal_intersection": "┴",
    "outer_left_vertical_intersection": "├",
    "outer_right_vertical_intersection": "┤",
    "top_left_corner": "┌",
    "top_right_corner": "┐",
    "bottom_left_corner": "└",
    "bottom_right_corner": "┘",
}

# Field overrides applied on top of TableConfiguration defaults.
STYLE_PRESETS: dict[str, dict[str, Any]] = {
    "default": {},
    "markdown": {
        "header_bottom_intersection": "|",
        "outer_left_vertical_intersection": "|",
        "outer_right_vertical_intersection": "|",
        "has_top_row": False,
        "has_inner_rows": False,
        "has_bottom_row": False,
    },
    "mysql": {"has_inner_rows": False},
    "mysql_simple": {
        "has_top_row": False,
        "has_inner_rows": False,
        "has_bottom_row": False,
    },
    "simple": {
        "inner_column_delimiter": " ",
        "header_bottom_intersection": " ",
        "has_top_row": False,
        "has_inner_rows": False,
        "has_bottom_row": False,
        "has_outer_columns": False,
    },
    "unicode": dict(_UNICODE_SINGLE),
    "unicode_alt": {
        **_UNICODE_SINGLE,
        "outer_column_delimiter": "║",
        "header_row_divider": "═",
        "outer_row_divider": "═",
        "header_top_intersection": "╤",
        "header_bottom_intersection": "╪",
        "outer_bottom_horizontal_intersection": "╧",
        "outer_left_vertical_intersection": "╟",
        "outer_right_vertical_intersection": "╢",
        "top_left_corner": "╔",
        "top_right_corner": "╗",
        "bottom_left_corner": "╚",
        "bottom_right_corner": "╝",
    },
}


def normalize_style_name(name: str) -> str:
    """Normalize a style name: case-insensitive, '-' and '_' interchangeable."""
    return str(name).strip().lower().replace("-", "_")


def get_style_overrides(name: str) -> dict[str, Any]:
    """Return a copy of the field overrides for a named style."""
    key = normalize_style_name(name)
    if key not in STYLE_PRESETS:
        valid = ", ".join(sorted(STYLE_PRESETS))
        raise ValueError(f"style must be one of: {valid}")
    return dict(STYLE_PRESETS[key])


def list_styles() -> list[str]:
    """List all available style names."""
    return sorted(STYLE_PRESETS)


__all__ = [
    "Alignment",
    "STYLE_PRESETS",
    "TableStyle",
    "get_style_overrides",
    "list_styles",
    "normalize_style_name",
]
