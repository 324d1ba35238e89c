"""Table layout configuration model."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .styles import get_style_overrides

GLYPH_FIELDS: tuple[str, ...] = (
    "inner_column_delimiter",
    "outer_column_delimiter",
    "header_row_divider",
    "inner_row_divider",
    "outer_row_divider",
    "header_top_intersection",
    "header_bottom_intersection",
    "inner_intersection",
    "outer_bottom_horizontal_intersection",
    "outer_left_vertical_intersection",
    "outer_right_vertical_intersection",
    "top_left_corner",
    "top_right_corner",
    "bottom_left_corner",
    "bottom_right_corner",
)


class TableConfiguration(BaseModel):
    """Delimiter glyphs and border toggles used when rendering a table.

    Every glyph is a single character. An empty glyph (``""`` or ``None``)
    removes that border position from the output.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    # Column delimiters
    inner_column_delimiter: str = Field(default="|", description="Delimiter between cells")
    outer_column_delimiter: str = Field(default="|", description="Delimiter at row edges")

    # Divider fill characters
    header_row_divider: str = Field(default="-", description="Fill for top and header dividers")
    inner_row_divider: str = Field(default="-", description="Fill for dividers between rows")
    outer_row_divider: str = Field(default="-", description="Fill for the bottom divider")

    # Intersections
    header_top_intersection: str = Field(default="+", description="Top divider crossing")
    header_bottom_intersection: str = Field(default="+", description="Header divider crossing")
    inner_intersection: str = Field(default="+", description="Inner divider crossing")
    outer_bottom_horizontal_intersection: str = Field(
        default="+", description="Bottom divider crossing"
    )
    outer_left_vertical_intersection: str = Field(
        default="+", description="Left edge of header and inner dividers"
    )
    outer_right_vertical_intersection: str = Field(
        default="+", description="Right edge of header and inner dividers"
    )

    # Corners
    top_left_corner: str = Field(default="+", description="Top-left corner")
    top_right_corner: str = Field(default="+", description="Top-right corner")
    bottom_left_corner: str = Field(default="+", description="Bottom-left corner")
    bottom_right_corner: str = Field(default="+", description="Bottom-right corner")

    # Toggles
    has_top_row: bool = Field(default=True, description="Draw the divider above the header")
    has_header_row: bool = Field(default=True, description="Draw the divider below the header")
    has_inner_rows: bool = Field(default=True, description="Draw dividers between data rows")
    has_bottom_row: bool = Field(default=True, description="Draw the divider below the last row")
    has_outer_columns: bool = Field(default=True, description="Draw the left and right edges")

    @field_validator(*GLYPH_FIELDS, mode="before")
    @classmethod
    def parse_glyph(cls, value: Any) -> str:
        """Accept a single character; None and "" mean no glyph."""
        if value is None:
            return ""
        text = str(value)
        if len(text) > 1:
            raise ValueError("glyph must be a single character")
        return text

    @classmethod
    def from_style(
        cls, style: str = "default", overrides: dict[str, Any] | None = None
    ) -> TableConfiguration:
        """Create a configuration from a style preset with optional overrides."""
        base = get_style_overrides(style)
        updates = {k: v for k, v in (overrides or {}).items() if k in cls.model_fields}
        base.update(updates)
        return cls(**base)

    @classmethod
    def from_env(cls) -> TableConfiguration:
        """Create a configuration from the BOXTABLE_STYLE environment variable."""
        return cls.from_style(os.getenv("BOXTABLE_STYLE", "default"))


__all__ = ["GLYPH_FIELDS", "TableConfiguration"]
