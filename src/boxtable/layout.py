"""Pure layout helpers: column widths, cell alignment, rows and dividers.

Every width counts characters, so a width of ``n`` means ``len(text) == n``.
Each cell is written with one space on either side, which is why dividers
span ``width + 2`` fill characters per column.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from boxtable.models.styles import Alignment

CELL_PADDING = 1


def stringify(value: Any) -> str:
    """Return the display text of a cell or header value."""
    return value if isinstance(value, str) else str(value)


def column_widths(headers: Sequence[Any], rows: Iterable[Sequence[Any]]) -> list[int]:
    """Compute the widest text per column across the header and all rows.

    Rows are expected to be exactly ``len(headers)`` long.
    """
    widths = [len(stringify(header)) for header in headers]
    for row in rows:
        for index, value in enumerate(row[: len(widths)]):
            length = len(stringify(value))
            if length > widths[index]:
                widths[index] = length
    return widths


def align_cell(text: str, width: int, alignment: Alignment = Alignment.LEFT) -> str:
    """Pad ``text`` with spaces to ``width``; never truncates."""
    spare = width - len(text)
    if spare <= 0:
        return text
    if alignment is Alignment.RIGHT:
        return " " * spare + text
    if alignment is Alignment.CENTER:
        left = spare // 2
        return " " * left + text + " " * (spare - left)
    return text + " " * spare


def format_row(
    cells: Sequence[Any],
    widths: Sequence[int],
    left: str,
    interior: str,
    right: str,
    alignments: Sequence[Alignment] | None = None,
) -> str:
    """Format one row as ``left cell interior cell ... right``."""
    pad = " " * CELL_PADDING
    parts: list[str] = []
    for index, width in enumerate(widths):
        alignment = alignments[index] if alignments else Alignment.LEFT
        text = align_cell(stringify(cells[index]), width, alignment)
        parts.append(pad + text + pad)
    return left + interior.join(parts) + right


def format_divider(
    widths: Sequence[int],
    left: str,
    interior: str,
    right: str,
    fill: str,
) -> str:
    """Build a divider line whose crossings line up with :func:`format_row`.

    An empty ``fill`` draws a blank line of the same width.
    """
    fill = fill or " "
    segments = [fill * (width + 2 * CELL_PADDING) for width in widths]
    return left + interior.join(segments) + right


__all__ = [
    "CELL_PADDING",
    "align_cell",
    "column_widths",
    "format_divider",
    "format_row",
    "stringify",
]
