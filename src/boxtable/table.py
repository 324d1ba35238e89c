"""Table model: headers, rows and text rendering."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from rich.text import Text

from boxtable.errors import TableArgumentError, TableStateError
from boxtable.layout import column_widths, format_divider, format_row
from boxtable.models.config import TableConfiguration
from boxtable.models.styles import Alignment

logger = logging.getLogger(__name__)

EMPTY_CELL = ""


class Table:
    """A console table of column headers and rows of displayable values.

    Every stored row always holds exactly one cell per column: short rows are
    padded with empty cells when added, and adding columns pads existing rows.

    Rendering is a pure read of the current state. Mutation is not
    thread-safe; callers sharing a table across threads must lock around it.

    Examples:
        >>> table = Table("Name", "Age").add_row("Alice", 30)
        >>> print(table)
        +-------+-----+
        | Name  | Age |
        +-------+-----+
        | Alice | 30  |
        +-------+-----+
        <BLANKLINE>
    """

    def __init__(self, *columns: Any, config: TableConfiguration | None = None) -> None:
        if columns and isinstance(columns[0], TableConfiguration):
            if config is not None:
                raise TableArgumentError("configuration passed both positionally and by keyword")
            config, columns = columns[0], columns[1:]

        self.config = config if config is not None else TableConfiguration()
        self._columns: list[Any] = []
        self._alignments: list[Alignment] = []
        self._rows: list[list[Any]] = []
        self._extend_columns(columns, Alignment.LEFT)

    @classmethod
    def from_records(
        cls,
        columns: Iterable[Any] | None,
        rows: Iterable[Sequence[Any]] | None,
        config: TableConfiguration | None = None,
    ) -> Table:
        """Build a table from a column collection and a row collection."""
        if columns is None:
            raise TableArgumentError("columns must not be None")
        if rows is None:
            raise TableArgumentError("rows must not be None")
        return cls(*columns, config=config).add_rows(rows)

    # ------------------------------------------------------------------
    # Read surface
    # ------------------------------------------------------------------

    @property
    def columns(self) -> tuple[Any, ...]:
        return tuple(self._columns)

    @property
    def rows(self) -> tuple[tuple[Any, ...], ...]:
        return tuple(tuple(row) for row in self._rows)

    @property
    def alignments(self) -> tuple[Alignment, ...]:
        return tuple(self._alignments)

    @property
    def longest_row(self) -> int:
        """Length of the longest stored row (0 when there are no rows)."""
        return max((len(row) for row in self._rows), default=0)

    @property
    def config(self) -> TableConfiguration:
        return self._config

    @config.setter
    def config(self, value: TableConfiguration) -> None:
        if not isinstance(value, TableConfiguration):
            raise TableArgumentError(
                f"config must be a TableConfiguration, got {type(value).__name__}"
            )
        self._config = value

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_row(self, *values: Any) -> Table:
        """Append one row, padding it with empty cells up to the column count."""
        self._rows.append(self._normalize_row(values))
        return self

    def add_rows(self, rows: Iterable[Sequence[Any]] | None) -> Table:
        """Append several rows. Either every row is added or none is."""
        if rows is None:
            raise TableArgumentError("rows must not be None")
        normalized = []
        for row in rows:
            if row is None:
                raise TableArgumentError("row must not be None")
            if isinstance(row, (str, bytes)):
                raise TableArgumentError("row must be a sequence of cells, not a string")
            normalized.append(self._normalize_row(tuple(row)))
        self._rows.extend(normalized)
        return self

    def add_column(self, title: Any, alignment: Alignment = Alignment.LEFT) -> Table:
        """Append one column; existing rows get an empty cell for it."""
        self._extend_columns((title,), alignment)
        return self

    def add_columns(self, *titles: Any, alignment: Alignment = Alignment.LEFT) -> Table:
        """Append several columns; existing rows get empty cells for them."""
        self._extend_columns(titles, alignment)
        return self

    def set_alignment(self, index: int, alignment: Alignment) -> Table:
        """Change the alignment of the column at ``index``."""
        if not 0 <= index < len(self._columns):
            raise TableArgumentError(
                f"column index {index} is out of range for {len(self._columns)} columns"
            )
        self._alignments[index] = Alignment(alignment)
        return self

    def _extend_columns(self, titles: Sequence[Any], alignment: Alignment) -> None:
        if not titles:
            return
        alignment = Alignment(alignment)
        self._columns.extend(titles)
        self._alignments.extend(alignment for _ in titles)
        if self._rows:
            logger.debug(
                "Padding %d rows with %d empty cells for new columns",
                len(self._rows),
                len(titles),
            )
            for row in self._rows:
                row.extend(EMPTY_CELL for _ in titles)

    def _normalize_row(self, values: Sequence[Any]) -> list[Any]:
        column_count = len(self._columns)
        if column_count == 0:
            logger.debug("Rejected row of %d values: table has no columns", len(values))
            raise TableStateError(
                "No columns exist, add columns before adding rows",
                column_count=column_count,
                value_count=len(values),
            )
        if len(values) > column_count:
            logger.debug(
                "Rejected row of %d values: table has %d columns", len(values), column_count
            )
            raise TableStateError(
                f"The row has {len(values)} values but the table has only "
                f"{column_count} columns",
                column_count=column_count,
                value_count=len(values),
            )
        row = list(values)
        if len(row) < column_count:
            logger.debug("Padding row of %d values to %d columns", len(row), column_count)
            row.extend(EMPTY_CELL for _ in range(column_count - len(row)))
        return row

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Render the table as text, one line break after every line."""
        if not self._columns:
            return ""

        cfg = self._config
        widths = column_widths(self._columns, self._rows)

        if cfg.has_outer_columns:
            edge_left = edge_right = cfg.outer_column_delimiter
        else:
            edge_left = edge_right = ""

        def row_line(cells: Sequence[Any]) -> str:
            return format_row(
                cells, widths, edge_left, cfg.inner_column_delimiter, edge_right, self._alignments
            )

        def divider(left: str, interior: str, right: str, fill: str) -> str:
            if not cfg.has_outer_columns:
                left = right = ""
            return format_divider(widths, left, interior, right, fill)

        lines: list[str] = []
        if cfg.has_top_row:
            lines.append(
                divider(
                    cfg.top_left_corner,
                    cfg.header_top_intersection,
                    cfg.top_right_corner,
                    cfg.header_row_divider,
                )
            )

        lines.append(row_line(self._columns))

        if cfg.has_header_row:
            lines.append(
                divider(
                    cfg.outer_left_vertical_intersection,
                    cfg.header_bottom_intersection,
                    cfg.outer_right_vertical_intersection,
                    cfg.header_row_divider,
                )
            )

        inner_divider = divider(
            cfg.outer_left_vertical_intersection,
            cfg.inner_intersection,
            cfg.outer_right_vertical_intersection,
            cfg.inner_row_divider,
        )
        for index, row in enumerate(self._rows):
            if index > 0 and cfg.has_inner_rows:
                lines.append(inner_divider)
            lines.append(row_line(row))

        if cfg.has_bottom_row:
            lines.append(
                divider(
                    cfg.bottom_left_corner,
                    cfg.outer_bottom_horizontal_intersection,
                    cfg.bottom_right_corner,
                    cfg.outer_row_divider,
                )
            )

        return "".join(line + "\n" for line in lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Table(columns={len(self._columns)}, rows={len(self._rows)})"

    def __rich__(self) -> Text:
        return Text(self.render().rstrip("\n"), no_wrap=True, overflow="ignore")


__all__ = ["EMPTY_CELL", "Table"]
