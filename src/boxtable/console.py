"""Console output for rendered tables."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from boxtable.table import Table

console = Console()


def print_table(table: Table, console_instance: Console | None = None) -> None:
    """Write the rendered table to the console exactly as laid out."""
    target = console_instance or console
    rendered = Text(table.render(), no_wrap=True, overflow="ignore")
    target.print(rendered, markup=False, highlight=False, soft_wrap=True, end="")


__all__ = ["console", "print_table"]
