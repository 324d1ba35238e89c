"""Tests for boxtable.console."""

from __future__ import annotations

import io

from rich.console import Console

from boxtable.console import print_table
from boxtable.table import Table


def _console(buffer: io.StringIO) -> Console:
    return Console(file=buffer, width=120, color_system=None, force_terminal=False)


def test_print_table_writes_rendered_text(people: Table) -> None:
    buffer = io.StringIO()
    print_table(people, _console(buffer))
    assert buffer.getvalue() == people.render()


def test_markup_like_text_is_printed_verbatim() -> None:
    table = Table("[bold]x[/bold]").add_row("[red]")
    buffer = io.StringIO()
    _console(buffer).print(table)
    assert buffer.getvalue() == table.render()


def test_print_table_without_columns_writes_nothing() -> None:
    buffer = io.StringIO()
    print_table(Table(), _console(buffer))
    assert buffer.getvalue() == ""
