"""boxtable - aligned, delimiter-framed plain-text tables for the console.

Build a :class:`Table` from column headers and rows of values, optionally
with a :class:`TableConfiguration` or a named style, and render it with
``str(table)``.
"""

from __future__ import annotations

from typing import Any

__version__ = "0.1.0"


# Lazy imports keep `import boxtable` free of pydantic and rich.
def __getattr__(name: str) -> Any:
    """Lazy import of the public API."""
    if name == "Table":
        from boxtable.table import Table

        return Table
    if name in ("TableConfiguration", "Alignment", "list_styles"):
        from boxtable import models

        return getattr(models, name)
    if name in ("TableError", "TableArgumentError", "TableStateError"):
        from boxtable import errors

        return getattr(errors, name)
    if name == "print_table":
        from boxtable.console import print_table

        return print_table
    raise AttributeError(f"module 'boxtable' has no attribute {name!r}")


__all__ = [
    "__version__",
    "Alignment",
    "Table",
    "TableArgumentError",
    "TableConfiguration",
    "TableError",
    "TableStateError",
    "list_styles",
    "print_table",
]
