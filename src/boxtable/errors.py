"""Exceptions raised by boxtable."""

from __future__ import annotations


class TableError(Exception):
    """Base class for all table errors."""


class TableArgumentError(TableError, ValueError):
    """Raised when a required argument is missing or of the wrong kind."""


class TableStateError(TableError, RuntimeError):
    """Raised when a mutation is not valid for the table's current shape."""

    def __init__(self, message: str, column_count: int = 0, value_count: int = 0):
        self.column_count = column_count
        self.value_count = value_count
        super().__init__(message)


__all__ = ["TableArgumentError", "TableError", "TableStateError"]
