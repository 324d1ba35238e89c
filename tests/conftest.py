"""Shared fixtures for boxtable tests."""

from __future__ import annotations

import pathlib
import sys

import pytest

# Ensure src directory is in path
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.append(str(SRC_PATH))

from boxtable.table import Table  # noqa: E402


@pytest.fixture
def people() -> Table:
    """Two columns, two rows, default configuration."""
    return Table("Name", "Age").add_row("Alice", 30).add_row("Bob", 4)
