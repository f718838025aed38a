"""Shared fixtures for the table tests."""

from __future__ import annotations

from typing import Any

import pytest

from table.paired import PairedTable


@pytest.fixture
def table() -> PairedTable[Any, Any, Any]:
    return PairedTable()


@pytest.fixture
def grid() -> PairedTable[Any, Any, Any]:
    """Columns A, B and rows x, y with every cell set."""
    t: PairedTable[Any, Any, Any] = PairedTable()
    t.add_column("A")
    t.add_column("B")
    t.add_row("x")
    t.add_row("y")
    t.set("A", "x", 1)
    t.set("B", "x", 2)
    t.set("A", "y", 3)
    t.set("B", "y", 4)
    return t
