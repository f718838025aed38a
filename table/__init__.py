"""
Sparse, nullable two-dimensional tables.

A Table maps a (Column header, Row identifier) pair to a value:
  - ``Table``       — the abstract interface
  - ``PairedTable`` — dict-backed implementation keyed by ``(header, identifier)``
"""

from table.base import Table
from table.errors import DuplicateIdentifierError, NoSuchElementError, TableError
from table.paired import PairedTable

__all__ = [
    "Table",
    "PairedTable",
    "TableError",
    "DuplicateIdentifierError",
    "NoSuchElementError",
]
