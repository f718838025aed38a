"""
Errors raised by Table implementations.

Write paths are strict (unknown headers / identifiers raise), cell-read
paths are permissive (unknown keys read as "no value").
"""


class TableError(Exception):
    """Base class for every error raised by a Table."""


class DuplicateIdentifierError(TableError, ValueError):
    """A bulk insertion referenced a Column header or Row identifier that already exists."""


class NoSuchElementError(TableError, KeyError):
    """An operation referenced a Column header or Row identifier the Table does not know."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""
