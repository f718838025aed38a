"""
PairedTable — a Table backed by a single dict keyed by ``(header, identifier)``.

Column headers and Row identifiers are kept in insertion-ordered dicts
used as sets, so iteration and rendering are deterministic.  Each cell
is logically stored under the key ``(header, identifier)``; a key that
is missing means no value was ever recorded for that cell.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Mapping, Optional, Set, Tuple

from table.base import C, R, Table, V
from table.constants import DEFAULT_CELL_WIDTH, DEFAULT_TABLE_HEADER
from table.errors import DuplicateIdentifierError, NoSuchElementError
from utils.text import render_grid

logger = logging.getLogger(__name__)


class PairedTable(Table[V, C, R]):
    """
    Sparse, nullable table of values indexed by Column header and Row identifier.

    Usage::

        table = PairedTable()
        table.add_column("Name")
        table.add_row("alice")
        table.set("Name", "alice", "Alice")
        table.get_row("alice")          # {"Name": "Alice"}
    """

    def __init__(self) -> None:
        self._cells: Dict[Tuple[C, R], Optional[V]] = {}
        self._headers: Dict[C, None] = {}
        self._identifiers: Dict[R, None] = {}

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _key(header: C, identifier: R) -> Tuple[C, R]:
        return (header, identifier)

    def _require_column(self, header: C) -> None:
        if header not in self._headers:
            raise NoSuchElementError(f"Column '{header}' does not exist in this Table!")

    def _require_row(self, identifier: R) -> None:
        if identifier not in self._identifiers:
            raise NoSuchElementError(f"Row '{identifier}' does not exist in this Table!")

    # ------------------------------------------------------------------
    # Columns
    # ------------------------------------------------------------------

    def add_column(self, header: C, values: Optional[Mapping[R, V]] = None) -> bool:
        if values is None:
            if header in self._headers:
                return False
            self._headers[header] = None
            logger.debug("Added column %r", header)
            return True

        if header in self._headers:
            raise DuplicateIdentifierError(f"Column '{header}' already exists in this Table!")

        # Materialise before mutating so a bad mapping leaves the table untouched.
        writes = [
            (identifier, value)
            for identifier, value in values.items()
            if identifier in self._identifiers
        ]
        self._headers[header] = None
        for identifier, value in writes:
            self._cells[self._key(header, identifier)] = value
        logger.debug("Added column %r with %d value(s)", header, len(writes))
        return True

    def remove_column(self, header: C) -> bool:
        if header not in self._headers:
            return False
        del self._headers[header]
        for identifier in self._identifiers:
            self._cells.pop(self._key(header, identifier), None)
        logger.debug("Removed column %r", header)
        return True

    def clear_column(self, header: C) -> bool:
        if header not in self._headers:
            return False
        for identifier in self._identifiers:
            self.clear(header, identifier)
        return True

    def contains_column(self, header: C) -> bool:
        return header in self._headers

    def get_column_headers(self) -> Set[C]:
        return set(self._headers)

    def iter_column_headers(self) -> Iterator[C]:
        return iter(list(self._headers))

    def get_column(self, header: C) -> Dict[R, Optional[V]]:
        self._require_column(header)
        return {
            identifier: self.get(header, identifier)
            for identifier in self._identifiers
        }

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def add_row(self, identifier: R, values: Optional[Mapping[C, V]] = None) -> bool:
        if values is None:
            if identifier in self._identifiers:
                return False
            self._identifiers[identifier] = None
            logger.debug("Added row %r", identifier)
            return True

        if identifier in self._identifiers:
            raise DuplicateIdentifierError(f"Row '{identifier}' already exists in this Table!")

        writes = [
            (header, value)
            for header, value in values.items()
            if header in self._headers
        ]
        self._identifiers[identifier] = None
        for header, value in writes:
            self._cells[self._key(header, identifier)] = value
        logger.debug("Added row %r with %d value(s)", identifier, len(writes))
        return True

    def remove_row(self, identifier: R) -> bool:
        if identifier not in self._identifiers:
            return False
        del self._identifiers[identifier]
        for header in self._headers:
            self._cells.pop(self._key(header, identifier), None)
        logger.debug("Removed row %r", identifier)
        return True

    def clear_row(self, identifier: R) -> bool:
        if identifier not in self._identifiers:
            return False
        for header in self._headers:
            self.clear(header, identifier)
        return True

    def contains_row(self, identifier: R) -> bool:
        return identifier in self._identifiers

    def get_row_identifiers(self) -> Set[R]:
        return set(self._identifiers)

    def iter_row_identifiers(self) -> Iterator[R]:
        return iter(list(self._identifiers))

    def get_row(self, identifier: R) -> Dict[C, Optional[V]]:
        self._require_row(identifier)
        return {
            header: self.get(header, identifier)
            for header in self._headers
        }

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------

    def get(self, header: C, identifier: R) -> Optional[V]:
        return self._cells.get(self._key(header, identifier))

    def get_or_else(self, header: C, identifier: R, default: V) -> Optional[V]:
        if self.contains(header, identifier):
            return self.get(header, identifier)
        return default

    def set(self, header: C, identifier: R, value: Optional[V]) -> None:
        self._require_column(header)
        self._require_row(identifier)
        self._cells[self._key(header, identifier)] = value

    def clear(self, header: C, identifier: R) -> bool:
        if not self.contains(header, identifier):
            return False
        self._cells[self._key(header, identifier)] = None
        return True

    def contains(self, header: C, identifier: R) -> bool:
        return self._key(header, identifier) in self._cells

    # ------------------------------------------------------------------
    # Representation / value semantics
    # ------------------------------------------------------------------

    def representation(
        self,
        width: int = DEFAULT_CELL_WIDTH,
        table_header: str = DEFAULT_TABLE_HEADER,
    ) -> str:
        return render_grid(self, width, table_header)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, PairedTable):
            return NotImplemented
        return (
            self._cells == other._cells
            and self._headers.keys() == other._headers.keys()
            and self._identifiers.keys() == other._identifiers.keys()
        )

    def __hash__(self) -> int:
        # Values may be unhashable, so only the keys take part.  Equal tables
        # hash equal; mutating a table changes its hash.
        return hash(
            (
                frozenset(self._cells),
                frozenset(self._headers),
                frozenset(self._identifiers),
            )
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(columns={len(self._headers)}, "
            f"rows={len(self._identifiers)}, cells={len(self._cells)})"
        )
