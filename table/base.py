"""
Base class for all two-dimensional tables.

A Table keeps its values in tabular form: every value is associated with
exactly one Column (identified by its *header*) and one Row (identified by
its *identifier*).  Values may be ``None``.

  - All Column headers are unique.
  - All Row identifiers are unique.
  - A cell that was never written is *absent*; that is different from a
    cell that holds ``None``.  ``contains`` tells the two apart.

Write paths (``set``, bulk ``add_column`` / ``add_row``, ``get_row`` /
``get_column``) check that the header and identifier exist.  Cell reads
(``get``, ``get_or_else``, ``contains``) never raise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Generic, Iterator, Mapping, Optional, Set, TypeVar

from table.constants import DEFAULT_CELL_WIDTH, DEFAULT_TABLE_HEADER

V = TypeVar("V")
C = TypeVar("C")
R = TypeVar("R")


class Table(ABC, Generic[V, C, R]):
    """
    Interface that every table implementation must provide.

    ``V`` is the value type, ``C`` the Column header type and ``R`` the Row
    identifier type.  Headers and identifiers must be hashable.
    """

    # ------------------------------------------------------------------
    # Columns
    # ------------------------------------------------------------------

    @abstractmethod
    def add_column(self, header: C, values: Optional[Mapping[R, V]] = None) -> bool:
        """
        Add a Column to this Table.

        Without *values*, returns ``False`` (and changes nothing) if the
        Column already exists, ``True`` otherwise.

        With *values*, the Column must not exist yet, otherwise
        ``DuplicateIdentifierError`` is raised and the Table is left
        unchanged.  Existing Rows take their value from *values*; Rows
        missing from it stay unset and keys that are not known Row
        identifiers are ignored.
        """
        ...

    @abstractmethod
    def remove_column(self, header: C) -> bool:
        """Remove a Column and all its cells.  Returns whether it existed."""
        ...

    @abstractmethod
    def clear_column(self, header: C) -> bool:
        """Set every recorded cell of a Column to ``None``.  Returns whether it existed."""
        ...

    @abstractmethod
    def contains_column(self, header: C) -> bool:
        ...

    @abstractmethod
    def get_column_headers(self) -> Set[C]:
        """Return a copy of the Column headers."""
        ...

    @abstractmethod
    def iter_column_headers(self) -> Iterator[C]:
        """Iterate over the Column headers in insertion order."""
        ...

    @abstractmethod
    def get_column(self, header: C) -> Dict[R, Optional[V]]:
        """
        Map every known Row identifier to its value under *header*
        (``None`` where absent).

        Raises ``NoSuchElementError`` if the Column does not exist.
        """
        ...

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    @abstractmethod
    def add_row(self, identifier: R, values: Optional[Mapping[C, V]] = None) -> bool:
        """Row counterpart of ``add_column``."""
        ...

    @abstractmethod
    def remove_row(self, identifier: R) -> bool:
        ...

    @abstractmethod
    def clear_row(self, identifier: R) -> bool:
        ...

    @abstractmethod
    def contains_row(self, identifier: R) -> bool:
        ...

    @abstractmethod
    def get_row_identifiers(self) -> Set[R]:
        ...

    @abstractmethod
    def iter_row_identifiers(self) -> Iterator[R]:
        ...

    @abstractmethod
    def get_row(self, identifier: R) -> Dict[C, Optional[V]]:
        ...

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------

    @abstractmethod
    def get(self, header: C, identifier: R) -> Optional[V]:
        """Return the value at *header* / *identifier*, ``None`` if there is none."""
        ...

    @abstractmethod
    def get_or_else(self, header: C, identifier: R, default: V) -> Optional[V]:
        """Return the recorded value, or *default* if no value was recorded."""
        ...

    @abstractmethod
    def set(self, header: C, identifier: R, value: Optional[V]) -> None:
        """
        Associate *value* with *header* / *identifier*.

        Raises ``NoSuchElementError`` if either the Column or the Row does
        not exist.
        """
        ...

    @abstractmethod
    def clear(self, header: C, identifier: R) -> bool:
        """Set a recorded cell to ``None``.  Returns ``False`` if no value was recorded."""
        ...

    @abstractmethod
    def contains(self, header: C, identifier: R) -> bool:
        """Return ``True`` if a value (possibly ``None``) is recorded for the cell."""
        ...

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    @abstractmethod
    def representation(
        self,
        width: int = DEFAULT_CELL_WIDTH,
        table_header: str = DEFAULT_TABLE_HEADER,
    ) -> str:
        """Render this Table as a boxed grid of fixed-width cells."""
        ...

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        header, identifier = key
        return self.contains(header, identifier)

    def __str__(self) -> str:
        return self.representation()
