"""
TableData: a pydantic snapshot of a Table's contents.

Only recorded cells are listed, so a snapshot keeps the difference
between an absent cell and a cell holding ``None``.

The JSON form keeps JSON-native keys and values only: tuple keys come
back as tuples, but dates, sets and other objects come back as their
JSON encoding (dates as ISO strings).
"""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, field_validator

from dto.cell_data import CellData, freeze_key
from table.base import Table
from table.paired import PairedTable


class TableData(BaseModel):
    """Structured representation of a single Table."""

    headers: List[Any] = []
    identifiers: List[Any] = []
    cells: List[CellData] = []

    @field_validator("headers", "identifiers")
    @classmethod
    def freeze_axis_keys(cls, v: List[Any]) -> List[Any]:
        return [freeze_key(k) for k in v]

    @classmethod
    def from_table(cls, table: Table[Any, Any, Any]) -> "TableData":
        headers = list(table.iter_column_headers())
        identifiers = list(table.iter_row_identifiers())
        cells = [
            CellData(
                header=header,
                identifier=identifier,
                value=table.get(header, identifier),
            )
            for identifier in identifiers
            for header in headers
            if table.contains(header, identifier)
        ]
        return cls(headers=headers, identifiers=identifiers, cells=cells)

    def to_table(self) -> PairedTable[Any, Any, Any]:
        """
        Rebuild a ``PairedTable`` from this snapshot.

        Raises ``NoSuchElementError`` if a cell references a Column or Row
        that the snapshot does not declare.
        """
        table: PairedTable[Any, Any, Any] = PairedTable()
        for header in self.headers:
            table.add_column(header)
        for identifier in self.identifiers:
            table.add_row(identifier)
        for cell in self.cells:
            table.set(cell.header, cell.identifier, cell.value)
        return table
