"""
Worksheet bridge — move a Table in and out of an openpyxl Worksheet.

Layout (both directions)::

    A1 = table header | B1.. = Column headers
    A2.. = Row identifiers | interior = cell values

Blank interior cells are absent from the Table; absent and ``None``
cells are written as blanks.
"""

from __future__ import annotations

import datetime
import decimal
import logging
from typing import Any, Dict, Tuple

from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from table.base import Table
from table.paired import PairedTable

logger = logging.getLogger(__name__)

_NATIVE_TYPES = (
    str,
    int,
    float,
    bool,
    decimal.Decimal,
    datetime.datetime,
    datetime.date,
    datetime.time,
    datetime.timedelta,
)


def _coord(col: int, row: int) -> str:
    """Return an A1-style coordinate from 1-based col/row indices."""
    return f"{get_column_letter(col)}{row}"


def _to_cell_value(value: Any) -> Any:
    """openpyxl only stores native scalar types; anything else is written as text."""
    if value is None or isinstance(value, _NATIVE_TYPES):
        return value
    return str(value)


def extract_table(ws: Worksheet) -> Tuple[PairedTable[Any, Any, Any], str]:
    """
    Read the used range of *ws* into a ``PairedTable``.

    Returns ``(table, table_header)`` where *table_header* is the text of
    the top-left cell (``""`` if blank).  Blank or duplicate Column
    headers / Row identifiers are skipped with a warning; the first
    occurrence wins.
    """
    min_row, min_col = ws.min_row, ws.min_column
    max_row, max_col = ws.max_row, ws.max_column

    corner = ws.cell(row=min_row, column=min_col).value
    table_header = "" if corner is None else str(corner)

    table: PairedTable[Any, Any, Any] = PairedTable()

    # Column index -> header, for the columns that made it into the table
    headers_by_col: Dict[int, Any] = {}
    for col in range(min_col + 1, max_col + 1):
        header = ws.cell(row=min_row, column=col).value
        if header is None:
            logger.warning(
                "Skipping column %s: blank header", get_column_letter(col)
            )
            continue
        if not table.add_column(header):
            logger.warning(
                "Skipping column %s: duplicate header %r",
                get_column_letter(col),
                header,
            )
            continue
        headers_by_col[col] = header

    for row in range(min_row + 1, max_row + 1):
        identifier = ws.cell(row=row, column=min_col).value
        if identifier is None:
            logger.warning("Skipping row %d: blank identifier", row)
            continue
        if table.contains_row(identifier):
            logger.warning(
                "Skipping row %d: duplicate identifier %r", row, identifier
            )
            continue

        values: Dict[Any, Any] = {}
        for col, header in headers_by_col.items():
            value = ws.cell(row=row, column=col).value
            if value is not None:
                values[header] = value
        table.add_row(identifier, values)

    logger.info(
        "Extracted table from '%s' (%s:%s): %d column(s), %d row(s)",
        ws.title,
        _coord(min_col, min_row),
        _coord(max_col, max_row),
        len(headers_by_col),
        len(table.get_row_identifiers()),
    )
    return table, table_header


def write_table(
    table: Table[Any, Any, Any],
    ws: Worksheet,
    table_header: str = "",
) -> None:
    """Write *table* into *ws* starting at ``A1``, using the layout above."""
    ws.cell(row=1, column=1).value = table_header or None

    headers = list(table.iter_column_headers())
    for col, header in enumerate(headers, start=2):
        ws.cell(row=1, column=col).value = _to_cell_value(header)

    for row, identifier in enumerate(table.iter_row_identifiers(), start=2):
        ws.cell(row=row, column=1).value = _to_cell_value(identifier)
        for col, header in enumerate(headers, start=2):
            if table.contains(header, identifier):
                ws.cell(row=row, column=col).value = _to_cell_value(
                    table.get(header, identifier)
                )
