"""
Utilities to render a Table as a boxed grid of fixed-width text cells.

    +-----+-----+-----+
    |     |    A|    B|
    +-----+-----+-----+
    |    x|    1|     |
    |    y| null|    4|
    +-----+-----+-----+
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

if TYPE_CHECKING:
    from table.base import Table

_ELLIPSIS = "..."


def empty_table_message(num_columns: int, num_rows: int) -> str:
    return (
        f"Table has {num_columns} Columns and {num_rows} Rows. "
        "Add more data to visualize the Table"
    )


def fit_cell(text: str, width: int) -> str:
    """
    Fit *text* into exactly *width* characters.

    Longer text keeps its first ``width - 3`` characters followed by
    ``...``; shorter text is left-padded with spaces.
    """
    if len(text) > width:
        return text[: width - len(_ELLIPSIS)] + _ELLIPSIS
    return text.rjust(width)


def cell_text(table: Table[Any, Any, Any], header: Any, identifier: Any) -> str:
    """Return the display text of a cell: ``""`` if absent, ``"null"`` for ``None``."""
    if not table.contains(header, identifier):
        return ""
    value = table.get(header, identifier)
    return "null" if value is None else str(value)


def render_grid(table: Table[Any, Any, Any], width: int, table_header: str = "") -> str:
    """
    Render *table* as a boxed grid.

    Columns and Rows follow the table's insertion order.  An empty table
    (no Columns or no Rows) renders as a short message with the counts.
    """
    headers = list(table.iter_column_headers())
    identifiers = list(table.iter_row_identifiers())

    if not headers or not identifiers:
        return empty_table_message(len(headers), len(identifiers))

    if width < len(_ELLIPSIS):
        raise ValueError(f"Cell width must be at least {len(_ELLIPSIS)}, got {width}")

    unit = "+" + "-" * width
    separator = unit * (len(headers) + 1) + "+"

    def _line(texts: List[str]) -> str:
        return "|" + "|".join(fit_cell(t, width) for t in texts) + "|"

    lines: List[str] = [
        separator,
        _line([str(table_header)] + [str(h) for h in headers]),
        separator,
    ]
    for identifier in identifiers:
        lines.append(
            _line(
                [str(identifier)]
                + [cell_text(table, header, identifier) for header in headers]
            )
        )
    lines.append(separator)
    return "\n".join(lines)
