"""
Utility to render a Table into an HTML <table> string.
"""

from __future__ import annotations

from typing import Any, List

from table.base import Table
from utils.text import cell_text


def _escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def render_table_html(table: Table[Any, Any, Any], table_header: str = "") -> str:
    """
    Render *table* into an HTML ``<table>`` string.

    The header row starts with *table_header* followed by every Column
    header; each body row starts with its Row identifier.  Absent cells
    are empty and ``None`` cells read ``null``, as in the text grid.
    """
    headers = list(table.iter_column_headers())
    identifiers = list(table.iter_row_identifiers())

    parts: List[str] = ['<table border="1" cellpadding="5" cellspacing="0">']

    # <thead>
    parts.append("  <thead>")
    parts.append("    <tr>")
    parts.append(f"      <th>{_escape_html(str(table_header))}</th>")
    for header in headers:
        parts.append(f"      <th>{_escape_html(str(header))}</th>")
    parts.append("    </tr>")
    parts.append("  </thead>")

    # <tbody>
    if identifiers:
        parts.append("  <tbody>")
        for identifier in identifiers:
            parts.append("    <tr>")
            parts.append(f"      <th>{_escape_html(str(identifier))}</th>")
            for header in headers:
                val = _escape_html(cell_text(table, header, identifier))
                parts.append(f"      <td>{val}</td>")
            parts.append("    </tr>")
        parts.append("  </tbody>")

    parts.append("</table>")
    return "\n".join(parts)
