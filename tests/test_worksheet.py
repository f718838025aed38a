import datetime
import logging

import pytest
from openpyxl import Workbook

from extractors.worksheet import extract_table, write_table
from table.paired import PairedTable


@pytest.fixture
def ws():
    return Workbook().active


def test_extract_table(ws):
    ws.append(["id", "A", "B"])
    ws.append(["x", 1, None])
    ws.append(["y", None, "four"])

    table, table_header = extract_table(ws)

    assert table_header == "id"
    assert list(table.iter_column_headers()) == ["A", "B"]
    assert list(table.iter_row_identifiers()) == ["x", "y"]
    assert table.get_row("x") == {"A": 1, "B": None}
    assert table.contains("A", "x")
    assert not table.contains("B", "x")
    assert table.get("B", "y") == "four"


def test_extract_table_respects_used_range_offset(ws):
    ws["C3"] = "corner"
    ws["D3"] = "A"
    ws["C4"] = "x"
    ws["D4"] = 42

    table, table_header = extract_table(ws)

    assert table_header == "corner"
    assert table.get_row("x") == {"A": 42}


def test_extract_table_skips_blank_and_duplicate_keys(ws, caplog):
    ws.append([None, "A", None, "A", "B"])
    ws.append(["x", 1, 2, 3, 4])
    ws.append([None, 5, 6, 7, 8])
    ws.append(["x", 9, 10, 11, 12])

    with caplog.at_level(logging.WARNING, logger="extractors.worksheet"):
        table, table_header = extract_table(ws)

    assert table_header == ""
    assert table.get_column_headers() == {"A", "B"}
    assert table.get_row_identifiers() == {"x"}
    # First occurrence wins for both axes
    assert table.get_row("x") == {"A": 1, "B": 4}

    messages = [r.getMessage() for r in caplog.records]
    assert any("blank header" in m for m in messages)
    assert any("duplicate header 'A'" in m for m in messages)
    assert any("blank identifier" in m for m in messages)
    assert any("duplicate identifier 'x'" in m for m in messages)


def test_extract_empty_sheet(ws):
    table, table_header = extract_table(ws)
    assert table_header == ""
    assert table.get_column_headers() == set()
    assert table.get_row_identifiers() == set()


def test_write_table_then_extract(ws):
    table = PairedTable()
    table.add_column("when")
    table.add_column("count")
    table.add_row("r1")
    table.add_row("r2")
    table.set("when", "r1", datetime.datetime(2024, 1, 2, 3, 4, 5))
    table.set("count", "r2", 7)

    write_table(table, ws, table_header="rows")

    assert ws["A1"].value == "rows"
    assert ws["B1"].value == "when"
    assert ws["A3"].value == "r2"
    assert ws["C3"].value == 7
    assert ws["C2"].value is None

    extracted, table_header = extract_table(ws)
    assert table_header == "rows"
    assert extracted == table


def test_write_table_stringifies_unsupported_values(ws):
    table = PairedTable()
    table.add_column(("a", "b"))
    table.add_row("x")
    table.set(("a", "b"), "x", {"k": 1})
    table.add_row("y")
    table.set(("a", "b"), "y", None)

    write_table(table, ws)

    assert ws["A1"].value is None
    assert ws["B1"].value == "('a', 'b')"
    assert ws["B2"].value == "{'k': 1}"
    assert ws["B3"].value is None
