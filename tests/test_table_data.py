import datetime
import json

import pytest

from dto.cell_data import CellData
from dto.table_data import TableData
from table import NoSuchElementError


def test_from_table_lists_only_recorded_cells(table):
    table.add_column("A")
    table.add_row("x")
    table.add_row("y")
    table.set("A", "x", None)

    data = TableData.from_table(table)

    assert data.headers == ["A"]
    assert data.identifiers == ["x", "y"]
    assert data.cells == [CellData(header="A", identifier="x", value=None)]


def test_to_table_rebuilds_an_equal_table(grid):
    grid.clear("A", "x")
    grid.add_row("z")

    rebuilt = TableData.from_table(grid).to_table()

    assert rebuilt == grid
    assert rebuilt.contains("A", "x")
    assert not rebuilt.contains("A", "z")


def test_json_round_trip(grid):
    raw = TableData.from_table(grid).model_dump_json()
    payload = json.loads(raw)
    assert payload["headers"] == ["A", "B"]
    assert {"header": "B", "identifier": "y", "value": 4} in payload["cells"]

    assert TableData.model_validate_json(raw).to_table() == grid


def test_to_table_rejects_unknown_keys():
    data = TableData(
        headers=["A"],
        identifiers=["x"],
        cells=[CellData(header="B", identifier="x", value=1)],
    )
    with pytest.raises(NoSuchElementError):
        data.to_table()


def test_json_round_trip_keeps_tuple_keys(table):
    table.add_column(("a", "b"))
    table.add_column(("nested", ("c", 1)))
    table.add_row((1, 2))
    table.set(("a", "b"), (1, 2), "ab")
    table.set(("nested", ("c", 1)), (1, 2), [1, 2])

    raw = TableData.from_table(table).model_dump_json()
    rebuilt = TableData.model_validate_json(raw).to_table()

    assert list(rebuilt.iter_column_headers()) == [("a", "b"), ("nested", ("c", 1))]
    assert rebuilt.get_row((1, 2)) == {("a", "b"): "ab", ("nested", ("c", 1)): [1, 2]}
    # List values are not keys and stay lists
    assert rebuilt == table


def test_json_round_trip_turns_dates_into_strings(table):
    table.add_column("when")
    table.add_row("x")
    table.set("when", "x", datetime.date(2024, 1, 2))

    raw = TableData.from_table(table).model_dump_json()
    rebuilt = TableData.model_validate_json(raw).to_table()

    assert rebuilt.get("when", "x") == "2024-01-02"
    assert rebuilt != table
