from table.paired import PairedTable
from utils.html import render_table_html


def test_render_table_html():
    t = PairedTable()
    t.add_column("Name")
    t.add_column("Note")
    t.add_row("r1")
    t.add_row("r2")
    t.set("Name", "r1", "<Alice & Bob>")
    t.set("Note", "r2", None)

    html = render_table_html(t, table_header="id")

    assert html.startswith('<table border="1" cellpadding="5" cellspacing="0">')
    assert html.endswith("</table>")
    assert "      <th>id</th>" in html
    assert "      <th>Name</th>" in html
    assert "      <th>r1</th>" in html
    assert "      <td>&lt;Alice &amp; Bob&gt;</td>" in html
    assert "      <td>null</td>" in html
    # r1/Note and r2/Name were never written
    assert html.count("      <td></td>") == 2


def test_empty_table_has_no_body(table):
    table.add_column("A")
    html = render_table_html(table)
    assert "<thead>" in html
    assert "<tbody>" not in html


def test_body_rows_follow_insertion_order(grid):
    html = render_table_html(grid)
    assert html.index("<th>x</th>") < html.index("<th>y</th>")


def test_quotes_are_escaped(table):
    table.add_column("q")
    table.add_row("r")
    table.set("q", "r", "it's \"quoted\"")

    html = render_table_html(table)

    assert "<td>it&#x27;s &quot;quoted&quot;</td>" in html
