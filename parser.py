"""
Table renderer — CLI entry point.

Usage:
    python parser.py <excel_file> [--sheet <sheet_name>] [--format text|html|json]
                     [--width <n>] [--output <output_file>]

Loads an Excel workbook, reads one worksheet into a Table (first row =
Column headers, first column = Row identifiers) and writes it out as a
boxed text grid, an HTML table or a JSON snapshot.

If --sheet is not provided, the active worksheet is used.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import zipfile
from typing import Any, Optional, Tuple

import dotenv
import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from dto.table_data import TableData
from extractors.worksheet import extract_table
from table.constants import DEFAULT_CELL_WIDTH, env_cell_width
from table.paired import PairedTable
from utils.html import render_table_html

logger = logging.getLogger(__name__)

FORMATS = ("text", "html", "json")


# -------------------------------------------------------------------
# Pipeline
# -------------------------------------------------------------------


def load_table(
    file_path: str,
    sheet_name: Optional[str] = None,
) -> Tuple[PairedTable[Any, Any, Any], str]:
    """
    Load a worksheet of the workbook at *file_path* into a Table.

    Returns ``(table, table_header)``.  Raises ``ValueError`` if
    *sheet_name* is not in the workbook.
    """
    logger.info("Loading workbook: %s", file_path)

    workbook = openpyxl.load_workbook(file_path, data_only=True, read_only=False)
    try:
        if sheet_name is None:
            ws = workbook.active
        elif sheet_name in workbook.sheetnames:
            ws = workbook[sheet_name]
        else:
            logger.error(
                "Worksheet '%s' not found. Available sheets: %s",
                sheet_name,
                workbook.sheetnames,
            )
            raise ValueError(f"Worksheet '{sheet_name}' not found in workbook")

        logger.info("Processing sheet: %s", ws.title)
        return extract_table(ws)
    finally:
        workbook.close()


def render(
    table: PairedTable[Any, Any, Any],
    output_format: str = "text",
    width: int = DEFAULT_CELL_WIDTH,
    table_header: str = "",
) -> str:
    """Render *table* in one of ``FORMATS``."""
    if output_format == "text":
        return table.representation(width, table_header)
    if output_format == "html":
        return render_table_html(table, table_header)
    if output_format == "json":
        return TableData.from_table(table).model_dump_json(indent=2)
    raise ValueError(f"Unknown output format: {output_format!r}")


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    # Search from the working directory, not from this file's location.
    dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))
    width = env_cell_width()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Render a worksheet as a table (text grid, HTML or JSON).",
    )
    parser.add_argument(
        "excel_file",
        help="Path to the .xlsx file to read",
    )
    parser.add_argument(
        "-s",
        "--sheet",
        default=None,
        help="Name of the worksheet to read (default: the active sheet)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=width,
        help=f"Cell width for the text format (default: {width}, from TABLE_CELL_WIDTH)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file path (default: stdout)",
    )
    args = parser.parse_args(argv)

    excel_path = args.excel_file
    if not os.path.isfile(excel_path):
        logger.error("File not found: %s", excel_path)
        return 1

    try:
        table, table_header = load_table(excel_path, sheet_name=args.sheet)
        rendered = render(
            table,
            output_format=args.format,
            width=args.width,
            table_header=table_header,
        )
    except (ValueError, InvalidFileException, zipfile.BadZipFile) as exc:
        logger.error("%s", exc)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(rendered)
            f.write("\n")
        logger.info("Output written to %s", args.output)
    else:
        print(rendered)

    return 0


if __name__ == "__main__":
    sys.exit(main())
