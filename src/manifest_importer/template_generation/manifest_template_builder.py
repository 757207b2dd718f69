"""Blank manifest workbook generation service."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .constants import (
    DATE_LINE_PREFIX,
    DEFAULT_DATES_TEXT,
    DEFAULT_TRIP_TEXT,
    MANIFEST_SHEET_NAME,
    PASSENGER_COLUMNS,
    PASSENGER_HEADER_ROW,
    TRIP_LINE_PREFIX,
)


def generate_manifest_template(
    output_path: Path | str,
    *,
    trip_description: str = DEFAULT_TRIP_TEXT,
    date_range: str = DEFAULT_DATES_TEXT,
) -> Path:
    """Create an empty manifest in the operator's layout and return its path."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = MANIFEST_SHEET_NAME

    sheet.cell(row=1, column=1, value=f"{TRIP_LINE_PREFIX} {trip_description}")
    sheet.cell(row=1, column=1).style = "Headline 1"
    sheet.cell(row=2, column=1, value=f"{DATE_LINE_PREFIX} {date_range}")

    for column_index, name in enumerate(PASSENGER_COLUMNS, start=1):
        sheet.cell(row=PASSENGER_HEADER_ROW, column=column_index, value=name)
        sheet.cell(row=PASSENGER_HEADER_ROW, column=column_index).style = "Headline 3"
        width = 30 if name == "Name" else 14
        sheet.column_dimensions[get_column_letter(column_index)].width = width
    sheet.freeze_panes = sheet.cell(row=PASSENGER_HEADER_ROW + 1, column=1)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()
