"""Worksheet row parsing: header metadata and passenger table extraction."""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import date

from manifest_importer.import_failures import EmptyManifestError, HeaderNotFoundError

from .cell_values import cell_text, is_empty_cell, parse_date_text
from .manifest_models import ManifestHeader, ParsedSheet, RawWorkbookRow

DEFAULT_HEADER_SCAN_ROWS = 5
TRIP_LABEL = "reise:"
DATE_LABEL = "datum:"
HEADER_ROW_TOKENS = frozenset({"id", "name"})

_TRIP_LABEL_PATTERN = re.compile(re.escape(TRIP_LABEL), re.IGNORECASE)
_DATE_LABEL_PATTERN = re.compile(re.escape(DATE_LABEL), re.IGNORECASE)
_RANGE_SEPARATOR = re.compile(r"\s*[-–—]\s*")


def parse_manifest_sheet(
    rows: Sequence[RawWorkbookRow], *, header_scan_rows: int = DEFAULT_HEADER_SCAN_ROWS
) -> ParsedSheet:
    """Split one worksheet into header metadata and passenger rows.

    Raises:
      HeaderNotFoundError: No row names an `ID` or `Name` column.
      EmptyManifestError: The passenger table has no non-empty rows.
    """
    header = parse_manifest_header(rows[:header_scan_rows])
    header_index = _find_header_row(rows)
    if header_index is None:
        raise HeaderNotFoundError("Passenger table header (ID/Name) not found.")

    columns = tuple(cell_text(cell) for cell in rows[header_index])
    data_rows = tuple(
        _row_mapping(columns, row)
        for row in rows[header_index + 1 :]
        if not all(is_empty_cell(cell) for cell in row)
    )
    if not data_rows:
        raise EmptyManifestError("Passenger table contains no rows.")

    return ParsedSheet(
        header=header,
        columns=columns,
        data_rows=data_rows,
        header_row_number=header_index + 1,
    )


def parse_manifest_header(rows: Sequence[RawWorkbookRow]) -> ManifestHeader:
    """Read the trip description and date range label lines."""
    trip_description = ""
    date_range_text = ""
    for row in rows:
        if not row:
            continue
        first_cell = cell_text(row[0])
        if TRIP_LABEL in first_cell.lower():
            trip_description = _TRIP_LABEL_PATTERN.sub("", first_cell, count=1).strip()
        if DATE_LABEL in first_cell.lower():
            date_range_text = _DATE_LABEL_PATTERN.sub("", first_cell, count=1).strip()

    departure_date, end_date = parse_date_range(date_range_text)
    return ManifestHeader(
        trip_description=trip_description,
        date_range_text=date_range_text,
        departure_date=departure_date,
        end_date=end_date,
    )


def parse_date_range(text: str) -> tuple[date | None, date | None]:
    """Parse `"D.M.Y - D.M.Y"`; unparsable sides come back as None."""
    parts = _RANGE_SEPARATOR.split(text.strip(), maxsplit=1)
    if len(parts) != 2:
        return None, None
    return parse_date_text(parts[0]), parse_date_text(parts[1])


def _find_header_row(rows: Sequence[RawWorkbookRow]) -> int | None:
    for index, row in enumerate(rows):
        if any(cell_text(cell).lower() in HEADER_ROW_TOKENS for cell in row):
            return index
    return None


def _row_mapping(columns: Sequence[str], row: RawWorkbookRow) -> dict[str, object]:
    mapping: dict[str, object] = {}
    for index, column in enumerate(columns):
        if not column or column in mapping:
            continue
        mapping[column] = row[index] if index < len(row) else None
    return mapping
