"""Manifest parsing domain exports."""

from .manifest_models import (
    NOT_ASSIGNED,
    NOT_PROVIDED,
    Gender,
    ManifestHeader,
    ParsedSheet,
    ParsedTourist,
    RawWorkbookRow,
    WorksheetRows,
)
from .passenger_decoder import decode_passengers, split_name
from .row_parser import DEFAULT_HEADER_SCAN_ROWS, parse_date_range, parse_manifest_sheet
from .workbook_decoder import decode_workbook

__all__ = [
    "DEFAULT_HEADER_SCAN_ROWS",
    "NOT_ASSIGNED",
    "NOT_PROVIDED",
    "Gender",
    "ManifestHeader",
    "ParsedSheet",
    "ParsedTourist",
    "RawWorkbookRow",
    "WorksheetRows",
    "decode_passengers",
    "decode_workbook",
    "parse_date_range",
    "parse_manifest_sheet",
    "split_name",
]
