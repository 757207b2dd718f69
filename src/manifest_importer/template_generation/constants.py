"""Shared template generation constants."""

from __future__ import annotations

MANIFEST_SHEET_NAME = "Manifest"

TRIP_LINE_PREFIX = "Reise:"
DATE_LINE_PREFIX = "Datum:"
DEFAULT_TRIP_TEXT = "<Trip description>"
DEFAULT_DATES_TEXT = "<DD.MM.YYYY - DD.MM.YYYY>"

PASSENGER_HEADER_ROW = 4
PASSENGER_COLUMNS: tuple[str, ...] = (
    "ID",
    "Name",
    "DoB",
    "Nat",
    "Pass-No",
    "DoI",
    "DoE",
    "PoI",
    "Rm",
    "Veg.",
)
