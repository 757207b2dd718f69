"""Helpers coercing raw worksheet cells into text and dates."""

from __future__ import annotations

import re
from datetime import date, datetime

from openpyxl.utils.datetime import from_excel

_DOTTED_DATE = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{2}|\d{4})$")
_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")


def cell_text(value: object) -> str:
    """Return the trimmed text of a cell, empty for None."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.strftime("%d.%m.%Y")
    if isinstance(value, date):
        return value.strftime("%d.%m.%Y")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def is_empty_cell(value: object) -> bool:
    return cell_text(value) == ""


def parse_cell_date(value: object) -> date | None:
    """Interpret a date cell: date objects, Excel serials, D.M.Y or ISO text."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, int | float):
        return _from_serial(value)
    if isinstance(value, str):
        return parse_date_text(value)
    return None


def parse_date_text(text: str) -> date | None:
    """Parse `D.M.Y` (two-digit years are 20xx) or ISO `Y-M-D` text."""
    stripped = text.strip()
    match = _DOTTED_DATE.fullmatch(stripped)
    if match:
        day, month, year = (int(part) for part in match.groups())
        if year < 100:
            year += 2000
        return _safe_date(year, month, day)
    match = _ISO_DATE.match(stripped)
    if match:
        year, month, day = (int(part) for part in match.groups())
        return _safe_date(year, month, day)
    return None


def _from_serial(value: float) -> date | None:
    if value <= 0:
        return None
    try:
        converted = from_excel(value)
    except (ValueError, OverflowError):
        return None
    if isinstance(converted, datetime):
        return converted.date()
    return None


def _safe_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None
