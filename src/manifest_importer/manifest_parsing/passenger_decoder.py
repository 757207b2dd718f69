"""Per-row passenger decoding for parsed manifest sheets."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date

from manifest_importer.classification.tour_categories import TripSegment

from .cell_values import cell_text, parse_cell_date
from .manifest_models import NOT_ASSIGNED, NOT_PROVIDED, Gender, ParsedSheet, ParsedTourist

COLUMN_ALIASES: Mapping[str, tuple[str, ...]] = {
    "name": ("name",),
    "date_of_birth": ("dob", "date of birth", "geburtsdatum"),
    "nationality": ("nat", "nationality", "nationalität"),
    "passport_number": ("pass-no", "pass no", "passport", "reisepass"),
    "passport_issue_date": ("doi", "date of issue"),
    "passport_expiry_date": ("doe", "date of expiry"),
    "place_of_issue": ("poi", "pol", "place of issue"),
    "room": ("rm", "room", "zimmer"),
    "vegetarian": ("veg.", "veg", "vegetarian"),
}

ROOM_CODES: Mapping[str, str] = {
    "EZ": "SNGL",
    "SGL": "SNGL",
    "SNGL": "SNGL",
    "SINGLE": "SNGL",
    "DZ": "DBL",
    "DBL": "DBL",
    "DOUBLE": "DBL",
    "TWIN": "TWN",
    "TWN": "TWN",
}

VEGETARIAN_MARKERS = frozenset({"yes", "ja", "x", "true", "1"})
VEGETARIAN_REMARK = "Vegetarian"
BIRTHDAY_REMARK = "Geburtstag"

# Female titles are checked first: "mr." is a substring of "mrs.".
_FEMALE_TITLE = re.compile(r"\b(?:mrs|ms|miss|frau)\b\.?", re.IGNORECASE)
_MALE_TITLE = re.compile(r"\b(?:mr|herr)\b\.?", re.IGNORECASE)
_LEADING_TITLE = re.compile(
    r"^\s*(?:mrs|ms|miss|mr|frau|herr|dr|prof)\.?(?:\s+|$)", re.IGNORECASE
)
_ROOM_WITH_NUMBER = re.compile(r"^([A-Z]+)[-\s]*(\d+)$")


@dataclass(frozen=True)
class _TripWindow:
    departure_date: date | None
    end_date: date | None


def decode_passengers(
    sheet: ParsedSheet, *, segment: TripSegment, check_in_date: date
) -> tuple[ParsedTourist, ...]:
    """Decode every data row of the sheet into a normalized passenger."""
    column_index = resolve_columns(sheet.columns)
    window = _TripWindow(sheet.header.departure_date, sheet.header.end_date)
    return tuple(
        _decode_row(
            row,
            column_index,
            window=window,
            segment=segment,
            check_in_date=check_in_date,
        )
        for row in sheet.data_rows
    )


def resolve_columns(columns: tuple[str, ...]) -> dict[str, str]:
    """Map logical field names to the sheet's actual column headers."""
    by_lower = {column.strip().lower(): column for column in columns if column}
    resolved: dict[str, str] = {}
    for field_name, aliases in COLUMN_ALIASES.items():
        for alias in aliases:
            if alias in by_lower:
                resolved[field_name] = by_lower[alias]
                break
    return resolved


def _decode_row(
    row: Mapping[str, object],
    column_index: Mapping[str, str],
    *,
    window: _TripWindow,
    segment: TripSegment,
    check_in_date: date,
) -> ParsedTourist:
    def raw(field_name: str) -> object:
        column = column_index.get(field_name)
        return row.get(column) if column else None

    full_name = cell_text(raw("name"))
    last_name, first_name = split_name(full_name)
    date_of_birth = parse_cell_date(raw("date_of_birth"))
    room_preference, room_number = normalize_room(cell_text(raw("room")))
    remarks = build_remarks(
        vegetarian=is_vegetarian(raw("vegetarian")),
        birthday_during_trip=is_birthday_during_trip(
            date_of_birth, window.departure_date, window.end_date
        ),
    )

    return ParsedTourist(
        first_name=first_name or NOT_PROVIDED,
        last_name=last_name or NOT_PROVIDED,
        full_name=full_name or NOT_PROVIDED,
        date_of_birth=date_of_birth,
        passport_number=cell_text(raw("passport_number")) or NOT_PROVIDED,
        passport_issue_date=parse_cell_date(raw("passport_issue_date")),
        passport_expiry_date=parse_cell_date(raw("passport_expiry_date")),
        nationality=cell_text(raw("nationality")) or NOT_PROVIDED,
        place_of_issue=cell_text(raw("place_of_issue")) or None,
        room_preference=room_preference,
        room_number=room_number,
        segment=segment,
        gender=infer_gender(full_name),
        remarks=remarks,
        check_in_date=check_in_date,
        check_out_date=window.end_date,
    )


def split_name(full_name: str) -> tuple[str, str]:
    """Split `"Mrs. Richter, Nancy"` into `("Richter", "Nancy")`."""
    last_part, _, first_part = full_name.partition(",")
    last_name = _LEADING_TITLE.sub("", last_part, count=1).strip()
    return last_name, first_part.strip()


def infer_gender(full_name: str) -> Gender:
    if _FEMALE_TITLE.search(full_name):
        return Gender.FEMALE
    if _MALE_TITLE.search(full_name):
        return Gender.MALE
    return Gender.UNKNOWN


def is_vegetarian(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return cell_text(value).lower() in VEGETARIAN_MARKERS


def is_birthday_during_trip(
    date_of_birth: date | None, departure_date: date | None, end_date: date | None
) -> bool:
    """Project the birthday onto the departure year and test the trip window.

    Trips crossing a year boundary are not handled.
    """
    if date_of_birth is None or departure_date is None or end_date is None:
        return False
    year = departure_date.year
    day = date_of_birth.day
    if date_of_birth.month == 2 and day == 29 and not _is_leap(year):
        day = 28
    birthday = date(year, date_of_birth.month, day)
    return departure_date <= birthday <= end_date


def build_remarks(*, vegetarian: bool, birthday_during_trip: bool) -> str | None:
    parts = []
    if vegetarian:
        parts.append(VEGETARIAN_REMARK)
    if birthday_during_trip:
        parts.append(BIRTHDAY_REMARK)
    return ", ".join(parts) if parts else None


def normalize_room(value: str) -> tuple[str, str | None]:
    """Return (room preference, room number) for a raw room cell."""
    code = value.strip().upper()
    if not code:
        return NOT_ASSIGNED, None
    match = _ROOM_WITH_NUMBER.fullmatch(code)
    if match:
        room_type = ROOM_CODES.get(match.group(1), match.group(1))
        return room_type, f"{room_type}-{match.group(2)}"
    return ROOM_CODES.get(code, code), None


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
