"""Manifest parsing entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from enum import Enum

from manifest_importer.classification.tour_categories import TripSegment

CellValue = object
RawWorkbookRow = tuple[CellValue, ...]

NOT_PROVIDED = "Not provided"
NOT_ASSIGNED = "Not assigned"


class Gender(str, Enum):
    """Passenger gender inferred from the honorific."""

    MALE = "M"
    FEMALE = "F"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class WorksheetRows:
    """Raw cell values of one decoded worksheet."""

    sheet_name: str
    rows: tuple[RawWorkbookRow, ...]


@dataclass(frozen=True)
class ManifestHeader:
    """Trip metadata found above the passenger table."""

    trip_description: str
    date_range_text: str
    departure_date: date | None
    end_date: date | None


@dataclass(frozen=True)
class ParsedSheet:
    """Header metadata plus the passenger table of one worksheet."""

    header: ManifestHeader
    columns: tuple[str, ...]
    data_rows: tuple[Mapping[str, CellValue], ...]
    header_row_number: int


@dataclass(frozen=True)
class ParsedTourist:  # pylint: disable=too-many-instance-attributes
    """Normalized passenger decoded from one manifest row."""

    first_name: str
    last_name: str
    full_name: str
    date_of_birth: date | None
    passport_number: str
    passport_issue_date: date | None
    passport_expiry_date: date | None
    nationality: str
    place_of_issue: str | None
    room_preference: str
    room_number: str | None
    segment: TripSegment
    gender: Gender
    remarks: str | None
    check_in_date: date
    check_out_date: date | None
