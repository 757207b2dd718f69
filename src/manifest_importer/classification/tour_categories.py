"""Tour category and trip segment entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class TourCategory(str, Enum):
    """Tour types a manifest can belong to."""

    ER = "ER"
    CO = "CO"
    KAS = "KAS"
    ZA = "ZA"


class TripSegment(str, Enum):
    """Portion of a multi-country trip a manifest covers."""

    PRIMARY = "PRIMARY"
    EXTENSION = "EXTENSION"


class MatchField(str, Enum):
    """Reservation date compared against the manifest when matching."""

    DEPARTURE_DATE = "departure_date"
    END_DATE = "end_date"
    RESOLVED_ARRIVAL = "resolved_arrival"


@dataclass(frozen=True)
class CategoryProfile:
    """Date offset and matching criterion for one tour category."""

    offset_days: int
    match_field: MatchField
    criterion_label: str


CATEGORY_PROFILES: Mapping[TourCategory, CategoryProfile] = {
    TourCategory.ER: CategoryProfile(
        offset_days=0,
        match_field=MatchField.DEPARTURE_DATE,
        criterion_label="departure date",
    ),
    TourCategory.CO: CategoryProfile(
        offset_days=0,
        match_field=MatchField.DEPARTURE_DATE,
        criterion_label="departure date",
    ),
    # Sheet states the regional tour start; arrival in Usbekistan is 14 days later.
    TourCategory.KAS: CategoryProfile(
        offset_days=14,
        match_field=MatchField.END_DATE,
        criterion_label="end date",
    ),
    # Sheet states the regional entry date; arrival in Usbekistan is 4 days later.
    TourCategory.ZA: CategoryProfile(
        offset_days=4,
        match_field=MatchField.RESOLVED_ARRIVAL,
        criterion_label="resolved arrival date",
    ),
}


@dataclass(frozen=True)
class CategoryMatch:
    """Outcome of classifying one trip description."""

    category: TourCategory
    rule: str
