"""Classification domain exports."""

from .category_rules import CATEGORY_RULES, CategoryRule, classify_trip
from .date_resolution import resolve_arrival_date
from .tour_categories import (
    CATEGORY_PROFILES,
    CategoryMatch,
    CategoryProfile,
    MatchField,
    TourCategory,
    TripSegment,
)
from .trip_segments import infer_segment

__all__ = [
    "CATEGORY_PROFILES",
    "CATEGORY_RULES",
    "CategoryMatch",
    "CategoryProfile",
    "CategoryRule",
    "MatchField",
    "TourCategory",
    "TripSegment",
    "classify_trip",
    "infer_segment",
    "resolve_arrival_date",
]
