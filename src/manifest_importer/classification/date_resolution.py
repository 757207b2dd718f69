"""Category-specific arrival date resolution."""

from __future__ import annotations

from datetime import date, timedelta

from .tour_categories import CATEGORY_PROFILES, TourCategory


def resolve_arrival_date(departure_date: date, category: TourCategory) -> date:
    """Return the in-country arrival date for the sheet's stated departure date."""
    return departure_date + timedelta(days=CATEGORY_PROFILES[category].offset_days)
