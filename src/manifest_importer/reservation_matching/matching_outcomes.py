"""Reservation matching entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from manifest_importer.classification.tour_categories import TourCategory


class AmbiguityPolicy(str, Enum):
    """How the matcher treats several reservations satisfying one manifest."""

    REJECT = "reject"
    FIRST = "first"


@dataclass(frozen=True)
class ReservationSummary:
    """Read-only view of an existing reservation used as a match candidate."""

    id: str
    number: str
    category: TourCategory
    departure_date: date
    end_date: date | None
