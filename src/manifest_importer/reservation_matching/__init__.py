"""Reservation matching domain exports."""

from .matching_outcomes import AmbiguityPolicy, ReservationSummary
from .reservation_matcher import match_reservation

__all__ = [
    "AmbiguityPolicy",
    "ReservationSummary",
    "match_reservation",
]
