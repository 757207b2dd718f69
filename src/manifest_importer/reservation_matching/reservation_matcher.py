"""Selection of the one reservation a classified manifest belongs to."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from manifest_importer.classification.tour_categories import (
    CATEGORY_PROFILES,
    MatchField,
    TourCategory,
)
from manifest_importer.import_failures import (
    AmbiguousReservationError,
    NoMatchingReservationError,
)

from .matching_outcomes import AmbiguityPolicy, ReservationSummary

logger = logging.getLogger(__name__)


def match_reservation(
    category: TourCategory,
    departure_date: date,
    end_date: date | None,
    resolved_arrival_date: date,
    candidates: Sequence[ReservationSummary],
    *,
    ambiguity_policy: AmbiguityPolicy = AmbiguityPolicy.REJECT,
) -> ReservationSummary:
    """Return the unique candidate satisfying the category's date predicate.

    Candidates of another category are ignored. Under `AmbiguityPolicy.FIRST`
    the first satisfying candidate in snapshot order wins.

    Raises:
      NoMatchingReservationError: No candidate satisfies the predicate.
      AmbiguousReservationError: Several candidates satisfy it and the policy
        is `AmbiguityPolicy.REJECT`.
    """
    profile = CATEGORY_PROFILES[category]
    target = _manifest_date(profile.match_field, departure_date, end_date, resolved_arrival_date)
    if target is None:
        raise NoMatchingReservationError(
            f"No {category.value} reservation: manifest has no {profile.criterion_label}."
        )

    matches = [
        candidate
        for candidate in candidates
        if candidate.category == category
        and _candidate_date(profile.match_field, candidate) == target
    ]
    if not matches:
        raise NoMatchingReservationError(
            f"No {category.value} reservation with {profile.criterion_label} "
            f"{target.isoformat()}."
        )
    if len(matches) > 1:
        numbers = tuple(candidate.number for candidate in matches)
        if ambiguity_policy == AmbiguityPolicy.REJECT:
            raise AmbiguousReservationError(
                f"{len(matches)} {category.value} reservations with {profile.criterion_label} "
                f"{target.isoformat()}: {', '.join(numbers)}.",
                candidate_numbers=numbers,
            )
        logger.warning(
            "Several %s reservations match %s %s, selecting %s",
            category.value,
            profile.criterion_label,
            target.isoformat(),
            matches[0].number,
        )
    return matches[0]


def _manifest_date(
    match_field: MatchField,
    departure_date: date,
    end_date: date | None,
    resolved_arrival_date: date,
) -> date | None:
    if match_field == MatchField.END_DATE:
        return end_date
    if match_field == MatchField.RESOLVED_ARRIVAL:
        return resolved_arrival_date
    return departure_date


def _candidate_date(match_field: MatchField, candidate: ReservationSummary) -> date | None:
    if match_field == MatchField.END_DATE:
        return candidate.end_date
    return candidate.departure_date
