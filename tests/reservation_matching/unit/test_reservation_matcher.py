"""Reservation matcher tests."""

from __future__ import annotations

from datetime import date

import pytest
from manifest_importer.classification import TourCategory
from manifest_importer.import_failures import (
    AmbiguousReservationError,
    FailureReason,
    NoMatchingReservationError,
)
from manifest_importer.reservation_matching import (
    AmbiguityPolicy,
    ReservationSummary,
    match_reservation,
)


def _reservation(
    number: str, category: TourCategory, departure: date, end: date | None = None
) -> ReservationSummary:
    return ReservationSummary(
        id=f"id-{number}",
        number=number,
        category=category,
        departure_date=departure,
        end_date=end,
    )


CANDIDATES = (
    _reservation("CO-01", TourCategory.CO, date(2026, 4, 17), date(2026, 4, 28)),
    _reservation("ER-01", TourCategory.ER, date(2026, 4, 17), date(2026, 4, 30)),
    _reservation("ER-02", TourCategory.ER, date(2026, 5, 1), date(2026, 5, 14)),
    _reservation("KAS-01", TourCategory.KAS, date(2026, 5, 4), date(2026, 5, 10)),
    _reservation("ZA-01", TourCategory.ZA, date(2026, 4, 12), date(2026, 4, 28)),
)


def test_er_matches_on_departure_date_ignoring_other_categories() -> None:
    match = match_reservation(
        TourCategory.ER,
        date(2026, 4, 17),
        date(2026, 5, 6),
        date(2026, 4, 17),
        CANDIDATES,
    )

    assert match.number == "ER-01"


def test_co_matches_on_departure_date() -> None:
    match = match_reservation(
        TourCategory.CO, date(2026, 4, 17), None, date(2026, 4, 17), CANDIDATES
    )

    assert match.number == "CO-01"


def test_kas_matches_on_end_date() -> None:
    match = match_reservation(
        TourCategory.KAS,
        date(2026, 4, 20),
        date(2026, 5, 10),
        date(2026, 5, 4),
        CANDIDATES,
    )

    assert match.number == "KAS-01"


def test_kas_without_end_date_does_not_match() -> None:
    with pytest.raises(NoMatchingReservationError, match="no end date"):
        match_reservation(
            TourCategory.KAS, date(2026, 4, 20), None, date(2026, 5, 4), CANDIDATES
        )


def test_za_matches_on_resolved_arrival_date() -> None:
    match = match_reservation(
        TourCategory.ZA,
        date(2026, 4, 8),
        date(2026, 4, 28),
        date(2026, 4, 12),
        CANDIDATES,
    )

    assert match.number == "ZA-01"


def test_no_candidate_names_criterion_and_date() -> None:
    with pytest.raises(NoMatchingReservationError) as exc_info:
        match_reservation(
            TourCategory.ER, date(2026, 6, 1), None, date(2026, 6, 1), CANDIDATES
        )

    assert exc_info.value.reason == FailureReason.NO_MATCHING_RESERVATION
    assert "departure date 2026-06-01" in exc_info.value.message


def test_several_candidates_are_rejected_by_default() -> None:
    candidates = (
        *CANDIDATES,
        _reservation("ER-03", TourCategory.ER, date(2026, 4, 17), date(2026, 5, 6)),
    )

    with pytest.raises(AmbiguousReservationError) as exc_info:
        match_reservation(
            TourCategory.ER, date(2026, 4, 17), None, date(2026, 4, 17), candidates
        )

    assert exc_info.value.reason == FailureReason.AMBIGUOUS_RESERVATION
    assert exc_info.value.candidate_numbers == ("ER-01", "ER-03")
    assert "ER-01, ER-03" in exc_info.value.message


def test_first_policy_selects_first_candidate_in_snapshot_order() -> None:
    candidates = (
        _reservation("ER-03", TourCategory.ER, date(2026, 4, 17), date(2026, 5, 6)),
        *CANDIDATES,
    )

    match = match_reservation(
        TourCategory.ER,
        date(2026, 4, 17),
        None,
        date(2026, 4, 17),
        candidates,
        ambiguity_policy=AmbiguityPolicy.FIRST,
    )

    assert match.number == "ER-03"


def test_empty_snapshot_does_not_match() -> None:
    with pytest.raises(NoMatchingReservationError):
        match_reservation(TourCategory.ZA, date(2026, 4, 8), None, date(2026, 4, 12), ())
