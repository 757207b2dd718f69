"""Reservation store contract plus in-memory and JSON file implementations."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Protocol

from manifest_importer.classification.tour_categories import TourCategory, TripSegment
from manifest_importer.manifest_parsing.manifest_models import Gender, ParsedTourist
from manifest_importer.reservation_matching.matching_outcomes import ReservationSummary

from .roster_models import SegmentImportCounts
from .tourist_identity import tourist_identity

logger = logging.getLogger(__name__)


class ReservationStoreError(Exception):
    """Raised when the reservation store cannot be read or written."""


class ReservationStore(Protocol):
    """Read and write collaborator of the import pipeline."""

    def list_reservation_candidates(
        self, category: TourCategory
    ) -> Sequence[ReservationSummary]: ...

    def import_tourists_for_segment(
        self,
        reservation_id: str,
        segment: TripSegment,
        tourists: Sequence[ParsedTourist],
    ) -> SegmentImportCounts: ...


@dataclass
class StoredReservation:
    """Reservation record with its passenger list and pax counters."""

    summary: ReservationSummary
    tourists: list[ParsedTourist] = field(default_factory=list)
    pax: int = 0
    pax_primary: int = 0
    pax_extension: int = 0

    def tourists_for(self, segment: TripSegment) -> list[ParsedTourist]:
        return [tourist for tourist in self.tourists if tourist.segment == segment]

    def recount_pax(self) -> None:
        self.pax = len(self.tourists)
        self.pax_primary = len(self.tourists_for(TripSegment.PRIMARY))
        self.pax_extension = len(self.tourists_for(TripSegment.EXTENSION))


class InMemoryReservationStore:
    """Reservation store keeping every record in process memory."""

    def __init__(self, reservations: Iterable[StoredReservation] = ()) -> None:
        self._reservations: dict[str, StoredReservation] = {}
        for reservation in reservations:
            self.add_reservation(reservation)

    def add_reservation(self, reservation: StoredReservation | ReservationSummary) -> None:
        record = (
            reservation
            if isinstance(reservation, StoredReservation)
            else StoredReservation(summary=reservation)
        )
        record.recount_pax()
        self._reservations[record.summary.id] = record

    def reservation(self, reservation_id: str) -> StoredReservation:
        try:
            return self._reservations[reservation_id]
        except KeyError as exc:
            raise ReservationStoreError(f"Unknown reservation id: {reservation_id}") from exc

    @property
    def reservations(self) -> tuple[StoredReservation, ...]:
        return tuple(self._reservations.values())

    def list_reservation_candidates(self, category: TourCategory) -> tuple[ReservationSummary, ...]:
        return tuple(
            record.summary
            for record in self._reservations.values()
            if record.summary.category == category
        )

    def import_tourists_for_segment(
        self,
        reservation_id: str,
        segment: TripSegment,
        tourists: Sequence[ParsedTourist],
    ) -> SegmentImportCounts:
        """Append unseen tourists of one segment and recount the reservation's pax.

        Identity is compared against stored tourists of the same segment and
        earlier rows of the same call; the other segment is never touched.
        """
        record = self.reservation(reservation_id)
        for tourist in tourists:
            if tourist.segment != segment:
                raise ReservationStoreError(
                    f"Tourist {tourist.full_name!r} belongs to {tourist.segment.value}, "
                    f"not {segment.value}."
                )
        known = {tourist_identity(tourist) for tourist in record.tourists_for(segment)}
        created = 0
        skipped = 0
        for tourist in tourists:
            identity = tourist_identity(tourist)
            if identity in known:
                skipped += 1
                continue
            known.add(identity)
            record.tourists.append(tourist)
            created += 1
        record.recount_pax()
        logger.debug(
            "Reservation %s %s: created %d, skipped %d",
            record.summary.number,
            segment.value,
            created,
            skipped,
        )
        return SegmentImportCounts(created=created, skipped=skipped)


class JsonFileReservationStore(InMemoryReservationStore):
    """Reservation store persisted as one JSON document, saved after every import."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(_load_document(self.path))

    def import_tourists_for_segment(
        self,
        reservation_id: str,
        segment: TripSegment,
        tourists: Sequence[ParsedTourist],
    ) -> SegmentImportCounts:
        record = self.reservation(reservation_id)
        tourists_before = list(record.tourists)
        counts = super().import_tourists_for_segment(reservation_id, segment, tourists)
        try:
            self.save()
        except ReservationStoreError:
            record.tourists = tourists_before
            record.recount_pax()
            raise
        return counts

    def save(self) -> None:
        document = {"reservations": [_reservation_to_json(record) for record in self.reservations]}
        temporary = self.path.with_name(f"{self.path.name}.tmp")
        try:
            temporary.write_text(
                json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8"
            )
            os.replace(temporary, self.path)
        except OSError as exc:
            raise ReservationStoreError(f"Failed to write reservation store: {exc}") from exc


def _load_document(path: Path) -> list[StoredReservation]:
    if not path.exists():
        raise ReservationStoreError(f"Reservation store file not found: {path}")
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ReservationStoreError(f"Failed to read reservation store: {exc}") from exc
    if not isinstance(document, Mapping) or not isinstance(document.get("reservations"), list):
        raise ReservationStoreError("Reservation store must contain a 'reservations' list.")
    try:
        return [_reservation_from_json(entry) for entry in document["reservations"]]
    except (KeyError, TypeError, ValueError) as exc:
        raise ReservationStoreError(f"Invalid reservation entry: {exc}") from exc


def _reservation_from_json(entry: Mapping[str, Any]) -> StoredReservation:
    summary = ReservationSummary(
        id=str(entry["id"]),
        number=str(entry["number"]),
        category=TourCategory(entry["category"]),
        departure_date=date.fromisoformat(entry["departure_date"]),
        end_date=_optional_date(entry.get("end_date")),
    )
    return StoredReservation(
        summary=summary,
        tourists=[_tourist_from_json(item) for item in entry.get("tourists", [])],
    )


def _reservation_to_json(record: StoredReservation) -> dict[str, Any]:
    summary = record.summary
    return {
        "id": summary.id,
        "number": summary.number,
        "category": summary.category.value,
        "departure_date": summary.departure_date.isoformat(),
        "end_date": summary.end_date.isoformat() if summary.end_date else None,
        "pax": record.pax,
        "pax_primary": record.pax_primary,
        "pax_extension": record.pax_extension,
        "tourists": [_tourist_to_json(tourist) for tourist in record.tourists],
    }


_DATE_FIELDS = (
    "date_of_birth",
    "passport_issue_date",
    "passport_expiry_date",
    "check_in_date",
    "check_out_date",
)


def _tourist_to_json(tourist: ParsedTourist) -> dict[str, Any]:
    payload: dict[str, Any] = dict(vars(tourist))
    for name in _DATE_FIELDS:
        value = payload[name]
        payload[name] = value.isoformat() if value else None
    payload["segment"] = tourist.segment.value
    payload["gender"] = tourist.gender.value
    return payload


def _tourist_from_json(item: Mapping[str, Any]) -> ParsedTourist:
    values = dict(item)
    for name in _DATE_FIELDS:
        values[name] = _optional_date(values.get(name))
    values["segment"] = TripSegment(values["segment"])
    values["gender"] = Gender(values.get("gender", Gender.UNKNOWN.value))
    return ParsedTourist(**values)


def _optional_date(value: Any) -> date | None:
    if value in (None, ""):
        return None
    return date.fromisoformat(value)
