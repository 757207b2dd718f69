"""Roster import entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date

from manifest_importer.classification.tour_categories import TourCategory, TripSegment
from manifest_importer.import_failures import FailureReason
from manifest_importer.manifest_parsing.manifest_models import ManifestHeader, ParsedTourist
from manifest_importer.reservation_matching.matching_outcomes import ReservationSummary

SEGMENT_IMPORT_ORDER: tuple[TripSegment, ...] = (TripSegment.PRIMARY, TripSegment.EXTENSION)


@dataclass(frozen=True)
class ParsedManifest:  # pylint: disable=too-many-instance-attributes
    """One uploaded file after parsing, classification and matching."""

    source_file: str
    header: ManifestHeader
    category: TourCategory
    rule: str
    segment: TripSegment
    resolved_arrival_date: date
    reservation: ReservationSummary
    tourists: tuple[ParsedTourist, ...]


@dataclass(frozen=True)
class ReservationBucket:
    """Tourists of every manifest matched to one reservation, split by segment."""

    reservation: ReservationSummary
    source_files: tuple[str, ...]
    tourists_by_segment: Mapping[TripSegment, tuple[ParsedTourist, ...]]

    def tourists_for(self, segment: TripSegment) -> tuple[ParsedTourist, ...]:
        return self.tourists_by_segment.get(segment, ())


@dataclass(frozen=True)
class SegmentImportCounts:
    """Store-reported outcome of one segment import call."""

    created: int
    skipped: int


@dataclass(frozen=True)
class SegmentImportResult:
    """Outcome of importing one segment of a reservation bucket."""

    segment: TripSegment
    submitted: int
    created: int
    skipped: int


@dataclass(frozen=True)
class ReservationImportResult:
    """Outcome of importing every segment of one reservation bucket."""

    reservation_id: str
    reservation_number: str
    source_files: tuple[str, ...]
    segments: tuple[SegmentImportResult, ...]
    error: FailureReason | None = None
    detail: str | None = None

    @property
    def created(self) -> int:
        return sum(segment.created for segment in self.segments)

    @property
    def skipped(self) -> int:
        return sum(segment.skipped for segment in self.segments)

    @property
    def submitted(self) -> int:
        return sum(segment.submitted for segment in self.segments)

    @property
    def succeeded(self) -> bool:
        """Return True when every segment reached the store without error."""
        return self.error is None
