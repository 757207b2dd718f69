"""Grouping of matched manifests into per-reservation, per-segment buckets."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from manifest_importer.classification.tour_categories import TripSegment
from manifest_importer.manifest_parsing.manifest_models import ParsedTourist
from manifest_importer.reservation_matching.matching_outcomes import ReservationSummary

from .roster_models import SEGMENT_IMPORT_ORDER, ParsedManifest, ReservationBucket


@dataclass
class _BucketCollector:
    """Mutable accumulator for one reservation while folding manifests."""

    reservation: ReservationSummary
    source_files: list[str] = field(default_factory=list)
    tourists: dict[TripSegment, list[ParsedTourist]] = field(default_factory=dict)

    def freeze(self) -> ReservationBucket:
        return ReservationBucket(
            reservation=self.reservation,
            source_files=tuple(self.source_files),
            tourists_by_segment={
                segment: tuple(self.tourists[segment])
                for segment in SEGMENT_IMPORT_ORDER
                if self.tourists.get(segment)
            },
        )


def group_by_reservation(manifests: Sequence[ParsedManifest]) -> tuple[ReservationBucket, ...]:
    """Bucket manifests by reservation in order of first appearance.

    Tourists keep file order, then row order, within each segment.
    """
    collectors: dict[str, _BucketCollector] = {}
    for manifest in manifests:
        collector = collectors.setdefault(
            manifest.reservation.id, _BucketCollector(reservation=manifest.reservation)
        )
        collector.source_files.append(manifest.source_file)
        collector.tourists.setdefault(manifest.segment, []).extend(manifest.tourists)
    return tuple(collector.freeze() for collector in collectors.values())
