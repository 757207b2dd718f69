"""Segment-scoped import of one reservation bucket into the reservation store."""

from __future__ import annotations

import logging

from manifest_importer.classification.tour_categories import TripSegment
from manifest_importer.import_failures import ImportFailedError, ManifestImportError

from .reservation_store import ReservationStore
from .roster_models import (
    SEGMENT_IMPORT_ORDER,
    ReservationBucket,
    ReservationImportResult,
    SegmentImportResult,
)

logger = logging.getLogger(__name__)


def import_reservation_bucket(
    bucket: ReservationBucket, store: ReservationStore, *, dry_run: bool = False
) -> ReservationImportResult:
    """Import each non-empty segment of the bucket, PRIMARY first.

    A store failure stops this reservation only; segments imported before
    the failure keep their counts. In dry-run mode the store is not called.
    """
    segments: list[SegmentImportResult] = []
    for segment in SEGMENT_IMPORT_ORDER:
        if not bucket.tourists_for(segment):
            continue
        try:
            segments.append(_import_segment(bucket, segment, store, dry_run=dry_run))
        except ManifestImportError as exc:
            logger.warning(
                "Import into reservation %s failed: %s", bucket.reservation.number, exc.message
            )
            return _result(bucket, segments, error=exc)
    return _result(bucket, segments)


def _import_segment(
    bucket: ReservationBucket,
    segment: TripSegment,
    store: ReservationStore,
    *,
    dry_run: bool,
) -> SegmentImportResult:
    tourists = bucket.tourists_for(segment)
    if dry_run:
        return SegmentImportResult(segment=segment, submitted=len(tourists), created=0, skipped=0)
    try:
        counts = store.import_tourists_for_segment(bucket.reservation.id, segment, tourists)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise ImportFailedError(f"{segment.value} import failed: {exc}") from exc
    logger.info(
        "Reservation %s %s: created %d, skipped %d",
        bucket.reservation.number,
        segment.value,
        counts.created,
        counts.skipped,
    )
    return SegmentImportResult(
        segment=segment,
        submitted=len(tourists),
        created=counts.created,
        skipped=counts.skipped,
    )


def _result(
    bucket: ReservationBucket,
    segments: list[SegmentImportResult],
    *,
    error: ManifestImportError | None = None,
) -> ReservationImportResult:
    return ReservationImportResult(
        reservation_id=bucket.reservation.id,
        reservation_number=bucket.reservation.number,
        source_files=bucket.source_files,
        segments=tuple(segments),
        error=error.reason if error else None,
        detail=error.message if error else None,
    )
