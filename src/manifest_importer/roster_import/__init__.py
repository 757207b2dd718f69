"""Roster import domain exports."""

from .manifest_importer import import_reservation_bucket
from .reservation_store import (
    InMemoryReservationStore,
    JsonFileReservationStore,
    ReservationStore,
    ReservationStoreError,
    StoredReservation,
)
from .roster_models import (
    ParsedManifest,
    ReservationBucket,
    ReservationImportResult,
    SegmentImportCounts,
    SegmentImportResult,
)
from .segment_grouper import group_by_reservation
from .tourist_identity import tourist_identity

__all__ = [
    "InMemoryReservationStore",
    "JsonFileReservationStore",
    "ParsedManifest",
    "ReservationBucket",
    "ReservationImportResult",
    "ReservationStore",
    "ReservationStoreError",
    "SegmentImportCounts",
    "SegmentImportResult",
    "StoredReservation",
    "group_by_reservation",
    "import_reservation_bucket",
    "tourist_identity",
]
