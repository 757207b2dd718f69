"""Batch import outcome entities shared by orchestration and reporting."""

from __future__ import annotations

from dataclasses import dataclass

from manifest_importer.import_failures import FailureReason
from manifest_importer.roster_import.roster_models import ReservationImportResult


@dataclass(frozen=True)
class FileFailure:
    """A file that stopped before reaching a reservation bucket."""

    file: str
    reason: FailureReason
    detail: str


@dataclass(frozen=True)
class ImportSummary:
    """Aggregated outcome of one batch import."""

    per_reservation: tuple[ReservationImportResult, ...]
    failures: tuple[FileFailure, ...]
    dry_run: bool = False

    @property
    def total_created(self) -> int:
        return sum(result.created for result in self.per_reservation)

    @property
    def total_skipped(self) -> int:
        return sum(result.skipped for result in self.per_reservation)

    @property
    def failed_reservations(self) -> tuple[ReservationImportResult, ...]:
        return tuple(result for result in self.per_reservation if not result.succeeded)

    @property
    def has_failures(self) -> bool:
        """Return True when any file or reservation did not complete."""
        return bool(self.failures or self.failed_reservations)
