"""Failure taxonomy shared by every stage of the manifest import pipeline."""

from __future__ import annotations

from enum import Enum


class FailureReason(str, Enum):
    """Reason a file or reservation bucket did not complete its import."""

    UNREADABLE_WORKBOOK = "UNREADABLE_WORKBOOK"
    HEADER_NOT_FOUND = "HEADER_NOT_FOUND"
    EMPTY_MANIFEST = "EMPTY_MANIFEST"
    UNCLASSIFIED_CATEGORY = "UNCLASSIFIED_CATEGORY"
    MISSING_DEPARTURE_DATE = "MISSING_DEPARTURE_DATE"
    NO_MATCHING_RESERVATION = "NO_MATCHING_RESERVATION"
    AMBIGUOUS_RESERVATION = "AMBIGUOUS_RESERVATION"
    IMPORT_FAILED = "IMPORT_FAILED"


class ManifestImportError(Exception):
    """Base class for per-file and per-reservation business failures."""

    reason: FailureReason

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class WorkbookDecodeError(ManifestImportError):
    """Raised when an uploaded file cannot be opened as a workbook."""

    reason = FailureReason.UNREADABLE_WORKBOOK


class HeaderNotFoundError(ManifestImportError):
    """Raised when no passenger table header row exists in the sheet."""

    reason = FailureReason.HEADER_NOT_FOUND


class EmptyManifestError(ManifestImportError):
    """Raised when the passenger table has no data rows."""

    reason = FailureReason.EMPTY_MANIFEST


class UnclassifiedCategoryError(ManifestImportError):
    """Raised when the trip description matches no category rule."""

    reason = FailureReason.UNCLASSIFIED_CATEGORY


class MissingDepartureDateError(ManifestImportError):
    """Raised when the date range did not yield a departure date."""

    reason = FailureReason.MISSING_DEPARTURE_DATE


class NoMatchingReservationError(ManifestImportError):
    """Raised when no reservation satisfies the category's date predicate."""

    reason = FailureReason.NO_MATCHING_RESERVATION


class AmbiguousReservationError(ManifestImportError):
    """Raised when several reservations satisfy the date predicate."""

    reason = FailureReason.AMBIGUOUS_RESERVATION

    def __init__(self, message: str, candidate_numbers: tuple[str, ...]) -> None:
        super().__init__(message)
        self.candidate_numbers = candidate_numbers


class ImportFailedError(ManifestImportError):
    """Raised when the reservation store rejected a segment import."""

    reason = FailureReason.IMPORT_FAILED
