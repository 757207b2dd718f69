"""Plain-text digest of a batch import for the operator."""

from __future__ import annotations

from manifest_importer.import_summary import FileFailure, ImportSummary
from manifest_importer.roster_import.roster_models import ReservationImportResult


def render_digest(summary: ImportSummary) -> str:
    """Render one line per reservation, one per failed file, then a totals line."""
    lines = [
        _reservation_line(result, dry_run=summary.dry_run) for result in summary.per_reservation
    ]
    lines.extend(_failure_line(failure) for failure in summary.failures)
    lines.append(_totals_line(summary))
    return "\n".join(lines)


def _reservation_line(result: ReservationImportResult, *, dry_run: bool) -> str:
    if dry_run:
        line = f"{result.reservation_number}: would submit {result.submitted} (dry run)"
    else:
        line = f"{result.reservation_number}: created {result.created}, skipped {result.skipped}"
    if result.error is not None:
        line += f" - {result.error.value} ({result.detail})"
    return line


def _failure_line(failure: FileFailure) -> str:
    return f"{failure.file}: {failure.reason.value} ({failure.detail})"


def _totals_line(summary: ImportSummary) -> str:
    failed = len(summary.failures) + len(summary.failed_reservations)
    prefix = "Dry run total" if summary.dry_run else "Total"
    return (
        f"{prefix}: {len(summary.per_reservation)} reservations, "
        f"created {summary.total_created}, skipped {summary.total_skipped}, failures {failed}"
    )
