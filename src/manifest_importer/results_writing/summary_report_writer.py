"""Summary workbook writer service."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from manifest_importer.classification.tour_categories import TripSegment
from manifest_importer.import_summary import ImportSummary
from manifest_importer.roster_import.roster_models import (
    ReservationImportResult,
    SegmentImportResult,
)

from .report_models import ReservationStatus, RunMetadata

RESERVATIONS_SHEET_NAME = "Reservations"
FAILURES_SHEET_NAME = "Failures"
RUN_INFO_SHEET_NAME = "RunInfo"

RESERVATION_COLUMNS: tuple[str, ...] = (
    "Reservation",
    "Reservation ID",
    "Files",
    "Primary submitted",
    "Primary created",
    "Primary skipped",
    "Extension submitted",
    "Extension created",
    "Extension skipped",
    "Status",
    "Detail",
)
FAILURE_COLUMNS: tuple[str, ...] = ("File", "Reason", "Detail")


def write_summary_workbook(
    summary: ImportSummary, output_path: Path | str, run_metadata: RunMetadata
) -> Path:
    """Write the Reservations, Failures and RunInfo sheets and return the output path."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = RESERVATIONS_SHEET_NAME

    _write_header_row(sheet, RESERVATION_COLUMNS)
    for row_index, result in enumerate(summary.per_reservation, start=2):
        _write_row(sheet, row_index, _reservation_row(result, dry_run=summary.dry_run))

    failures_sheet = workbook.create_sheet(FAILURES_SHEET_NAME)
    _write_header_row(failures_sheet, FAILURE_COLUMNS)
    for row_index, failure in enumerate(summary.failures, start=2):
        _write_row(failures_sheet, row_index, (failure.file, failure.reason.value, failure.detail))

    _write_run_info_sheet(workbook, summary, run_metadata)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_header_row(sheet, columns: Sequence[str]) -> None:
    for column_index, name in enumerate(columns, start=1):
        sheet.cell(row=1, column=column_index, value=name)
        sheet.cell(row=1, column=column_index).style = "Headline 3"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 40)
        )


def _write_row(sheet, row_index: int, values: Sequence[object]) -> None:
    for column_index, value in enumerate(values, start=1):
        sheet.cell(row=row_index, column=column_index, value=value)


def _reservation_row(result: ReservationImportResult, *, dry_run: bool) -> tuple[object, ...]:
    by_segment = {segment.segment: segment for segment in result.segments}
    primary = by_segment.get(TripSegment.PRIMARY)
    extension = by_segment.get(TripSegment.EXTENSION)
    return (
        result.reservation_number,
        result.reservation_id,
        ", ".join(result.source_files),
        *_segment_counts(primary),
        *_segment_counts(extension),
        _reservation_status(result, dry_run=dry_run).value,
        result.detail,
    )


def _segment_counts(segment: SegmentImportResult | None) -> tuple[int, int, int]:
    if segment is None:
        return 0, 0, 0
    return segment.submitted, segment.created, segment.skipped


def _reservation_status(result: ReservationImportResult, *, dry_run: bool) -> ReservationStatus:
    if not result.succeeded:
        return ReservationStatus.FAILED
    if dry_run:
        return ReservationStatus.DRY_RUN
    return ReservationStatus.OK


def _write_run_info_sheet(
    workbook: Workbook, summary: ImportSummary, run_metadata: RunMetadata
) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    entries = [
        ("run_start", run_metadata.run_start.isoformat()),
        ("config_path", str(run_metadata.config_path)),
        ("store_path", str(run_metadata.store_path)),
        ("output_path", str(run_metadata.output_path)),
        ("dry_run", summary.dry_run),
        ("input_files", len(run_metadata.input_files)),
        ("reservations", len(summary.per_reservation)),
        ("failed_reservations", len(summary.failed_reservations)),
        ("failed_files", len(summary.failures)),
        ("total_created", summary.total_created),
        ("total_skipped", summary.total_skipped),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)
