"""Results writing domain exports."""

from .digest_renderer import render_digest
from .report_models import ReservationStatus, RunMetadata
from .summary_report_writer import (
    FAILURES_SHEET_NAME,
    RESERVATIONS_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    write_summary_workbook,
)

__all__ = [
    "FAILURES_SHEET_NAME",
    "RESERVATIONS_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "ReservationStatus",
    "RunMetadata",
    "render_digest",
    "write_summary_workbook",
]
