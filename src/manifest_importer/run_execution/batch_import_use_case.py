"""Batch import orchestration: parse, classify, match, group and import."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date

from manifest_importer.classification import (
    CategoryMatch,
    TourCategory,
    TripSegment,
    classify_trip,
    infer_segment,
    resolve_arrival_date,
)
from manifest_importer.configuration.runtime_settings import ImportSettings
from manifest_importer.import_failures import (
    FailureReason,
    ManifestImportError,
    MissingDepartureDateError,
    WorkbookDecodeError,
)
from manifest_importer.import_summary import FileFailure, ImportSummary
from manifest_importer.manifest_parsing import (
    ManifestHeader,
    ParsedTourist,
    WorksheetRows,
    decode_passengers,
    decode_workbook,
    parse_manifest_sheet,
)
from manifest_importer.reservation_matching import ReservationSummary, match_reservation
from manifest_importer.roster_import import (
    ParsedManifest,
    ReservationStore,
    ReservationStoreError,
    group_by_reservation,
    import_reservation_bucket,
)

from .run_contracts import UploadedFile

logger = logging.getLogger(__name__)

WorkbookDecoder = Callable[[bytes], Sequence[WorksheetRows]]


class BatchImportError(Exception):
    """Raised when a batch cannot proceed for reasons unrelated to one file."""


@dataclass(frozen=True)
class _PreparedFile:
    """A file parsed and classified, waiting for its reservation."""

    source_file: str
    header: ManifestHeader
    match: CategoryMatch
    segment: TripSegment
    departure_date: date
    resolved_arrival_date: date
    tourists: tuple[ParsedTourist, ...]


_FileOutcome = _PreparedFile | ParsedManifest | FileFailure


def import_batch(
    files: Sequence[UploadedFile],
    store: ReservationStore,
    *,
    settings: ImportSettings = ImportSettings(),
    decoder: WorkbookDecoder = decode_workbook,
    dry_run: bool = False,
) -> ImportSummary:
    """Import a batch of manifest uploads into their reservations.

    Business failures are reported in the summary, never raised.

    Raises:
      BatchImportError: Reading a candidate snapshot from the store failed.
    """
    if not files:
        return ImportSummary(per_reservation=(), failures=(), dry_run=dry_run)

    with ThreadPoolExecutor(max_workers=settings.parallelism) as executor:
        outcomes: list[_FileOutcome] = list(
            executor.map(lambda upload: _prepare_file(upload, settings, decoder), files)
        )

    snapshots = _read_candidate_snapshots(outcomes, store)
    outcomes = [_match_outcome(outcome, snapshots, settings) for outcome in outcomes]

    manifests = [outcome for outcome in outcomes if isinstance(outcome, ParsedManifest)]
    failures = tuple(outcome for outcome in outcomes if isinstance(outcome, FileFailure))
    per_reservation = tuple(
        import_reservation_bucket(bucket, store, dry_run=dry_run)
        for bucket in group_by_reservation(manifests)
    )
    summary = ImportSummary(per_reservation=per_reservation, failures=failures, dry_run=dry_run)
    logger.info(
        "Batch of %d files: %d reservations, %d file failures, created %d, skipped %d",
        len(files),
        len(per_reservation),
        len(failures),
        summary.total_created,
        summary.total_skipped,
    )
    return summary


def _prepare_file(
    upload: UploadedFile, settings: ImportSettings, decoder: WorkbookDecoder
) -> _PreparedFile | FileFailure:
    try:
        prepared = _parse_and_classify(upload, settings, decoder)
    except ManifestImportError as exc:
        logger.warning("%s: %s (%s)", upload.name, exc.reason.value, exc.message)
        return FileFailure(file=upload.name, reason=exc.reason, detail=exc.message)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.warning("%s: unexpected decoding error", upload.name, exc_info=True)
        return FileFailure(
            file=upload.name,
            reason=FailureReason.UNREADABLE_WORKBOOK,
            detail=f"Workbook could not be processed: {exc}",
        )
    logger.debug(
        "%s: %s via %s, %s, %d tourists",
        upload.name,
        prepared.match.category.value,
        prepared.match.rule,
        prepared.segment.value,
        len(prepared.tourists),
    )
    return prepared


def _parse_and_classify(
    upload: UploadedFile, settings: ImportSettings, decoder: WorkbookDecoder
) -> _PreparedFile:
    worksheets = decoder(upload.content)
    if not worksheets:
        raise WorkbookDecodeError("Workbook contains no worksheets.")
    sheet = parse_manifest_sheet(worksheets[0].rows, header_scan_rows=settings.header_scan_rows)
    match = classify_trip(sheet.header.trip_description)
    segment = infer_segment(sheet.header.trip_description)
    departure_date = sheet.header.departure_date
    if departure_date is None:
        raise MissingDepartureDateError(
            f"Departure date not readable from {sheet.header.date_range_text!r}."
        )
    resolved_arrival_date = resolve_arrival_date(departure_date, match.category)
    tourists = decode_passengers(sheet, segment=segment, check_in_date=resolved_arrival_date)
    return _PreparedFile(
        source_file=upload.name,
        header=sheet.header,
        match=match,
        segment=segment,
        departure_date=departure_date,
        resolved_arrival_date=resolved_arrival_date,
        tourists=tourists,
    )


def _read_candidate_snapshots(
    outcomes: Sequence[_FileOutcome], store: ReservationStore
) -> dict[TourCategory, tuple[ReservationSummary, ...]]:
    snapshots: dict[TourCategory, tuple[ReservationSummary, ...]] = {}
    for outcome in outcomes:
        if not isinstance(outcome, _PreparedFile):
            continue
        category = outcome.match.category
        if category in snapshots:
            continue
        try:
            snapshots[category] = tuple(store.list_reservation_candidates(category))
        except (ReservationStoreError, OSError) as exc:
            raise BatchImportError(
                f"Failed to read {category.value} reservations: {exc}"
            ) from exc
    return snapshots


def _match_outcome(
    outcome: _FileOutcome,
    snapshots: Mapping[TourCategory, tuple[ReservationSummary, ...]],
    settings: ImportSettings,
) -> _FileOutcome:
    if not isinstance(outcome, _PreparedFile):
        return outcome
    category = outcome.match.category
    try:
        reservation = match_reservation(
            category,
            outcome.departure_date,
            outcome.header.end_date,
            outcome.resolved_arrival_date,
            snapshots[category],
            ambiguity_policy=settings.ambiguity_policy,
        )
    except ManifestImportError as exc:
        logger.warning("%s: %s (%s)", outcome.source_file, exc.reason.value, exc.message)
        return FileFailure(file=outcome.source_file, reason=exc.reason, detail=exc.message)
    return ParsedManifest(
        source_file=outcome.source_file,
        header=outcome.header,
        category=category,
        rule=outcome.match.rule,
        segment=outcome.segment,
        resolved_arrival_date=outcome.resolved_arrival_date,
        reservation=reservation,
        tourists=outcome.tourists,
    )
