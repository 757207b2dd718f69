"""Import run use-case service: configuration, store, batch and report."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from manifest_importer.configuration import Configuration, ConfigurationError, load_configuration
from manifest_importer.results_writing import RunMetadata, write_summary_workbook
from manifest_importer.roster_import import JsonFileReservationStore, ReservationStoreError

from .batch_import_use_case import BatchImportError, import_batch
from .run_contracts import ImportRunOutcome, ImportRunRequest, UploadedFile


class RunExecutionError(Exception):
    """Raised when an import run cannot be completed."""


def execute_manifest_import_run(request: ImportRunRequest) -> ImportRunOutcome:
    """Import the requested manifests into the configured store and write the report."""
    run_start = datetime.now(UTC)
    try:
        configuration = load_configuration(request.config_path)
        store = JsonFileReservationStore(configuration.store.path)
        uploads = [UploadedFile.from_path(path) for path in request.input_paths]
    except (ConfigurationError, ReservationStoreError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc

    try:
        summary = import_batch(
            uploads,
            store,
            settings=configuration.import_settings,
            dry_run=request.dry_run,
        )
    except BatchImportError as exc:
        raise RunExecutionError(str(exc)) from exc

    report_path = _resolve_report_path(request.report_path, configuration, run_start)
    if report_path is not None:
        run_metadata = RunMetadata(
            run_start=run_start,
            config_path=Path(request.config_path).resolve(),
            store_path=configuration.store.path,
            input_files=tuple(upload.name for upload in uploads),
            output_path=report_path.resolve(),
        )
        try:
            report_path = write_summary_workbook(summary, report_path, run_metadata)
        except OSError as exc:
            raise RunExecutionError(f"Failed to write summary workbook: {exc}") from exc
    return ImportRunOutcome(summary=summary, report_path=report_path)


def _resolve_report_path(
    requested: str | None, configuration: Configuration, run_start: datetime
) -> Path | None:
    if requested:
        return Path(requested)
    if configuration.report.output_dir is None:
        return None
    timestamp = run_start.strftime("%Y%m%d-%H%M%S")
    return configuration.report.output_dir / f"import-summary-{timestamp}.xlsx"
