"""Run execution domain exports."""

from manifest_importer.import_summary import FileFailure, ImportSummary

from .batch_import_use_case import BatchImportError, import_batch
from .import_run_use_case import RunExecutionError, execute_manifest_import_run
from .run_contracts import ImportRunOutcome, ImportRunRequest, UploadedFile

__all__ = [
    "BatchImportError",
    "FileFailure",
    "ImportRunOutcome",
    "ImportRunRequest",
    "ImportSummary",
    "RunExecutionError",
    "UploadedFile",
    "execute_manifest_import_run",
    "import_batch",
]
