"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from manifest_importer.import_summary import ImportSummary


@dataclass(frozen=True)
class UploadedFile:
    """One manifest upload: original file name plus raw workbook bytes."""

    name: str
    content: bytes

    @classmethod
    def from_path(cls, path: Path | str) -> UploadedFile:
        source = Path(path)
        return cls(name=source.name, content=source.read_bytes())


@dataclass(frozen=True)
class ImportRunRequest:
    """Input contract for executing one import run."""

    config_path: str
    input_paths: tuple[str, ...]
    report_path: str | None = None
    dry_run: bool = False


@dataclass(frozen=True)
class ImportRunOutcome:
    """Output contract for one completed import run."""

    summary: ImportSummary
    report_path: Path | None
