"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from manifest_importer.manifest_parsing.row_parser import DEFAULT_HEADER_SCAN_ROWS
from manifest_importer.reservation_matching.matching_outcomes import AmbiguityPolicy

DEFAULT_PARALLELISM = 4


@dataclass(frozen=True)
class StoreSettings:
    """Location of the JSON reservation store."""

    path: Path


@dataclass(frozen=True)
class ImportSettings:
    """Tuning of one batch import."""

    parallelism: int = DEFAULT_PARALLELISM
    ambiguity_policy: AmbiguityPolicy = AmbiguityPolicy.REJECT
    header_scan_rows: int = DEFAULT_HEADER_SCAN_ROWS


@dataclass(frozen=True)
class ReportSettings:
    """Default destination of summary workbooks."""

    output_dir: Path | None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    store: StoreSettings
    import_settings: ImportSettings
    report: ReportSettings
