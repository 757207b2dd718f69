"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class ReservationStatus(str, Enum):
    """Rendered status of one reservation row."""

    OK = "OK"
    DRY_RUN = "DRY_RUN"
    FAILED = "FAILED"


@dataclass(frozen=True)
class RunMetadata:
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    config_path: Path
    store_path: Path
    input_files: tuple[str, ...]
    output_path: Path
