"""Tests for the import run use-case service."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from manifest_importer.run_execution import (
    ImportRunRequest,
    RunExecutionError,
    execute_manifest_import_run,
)
from manifest_importer.template_generation import generate_manifest_template
from openpyxl import load_workbook


def _write_store(tmp_path: Path) -> Path:
    path = tmp_path / "reservations.json"
    path.write_text(
        json.dumps(
            {
                "reservations": [
                    {
                        "id": "r-1",
                        "number": "ER-01",
                        "category": "ER",
                        "departure_date": "2026-04-17",
                        "end_date": "2026-04-30",
                        "tourists": [],
                    }
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


def _write_config(tmp_path: Path, *, report_dir: str | None = None) -> Path:
    _write_store(tmp_path)
    lines = ["store:", "  path: reservations.json", "import:", "  parallelism: 2"]
    if report_dir:
        lines += ["report:", f"  output_dir: {report_dir}"]
    path = tmp_path / "config.yaml"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def _write_manifest(tmp_path: Path, name: str = "manifest.xlsx") -> Path:
    path = generate_manifest_template(
        tmp_path / name, trip_description="Usbekistan", date_range="17.04.2026 - 30.04.2026"
    )
    workbook = load_workbook(path)
    sheet = workbook.active
    sheet.append([1, "Mrs. Richter, Nancy", None, "DEU", "C01X00T47"])
    sheet.append([2, "Mr. Richter, Paul", None, "DEU", "C01X00T48"])
    workbook.save(path)
    return path


def test_imports_into_json_store_and_writes_requested_report(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path)
    manifest_path = _write_manifest(tmp_path)
    report_path = tmp_path / "out" / "summary.xlsx"

    outcome = execute_manifest_import_run(
        ImportRunRequest(
            config_path=str(config_path),
            input_paths=(str(manifest_path),),
            report_path=str(report_path),
        )
    )

    assert outcome.summary.total_created == 2
    assert outcome.report_path == report_path.resolve()
    assert report_path.exists()
    document = json.loads((tmp_path / "reservations.json").read_text(encoding="utf-8"))
    assert document["reservations"][0]["pax"] == 2


def test_report_defaults_to_configured_output_dir(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, report_dir="reports")
    manifest_path = _write_manifest(tmp_path)

    outcome = execute_manifest_import_run(
        ImportRunRequest(config_path=str(config_path), input_paths=(str(manifest_path),))
    )

    assert outcome.report_path is not None
    assert outcome.report_path.parent == (tmp_path / "reports").resolve()
    assert outcome.report_path.name.startswith("import-summary-")


def test_no_report_without_path_or_output_dir(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path)
    manifest_path = _write_manifest(tmp_path)

    outcome = execute_manifest_import_run(
        ImportRunRequest(config_path=str(config_path), input_paths=(str(manifest_path),))
    )

    assert outcome.report_path is None


def test_dry_run_does_not_modify_the_store_file(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path)
    manifest_path = _write_manifest(tmp_path)
    store_before = (tmp_path / "reservations.json").read_text(encoding="utf-8")

    outcome = execute_manifest_import_run(
        ImportRunRequest(
            config_path=str(config_path), input_paths=(str(manifest_path),), dry_run=True
        )
    )

    assert outcome.summary.dry_run
    assert (tmp_path / "reservations.json").read_text(encoding="utf-8") == store_before


def test_missing_configuration_raises_run_error(tmp_path: Path) -> None:
    with pytest.raises(RunExecutionError, match="Configuration file not found"):
        execute_manifest_import_run(
            ImportRunRequest(config_path=str(tmp_path / "missing.yaml"), input_paths=())
        )


def test_missing_store_raises_run_error(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("store:\n  path: nowhere.json\n", encoding="utf-8")

    with pytest.raises(RunExecutionError, match="Reservation store file not found"):
        execute_manifest_import_run(ImportRunRequest(config_path=str(config_path), input_paths=()))
