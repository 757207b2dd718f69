"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from click.testing import CliRunner
from manifest_importer.cli import cli
from manifest_importer.results_writing import RESERVATIONS_SHEET_NAME, RUN_INFO_SHEET_NAME
from manifest_importer.template_generation import MANIFEST_SHEET_NAME
from openpyxl import load_workbook


def _write_config(tmp_path: Path) -> Path:
    store_path = tmp_path / "reservations.json"
    store_path.write_text(
        json.dumps(
            {
                "reservations": [
                    {
                        "id": "r-er",
                        "number": "ER-2026-04",
                        "category": "ER",
                        "departure_date": "2026-04-17",
                        "end_date": "2026-05-06",
                    },
                    {
                        "id": "r-kas",
                        "number": "KAS-2026-05",
                        "category": "KAS",
                        "departure_date": "2026-05-01",
                        "end_date": "2026-05-12",
                    },
                ]
            }
        ),
        encoding="utf-8",
    )
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "store:\n  path: reservations.json\nreport:\n  output_dir: reports\n", encoding="utf-8"
    )
    return config_path


def _generate_manifest(
    runner: CliRunner,
    path: Path,
    trip: str,
    dates: str,
    passengers: Sequence[Sequence[object]],
) -> Path:
    result = runner.invoke(
        cli, ["generate-template", "--output", str(path), "--trip", trip, "--dates", dates]
    )
    assert result.exit_code == 0
    workbook = load_workbook(path)
    sheet = workbook[MANIFEST_SHEET_NAME]
    for index, passenger in enumerate(passengers, start=1):
        sheet.append([index, *passenger])
    workbook.save(path)
    return path


def test_generate_config_command_writes_placeholder_file_with_default_name(
    tmp_path: Path,
) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(cli, ["generate-config"])
        output_path = Path("config.yaml").resolve()

        assert result.exit_code == 0
        assert output_path.exists()
        content = output_path.read_text(encoding="utf-8")
        assert "store:" in content
        assert "<REQUIRED>" in content
        assert str(output_path) in result.output


def test_generate_config_command_fails_when_output_file_already_exists(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "config.yaml"
    output_path.write_text("already-there", encoding="utf-8")

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code != 0
    assert "already exists" in str(result.exception).lower()
    assert output_path.read_text(encoding="utf-8") == "already-there"


def test_import_command_reconciles_primary_and_extension_files(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)
    primary = _generate_manifest(
        runner,
        tmp_path / "usbekistan.xlsx",
        "Usbekistan",
        "17.04.2026 - 30.04.2026",
        [("Mrs. Richter, Nancy", None, "DEU", "C01X00T47")],
    )
    extension = _generate_manifest(
        runner,
        tmp_path / "turkmenistan.xlsx",
        "Usbekistan mit Verlängerung Turkmenistan",
        "17.04.2026 - 06.05.2026",
        [("Mr. Richter, Paul", None, "DEU", "C01X00T48")],
    )

    result = runner.invoke(
        cli, ["import", "--config", str(config_path), str(primary), str(extension)]
    )

    assert result.exit_code == 0, result.output
    assert "ER-2026-04: created 2, skipped 0" in result.output
    assert "Total: 1 reservations, created 2, skipped 0, failures 0" in result.output
    document = json.loads((tmp_path / "reservations.json").read_text(encoding="utf-8"))
    record = document["reservations"][0]
    assert (record["pax"], record["pax_primary"], record["pax_extension"]) == (2, 1, 1)

    reports = list((tmp_path / "reports").glob("import-summary-*.xlsx"))
    assert len(reports) == 1
    report = load_workbook(reports[0])
    assert report[RESERVATIONS_SHEET_NAME].cell(row=2, column=1).value == "ER-2026-04"
    assert RUN_INFO_SHEET_NAME in report.sheetnames


def test_import_command_dry_run_reports_without_writing(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)
    store_before = (tmp_path / "reservations.json").read_text(encoding="utf-8")
    manifest = _generate_manifest(
        runner,
        tmp_path / "kasachstan.xlsx",
        "Kasachstan, Kirgistan und Usbekistan",
        "17.04.2026 - 12.05.2026",
        [("Frau Weber, Anna", None, "DEU", "P123")],
    )
    report_path = tmp_path / "dry-run.xlsx"

    result = runner.invoke(
        cli,
        [
            "import",
            "--config",
            str(config_path),
            "--report",
            str(report_path),
            "--dry-run",
            str(manifest),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "KAS-2026-05: would submit 1 (dry run)" in result.output
    assert f"report: {report_path.resolve()}" in result.output
    assert (tmp_path / "reservations.json").read_text(encoding="utf-8") == store_before


def test_import_command_exits_non_zero_when_a_file_fails(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)
    manifest = _generate_manifest(
        runner,
        tmp_path / "georgien.xlsx",
        "Georgien",
        "17.04.2026 - 30.04.2026",
        [("Mr. Test, Max", None, "DEU", "T1")],
    )

    result = runner.invoke(cli, ["import", "--config", str(config_path), str(manifest)])

    assert result.exit_code != 0
    assert "georgien.xlsx: UNCLASSIFIED_CATEGORY" in result.output
    assert "Import finished with failures" in str(result.exception)
