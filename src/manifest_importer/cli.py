"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from manifest_importer.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from manifest_importer.results_writing import render_digest
from manifest_importer.run_execution import (
    ImportRunRequest,
    RunExecutionError,
    execute_manifest_import_run,
)
from manifest_importer.template_generation import generate_manifest_template
from manifest_importer.template_generation.constants import DEFAULT_DATES_TEXT, DEFAULT_TRIP_TEXT

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="manifest-importer")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress at DEBUG level.")
def cli(verbose: bool) -> None:
    """Passenger manifest import and reservation reconciliation utility."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML import configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML import configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-template")
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the blank manifest workbook to write",
)
@click.option(
    "--trip",
    "trip_description",
    default=DEFAULT_TRIP_TEXT,
    show_default=True,
    help="Trip description written after the Reise: label",
)
@click.option(
    "--dates",
    "date_range",
    default=DEFAULT_DATES_TEXT,
    show_default=True,
    help="Date range written after the Datum: label",
)
def generate_template(output_path: str, trip_description: str, date_range: str) -> None:
    """Generate a blank passenger manifest workbook."""
    try:
        resolved_output = generate_manifest_template(
            output_path, trip_description=trip_description, date_range=date_range
        )
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="import")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON import configuration file",
)
@click.option(
    "--report",
    "report_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path for the summary workbook",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Parse, classify and match without writing to the reservation store.",
)
@click.argument(
    "input_paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=str),
)
def import_manifests(
    config_path: str, report_path: str | None, dry_run: bool, input_paths: tuple[str, ...]
) -> None:
    """Import passenger manifests into their matching reservations."""
    try:
        outcome = execute_manifest_import_run(
            ImportRunRequest(
                config_path=config_path,
                input_paths=input_paths,
                report_path=report_path,
                dry_run=dry_run,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(render_digest(outcome.summary))
    if outcome.report_path is not None:
        click.echo(f"report: {Path(outcome.report_path)}")
    if outcome.summary.has_failures:
        raise CliError("Import finished with failures.")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
