"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Import configuration template for manifest-importer.
# Replace every <REQUIRED> placeholder before running import.
# Optional settings are commented out and show their defaults.

store:
  # JSON reservation store, relative to this file unless absolute.
  path: "<REQUIRED>"

import:
  # Number of manifest files parsed concurrently.
  parallelism: 4
  # reject: several matching reservations fail the file.
  # first: the first matching reservation in store order is used.
  ambiguity_policy: reject
  # Rows scanned for the Reise:/Datum: header lines.
  header_scan_rows: 5

# report:
#   # Directory for summary workbooks written by `import` without --report.
#   output_dir: "reports"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML import configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder import configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Import configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
