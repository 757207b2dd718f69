"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from manifest_importer.reservation_matching.matching_outcomes import AmbiguityPolicy

from .runtime_settings import (
    DEFAULT_PARALLELISM,
    Configuration,
    ImportSettings,
    ReportSettings,
    StoreSettings,
)

_DEFAULT_IMPORT_SETTINGS = ImportSettings()


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    return Configuration(
        path=path,
        store=_parse_store_section(parsed.get("store"), base_path),
        import_settings=_parse_import_section(parsed.get("import")),
        report=_parse_report_section(parsed.get("report"), base_path),
    )


def _parse_store_section(value: Any, base_path: Path) -> StoreSettings:
    section = _require_mapping(value, "store")
    raw_path = _require_non_empty_string(section.get("path"), "store.path")
    return StoreSettings(path=_resolve_path(base_path, raw_path))


def _parse_import_section(value: Any) -> ImportSettings:
    if value is None:
        return _DEFAULT_IMPORT_SETTINGS
    section = _require_mapping(value, "import")
    parallelism = _require_positive_int(
        section.get("parallelism", DEFAULT_PARALLELISM), "import.parallelism"
    )
    header_scan_rows = _require_positive_int(
        section.get("header_scan_rows", _DEFAULT_IMPORT_SETTINGS.header_scan_rows),
        "import.header_scan_rows",
    )
    ambiguity_policy = _parse_ambiguity_policy(
        section.get("ambiguity_policy", _DEFAULT_IMPORT_SETTINGS.ambiguity_policy.value)
    )
    return ImportSettings(
        parallelism=parallelism,
        ambiguity_policy=ambiguity_policy,
        header_scan_rows=header_scan_rows,
    )


def _parse_ambiguity_policy(value: Any) -> AmbiguityPolicy:
    raw = _require_non_empty_string(value, "import.ambiguity_policy").lower()
    try:
        return AmbiguityPolicy(raw)
    except ValueError as exc:
        allowed = ", ".join(policy.value for policy in AmbiguityPolicy)
        raise ConfigurationError(
            f"import.ambiguity_policy must be one of: {allowed}."
        ) from exc


def _parse_report_section(value: Any, base_path: Path) -> ReportSettings:
    if value is None:
        return ReportSettings(output_dir=None)
    section = _require_mapping(value, "report")
    raw_dir = _optional_string(section.get("output_dir"), "report.output_dir")
    return ReportSettings(output_dir=_resolve_path(base_path, raw_dir) if raw_dir else None)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
