"""Template generation exports."""

from .constants import MANIFEST_SHEET_NAME, PASSENGER_COLUMNS, PASSENGER_HEADER_ROW
from .manifest_template_builder import generate_manifest_template

__all__ = [
    "MANIFEST_SHEET_NAME",
    "PASSENGER_COLUMNS",
    "PASSENGER_HEADER_ROW",
    "generate_manifest_template",
]
