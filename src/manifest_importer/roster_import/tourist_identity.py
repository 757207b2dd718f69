"""Deduplication identity of an imported tourist."""

from __future__ import annotations

import re

from manifest_importer.manifest_parsing.manifest_models import NOT_PROVIDED, ParsedTourist

_WHITESPACE = re.compile(r"\s+")


def tourist_identity(tourist: ParsedTourist) -> str:
    """Return the passport number when known, otherwise the normalized full name."""
    passport = _normalize(tourist.passport_number)
    if passport and passport != _normalize(NOT_PROVIDED):
        return f"passport:{passport.replace(' ', '')}"
    return f"name:{_normalize(tourist.full_name)}"


def _normalize(value: str) -> str:
    return _WHITESPACE.sub(" ", value.strip()).casefold()
