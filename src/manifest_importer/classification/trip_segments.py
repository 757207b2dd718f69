"""Trip segment inference from the trip description."""

from __future__ import annotations

from .category_rules import EXTENSION_COUNTRY, PRIMARY_COUNTRY, has_extension_keyword
from .tour_categories import TripSegment


def infer_segment(description: str) -> TripSegment:
    """Return EXTENSION for extension-country manifests, PRIMARY otherwise.

    A manifest covers the extension when it names the extension country together
    with an extension keyword, or names the extension country without the
    primary country.
    """
    text = description.lower()
    if EXTENSION_COUNTRY not in text:
        return TripSegment.PRIMARY
    if has_extension_keyword(text) or PRIMARY_COUNTRY not in text:
        return TripSegment.EXTENSION
    return TripSegment.PRIMARY
