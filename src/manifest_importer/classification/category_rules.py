"""Ordered rule chain classifying a trip description into a tour category."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from manifest_importer.import_failures import UnclassifiedCategoryError

from .tour_categories import CategoryMatch, TourCategory

PRIMARY_COUNTRY = "usbekistan"
EXTENSION_COUNTRY = "turkmenistan"
TAJIKISTAN = "tadschikistan"
KAZAKHSTAN = "kasachstan"
KYRGYZSTAN = "kirgistan"

EXTENSION_KEYWORDS: tuple[str, ...] = ("verlängerung", "verlangerung", "extension")
PRODUCT_TIER_KEYWORD = "comfort"
PRODUCT_FAMILY_KEYWORD = "erlebnis"

Predicate = Callable[[str], bool]


@dataclass(frozen=True)
class CategoryRule:
    """One entry of the classification chain; `predicate` receives lower-cased text."""

    name: str
    predicate: Predicate
    category: TourCategory


def _all_of(*terms: str) -> Predicate:
    return lambda text: all(term in text for term in terms)


def _none_of(*terms: str) -> Predicate:
    return lambda text: not any(term in text for term in terms)


def _any_of(*terms: str) -> Predicate:
    return lambda text: any(term in text for term in terms)


def _both(*predicates: Predicate) -> Predicate:
    return lambda text: all(predicate(text) for predicate in predicates)


def has_extension_keyword(text: str) -> bool:
    """Return True when the lower-cased text carries an extension keyword."""
    return _any_of(*EXTENSION_KEYWORDS)(text)


# Order matters: several signatures are textual subsets of earlier ones.
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        name="za-five-countries",
        predicate=_all_of(EXTENSION_COUNTRY, PRIMARY_COUNTRY, TAJIKISTAN, KAZAKHSTAN, KYRGYZSTAN),
        category=TourCategory.ZA,
    ),
    CategoryRule(
        name="kas-silk-road",
        predicate=_both(
            _all_of(KAZAKHSTAN, KYRGYZSTAN, PRIMARY_COUNTRY),
            _none_of(EXTENSION_COUNTRY, TAJIKISTAN),
        ),
        category=TourCategory.KAS,
    ),
    CategoryRule(
        name="co-comfort",
        predicate=_all_of(PRIMARY_COUNTRY, PRODUCT_TIER_KEYWORD),
        category=TourCategory.CO,
    ),
    CategoryRule(
        name="er-extension",
        predicate=_both(_all_of(PRIMARY_COUNTRY, EXTENSION_COUNTRY), has_extension_keyword),
        category=TourCategory.ER,
    ),
    CategoryRule(
        name="er-base",
        predicate=_both(
            _all_of(PRIMARY_COUNTRY),
            _none_of(EXTENSION_COUNTRY, TAJIKISTAN, KAZAKHSTAN, KYRGYZSTAN, PRODUCT_TIER_KEYWORD),
        ),
        category=TourCategory.ER,
    ),
    CategoryRule(
        name="er-product-family",
        predicate=_all_of(PRODUCT_FAMILY_KEYWORD),
        category=TourCategory.ER,
    ),
)


def classify_trip(
    description: str, rules: Sequence[CategoryRule] = CATEGORY_RULES
) -> CategoryMatch:
    """Return the category of the first rule matching the description."""
    text = description.strip().lower()
    if text:
        for rule in rules:
            if rule.predicate(text):
                return CategoryMatch(category=rule.category, rule=rule.name)
    raise UnclassifiedCategoryError(f"Tour category not recognized: {description.strip()!r}")
