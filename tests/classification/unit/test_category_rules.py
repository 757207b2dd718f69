"""Category rule chain tests."""

from __future__ import annotations

import pytest
from manifest_importer.classification import CATEGORY_RULES, CategoryRule, TourCategory
from manifest_importer.classification.category_rules import classify_trip
from manifest_importer.import_failures import FailureReason, UnclassifiedCategoryError


@pytest.mark.parametrize(
    ("description", "category", "rule"),
    [
        (
            "Turkmenistan, Usbekistan, Tadschikistan, Kasachstan und Kirgistan",
            TourCategory.ZA,
            "za-five-countries",
        ),
        ("Kasachstan, Kirgistan und Usbekistan", TourCategory.KAS, "kas-silk-road"),
        ("Usbekistan ComfortPlus", TourCategory.CO, "co-comfort"),
        ("Usbekistan mit Verlängerung Turkmenistan", TourCategory.ER, "er-extension"),
        ("Usbekistan mit Verlangerung Turkmenistan", TourCategory.ER, "er-extension"),
        ("Usbekistan with Turkmenistan extension", TourCategory.ER, "er-extension"),
        ("Usbekistan", TourCategory.ER, "er-base"),
        ("  USBEKISTAN  ", TourCategory.ER, "er-base"),
        ("Erlebnisreise Seidenstrasse", TourCategory.ER, "er-product-family"),
    ],
)
def test_classifies_known_trip_descriptions(
    description: str, category: TourCategory, rule: str
) -> None:
    match = classify_trip(description)

    assert match.category == category
    assert match.rule == rule


def test_five_country_trip_wins_over_later_rules() -> None:
    description = "Erlebnis Turkmenistan, Usbekistan, Tadschikistan, Kasachstan, Kirgistan Comfort"

    assert classify_trip(description).category == TourCategory.ZA


def test_silk_road_with_tajikistan_is_not_kas() -> None:
    with pytest.raises(UnclassifiedCategoryError):
        classify_trip("Kasachstan, Kirgistan, Tadschikistan und Usbekistan")


@pytest.mark.parametrize(
    "description",
    [
        "",
        "   ",
        "Georgien und Armenien",
        "Turkmenistan",
        "Usbekistan und Turkmenistan",
        "Usbekistan und Kasachstan",
    ],
)
def test_unrecognized_descriptions_fail(description: str) -> None:
    with pytest.raises(UnclassifiedCategoryError) as exc_info:
        classify_trip(description)

    assert exc_info.value.reason == FailureReason.UNCLASSIFIED_CATEGORY
    assert "Tour category not recognized" in exc_info.value.message


def test_rule_table_is_ordered_and_named_uniquely() -> None:
    names = [rule.name for rule in CATEGORY_RULES]

    assert names == [
        "za-five-countries",
        "kas-silk-road",
        "co-comfort",
        "er-extension",
        "er-base",
        "er-product-family",
    ]
    assert len(set(names)) == len(names)


def test_rules_receive_lower_cased_text() -> None:
    seen: list[str] = []

    def _record(text: str) -> bool:
        seen.append(text)
        return True

    rules = (CategoryRule(name="probe", predicate=_record, category=TourCategory.CO),)

    match = classify_trip("  Usbekistan ComfortPlus ", rules=rules)

    assert match.rule == "probe"
    assert seen == ["usbekistan comfortplus"]
