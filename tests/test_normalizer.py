"""Tests for ingredient text normalization."""

import pytest

from ava_health.services.normalizer import extract_ingredients_section, normalize


def test_normalize_splits_and_trims_in_order() -> None:
    tokens = normalize("  Water ,Glycerin,  Phenoxyethanol  , Fragrance")

    assert tokens == ["Water", "Glycerin", "Phenoxyethanol", "Fragrance"]


@pytest.mark.parametrize("raw", ["", "   ", ",", " , ,, "])
def test_normalize_blank_input_yields_nothing(raw: str) -> None:
    assert normalize(raw) == []


def test_normalize_keeps_duplicates_casing_and_punctuation() -> None:
    tokens = normalize("aqua (water), Aqua (Water), Vitamin E.")

    assert tokens == ["aqua (water)", "Aqua (Water)", "Vitamin E."]


def test_normalize_only_splits_on_commas() -> None:
    assert normalize("Water; Glycerin\nFragrance") == ["Water; Glycerin\nFragrance"]


def test_extract_section_after_label() -> None:
    text = "Hydrating Cream\nINGREDIENTS: Water, Glycerin, Fragrance. Made in France"

    assert extract_ingredients_section(text) == "Water, Glycerin, Fragrance"


def test_extract_section_falls_back_to_list_paragraph() -> None:
    text = "Brand X\n\nWater, Glycerin, Aloe Vera, Tocopherol\n\nMade in USA"

    assert (
        extract_ingredients_section(text) == "Water, Glycerin, Aloe Vera, Tocopherol"
    )


def test_extract_section_returns_none_without_list() -> None:
    assert extract_ingredients_section("Shake well\n\nStore in a cool place") is None
