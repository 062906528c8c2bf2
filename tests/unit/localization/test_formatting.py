"""Tests for the PF2e display formatters."""
from __future__ import annotations

import pytest

from foundry_markup.core.localization import (
    format_bulk,
    format_price,
    slug_to_pascal_case,
    trait_label,
)


class TestSlugToPascalCase:
    @pytest.mark.parametrize(
        ("slug", "expected"),
        [
            ("fire-resistance", "FireResistance"),
            ("fire_resistance", "FireResistance"),
            ("versatile-p", "VersatileP"),
            ("fire", "Fire"),
            ("  cold iron ", "ColdIron"),
            ("", ""),
        ],
    )
    def test_conversion(self, slug: str, expected: str) -> None:
        assert slug_to_pascal_case(slug) == expected


class TestTraitLabel:
    def test_localized(self, localization) -> None:
        assert trait_label("fire", localization) == "Fire"

    def test_unlocalized_falls_back_to_pascal(self, localization) -> None:
        assert trait_label("versatile-p", localization) == "VersatileP"

    def test_custom_namespace(self) -> None:
        data = {"SF2E": {"TraitTech": "Tech"}}
        assert trait_label("tech", data, namespace="SF2E") == "Tech"


class TestFormatPrice:
    def test_single_coin(self, localization) -> None:
        assert format_price({"value": {"gp": 5}}, localization) == "5 gp"

    def test_coins_in_denomination_order(self) -> None:
        price = {"value": {"cp": 3, "gp": 5, "sp": 2, "pp": 1}}
        assert format_price(price) == "1 pp, 5 gp, 2 sp, 3 cp"

    def test_zero_coins_skipped(self) -> None:
        assert format_price({"value": {"gp": 0, "sp": 4}}) == "4 sp"

    def test_no_coins(self) -> None:
        assert format_price({"value": {}}) == "0 gp"

    def test_per_quantity(self) -> None:
        assert format_price({"value": {"sp": 1}, "per": 10}) == "1 sp / 10"

    def test_localized_abbreviation(self) -> None:
        data = {"PF2E": {"CurrencyAbbreviations": {"gp": "po"}}}
        assert format_price({"value": {"gp": 2}}, data) == "2 po"

    @pytest.mark.parametrize("price", [None, "5 gp", {"value": None}, {}])
    def test_invalid(self, price) -> None:
        assert format_price(price) == "-"


class TestFormatBulk:
    def test_missing(self) -> None:
        assert format_bulk(None) is None
        assert format_bulk({}) is None

    def test_negligible(self, localization) -> None:
        assert format_bulk({"value": 0}) == "-"
        assert format_bulk({"value": 0}, localization) == "Negligible"

    def test_light(self, localization) -> None:
        assert format_bulk({"value": 0.1}, localization) == "L"

    def test_whole_bulk(self) -> None:
        assert format_bulk({"value": 2}) == "2"
        assert format_bulk({"value": 1.0}) == "1"
