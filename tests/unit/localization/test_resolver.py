"""Tests for dotted-key resolution against nested localization data."""
from __future__ import annotations

import pytest

from foundry_markup.core.localization import NOT_FOUND, is_found, resolve


class TestResolve:
    def test_string_leaf(self, localization) -> None:
        assert resolve(localization, "PF2E.TraitFire") == "Fire"

    def test_deeply_nested_leaf(self, localization) -> None:
        value = resolve(localization, "PF2E.Item.Weapon.Rune.Striking.Greater")
        assert value == "Greater Striking"

    def test_string_leaf_returned_verbatim(self, localization) -> None:
        """Placeholders and markup are not interpreted by the resolver."""
        assert resolve(localization, "PF2E.ItemLevel") == "{type} {level}"

    def test_missing_segment(self, localization) -> None:
        assert resolve(localization, "PF2E.Nope") is NOT_FOUND
        assert resolve(localization, "Nope.TraitFire") is NOT_FOUND

    def test_path_through_string_is_not_found(self, localization) -> None:
        assert resolve(localization, "PF2E.TraitFire.Extra") is NOT_FOUND

    def test_mapping_leaf_is_not_found(self, localization) -> None:
        assert resolve(localization, "PF2E.Item") is NOT_FOUND

    def test_integer_leaf_is_stringified(self, localization) -> None:
        assert resolve(localization, "PF2E.SpeedBase") == "25"

    def test_integral_float_has_no_fraction(self) -> None:
        assert resolve({"A": {"B": 5.0}}, "A.B") == "5"
        assert resolve({"A": {"B": 2.5}}, "A.B") == "2.5"

    def test_bool_leaf_is_not_found(self, localization) -> None:
        assert resolve(localization, "PF2E.Flag") is NOT_FOUND

    @pytest.mark.parametrize("leaf", [None, [1, 2], {"x": "y"}])
    def test_other_leaf_types_are_not_found(self, leaf) -> None:
        assert resolve({"A": leaf}, "A") is NOT_FOUND

    def test_no_dictionary(self) -> None:
        assert resolve(None, "PF2E.TraitFire") is NOT_FOUND

    def test_empty_key(self, localization) -> None:
        assert resolve(localization, "") is NOT_FOUND


class TestNotFound:
    def test_sentinel_is_falsy_singleton(self) -> None:
        assert not NOT_FOUND
        assert type(NOT_FOUND)() is NOT_FOUND
        assert repr(NOT_FOUND) == "NOT_FOUND"

    def test_is_found(self, localization) -> None:
        assert is_found(resolve(localization, "PF2E.TraitFire"))
        assert not is_found(resolve(localization, "PF2E.Missing"))

    def test_empty_string_is_found(self) -> None:
        """An empty string is a real value, distinct from absence."""
        value = resolve({"A": ""}, "A")
        assert value == ""
        assert is_found(value)
