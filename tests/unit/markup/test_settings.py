"""Tests for MarkupSettings construction from config."""
from __future__ import annotations

from foundry_markup.core.markup import MarkupSettings


def test_defaults() -> None:
    settings = MarkupSettings()
    assert settings.max_depth == 8
    assert settings.max_expansions == 256
    assert settings.link_class == "internal-journal-link"
    assert settings.save_types == ("fortitude", "reflex", "will")


def test_from_config_reads_markup_section() -> None:
    settings = MarkupSettings.from_config(
        {"markup": {"max_depth": 3, "link_class": "jump", "save_types": ["Reflex"]}}
    )
    assert settings.max_depth == 3
    assert settings.max_expansions == 256
    assert settings.link_class == "jump"
    assert settings.save_types == ("reflex",)
    assert settings.namespace == "PF2E"


def test_from_empty_config() -> None:
    assert MarkupSettings.from_config(None) == MarkupSettings()
    assert MarkupSettings.from_config({"markup": None}) == MarkupSettings()


def test_max_expansions_from_config() -> None:
    assert MarkupSettings.from_config({"markup": {"max_expansions": 10}}).max_expansions == 10
