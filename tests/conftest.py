"""Shared fixtures for the foundry-markup test suite."""
from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'foundry_markup' without an install.
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from foundry_markup.core.documents import DocumentGraph, Journal
from foundry_markup.core.logging_setup import reset_logging_for_tests
from foundry_markup.core.markup import MarkupEngine, MarkupSettings
from foundry_markup.data import clear_caches


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch):
    """Fresh caches, no FOUNDRY_MARKUP_* env leakage, no stray log handler."""
    for key in list(os.environ):
        if key.startswith("FOUNDRY_MARKUP_"):
            monkeypatch.delenv(key, raising=False)
    clear_caches()
    yield
    clear_caches()
    reset_logging_for_tests()


@pytest.fixture
def localization() -> Dict[str, Any]:
    """A small slice of the pf2e en.json localization file."""
    return {
        "PF2E": {
            "TraitFire": "Fire",
            "TraitFireResistance": "Fire Resistance",
            "TraitDescriptionFire": "Effects with the <b>fire</b> trait deal \"fire\" damage.",
            "TraitMagical": "Magical",
            "CurrencyAbbreviations": {"pp": "pp", "gp": "gp", "sp": "sp", "cp": "cp"},
            "BulkTypeLight": "L",
            "BulkTypeNegligible": "Negligible",
            "WeaponGroupSword": "Swords",
            "ItemLevel": "{type} {level}",
            "Item": {
                "Weapon": {
                    "Rune": {
                        "Striking": {
                            "Striking": "Striking",
                            "Greater": "Greater Striking",
                            "Major": "Major Striking",
                        }
                    }
                }
            },
            "ArmorResilientRune": "Resilient",
            "ArmorGreaterResilientRune": "Greater Resilient",
            "ArmorMajorResilientRune": "Major Resilient",
            "NPC": {
                "Abilities": {
                    "Glossary": {
                        "AttackOfOpportunity": (
                            "You can make a @Check[reflex|dc:15|basic:true] save, see "
                            "@Localize[PF2E.NPC.Abilities.Glossary.Reach]."
                        ),
                        "Reach": "Reach @Trait[fire]",
                    }
                }
            },
            "SpeedBase": 25,
            "Flag": True,
        }
    }


@pytest.fixture
def engine() -> MarkupEngine:
    return MarkupEngine(MarkupSettings())


@pytest.fixture
def journal_payload() -> Dict[str, Any]:
    """Exported JSON of a journal with two text pages and an image page."""
    return {
        "_id": "j1",
        "name": "Abomination Vaults",
        "pages": [
            {
                "_id": "p1",
                "name": "Introduction",
                "type": "text",
                "title": {"level": 1},
                "text": {
                    "content": (
                        "<p>Read @UUID[JournalEntry.j1.JournalEntryPage.p2]{Gauntlight} "
                        "then @UUID[JournalEntry.j2.JournalEntryPage.p9]{the map}.</p>"
                    )
                },
            },
            {
                "_id": "p2",
                "name": "Gauntlight",
                "type": "text",
                "title": {"level": 2},
                "text": {"content": "<p>@Damage[2d6[fire]] @Condition[frightened]{Frightened 1}</p>"},
            },
            {"_id": "p3", "name": "Map", "type": "image", "src": "map.webp"},
        ],
    }


@pytest.fixture
def other_journal_payload() -> Dict[str, Any]:
    return {
        "_id": "j2",
        "name": "Maps",
        "pages": [{"_id": "p9", "name": "Dungeon", "type": "text", "text": {"content": "<p>Map</p>"}}],
    }


@pytest.fixture
def actor_payload() -> Dict[str, Any]:
    return {
        "_id": "a1",
        "name": "Goblin Warrior",
        "type": "npc",
        "system": {
            "details": {
                "level": {"value": -1},
                "publicNotes": "<p>A @Trait[goblin] skirmisher.</p>",
                "privateNotes": "",
            }
        },
    }


@pytest.fixture
def item_payload() -> Dict[str, Any]:
    return {
        "_id": "i1",
        "name": "Longsword",
        "type": "weapon",
        "system": {
            "level": {"value": 4},
            "traits": {"value": ["fire", "versatile-p"]},
            "price": {"value": {"gp": 100}},
            "bulk": {"value": 1},
            "runes": {"potency": 1, "striking": 1},
            "damage": {"dice": 1, "die": "d8", "damageType": "slashing"},
            "group": "sword",
            "category": "martial",
            "description": {"value": "<p>Deals @Damage[1d8[slashing]] damage.</p>"},
        },
    }


@pytest.fixture
def journals(journal_payload, other_journal_payload) -> DocumentGraph:
    return DocumentGraph(
        [Journal.from_dict(journal_payload), Journal.from_dict(other_journal_payload)]
    )


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a JSON payload under tmp_path and return its path."""

    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
