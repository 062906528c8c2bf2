"""Document-level rendering on top of the markup engine.

Each renderer pulls the rich-text fields out of a Foundry document, runs
them through the MarkupEngine with the right ResolutionContext and returns
plain dataclasses the CLI (or any host UI) can display.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .documents.graph import DocumentGraph
from .documents.models import Actor, Item, Journal
from .localization.formatting import format_bulk, format_price, slug_to_pascal_case, trait_label
from .localization.service import Localizer
from .markup.engine import MarkupEngine
from .markup.report import TransformReport

logger = logging.getLogger(__name__)

STRIKING_KEYS = {
    1: "PF2E.Item.Weapon.Rune.Striking.Striking",
    2: "PF2E.Item.Weapon.Rune.Striking.Greater",
    3: "PF2E.Item.Weapon.Rune.Striking.Major",
}
RESILIENT_KEYS = {
    1: "PF2E.ArmorResilientRune",
    2: "PF2E.ArmorGreaterResilientRune",
    3: "PF2E.ArmorMajorResilientRune",
}


@dataclass
class RenderedSection:
    """One rendered rich-text block."""

    id: str
    name: str
    html: str
    level: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "level": self.level, "html": self.html}


@dataclass
class RenderedDocument:
    """A rendered journal, actor or item."""

    kind: str
    name: str
    header: Dict[str, Any] = field(default_factory=dict)
    sections: List[RenderedSection] = field(default_factory=list)
    report: TransformReport = field(default_factory=TransformReport)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "name": self.name,
            "header": self.header,
            "sections": [s.to_dict() for s in self.sections],
            "report": self.report.to_dict(),
        }


def _nested(data: Mapping[str, Any], *path: str) -> Any:
    current: Any = data
    for part in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(part)
    return current


def _int(value: Any) -> int:
    return value if isinstance(value, int) and not isinstance(value, bool) else 0


def _rune_level(runes: Mapping[str, Any], name: str) -> int:
    return _int(runes.get(name))


def _signed(value: int) -> str:
    return f"+{value}" if value > 0 else str(value)


def _group_label(
    kind: str, group: Any, dictionary: Optional[Mapping[str, Any]], namespace: str
) -> Optional[str]:
    key = f"{namespace}.{kind}Group{slug_to_pascal_case(str(group))}"
    return Localizer(dictionary).lookup(key, str(group))


def _weapon_details(
    system: Mapping[str, Any],
    runes: Mapping[str, Any],
    dictionary: Optional[Mapping[str, Any]],
    namespace: str,
) -> Dict[str, Any]:
    details: Dict[str, Any] = {
        "attack": _signed(_int(_nested(system, "bonus", "value")) + _rune_level(runes, "potency")),
    }
    damage = system.get("damage")
    if isinstance(damage, Mapping):
        dice = (_int(damage.get("dice")) or 1) + _rune_level(runes, "striking")
        die = str(damage.get("die") or "").lstrip("d")
        details["damage"] = f"{dice}d{die} {damage.get('damageType') or ''}".strip()
    if system.get("group"):
        details["group"] = _group_label("Weapon", system["group"], dictionary, namespace)
    if system.get("range"):
        details["range"] = system["range"]
    if system.get("category"):
        details["category"] = system["category"]
    return details


def _armor_details(
    system: Mapping[str, Any],
    runes: Mapping[str, Any],
    dictionary: Optional[Mapping[str, Any]],
    namespace: str,
) -> Dict[str, Any]:
    details: Dict[str, Any] = {
        "ac": _int(system.get("acBonus")) + _rune_level(runes, "potency"),
    }
    resilient = _rune_level(runes, "resilient")
    if resilient > 0:
        details["saves"] = _signed(resilient)
    for name in ("dexCap", "checkPenalty", "strength"):
        if system.get(name) is not None:
            details[name] = system[name]
    if system.get("speedPenalty") is not None:
        details["speedPenalty"] = f"{system['speedPenalty']} ft"
    if system.get("group"):
        details["group"] = _group_label("Armor", system["group"], dictionary, namespace)
    if system.get("category"):
        details["category"] = system["category"]
    return details


def _consumable_details(system: Mapping[str, Any]) -> Dict[str, Any]:
    uses = system.get("uses")
    if not isinstance(uses, Mapping):
        return {}
    auto_destroy = "Yes" if uses.get("autoDestroy") else "No"
    return {"uses": f"{uses.get('value')} of {uses.get('max')} (auto-destroy: {auto_destroy})"}


def _effect_details(system: Mapping[str, Any]) -> Dict[str, Any]:
    details: Dict[str, Any] = {}
    duration = system.get("duration")
    if isinstance(duration, Mapping):
        value, unit = duration.get("value"), duration.get("unit") or ""
        # -1 marks durations expressed by the unit alone ("unlimited", "encounter").
        details["duration"] = unit if value == -1 else f"{value} {unit}".strip()
    rules = system.get("rules")
    if isinstance(rules, list) and rules:
        details["rules"] = [json.dumps(rule, sort_keys=True) for rule in rules]
    return details


def item_details(
    item: Item,
    localization: Optional[Mapping[str, Any]] = None,
    namespace: str = "PF2E",
) -> Dict[str, Any]:
    """Type-specific detail rows for weapons, armor, consumables and effects.

    Returns an empty dict for any other item type, or when the fields a type
    needs are absent.
    """
    system = item.system
    runes = system.get("runes")
    runes = runes if isinstance(runes, Mapping) else {}
    if item.type == "weapon":
        return _weapon_details(system, runes, localization, namespace)
    if item.type == "armor":
        return _armor_details(system, runes, localization, namespace)
    if item.type == "consumable":
        return _consumable_details(system)
    if item.type == "effect":
        return _effect_details(system)
    return {}


def render_journal(
    journal: Journal,
    engine: MarkupEngine,
    graph: Optional[DocumentGraph] = None,
    localization: Optional[Mapping[str, Any]] = None,
    page_id: Optional[str] = None,
) -> RenderedDocument:
    """Render the pages of a journal (or one page when ``page_id`` is given)."""
    graph = graph or DocumentGraph([journal])
    context = graph.context_for(journal, localization)
    rendered = RenderedDocument(kind="journal", name=journal.name)

    for page in journal.pages:
        if page_id is not None and page.id != page_id:
            continue
        if page.type == "text" and page.content:
            html, report = engine.process(page.content, context)
            rendered.report.merge(report)
        else:
            html = f"Unsupported page type: '{page.type}' or page has no content."
        rendered.sections.append(RenderedSection(page.id, page.name, html, page.title_level))

    logger.debug("Rendered %d page(s) of journal '%s'", len(rendered.sections), journal.name)
    return rendered


def render_actor(
    actor: Actor,
    engine: MarkupEngine,
    graph: Optional[DocumentGraph] = None,
    localization: Optional[Mapping[str, Any]] = None,
) -> RenderedDocument:
    """Render an actor's public/private notes and description."""
    context = (graph or DocumentGraph()).context_for_standalone(localization)
    rendered = RenderedDocument(
        kind="actor",
        name=actor.name,
        header={"type": actor.type, "level": _nested(actor.system, "details", "level", "value")},
    )

    fields = (
        ("publicNotes", ("details", "publicNotes")),
        ("privateNotes", ("details", "privateNotes")),
        ("description", ("details", "description")),
    )
    for section_id, path in fields:
        text = _nested(actor.system, *path)
        if not isinstance(text, str) or not text:
            continue
        html, report = engine.process(text, context)
        rendered.report.merge(report)
        rendered.sections.append(RenderedSection(section_id, section_id, html))
    return rendered


def item_display_name(item: Item, localization: Optional[Mapping[str, Any]] = None) -> str:
    """Item name prefixed with its potency and striking/resilient runes."""
    runes = item.system.get("runes")
    if not isinstance(runes, Mapping):
        return item.name
    loc = Localizer(localization)

    prefix = ""
    potency = _rune_level(runes, "potency")
    if potency > 0:
        prefix += f"+{potency} "
    striking = _rune_level(runes, "striking")
    if item.type == "weapon" and striking > 0:
        prefix += f"{loc.localize(STRIKING_KEYS[min(striking, 3)])} "
    resilient = _rune_level(runes, "resilient")
    if item.type == "armor" and resilient > 0:
        prefix += f"{loc.localize(RESILIENT_KEYS[min(resilient, 3)])} "
    return f"{prefix}{item.name}".strip()


def render_item(
    item: Item,
    engine: MarkupEngine,
    graph: Optional[DocumentGraph] = None,
    localization: Optional[Mapping[str, Any]] = None,
) -> RenderedDocument:
    """Render an item header (level, traits, price, bulk, details) and its description."""
    context = (graph or DocumentGraph()).context_for_standalone(localization)
    system = item.system
    traits = _nested(system, "traits", "value")

    header: Dict[str, Any] = {
        "type": item.type,
        "level": _nested(system, "level", "value"),
        "traits": [
            trait_label(t, localization, engine.settings.namespace)
            for t in (traits if isinstance(traits, list) else [])
            if isinstance(t, str)
        ],
        "price": format_price(system.get("price"), localization),
        "bulk": format_bulk(system.get("bulk"), localization) or "N/A",
    }
    details = item_details(item, localization, engine.settings.namespace)
    if details:
        header["details"] = details
    rendered = RenderedDocument(
        kind="item",
        name=item_display_name(item, localization),
        header=header,
    )

    description = _nested(system, "description", "value")
    if isinstance(description, str) and description:
        html, report = engine.process(description, context)
        rendered.report.merge(report)
        rendered.sections.append(RenderedSection("description", "description", html))

    spell_description = _nested(system, "spell", "system", "description", "value")
    if isinstance(spell_description, str) and spell_description:
        html, report = engine.process(spell_description, context)
        rendered.report.merge(report)
        spell_name = _nested(system, "spell", "name")
        rendered.sections.append(
            RenderedSection("spell", str(spell_name or "spell"), html, level=2)
        )
    return rendered


__all__ = [
    "RenderedDocument",
    "RenderedSection",
    "item_display_name",
    "item_details",
    "render_actor",
    "render_item",
    "render_journal",
]
