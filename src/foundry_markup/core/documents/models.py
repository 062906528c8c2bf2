"""Foundry document models.

Only the fields the renderers need are modelled; the raw ``system`` payload
of actors and items is kept as-is.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..markup.context import JournalRef


@dataclass
class JournalPage:
    """A single journal page.

    Attributes:
        id: Foundry ``_id``
        name: Page title
        type: 'text', 'image', 'video', ...
        content: Raw HTML of text pages
        title_level: Heading level 1-6 used for sidebar indentation
    """

    id: str
    name: str
    type: str = "text"
    content: str = ""
    title_level: int = 1

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "JournalPage":
        text = data.get("text") or {}
        title = data.get("title") or {}
        level = title.get("level") if isinstance(title, Mapping) else None
        content = text.get("content") if isinstance(text, Mapping) else None
        return cls(
            id=str(data.get("_id") or ""),
            name=str(data.get("name") or ""),
            type=str(data.get("type") or "text"),
            content=content if isinstance(content, str) else "",
            title_level=level if isinstance(level, int) and 1 <= level <= 6 else 1,
        )


@dataclass
class Journal:
    """A journal entry and its pages."""

    id: str
    name: str
    pages: List[JournalPage] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], fallback_name: str = "") -> "Journal":
        pages = [
            JournalPage.from_dict(p)
            for p in data.get("pages") or []
            if isinstance(p, Mapping)
        ]
        return cls(
            id=str(data.get("_id") or ""),
            name=str(data.get("name") or fallback_name),
            pages=pages,
        )

    @property
    def page_ids(self) -> List[str]:
        return [p.id for p in self.pages if p.id]

    def find_page(self, page_id: str) -> Optional[JournalPage]:
        for page in self.pages:
            if page.id == page_id:
                return page
        return None

    def to_ref(self) -> JournalRef:
        return JournalRef(id=self.id, name=self.name, page_ids=frozenset(self.page_ids))


@dataclass
class Actor:
    """An actor (npc or character)."""

    id: str
    name: str
    type: str
    system: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], fallback_name: str = "") -> "Actor":
        system = data.get("system")
        return cls(
            id=str(data.get("_id") or ""),
            name=str(data.get("name") or fallback_name),
            type=str(data.get("type") or ""),
            system=dict(system) if isinstance(system, Mapping) else {},
        )


@dataclass
class Item:
    """An item (weapon, armor, consumable, effect, equipment, ...)."""

    id: str
    name: str
    type: str
    system: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], fallback_name: str = "") -> "Item":
        system = data.get("system")
        return cls(
            id=str(data.get("_id") or ""),
            name=str(data.get("name") or fallback_name),
            type=str(data.get("type") or ""),
            system=dict(system) if isinstance(system, Mapping) else {},
        )


__all__ = ["Actor", "Item", "Journal", "JournalPage"]
