"""Resolution context for the directive transformer.

The ResolutionContext is the read-only bundle a caller hands to the engine:
the localization dictionary and the document graph of the current view
session. It is frozen and never mutated by the transformer, so a single
instance can be shared by concurrent render calls.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True)
class JournalRef:
    """A journal in the cross-journal graph.

    Attributes:
        id: Foundry ``_id`` of the journal entry
        name: Display name (informational)
        page_ids: Foundry ``_id`` of every page in the journal
    """

    id: str
    name: str = ""
    page_ids: FrozenSet[str] = frozenset()

    def has_page(self, page_id: str) -> bool:
        return page_id in self.page_ids


@dataclass(frozen=True)
class ResolutionContext:
    """Read-only lookup data for one transform call.

    Attributes:
        page_ids: Page ids of the journal currently being viewed
        localization: Nested localization dictionary, or None when none is loaded
        journals: Every loaded journal, for cross-journal references
        current_journal_id: Foundry id of the journal being viewed
    """

    page_ids: FrozenSet[str] = frozenset()
    localization: Optional[Mapping[str, Any]] = field(default=None, compare=False)
    journals: Tuple[JournalRef, ...] = ()
    current_journal_id: Optional[str] = None

    @classmethod
    def build(
        cls,
        page_ids: Iterable[str] = (),
        localization: Optional[Mapping[str, Any]] = None,
        journals: Iterable[JournalRef] = (),
        current_journal_id: Optional[str] = None,
    ) -> "ResolutionContext":
        """Build a context from arbitrary iterables."""
        return cls(
            page_ids=frozenset(p for p in page_ids if p),
            localization=localization,
            journals=tuple(journals),
            current_journal_id=current_journal_id,
        )

    @property
    def has_localization(self) -> bool:
        return self.localization is not None

    @property
    def has_journal_graph(self) -> bool:
        return bool(self.journals)

    def find_journal(self, journal_id: str) -> Optional[JournalRef]:
        for journal in self.journals:
            if journal.id == journal_id:
                return journal
        return None


EMPTY_CONTEXT = ResolutionContext()

__all__ = ["EMPTY_CONTEXT", "JournalRef", "ResolutionContext"]
