"""Document graph: the set of loaded journals a view can link into."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..markup.context import ResolutionContext
from .models import Journal


class DocumentGraph:
    """Loaded journals, indexed by Foundry id.

    Builds the ResolutionContext for each view:
    - a journal view links to its own pages and to pages of other journals
    - an actor/item view links across all journals only
    """

    def __init__(self, journals: Iterable[Journal] = ()) -> None:
        self._journals: Dict[str, Journal] = {}
        self._order: List[Journal] = []
        for journal in journals:
            self.add(journal)

    def add(self, journal: Journal) -> None:
        self._order.append(journal)
        if journal.id:
            self._journals.setdefault(journal.id, journal)

    @property
    def journals(self) -> List[Journal]:
        return list(self._order)

    def get(self, journal_id: str) -> Optional[Journal]:
        return self._journals.get(journal_id)

    def context_for(
        self,
        journal: Journal,
        localization: Optional[Mapping[str, Any]] = None,
    ) -> ResolutionContext:
        """Resolution context for rendering a page of ``journal``."""
        return ResolutionContext.build(
            page_ids=journal.page_ids,
            localization=localization,
            journals=[j.to_ref() for j in self._journals.values()],
            current_journal_id=journal.id or None,
        )

    def context_for_standalone(
        self,
        localization: Optional[Mapping[str, Any]] = None,
    ) -> ResolutionContext:
        """Resolution context for actor and item text (no current journal)."""
        return ResolutionContext.build(
            localization=localization,
            journals=[j.to_ref() for j in self._journals.values()],
        )


__all__ = ["DocumentGraph"]
