"""Link transformers for cross-references.

Handles:
- @Compendium[pack.reference]{label} - replaced by the label
- @UUID[locator]{label} - clickable marker or bold fallback

The markers are anchors carrying data attributes; the host UI intercepts
clicks on the link class and performs the navigation:

    <a href="#" class="internal-journal-link" data-page-id="p1">Intro</a>
    <a href="#" class="internal-journal-link" data-journal-id="j2" data-page-id="p9">Map</a>
    <a href="#" class="internal-journal-link" data-actor-name="Goblin">Goblin</a>
    <a href="#" class="internal-journal-link" data-item-name="Dagger">Dagger</a>
"""
from __future__ import annotations

import html
import re
from typing import Optional, Tuple

from .base import Directive, DirectiveKind, DirectiveTransformer, TransformContext


def strong(text: str) -> str:
    return f"<strong>{text}</strong>"


class CompendiumTransformer(DirectiveTransformer):
    """Replace @Compendium[...]{label} with the label.

    There is no compendium to link into outside Foundry, so only the
    display text survives.
    """

    kind = DirectiveKind.COMPENDIUM
    PATTERN = re.compile(r"@Compendium\[([^\]]*)\]\{([^}]*)\}")

    def render(self, directive: Directive, context: TransformContext) -> str:
        return directive.label or ""


class CrossReferenceTransformer(DirectiveTransformer):
    """Render @UUID[locator]{label} references.

    Resolution order (first match wins):
    0. Page of another loaded journal (only with a journal graph)
    a. Page of the current journal
    b. Actor reference
    c. Item reference
    d. Anything else (bold label)
    """

    kind = DirectiveKind.CROSS_REFERENCE
    PATTERN = re.compile(r"@UUID\[([^\]]*)\]\{([^}]*)\}")

    # JournalEntry.<journalId>.JournalEntryPage.<pageId>[#anchor]
    PAGE_LOCATOR = re.compile(r"JournalEntry\.([^.\]]+)\.JournalEntryPage\.([^.#\]]+)")

    def render(self, directive: Directive, context: TransformContext) -> str:
        locator = directive.argument.strip()
        label = directive.label or ""
        link_class = context.settings.link_class

        page = self._parse_page_locator(locator)
        if page is not None:
            journal_id, page_id = page
            if self._is_other_journal_page(journal_id, page_id, context):
                context.record_link(locator, resolved=True)
                return self._anchor(link_class, label, journal_id=journal_id, page_id=page_id)
            if page_id in context.resolution.page_ids:
                context.record_link(locator, resolved=True)
                return self._anchor(link_class, label, page_id=page_id)
            context.record_link(locator, resolved=False)
            return strong(label)

        if "Actor." in locator:
            context.record_link(locator, resolved=True)
            return self._anchor(link_class, label, actor_name=label)

        if ".Item." in locator:
            context.record_link(locator, resolved=True)
            return self._anchor(link_class, label, item_name=label)

        context.record_link(locator, resolved=False)
        return strong(label)

    def _parse_page_locator(self, locator: str) -> Optional[Tuple[str, str]]:
        match = self.PAGE_LOCATOR.search(locator)
        if not match:
            return None
        return match.group(1), match.group(2)

    def _is_other_journal_page(
        self,
        journal_id: str,
        page_id: str,
        context: TransformContext,
    ) -> bool:
        resolution = context.resolution
        if not resolution.has_journal_graph or journal_id == resolution.current_journal_id:
            return False
        journal = resolution.find_journal(journal_id)
        return journal is not None and journal.has_page(page_id)

    def _anchor(self, link_class: str, label: str, **data: str) -> str:
        attrs = "".join(
            f' data-{name.replace("_", "-")}="{html.escape(value, quote=True)}"'
            for name, value in data.items()
        )
        return f'<a href="#" class="{html.escape(link_class, quote=True)}"{attrs}>{label}</a>'
