"""Localize transformer.

Handles @Localize[dotted.key] directives. The resolved value is itself rich
text (it may contain @UUID, @Check, even further @Localize directives), so
it is run through the whole pipeline again before being spliced in.
"""
from __future__ import annotations

import logging
import re
from typing import Callable

from ...localization.resolver import NOT_FOUND, resolve
from .base import Directive, DirectiveKind, DirectiveTransformer, TransformContext

logger = logging.getLogger(__name__)

Expander = Callable[[str, TransformContext], str]


class LocalizeTransformer(DirectiveTransformer):
    """Resolve @Localize[key] against the localization dictionary.

    - Key found: the value is expanded recursively with the same context.
    - Key missing: ``<strong>key</strong>``.
    - Key already being expanded (a cycle), recursion ceiling reached or
      expansion allowance used up: the key text itself, without expanding.
    - No dictionary loaded: directives are left untouched.

    Example:
        Dictionary: {"PF2E": {"NPC": {"Notes": "See @UUID[Actor.x]{Goblin}"}}}
        Template: @Localize[PF2E.NPC.Notes]
        Output: See <a href="#" ... data-actor-name="Goblin">Goblin</a>
    """

    kind = DirectiveKind.LOCALIZE

    # Localization keys never contain brackets, so a non-greedy match is enough.
    PATTERN = re.compile(r"@Localize\[(.*?)\]")

    def __init__(self, expand: Expander) -> None:
        """Initialize with the engine's expansion callback.

        Args:
            expand: Runs the full pipeline on a string with a given context
        """
        self.expand = expand

    def transform(self, content: str, context: TransformContext) -> str:
        if not context.resolution.has_localization:
            return content
        return super().transform(content, context)

    def render(self, directive: Directive, context: TransformContext) -> str:
        key = directive.argument.strip()
        value = resolve(context.localization, key)

        if value is NOT_FOUND:
            context.record_localization(key, resolved=False)
            logger.debug("Unresolved localization key: %s", key)
            return f"<strong>{key}</strong>"

        context.record_localization(key, resolved=True)

        reason = self._stop_reason(key, context)
        if reason:
            if key not in context.depth_limit_keys:
                logger.warning("Localization %s at key %s; emitting key text", reason, key)
            context.record_depth_limit(key)
            return key

        with context.descend(key):
            return self.expand(value, context)

    @staticmethod
    def _stop_reason(key: str, context: TransformContext) -> str:
        settings = context.settings
        if context.is_expanding(key):
            return "cycle"
        if context.depth >= settings.max_depth:
            return f"nesting limit ({settings.max_depth}) reached"
        if context.expansions >= settings.max_expansions:
            return f"expansion limit ({settings.max_expansions}) reached"
        return ""
