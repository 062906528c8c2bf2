"""Audit transformer.

Final stage: records directive names that are still present after every
other stage (unknown kinds such as @Embed[...], or @Localize without a
dictionary). The text itself is left unchanged.
"""
from __future__ import annotations

import logging
import re

from .base import ContentTransformer, DirectiveKind, TransformContext

logger = logging.getLogger(__name__)


class DirectiveAuditTransformer(ContentTransformer):
    """Record unprocessed @Name[ directives on the context."""

    kind = DirectiveKind.UNKNOWN

    DIRECTIVE_PATTERN = re.compile(r"@([A-Z][A-Za-z]*)\[")

    def transform(self, content: str, context: TransformContext) -> str:
        for match in self.DIRECTIVE_PATTERN.finditer(content):
            name = match.group(1)
            context.record_unprocessed(name)
            logger.debug("Directive left unprocessed: @%s", name)
        return content
