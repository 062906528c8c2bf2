"""Markup engine: the directive transformer.

Runs the fixed stage order over a rich-text string:

1. LOCALIZE     - @Localize[key] (recursive)
2. COMPENDIUM   - @Compendium[...]{label}
3. UUID         - @UUID[locator]{label}
4. TRAITS       - @Trait[slug]{label}
5. CONDITIONS   - @Condition[id]{label}
6. ROLLS        - @Damage[...], @Check[...]{label}
7. AUDIT        - record leftovers

Usage:
    engine = MarkupEngine()
    html = engine.transform(text, ResolutionContext.build(page_ids=["p1"]))
    html, report = engine.process(text, context)
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Optional, Tuple

from .context import EMPTY_CONTEXT, ResolutionContext
from .report import TransformReport
from .settings import MarkupSettings
from .transformers.annotations import ConditionTransformer, TraitTransformer
from .transformers.audit import DirectiveAuditTransformer
from .transformers.base import (
    ContentTransformer,
    DirectiveKind,
    TransformContext,
    TransformerPipeline,
)
from .transformers.links import CompendiumTransformer, CrossReferenceTransformer
from .transformers.localize import LocalizeTransformer
from .transformers.rolls import CheckTransformer, DamageTransformer

logger = logging.getLogger(__name__)

# Every DirectiveKind appears exactly once.
STAGE_ORDER: Tuple[DirectiveKind, ...] = (
    DirectiveKind.LOCALIZE,
    DirectiveKind.COMPENDIUM,
    DirectiveKind.CROSS_REFERENCE,
    DirectiveKind.TRAIT,
    DirectiveKind.CONDITION,
    DirectiveKind.DAMAGE,
    DirectiveKind.CHECK,
    DirectiveKind.UNKNOWN,
)


class MarkupEngine:
    """Directive transformer over Foundry rich text."""

    def __init__(self, settings: Optional[MarkupSettings] = None) -> None:
        self.settings = settings or MarkupSettings()
        self.handlers = self._build_handlers()
        self.pipeline = TransformerPipeline([self.handlers[kind] for kind in STAGE_ORDER])

    def _build_handlers(self) -> Dict[DirectiveKind, ContentTransformer]:
        return {
            DirectiveKind.LOCALIZE: LocalizeTransformer(expand=self._expand),
            DirectiveKind.COMPENDIUM: CompendiumTransformer(),
            DirectiveKind.CROSS_REFERENCE: CrossReferenceTransformer(),
            DirectiveKind.TRAIT: TraitTransformer(),
            DirectiveKind.CONDITION: ConditionTransformer(),
            DirectiveKind.DAMAGE: DamageTransformer(),
            DirectiveKind.CHECK: CheckTransformer(),
            DirectiveKind.UNKNOWN: DirectiveAuditTransformer(),
        }

    def _expand(self, content: str, context: TransformContext) -> str:
        return self.pipeline.execute(content, context)

    def process(
        self,
        text: Optional[str],
        context: Optional[ResolutionContext] = None,
    ) -> Tuple[str, TransformReport]:
        """Transform text and report what resolved and what fell back.

        Args:
            text: Rich text from a journal page, actor or item field
            context: Read-only resolution data (defaults to an empty context)

        Returns:
            Tuple of (transformed text, report)
        """
        if not text or not isinstance(text, str):
            return "", TransformReport()

        transform_context = TransformContext(
            resolution=context or EMPTY_CONTEXT,
            settings=self.settings,
        )
        result = self._expand(text, transform_context)

        report = TransformReport(
            localized_keys=transform_context.localized_keys,
            missing_keys=transform_context.missing_keys,
            links_resolved=transform_context.links_resolved,
            links_unresolved=transform_context.links_unresolved,
            unprocessed=transform_context.unprocessed,
            depth_limit_keys=transform_context.depth_limit_keys,
            errors=transform_context.errors,
        )
        if report.has_issues:
            logger.debug(report.summary())
        return result, report

    def transform(self, text: Optional[str], context: Optional[ResolutionContext] = None) -> str:
        """Transform text; see process()."""
        result, _ = self.process(text, context)
        return result


@lru_cache(maxsize=1)
def default_engine() -> MarkupEngine:
    """Shared engine with default settings."""
    return MarkupEngine()


def transform(text: Optional[str], context: Optional[ResolutionContext] = None) -> str:
    """Transform text with the default engine."""
    return default_engine().transform(text, context)
