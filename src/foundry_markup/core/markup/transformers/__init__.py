"""Directive transformers for the markup engine.

- base: directive model, per-call context and pipeline infrastructure
- localize: @Localize (recursive)
- links: @Compendium and @UUID cross-references
- annotations: @Trait/@Traits and @Condition
- rolls: @Damage and @Check (bracket-depth scanned)
- audit: records directives no stage handled
"""
from __future__ import annotations

from .annotations import ConditionTransformer, TraitTransformer
from .audit import DirectiveAuditTransformer
from .base import (
    ContentTransformer,
    Directive,
    DirectiveKind,
    DirectiveTransformer,
    TransformContext,
    TransformerPipeline,
)
from .links import CompendiumTransformer, CrossReferenceTransformer
from .localize import LocalizeTransformer
from .rolls import CheckSpec, CheckTransformer, DamageTransformer, format_check, parse_check

__all__ = [
    # Base classes
    "ContentTransformer",
    "Directive",
    "DirectiveKind",
    "DirectiveTransformer",
    "TransformContext",
    "TransformerPipeline",
    # Stages
    "LocalizeTransformer",
    "CompendiumTransformer",
    "CrossReferenceTransformer",
    "TraitTransformer",
    "ConditionTransformer",
    "DamageTransformer",
    "CheckTransformer",
    "DirectiveAuditTransformer",
    # Check parsing
    "CheckSpec",
    "parse_check",
    "format_check",
]
