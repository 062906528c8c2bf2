"""Inline markup transformer for Foundry VTT rich text."""
from __future__ import annotations

from .context import EMPTY_CONTEXT, JournalRef, ResolutionContext
from .engine import STAGE_ORDER, MarkupEngine, default_engine, transform
from .report import TransformReport
from .scanner import BracketScanner, ScannedDirective, find_closing
from .settings import MarkupSettings
from .transformers.base import Directive, DirectiveKind

__all__ = [
    "BracketScanner",
    "Directive",
    "DirectiveKind",
    "EMPTY_CONTEXT",
    "JournalRef",
    "MarkupEngine",
    "MarkupSettings",
    "ResolutionContext",
    "STAGE_ORDER",
    "ScannedDirective",
    "TransformReport",
    "default_engine",
    "find_closing",
    "transform",
]
