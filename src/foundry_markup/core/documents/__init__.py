"""Foundry document models, loaders and the document graph."""
from __future__ import annotations

from .graph import DocumentGraph
from .loader import (
    Document,
    DocumentKind,
    detect_document_kind,
    load_document,
    load_localization,
    parse_document,
)
from .models import Actor, Item, Journal, JournalPage

__all__ = [
    "Actor",
    "Document",
    "DocumentGraph",
    "DocumentKind",
    "Item",
    "Journal",
    "JournalPage",
    "detect_document_kind",
    "load_document",
    "load_localization",
    "parse_document",
]
