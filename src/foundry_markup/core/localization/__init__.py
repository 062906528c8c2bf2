"""Localization layer: path resolver, localization service, formatters."""
from __future__ import annotations

from .formatting import format_bulk, format_price, slug_to_pascal_case, trait_label
from .resolver import NOT_FOUND, Resolved, is_found, resolve
from .service import Localizer, apply_replacements, derive_fallback, localize

__all__ = [
    # Resolver
    "NOT_FOUND",
    "Resolved",
    "is_found",
    "resolve",
    # Service
    "Localizer",
    "apply_replacements",
    "derive_fallback",
    "localize",
    # Formatting
    "format_bulk",
    "format_price",
    "slug_to_pascal_case",
    "trait_label",
]
