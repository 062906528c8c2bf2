"""Shared helpers for CLI commands."""
from __future__ import annotations

import argparse
from typing import Any, Dict, Optional

from foundry_markup.core.documents import load_localization
from foundry_markup.core.markup import MarkupEngine, MarkupSettings


def get_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Configuration loaded by the dispatcher (empty when run standalone)."""
    return getattr(args, "_config", None) or {}


def build_engine(args: argparse.Namespace) -> MarkupEngine:
    return MarkupEngine(MarkupSettings.from_config(get_config(args)))


def get_localization(args: argparse.Namespace) -> Optional[Dict[str, Any]]:
    """Load the dictionary named by --localization, if any."""
    path = getattr(args, "localization", None)
    if not path:
        return None
    return load_localization(path)


__all__ = ["build_engine", "get_config", "get_localization"]
