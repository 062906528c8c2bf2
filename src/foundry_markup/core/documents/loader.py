"""Loading Foundry documents and localization files from JSON.

Document kind detection follows the exported JSON shape:
- actor:   has ``system`` and ``type`` is 'npc' or 'character'
- journal: has a ``pages`` list
- item:    has ``system`` and any ``type``
"""
from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from ..exceptions import DocumentFormatError, DocumentNotFoundError
from .models import Actor, Item, Journal

logger = logging.getLogger(__name__)

ACTOR_TYPES = frozenset({"npc", "character"})

Document = Union[Journal, Actor, Item]


class DocumentKind(str, Enum):
    JOURNAL = "journal"
    ACTOR = "actor"
    ITEM = "item"


def detect_document_kind(data: Any) -> DocumentKind:
    """Classify exported Foundry JSON.

    Raises:
        DocumentFormatError: If the data is not a journal, actor or item
    """
    if isinstance(data, Mapping):
        if data.get("system") and data.get("type") in ACTOR_TYPES:
            return DocumentKind.ACTOR
        if isinstance(data.get("pages"), list):
            return DocumentKind.JOURNAL
        if data.get("system") and data.get("type"):
            return DocumentKind.ITEM
    raise DocumentFormatError(
        "Unrecognized JSON format. Does not appear to be a Foundry Journal, Actor, or Item."
    )


def parse_document(data: Any, fallback_name: str = "") -> Document:
    """Build the document model for exported Foundry JSON."""
    kind = detect_document_kind(data)
    if kind is DocumentKind.ACTOR:
        return Actor.from_dict(data, fallback_name)
    if kind is DocumentKind.JOURNAL:
        return Journal.from_dict(data, fallback_name)
    return Item.from_dict(data, fallback_name)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise DocumentNotFoundError(f"File not found: {path}", context={"path": str(path)})
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DocumentFormatError(
            f"Failed to parse JSON file: {path}",
            context={"path": str(path), "reason": str(exc)},
        ) from exc


def load_document(path: Union[str, Path]) -> Document:
    """Load a journal, actor or item from an exported JSON file."""
    path = Path(path)
    data = _read_json(path)
    try:
        document = parse_document(data, fallback_name=path.stem)
    except DocumentFormatError as exc:
        exc.context.setdefault("path", str(path))
        raise
    logger.debug("Loaded %s '%s' from %s", type(document).__name__, document.name, path)
    return document


def load_localization(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a localization dictionary (a JSON object) from disk."""
    path = Path(path)
    data = _read_json(path)
    if not isinstance(data, dict):
        raise DocumentFormatError(
            "Failed to parse localization file: top level must be an object.",
            context={"path": str(path)},
        )
    logger.debug("Loaded localization with %d top-level keys from %s", len(data), path)
    return data


__all__ = [
    "ACTOR_TYPES",
    "Document",
    "DocumentKind",
    "detect_document_kind",
    "load_document",
    "load_localization",
    "parse_document",
]
