"""Engine settings derived from the ``markup`` config section."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

DEFAULT_MAX_DEPTH = 8
DEFAULT_MAX_EXPANSIONS = 256
DEFAULT_LINK_CLASS = "internal-journal-link"
DEFAULT_NAMESPACE = "PF2E"
DEFAULT_SAVE_TYPES: Tuple[str, ...] = ("fortitude", "reflex", "will")


@dataclass(frozen=True)
class MarkupSettings:
    """Tunables for the directive transformer.

    Attributes:
        max_depth: Nested @Localize expansions allowed before the key text
            is emitted instead of expanding further
        max_expansions: Total @Localize expansions allowed in one transform
            call
        link_class: CSS class on clickable cross-reference markers
        namespace: Localization namespace for trait names/descriptions
        save_types: Positional @Check tokens recognized as the save type
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    max_expansions: int = DEFAULT_MAX_EXPANSIONS
    link_class: str = DEFAULT_LINK_CLASS
    namespace: str = DEFAULT_NAMESPACE
    save_types: Tuple[str, ...] = DEFAULT_SAVE_TYPES

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, Any]]) -> "MarkupSettings":
        """Build settings from a full config dict (reads its ``markup`` section)."""
        section = (config or {}).get("markup") or {}
        if not isinstance(section, Mapping):
            section = {}
        save_types = section.get("save_types")
        return cls(
            max_depth=int(section.get("max_depth", DEFAULT_MAX_DEPTH)),
            max_expansions=int(section.get("max_expansions", DEFAULT_MAX_EXPANSIONS)),
            link_class=str(section.get("link_class") or DEFAULT_LINK_CLASS),
            namespace=str(section.get("namespace") or DEFAULT_NAMESPACE),
            save_types=(
                tuple(str(s).lower() for s in save_types)
                if isinstance(save_types, (list, tuple))
                else DEFAULT_SAVE_TYPES
            ),
        )


__all__ = ["MarkupSettings"]
