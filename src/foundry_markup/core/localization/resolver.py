"""Dotted-key lookup in nested localization dictionaries.

Foundry localization files are nested JSON objects; a key such as
``PF2E.TraitFire`` addresses ``data["PF2E"]["TraitFire"]``. Absence is an
ordinary result here, reported with the ``NOT_FOUND`` sentinel.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union


class _NotFound:
    """Sentinel type for unresolved lookups (falsy, singleton)."""

    _instance: Optional["_NotFound"] = None

    def __new__(cls) -> "_NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()

Resolved = Union[str, _NotFound]


def _number_to_string(value: Union[int, float]) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def resolve(dictionary: Optional[Mapping[str, Any]], dotted_key: str) -> Resolved:
    """Resolve a dot-separated key against a nested dictionary.

    Args:
        dictionary: Nested mapping loaded from a localization file
        dotted_key: Key like 'PF2E.Item.Weapon.GroupLabel'

    Returns:
        The string leaf, a number rendered as a decimal string, or NOT_FOUND
        when a segment is missing, a step is not a mapping, or the leaf is
        any other type (mapping, list, bool, None).
    """
    if dictionary is None or not isinstance(dotted_key, str):
        return NOT_FOUND

    current: Any = dictionary
    for segment in dotted_key.split("."):
        if not isinstance(current, Mapping) or segment not in current:
            return NOT_FOUND
        current = current[segment]

    if isinstance(current, str):
        return current
    # bool is an int subclass; JSON true/false is not a display string.
    if isinstance(current, bool):
        return NOT_FOUND
    if isinstance(current, (int, float)):
        return _number_to_string(current)
    return NOT_FOUND


def is_found(value: Resolved) -> bool:
    """Return True when a resolve() result is an actual string."""
    return value is not NOT_FOUND


__all__ = ["NOT_FOUND", "Resolved", "resolve", "is_found"]
