"""Localization service.

Wraps the path resolver with the display fallback policy used throughout the
viewer and with ``{placeholder}`` substitution.

Fallback policy:
- No dictionary loaded: derive a readable label from the key itself
  ('PF2E.Item.Weapon.GroupLabel' -> 'GroupLabel').
- Dictionary loaded but key missing: return the key unchanged, so missing
  entries stay visible and greppable.
"""
from __future__ import annotations

import re
from typing import Any, Mapping, Optional

from .resolver import NOT_FOUND, Resolved, resolve

PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")


def derive_fallback(key: str) -> str:
    """Readable fallback for a key when no dictionary is available."""
    if "." not in key:
        return key
    last = key.rsplit(".", 1)[1]
    return last[:1].upper() + last[1:]


def apply_replacements(text: str, replacements: Optional[Mapping[str, Any]]) -> str:
    """Substitute ``{name}`` placeholders in a single pass.

    Unknown placeholders are left as they are. Substituted values are never
    rescanned, so replacement order does not matter.
    """
    if not replacements:
        return text

    def replacer(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in replacements:
            return str(replacements[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replacer, text)


def localize(
    dictionary: Optional[Mapping[str, Any]],
    key: str,
    replacements: Optional[Mapping[str, Any]] = None,
) -> str:
    """Localize a key.

    Args:
        dictionary: Localization data, or None when none is loaded
        key: Dotted localization key
        replacements: Optional placeholder values

    Returns:
        The localized (and substituted) string, following the fallback policy
    """
    if dictionary is None:
        text = derive_fallback(key)
    else:
        value = resolve(dictionary, key)
        text = key if value is NOT_FOUND else value
    return apply_replacements(text, replacements)


class Localizer:
    """Localization bound to one dictionary.

    Example:
        loc = Localizer(data)
        loc.localize("PF2E.ItemLevel", type="Item", level=3)
    """

    def __init__(self, dictionary: Optional[Mapping[str, Any]] = None) -> None:
        self.dictionary = dictionary

    @property
    def loaded(self) -> bool:
        return self.dictionary is not None

    def resolve(self, key: str) -> Resolved:
        return resolve(self.dictionary, key)

    def lookup(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the resolved string or ``default`` when unresolved."""
        value = resolve(self.dictionary, key)
        return default if value is NOT_FOUND else value

    def localize(self, key: str, **replacements: Any) -> str:
        return localize(self.dictionary, key, replacements or None)


__all__ = ["Localizer", "apply_replacements", "derive_fallback", "localize"]
