"""Display formatters for PF2e item data.

Used by the item renderer for trait pills, price and bulk rows.
"""
from __future__ import annotations

import re
from typing import Any, Mapping, Optional

from .resolver import NOT_FOUND, resolve

_SLUG_SEPARATORS = re.compile(r"[-_\s]+")

# Highest denomination first.
COIN_ORDER = ("pp", "gp", "sp", "cp")


def slug_to_pascal_case(slug: str) -> str:
    """Convert 'fire-resistance' / 'fire_resistance' to 'FireResistance'."""
    if not slug:
        return ""
    parts = [p for p in _SLUG_SEPARATORS.split(slug.strip()) if p]
    return "".join(p[:1].upper() + p[1:] for p in parts)


def _lookup(dictionary: Optional[Mapping[str, Any]], key: str, default: str) -> str:
    value = resolve(dictionary, key)
    return default if value is NOT_FOUND else value


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _canonical(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)


def trait_label(
    trait: str,
    dictionary: Optional[Mapping[str, Any]],
    namespace: str = "PF2E",
) -> str:
    """Localized trait name, or the PascalCase slug when unresolved."""
    pascal = slug_to_pascal_case(trait)
    return _lookup(dictionary, f"{namespace}.Trait{pascal}", pascal)


def format_price(price: Any, dictionary: Optional[Mapping[str, Any]] = None) -> str:
    """Format a PF2e price object.

    Example:
        {"value": {"gp": 5, "sp": 2}, "per": 1} -> "5 gp, 2 sp"
    """
    if not isinstance(price, Mapping):
        return "-"
    coins = price.get("value")
    if not isinstance(coins, Mapping):
        return "-"

    parts = []
    for coin in COIN_ORDER:
        amount = _number(coins.get(coin))
        if not amount:
            continue
        label = _lookup(dictionary, f"PF2E.CurrencyAbbreviations.{coin}", coin)
        parts.append(f"{_canonical(amount)} {label}")

    if not parts:
        parts.append(f"0 {_lookup(dictionary, 'PF2E.CurrencyAbbreviations.gp', 'gp')}")

    text = ", ".join(parts)
    per = _number(price.get("per"))
    if per is not None and per > 1:
        text += f" / {_canonical(per)}"
    return text


def format_bulk(bulk: Any, dictionary: Optional[Mapping[str, Any]] = None) -> Optional[str]:
    """Format a PF2e bulk object; None when the item carries no bulk data."""
    if not isinstance(bulk, Mapping):
        return None
    value = _number(bulk.get("value"))
    if value is None:
        return None
    if value == 0:
        return _lookup(dictionary, "PF2E.BulkTypeNegligible", "-")
    if 0 < value < 1:
        return _lookup(dictionary, "PF2E.BulkTypeLight", "L")
    return _canonical(value)


__all__ = [
    "COIN_ORDER",
    "format_bulk",
    "format_price",
    "slug_to_pascal_case",
    "trait_label",
]
