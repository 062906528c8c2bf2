"""Transform reporting dataclass.

Summarizes what a transform call resolved and what fell back.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Set


@dataclass
class TransformReport:
    """Report from one MarkupEngine.process() call."""

    localized_keys: Set[str] = field(default_factory=set)
    missing_keys: Set[str] = field(default_factory=set)
    links_resolved: Set[str] = field(default_factory=set)
    links_unresolved: Set[str] = field(default_factory=set)
    unprocessed: Set[str] = field(default_factory=set)
    depth_limit_keys: Set[str] = field(default_factory=set)
    errors: List[str] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        """True when anything fell back or failed."""
        return bool(
            self.missing_keys
            or self.links_unresolved
            or self.unprocessed
            or self.depth_limit_keys
            or self.errors
        )

    def merge(self, other: "TransformReport") -> None:
        """Fold another report into this one (e.g. across journal pages)."""
        self.localized_keys |= other.localized_keys
        self.missing_keys |= other.missing_keys
        self.links_resolved |= other.links_resolved
        self.links_unresolved |= other.links_unresolved
        self.unprocessed |= other.unprocessed
        self.depth_limit_keys |= other.depth_limit_keys
        self.errors.extend(other.errors)

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for serialization."""
        return {
            "localized_keys": sorted(self.localized_keys),
            "missing_keys": sorted(self.missing_keys),
            "links_resolved": sorted(self.links_resolved),
            "links_unresolved": sorted(self.links_unresolved),
            "unprocessed": sorted(self.unprocessed),
            "depth_limit_keys": sorted(self.depth_limit_keys),
            "errors": list(self.errors),
        }

    def summary(self) -> str:
        """Generate human-readable summary."""
        lines = [
            "Transform Report:",
            f"  Localized: {len(self.localized_keys)} resolved, {len(self.missing_keys)} missing",
            f"  Links: {len(self.links_resolved)} resolved, {len(self.links_unresolved)} unresolved",
        ]
        if self.unprocessed:
            lines.append(f"  Unprocessed directives: {', '.join(sorted(self.unprocessed))}")
        if self.depth_limit_keys:
            lines.append(f"  Nesting limit hit: {', '.join(sorted(self.depth_limit_keys))}")
        if self.errors:
            lines.append(f"  Errors: {len(self.errors)}")
            for e in self.errors[:3]:  # Show first 3
                lines.append(f"    - {e}")
        return "\n".join(lines)
