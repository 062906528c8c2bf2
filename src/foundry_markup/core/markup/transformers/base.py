"""Base classes for directive transformers.

The MarkupEngine runs a fixed pipeline of transformers over a rich-text
string. Each transformer owns exactly one DirectiveKind and rewrites every
occurrence of it; later stages see the output of earlier ones.

Transformation Order (7 steps):
1. LOCALIZE     - @Localize[key] (recursive, only with a dictionary)
2. COMPENDIUM   - @Compendium[pack]{label}
3. UUID         - @UUID[locator]{label}
4. TRAITS       - @Trait[slug]{label}, @Traits[slug]
5. CONDITIONS   - @Condition[id]{label}
6. ROLLS        - @Damage[...], @Check[...]{label} (bracket-depth scanned)
7. AUDIT        - record directives nothing above handled
"""
from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Iterator, List, Mapping, Optional, Set

from ..context import ResolutionContext
from ..settings import MarkupSettings

logger = logging.getLogger(__name__)


class DirectiveKind(str, Enum):
    """Closed set of directive kinds the engine knows about."""

    LOCALIZE = "Localize"
    COMPENDIUM = "Compendium"
    CROSS_REFERENCE = "UUID"
    TRAIT = "Trait"
    CONDITION = "Condition"
    DAMAGE = "Damage"
    CHECK = "Check"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Directive:
    """One directive occurrence, alive only during a transform call.

    Attributes:
        kind: Directive kind
        argument: Raw payload between the outer brackets
        label: Trailing {...} display text, or None when absent
        source: The exact source text of the directive
    """

    kind: DirectiveKind
    argument: str
    label: Optional[str] = None
    source: str = ""


@dataclass
class TransformContext:
    """Per-call state handed to every transformer.

    Wraps the caller's read-only ResolutionContext with the engine settings,
    the current recursion depth and tracking for the report. A fresh
    TransformContext is created for every top-level call; recursive
    @Localize expansion reuses it one level deeper.
    """

    resolution: ResolutionContext
    settings: MarkupSettings = field(default_factory=MarkupSettings)
    depth: int = 0
    expansions: int = 0

    # Keys whose values are being expanded, outermost first
    expanding: List[str] = field(default_factory=list)

    # Tracking for reports
    localized_keys: Set[str] = field(default_factory=set)
    missing_keys: Set[str] = field(default_factory=set)
    links_resolved: Set[str] = field(default_factory=set)
    links_unresolved: Set[str] = field(default_factory=set)
    unprocessed: Set[str] = field(default_factory=set)
    depth_limit_keys: Set[str] = field(default_factory=set)
    errors: List[str] = field(default_factory=list)

    @property
    def localization(self) -> Optional[Mapping[str, Any]]:
        return self.resolution.localization

    @contextmanager
    def descend(self, key: str) -> Iterator["TransformContext"]:
        """Run the expansion of ``key`` one level deeper."""
        self.depth += 1
        self.expansions += 1
        self.expanding.append(key)
        try:
            yield self
        finally:
            self.expanding.pop()
            self.depth -= 1

    def is_expanding(self, key: str) -> bool:
        return key in self.expanding

    def record_localization(self, key: str, resolved: bool) -> None:
        if resolved:
            self.localized_keys.add(key)
        else:
            self.missing_keys.add(key)

    def record_link(self, locator: str, resolved: bool) -> None:
        if resolved:
            self.links_resolved.add(locator)
        else:
            self.links_unresolved.add(locator)

    def record_depth_limit(self, key: str) -> None:
        self.depth_limit_keys.add(key)

    def record_unprocessed(self, name: str) -> None:
        self.unprocessed.add(name)

    def record_error(self, message: str) -> None:
        self.errors.append(message)


class ContentTransformer(ABC):
    """Abstract base class for content transformers.

    Transformers are stateless and receive all per-call data through the
    transform() method.
    """

    @abstractmethod
    def transform(self, content: str, context: TransformContext) -> str:
        """Transform content using this transformer's rules.

        Args:
            content: Input content to transform
            context: TransformContext with resolution data and tracking

        Returns:
            Transformed content
        """
        ...

    def get_name(self) -> str:
        """Get transformer name for logging/debugging."""
        return self.__class__.__name__


class DirectiveTransformer(ContentTransformer):
    """Transformer for one regex-matchable directive kind.

    Subclasses set ``kind`` and ``PATTERN`` and implement ``parse`` and
    ``render``. The default transform() substitutes every PATTERN match.
    """

    kind: ClassVar[DirectiveKind]
    PATTERN: ClassVar[re.Pattern[str]]

    def transform(self, content: str, context: TransformContext) -> str:
        def replacer(match: re.Match[str]) -> str:
            return self.render(self.parse(match), context)

        return self.PATTERN.sub(replacer, content)

    def parse(self, match: re.Match[str]) -> Directive:
        """Build a Directive from a PATTERN match (argument, optional label)."""
        label = match.group(2) if match.re.groups >= 2 else None
        return Directive(self.kind, match.group(1), label, match.group(0))

    @abstractmethod
    def render(self, directive: Directive, context: TransformContext) -> str:
        """Return the replacement text for one directive."""
        ...


class TransformerPipeline:
    """Execute a sequence of transformers on content.

    A stage that raises leaves its input untouched; the failure is logged
    and recorded on the context so the rendering pipeline never breaks on
    untrusted text.
    """

    def __init__(self, transformers: List[ContentTransformer]) -> None:
        self.transformers = transformers

    def execute(self, content: str, context: TransformContext) -> str:
        result = content
        for transformer in self.transformers:
            try:
                result = transformer.transform(result, context)
            except Exception as exc:
                logger.exception("Transformer %s failed; keeping its input", transformer.get_name())
                context.record_error(f"{transformer.get_name()}: {exc}")
        return result

