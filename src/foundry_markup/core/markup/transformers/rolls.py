"""Roll transformers for damage and check directives.

Both directive kinds may carry inline roll formulas with nested brackets,
so they are located with the BracketScanner instead of a regex.

Handles:
- @Damage[2d6[fire]]           - bold damage formula
- @Check[reflex|dc:20|basic:true]{label} - normalized check label
"""
from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional

from ..scanner import BracketScanner, ScannedDirective
from .base import ContentTransformer, Directive, DirectiveKind, TransformContext
from .links import strong


class ScannedDirectiveTransformer(ContentTransformer):
    """Transformer for a directive kind located by bracket-depth scanning."""

    kind: DirectiveKind

    def __init__(self) -> None:
        self.scanner = BracketScanner(self.kind.value)

    def transform(self, content: str, context: TransformContext) -> str:
        def replacer(scanned: ScannedDirective) -> str:
            directive = Directive(
                self.kind,
                scanned.argument,
                scanned.label,
                content[scanned.start : scanned.end],
            )
            return self.render(directive, context)

        return self.scanner.replace(content, replacer)

    @abstractmethod
    def render(self, directive: Directive, context: TransformContext) -> str:
        """Return the replacement text for one directive."""
        ...


class DamageTransformer(ScannedDirectiveTransformer):
    """Render @Damage[formula] verbatim in bold (the label wins when present)."""

    kind = DirectiveKind.DAMAGE

    def render(self, directive: Directive, context: TransformContext) -> str:
        if directive.label:
            return strong(directive.label)
        return strong(directive.argument)


@dataclass
class CheckSpec:
    """Fields parsed from a @Check argument."""

    type: Optional[str] = None
    dc: Optional[str] = None
    basic: bool = False
    statistic: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.type or self.dc or self.basic or self.statistic)


def _is_integer(token: str) -> bool:
    try:
        int(token)
    except ValueError:
        return False
    return True


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def parse_check(argument: str, save_types: Iterable[str]) -> CheckSpec:
    """Parse a pipe-delimited @Check argument.

    ``type``, ``dc`` and ``basic`` tokens set fields directly; other
    ``key:value`` tokens are ignored. Bare tokens are classified:
    the first save name fills ``type``, the first integer fills ``dc`` and
    the first other word fills ``statistic``.
    """
    saves = {s.lower() for s in save_types}
    spec = CheckSpec()
    for raw in argument.split("|"):
        token = raw.strip()
        if not token:
            continue

        if ":" in token:
            key, _, value = token.partition(":")
            key = key.strip().lower()
            value = value.strip()
            if key == "type":
                spec.type = value or None
            elif key == "dc":
                spec.dc = value or None
            elif key == "basic":
                spec.basic = value.lower() == "true"
            # Other keys (traits, name, ...) do not affect the label.
            continue

        if token.lower() in saves:
            if spec.type is None:
                spec.type = token
        elif _is_integer(token):
            if spec.dc is None:
                spec.dc = token
        elif spec.statistic is None:
            spec.statistic = token
    return spec


def format_check(spec: CheckSpec, fallback: str) -> str:
    """Produce the display text for a parsed check.

    - type and dc: compact form, 'Basic Reflex DC15'
    - partial data: readable reconstruction, 'Perception DC 20'
    - nothing parsed: ``fallback``
    """
    prefix = "Basic " if spec.basic else ""
    if spec.type and spec.dc:
        return f"{prefix}{_capitalize(spec.type)} DC{spec.dc}"

    if spec.is_empty:
        return fallback

    parts = []
    if spec.basic:
        parts.append("Basic")
    name = spec.type or spec.statistic
    if name:
        parts.append(_capitalize(name))
    if spec.dc:
        parts.append(f"DC {spec.dc}")
    return " ".join(parts)


class CheckTransformer(ScannedDirectiveTransformer):
    """Render @Check[...] as a bold, normalized check label.

    Example:
        Template: @Check[reflex|dc:15|basic:true]
        Output: <strong>Basic Reflex DC15</strong>
    """

    kind = DirectiveKind.CHECK

    def render(self, directive: Directive, context: TransformContext) -> str:
        spec = parse_check(directive.argument, context.settings.save_types)
        fallback = directive.label or directive.argument
        return strong(format_check(spec, fallback))
