"""Annotation transformers for traits and conditions.

Handles:
- @Trait[slug], @Traits[slug], each with an optional {label}
- @Condition[id]{label} - emphasized label
"""
from __future__ import annotations

import re

from ...localization.formatting import slug_to_pascal_case
from ...localization.resolver import NOT_FOUND, resolve
from .base import Directive, DirectiveKind, DirectiveTransformer, TransformContext

TAG_PATTERN = re.compile(r"<[^>]*>")


def hover_text(description: str) -> str:
    """Flatten a localized description into a title attribute value.

    Tags are stripped and ``@`` is written as an entity so the directive
    stages that run after traits leave the hover text alone.
    """
    text = TAG_PATTERN.sub("", description)
    return text.replace('"', "&quot;").replace("@", "&#64;").strip()


class TraitTransformer(DirectiveTransformer):
    """Render trait directives as their display label.

    Label: explicit {label}, else the localized <ns>.Trait<Pascal> name,
    else the PascalCase slug. When <ns>.TraitDescription<Pascal> resolves,
    the label is wrapped in a span carrying the description as hover text.

    Example:
        Template: @Trait[fire-resistance]
        Output (no dictionary): FireResistance
        Output (with description):
            <span class="trait-hint" title="You resist fire.">Fire Resistance</span>
    """

    kind = DirectiveKind.TRAIT
    PATTERN = re.compile(r"@Traits?\[([^\]]*)\](?:\{([^}]*)\})?")

    def render(self, directive: Directive, context: TransformContext) -> str:
        pascal = slug_to_pascal_case(directive.argument)
        namespace = context.settings.namespace
        localization = context.localization

        label = directive.label
        if not label:
            localized = resolve(localization, f"{namespace}.Trait{pascal}")
            label = pascal if localized is NOT_FOUND else localized

        description = resolve(localization, f"{namespace}.TraitDescription{pascal}")
        if description is NOT_FOUND:
            return label
        title = hover_text(description)
        if not title:
            return label
        return f'<span class="trait-hint" title="{title}">{label}</span>'


class ConditionTransformer(DirectiveTransformer):
    """Render @Condition[id]{label} as ``<em>label</em>``; the id is dropped."""

    kind = DirectiveKind.CONDITION
    PATTERN = re.compile(r"@Condition\[([^\]]*)\]\{([^}]*)\}")

    def render(self, directive: Directive, context: TransformContext) -> str:
        return f"<em>{directive.label}</em>"
