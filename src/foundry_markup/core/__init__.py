"""foundry-markup core library.

Submodules:
- localization: dotted-key resolution, localization fallbacks, formatters
- markup: the directive transformer pipeline
- documents: Foundry document models and JSON loaders
- render: document-level rendering on top of the transformer
"""
from __future__ import annotations

from . import exceptions  # noqa: F401
