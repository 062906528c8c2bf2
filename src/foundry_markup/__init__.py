"""
foundry-markup - Foundry VTT rich-text directive transformer

Rewrites the inline directives embedded in Foundry VTT journal, actor and
item text (@UUID, @Localize, @Trait, @Check, ...) into HTML markup, resolving
them against a localization dictionary and the loaded document graph.
"""

__version__ = "0.3.0"
__all__ = ["__version__"]
