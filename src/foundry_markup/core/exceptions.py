from __future__ import annotations

from typing import Any, Dict, Mapping


class FoundryMarkupError(Exception):
    """Base exception for foundry-markup.

    Subclasses also derive from a builtin (ValueError, FileNotFoundError);
    ``super().__init__`` hands the message on to it through the MRO.
    """

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigError(FoundryMarkupError, ValueError):
    """Raised when configuration cannot be loaded or fails validation."""


class DocumentFormatError(FoundryMarkupError, ValueError):
    """Raised when a JSON file is not a recognizable Foundry document."""


class DocumentNotFoundError(FoundryMarkupError, FileNotFoundError):
    """Raised when a document or localization file does not exist."""


__all__ = [
    "FoundryMarkupError",
    "ConfigError",
    "DocumentFormatError",
    "DocumentNotFoundError",
]
