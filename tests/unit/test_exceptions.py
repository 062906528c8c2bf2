"""Tests for the project exception hierarchy."""
from __future__ import annotations

import pytest

from foundry_markup.core.exceptions import (
    ConfigError,
    DocumentFormatError,
    DocumentNotFoundError,
    FoundryMarkupError,
)


@pytest.mark.parametrize(
    ("cls", "builtin"),
    [
        (ConfigError, ValueError),
        (DocumentFormatError, ValueError),
        (DocumentNotFoundError, FileNotFoundError),
    ],
)
def test_hierarchy(cls, builtin) -> None:
    err = cls("boom")
    assert isinstance(err, FoundryMarkupError)
    assert isinstance(err, builtin)
    assert str(err) == "boom"


def test_to_json_error() -> None:
    err = DocumentFormatError("bad file", context={"path": "x.json"})
    assert err.to_json_error() == {
        "message": "bad file",
        "code": "DocumentFormatError",
        "context": {"path": "x.json"},
    }


def test_context_is_copied() -> None:
    context = {"path": "x.json"}
    err = FoundryMarkupError("bad", context=context)
    context["path"] = "y.json"
    assert err.context == {"path": "x.json"}


@pytest.mark.parametrize("cls", [ConfigError, DocumentFormatError, DocumentNotFoundError])
def test_subclass_keeps_context_and_args(cls) -> None:
    err = cls("boom", context={"path": "x.json"})
    assert err.args == ("boom",)
    assert err.context == {"path": "x.json"}
    assert err.to_json_error()["code"] == cls.__name__


def test_not_found_has_no_errno() -> None:
    err = DocumentNotFoundError("missing")
    assert err.errno is None
    assert str(err) == "missing"
