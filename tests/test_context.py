"""Tests for decoding the preprocessor input."""

from __future__ import annotations

import json
from typing import Any

import pytest

from numeq.book import Book
from numeq.context import (
    MDBOOK_VERSION,
    PreprocessorContext,
    parse_input,
    version_compatible,
)
from numeq.errors import InputFormatError


def test_parse_input(mdbook_payload: list[Any]) -> None:
    """The context and the book are decoded from one JSON array."""

    ctx, book = parse_input(json.dumps(mdbook_payload))

    assert isinstance(book, Book)
    assert ctx.root == "/tmp/book"
    assert ctx.renderer == "html"
    assert ctx.mdbook_version == "0.4.40"
    assert ctx.get("preprocessor.numeq.prefix") is True
    assert ctx.get("book.title") == "Sample"


def test_parse_input_bytes(mdbook_payload: list[Any]) -> None:
    """Raw bytes from stdin are accepted."""

    ctx, _ = parse_input(json.dumps(mdbook_payload).encode())

    assert ctx.get("preprocessor.numeq.depth", 0) == 0


@pytest.mark.parametrize("data", ["not json", "{}", "[1, 2, 3]", "[1, {}]"])
def test_parse_input_rejects(data: str) -> None:
    """Anything but a ``[context, book]`` pair is an input error."""

    with pytest.raises(InputFormatError):
        parse_input(data)


def test_context_get_missing() -> None:
    """Missing or non-table segments give the default."""

    ctx = PreprocessorContext(config={"a": {"b": 1}})

    assert ctx.get("a.b") == 1
    assert ctx.get("a.c", "d") == "d"
    assert ctx.get("a.b.c") is None


def test_context_keeps_unknown_keys() -> None:
    """Unknown context keys are kept aside."""

    ctx = PreprocessorContext.from_dict({"root": "r", "custom": 1})

    assert ctx.extra == {"custom": 1}
    assert ctx.mdbook_version == MDBOOK_VERSION


@pytest.mark.parametrize(
    ("caller", "expected"),
    [
        (MDBOOK_VERSION, True),
        ("0.4.0", False),
        ("0.4.10", False),
        ("0.4.39", False),
        ("0.4.52", True),
        ("v0.4.41", True),
        ("0.5.0", False),
        ("0.3.7", False),
        ("1.0.0", False),
        ("garbage", False),
    ],
)
def test_version_compatible(caller: str, expected: bool) -> None:
    """The caller must satisfy ``^0.4.40``, i.e. ``>=0.4.40, <0.5.0``."""

    assert version_compatible(caller) is expected
