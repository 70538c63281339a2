"""Tests for the book model and its JSON layout."""

from __future__ import annotations

from typing import Any

import pytest

from numeq.book import (
    Book,
    Chapter,
    PartTitle,
    SectionNumber,
    Separator,
    book_from_dict,
    book_to_dict,
)
from numeq.book.section_number import parse_components
from numeq.errors import InputFormatError, MalformedSectionNumber


def test_section_number_display() -> None:
    """Every component is followed by a dot."""

    assert str(SectionNumber((1, 2, 3))) == "1.2.3."
    assert str(SectionNumber.parse("4.5")) == "4.5."
    assert len(SectionNumber([7])) == 1


@pytest.mark.parametrize("text", ["", "1..2", "1.a", "-1", "1.²", " 1"])
def test_parse_components_rejects(text: str) -> None:
    """Only dotted non-negative integers are accepted."""

    with pytest.raises(MalformedSectionNumber):
        parse_components(text)


def test_section_number_rejects_non_integers() -> None:
    """Components must be non-negative integers, not booleans."""

    with pytest.raises(MalformedSectionNumber):
        SectionNumber([1, -2])
    with pytest.raises(MalformedSectionNumber):
        SectionNumber([True])


def test_draft_chapter() -> None:
    """Chapters without a path are drafts."""

    assert Chapter(name="Later").is_draft_chapter()
    assert not Chapter(name="Now", path="now.md").is_draft_chapter()


def test_book_from_dict(mdbook_payload: list[Any]) -> None:
    """mdBook's serialized book is turned into models."""

    book = book_from_dict(mdbook_payload[1])

    groups, separator, part, usage = book.sections
    assert isinstance(groups, Chapter)
    assert groups.number == SectionNumber((1, 2))
    assert groups.path == "crypto/groups.md"
    assert isinstance(separator, Separator)
    assert part == PartTitle(title="Appendix")
    assert usage.content == "See {{eqref: eq:test}}."


def test_round_trip_keeps_unknown_keys(mdbook_payload: list[Any]) -> None:
    """Keys added by newer mdBook versions survive processing."""

    data = mdbook_payload[1]
    data["sections"][0]["Chapter"]["future_field"] = {"x": 1}
    data["extra_marker"] = True

    result = book_to_dict(book_from_dict(data))

    assert result["sections"][0]["Chapter"]["future_field"] == {"x": 1}
    assert result["extra_marker"] is True
    assert result == data


def test_book_to_dict_adds_marker() -> None:
    """The non-exhaustive marker is always present."""

    data = book_to_dict(Book(sections=[Chapter(name="A", path="a.md")]))

    assert data["__non_exhaustive"] is None
    assert data["sections"][0]["Chapter"]["number"] is None


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"sections": None},
        {"sections": ["Unknown"]},
        {"sections": [{"Chapter": {"content": "no name"}}]},
        {"sections": [{"Chapter": {"name": "n", "number": 3}}]},
    ],
)
def test_book_from_dict_rejects(data: Any) -> None:
    """Malformed input is reported as such."""

    with pytest.raises(InputFormatError):
        book_from_dict(data)


def test_dotted_number_in_input() -> None:
    """Section numbers written as strings are parsed."""

    book = book_from_dict(
        {"sections": [{"Chapter": {"name": "n", "number": "2.1"}}]}
    )

    assert book.sections[0].number == SectionNumber((2, 1))
