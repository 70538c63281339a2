"""Shared fixtures building small books."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from numeq.book import Book, Chapter, SectionNumber

ChapterFactory = Callable[..., Chapter]


def make_chapter(
    path: str | None,
    content: str = "",
    number: tuple[int, ...] | None = None,
    sub_items: list[Any] | None = None,
    name: str | None = None,
) -> Chapter:
    """Return a chapter with sensible defaults for tests."""

    return Chapter(
        name=name or (path or "Draft"),
        content=content,
        number=SectionNumber(number) if number is not None else None,
        sub_items=sub_items or [],
        path=path,
        source_path=path,
    )


@pytest.fixture
def chapter() -> ChapterFactory:
    """Expose :func:`make_chapter` to tests."""

    return make_chapter


@pytest.fixture
def sample_book() -> Book:
    """A book with nested chapters, a draft and cross references."""

    return Book(
        sections=[
            make_chapter("intro.md", "No equations here."),
            make_chapter(
                "a/intro.md",
                "$$x {{numeq}}{eq:first}$$ $$y {{numeq}}$$",
                number=(1,),
                sub_items=[
                    make_chapter(
                        "a/groups.md",
                        "$$z {{numeq}}{eq:main}$$ see {{eqref: eq:first}}",
                        number=(1, 1),
                    ),
                    make_chapter(None, "{{numeq}}{eq:draft}"),
                ],
            ),
            make_chapter(
                "b/detail.md",
                "By {{eqref: eq:main}} and {{eqref:eq:later}}.",
                number=(2,),
            ),
            make_chapter(
                "b/later.md", "$$w {{numeq}}{eq:later}$$", number=(2, 1)
            ),
        ]
    )


@pytest.fixture
def mdbook_payload() -> list[Any]:
    """A ``[context, book]`` pair as mdBook writes it to stdin."""

    def item(
        name: str,
        path: str | None,
        content: str,
        number: list[int] | None,
        sub_items: list[Any] | None = None,
    ) -> dict[str, Any]:
        return {
            "Chapter": {
                "name": name,
                "content": content,
                "number": number,
                "sub_items": sub_items or [],
                "path": path,
                "source_path": path,
                "parent_names": [],
            }
        }

    context = {
        "root": "/tmp/book",
        "config": {
            "book": {"title": "Sample"},
            "preprocessor": {"numeq": {"prefix": True}},
        },
        "renderer": "html",
        "mdbook_version": "0.4.40",
    }
    book = {
        "sections": [
            item(
                "Groups",
                "crypto/groups.md",
                "$$a {{numeq}}{eq:test}$$",
                [1, 2],
            ),
            "Separator",
            {"PartTitle": "Appendix"},
            item("Usage", "usage.md", "See {{eqref: eq:test}}.", [2]),
        ],
        "__non_exhaustive": None,
    }
    return [context, book]
