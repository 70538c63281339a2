"""Convert between mdBook's JSON book layout and the book models."""

from __future__ import annotations

from typing import Any

from ..errors import InputFormatError
from .book import Book, PartTitle, Separator
from .chapter import Chapter
from .section_number import SectionNumber
from .types import BookItem, BookItemList, JSONDict

# Chapter keys handled explicitly; anything else is carried in ``extra``.
_CHAPTER_KEYS = (
    "name",
    "content",
    "number",
    "sub_items",
    "path",
    "source_path",
    "parent_names",
)


def _section_number(value: Any) -> SectionNumber | None:  # noqa: ANN401
    if value is None:
        return None

    # Hand-written fixtures sometimes use the dotted form.
    if isinstance(value, str):
        return SectionNumber.parse(value)
    if not isinstance(value, list):
        raise InputFormatError(f"Invalid section number: {value!r}")
    return SectionNumber(value)


def _chapter_from_dict(data: JSONDict) -> Chapter:
    """Create a chapter from its serialized mapping.

    Args:
        data: Value of a ``{"Chapter": ...}`` item.

    Returns:
        The parsed chapter with its nested items.
    """

    if not isinstance(data, dict) or "name" not in data:
        raise InputFormatError(f"Invalid chapter: {data!r}")

    return Chapter(
        name=data["name"],
        content=data.get("content") or "",
        number=_section_number(data.get("number")),
        sub_items=items_from_list(data.get("sub_items") or []),
        path=data.get("path"),
        source_path=data.get("source_path"),
        parent_names=list(data.get("parent_names") or []),
        extra={k: v for k, v in data.items() if k not in _CHAPTER_KEYS},
    )


def item_from_json(value: Any) -> BookItem:  # noqa: ANN401
    """Create a book item from one entry of a ``sections`` list.

    Args:
        value: ``"Separator"``, ``{"PartTitle": str}`` or
            ``{"Chapter": dict}``.

    Returns:
        The matching model instance.

    Throws:
        InputFormatError: If the entry has none of these shapes.
    """

    if value == "Separator":
        return Separator()
    if isinstance(value, dict) and len(value) == 1:
        if "Chapter" in value:
            return _chapter_from_dict(value["Chapter"])
        if "PartTitle" in value:
            return PartTitle(title=str(value["PartTitle"]))
    raise InputFormatError(f"Unknown book item: {value!r}")


def items_from_list(values: list[Any]) -> BookItemList:
    """Create book items from a serialized list."""

    return [item_from_json(value) for value in values]


def book_from_dict(data: JSONDict) -> Book:
    """Create a book from mdBook's serialized ``Book`` mapping.

    Args:
        data: Mapping with a ``sections`` list.

    Returns:
        The parsed book.
    """

    if not isinstance(data, dict) or not isinstance(
        data.get("sections"), list
    ):
        raise InputFormatError("Book must be an object with a sections list")

    return Book(
        sections=items_from_list(data["sections"]),
        extra={k: v for k, v in data.items() if k != "sections"},
    )


def _chapter_to_dict(chapter: Chapter) -> JSONDict:
    data: JSONDict = {
        "name": chapter.name,
        "content": chapter.content,
        "number": (
            list(chapter.number.parts) if chapter.number is not None else None
        ),
        "sub_items": items_to_list(chapter.sub_items),
        "path": chapter.path,
        "source_path": chapter.source_path,
        "parent_names": list(chapter.parent_names),
    }
    data.update(chapter.extra)
    return data


def item_to_json(item: BookItem) -> Any:  # noqa: ANN401
    """Serialize a book item to mdBook's JSON layout."""

    if isinstance(item, Chapter):
        return {"Chapter": _chapter_to_dict(item)}
    if isinstance(item, PartTitle):
        return {"PartTitle": item.title}
    return "Separator"


def items_to_list(items: BookItemList) -> list[Any]:
    """Serialize a list of book items."""

    return [item_to_json(item) for item in items]


def book_to_dict(book: Book) -> JSONDict:
    """Serialize a book to mdBook's JSON layout.

    mdBook expects the ``__non_exhaustive`` marker, so it is emitted even
    when the input did not carry it.
    """

    data: JSONDict = {"sections": items_to_list(book.sections)}
    data["__non_exhaustive"] = None
    data.update(book.extra)
    return data
