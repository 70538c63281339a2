"""Common type aliases and protocols for book structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol, Union

if TYPE_CHECKING:
    from .book import PartTitle, Separator  # noqa: F401
    from .chapter import Chapter  # noqa: F401


BookItem = Union["Chapter", "Separator", "PartTitle"]
BookItemList = list[BookItem]
ItemVisitor = Callable[[Any], None]
JSONDict = dict[str, Any]


class ChapterLike(Protocol):
    """Minimal view of a chapter needed by the numbering passes.

    Host trees may supply any object exposing these members; the engine
    never relies on anything else.
    """

    path: str | None
    number: Any
    content: str
    sub_items: list[Any]

    def is_draft_chapter(self) -> bool: ...
