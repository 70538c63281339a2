"""Ordered depth-first traversal of book items."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from .types import ItemVisitor


def is_chapter(item: Any) -> bool:  # noqa: ANN401
    """Return whether ``item`` behaves like a chapter.

    Separators and part titles carry no content, so anything exposing
    ``is_draft_chapter`` is treated as a chapter.
    """

    return callable(getattr(item, "is_draft_chapter", None))


def for_each_mut(items: Iterable[Any], visitor: ItemVisitor) -> None:
    """Visit every item in pre-order.

    A chapter is visited before its sub-items, and its sub-items before its
    next sibling. Drafts are visited like any other item; skipping them is
    up to ``visitor``.

    Args:
        items: Ordered book items, mutated in place by ``visitor``.
        visitor: Callable invoked once per item.
    """

    for item in items:
        visitor(item)

        # Recurse right after the parent so numbering follows reading order.
        if is_chapter(item):
            for_each_mut(item.sub_items, visitor)


def iter_chapters(items: Iterable[Any]) -> Iterator[Any]:
    """Yield the chapters found in ``items`` in pre-order."""

    for item in items:
        if is_chapter(item):
            yield item
            yield from iter_chapters(item.sub_items)
