"""Book owning the ordered tree of chapters."""

from __future__ import annotations

from typing import Iterator

from attrs import define, field

from .chapter import Chapter
from .types import BookItemList, ItemVisitor, JSONDict
from .walk import for_each_mut, iter_chapters


@define(slots=True)
class Separator:
    """Horizontal separator between chapters in the table of contents."""


@define(slots=True)
class PartTitle:
    """Title introducing a part of the book.

    Attributes:
        title: Text of the part heading.
    """

    title: str


@define(slots=True)
class Book:
    """Book owning the ordered tree of chapters.

    Attributes:
        sections: Top-level book items in reading order.
        extra: Keys of the serialized book this model does not know about.
    """

    sections: BookItemList = field(factory=list, repr=False)
    extra: JSONDict = field(factory=dict, repr=False)

    def for_each_mut(self, visitor: ItemVisitor) -> None:
        """Apply ``visitor`` to every item of the book in pre-order."""

        for_each_mut(self.sections, visitor)

    def chapters(self) -> Iterator[Chapter]:
        """Yield every chapter of the book in pre-order."""

        return iter_chapters(self.sections)
