"""Chapter holding Markdown content and nested sub-chapters."""

from __future__ import annotations

from attrs import define, field

from .section_number import SectionNumber
from .types import BookItemList, JSONDict


@define(slots=True)
class Chapter:
    """Chapter holding Markdown content and nested sub-chapters.

    Attributes:
        name: Chapter title as written in ``SUMMARY.md``.
        content: Markdown source of the chapter; rewritten in place.
        number: Section number such as ``1.2.`` or ``None`` for prefix,
            suffix and unnumbered chapters.
        sub_items: Ordered list of nested book items.
        path: Location of the rendered chapter relative to the book source
            directory, ``None`` for draft chapters.
        source_path: Location of the source file, if it exists.
        parent_names: Names of the enclosing chapters, outermost first.
        extra: Keys of the serialized chapter this model does not know
            about, kept so they survive a round trip.
    """

    name: str
    content: str = ""
    number: SectionNumber | None = None
    sub_items: BookItemList = field(factory=list, repr=False)
    path: str | None = None
    source_path: str | None = None
    parent_names: list[str] = field(factory=list, repr=False)
    extra: JSONDict = field(factory=dict, repr=False)

    def is_draft_chapter(self) -> bool:
        """Return whether the chapter is a draft without a source file."""

        return self.path is None
