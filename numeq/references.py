"""Second pass: turn equation references into links."""

from __future__ import annotations

import logging
import re
from typing import Any

from .book.types import ChapterLike
from .book.walk import for_each_mut, is_chapter
from .labels import LabelTable
from .numbering import chapter_path
from .paths import relative_path

logger = logging.getLogger(__name__)

REF_RE = re.compile(r"\{\{eqref:\s*(?P<label>.*?)\}\}")

# Rendered in place of references to unknown labels.
UNRESOLVED_MARKER = "**[??]**"


def find_and_replace_refs(text: str, path: str, labels: LabelTable) -> str:
    """Replace ``{{eqref: label}}`` placeholders by links.

    Args:
        text: Chapter content.
        path: Path of the chapter holding the references.
        labels: Label table built by the numbering pass.

    Returns:
        The rewritten content. Unknown labels are rendered as
        :data:`UNRESOLVED_MARKER` and reported with a warning.
    """

    def replace(match: re.Match[str]) -> str:
        label = match.group("label").strip()
        info = labels.get(label)
        if info is None:
            logger.warning(f"Unknown equation reference: {label}")
            return UNRESOLVED_MARKER

        target = relative_path(path, info.path)
        return f"[({info.num})]({target}#{label})"

    return REF_RE.sub(replace, text)


def resolve_chapter(chapter: ChapterLike, labels: LabelTable) -> None:
    """Resolve the references of one non-draft chapter in place."""

    chapter.content = find_and_replace_refs(
        chapter.content, chapter_path(chapter), labels
    )


def resolve_references(items: Any, labels: LabelTable) -> None:  # noqa: ANN401
    """Run the reference pass over a whole tree.

    Only reads ``labels``, so the traversal order does not matter; it must
    run after the numbering pass has seen every chapter.

    Args:
        items: A ``Book`` or an ordered list of book items.
        labels: Complete label table.
    """

    def visit(item: Any) -> None:  # noqa: ANN401
        if is_chapter(item) and not item.is_draft_chapter():
            resolve_chapter(item, labels)

    for_each_mut(getattr(items, "sections", items), visit)
