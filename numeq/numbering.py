"""First pass: number equations and collect their labels."""

from __future__ import annotations

import logging
import re
from typing import Any

from attrs import define, field

from .book.section_number import parse_components
from .book.types import ChapterLike
from .book.walk import for_each_mut, is_chapter
from .config import NumEqConfig
from .errors import MissingChapterPath
from .labels import LabelInfo, LabelTable

logger = logging.getLogger(__name__)

# ``{{numeq}}`` optionally followed by ``{label}``; the label is lazy so the
# first closing brace ends it.
EQ_RE = re.compile(r"\{\{numeq\}\}(\{(?P<label>.*?)\})?")


@define(slots=True)
class NumberingState:
    """Counter threaded through the chapters of one run.

    Attributes:
        counter: Number of the last equation in the current reset window.
        current: Leading section number components of the current window,
            only tracked when a prefix depth is configured.
    """

    counter: int = 0
    current: list[int] = field(factory=list)


def chapter_path(chapter: ChapterLike) -> str:
    """Return the path of a non-draft chapter.

    Throws:
        MissingChapterPath: If the chapter has no path.
    """

    if chapter.path is None:
        raise MissingChapterPath(getattr(chapter, "name", None))
    return str(chapter.path)


def section_prefix(chapter: ChapterLike, config: NumEqConfig) -> str:
    """Return the raw prefix for a chapter, such as ``1.2.``.

    The prefix is empty when prefixes are disabled or when the chapter has
    no section number.
    """

    if not config.prefix or chapter.number is None:
        return ""
    return str(chapter.number)


def start_chapter(
    prefix: str, config: NumEqConfig, state: NumberingState
) -> str:
    """Apply the reset policy at the start of a chapter.

    Args:
        prefix: Raw prefix from :func:`section_prefix`.
        config: Numbering options.
        state: Running state, updated in place.

    Returns:
        The prefix printed in front of the equation numbers.

    Throws:
        MalformedSectionNumber: If ``prefix`` has a non-numeric component.
    """

    if not config.global_ and config.depth == 0:
        state.counter = 0

    if config.depth == 0:
        return prefix

    if not prefix:
        state.counter = 0
        return ""

    components = parse_components(prefix)
    if len(components) < config.depth:
        components += [0] * (config.depth - len(components))
    vector = components[: config.depth]

    # A new window starts whenever the leading components change.
    if vector != state.current:
        state.current = vector
        state.counter = 0

    return "".join(f"{part}." for part in vector)


def find_and_replace_eqs(
    text: str,
    prefix: str,
    path: str,
    labels: LabelTable,
    state: NumberingState,
) -> str:
    """Number every ``{{numeq}}`` placeholder of ``text``.

    Placeholders become ``\\tag{<prefix><n>}``, preceded by
    ``\\htmlId{<label>}{} `` when they carry a label. New labels are added
    to ``labels``; a label seen before keeps its first binding and only
    triggers a warning.

    Args:
        text: Chapter content.
        prefix: Printed prefix for this chapter.
        path: Path of the chapter, recorded for labels.
        labels: Label table, updated in place.
        state: Running state whose counter is advanced per equation.

    Returns:
        The rewritten content.
    """

    def replace(match: re.Match[str]) -> str:
        state.counter += 1
        num = f"{prefix}{state.counter}"
        label = match.group("label")
        if label is None:
            return f"\\tag{{{num}}}"

        if label in labels:
            logger.warning(f"Eq. {num}: Label `{label}' already used")
        else:
            labels[label] = LabelInfo(num=num, path=path)
        return f"\\htmlId{{{label}}}{{}} \\tag{{{num}}}"

    return EQ_RE.sub(replace, text)


def number_chapter(
    chapter: ChapterLike,
    config: NumEqConfig,
    labels: LabelTable,
    state: NumberingState,
) -> None:
    """Number the equations of one non-draft chapter in place."""

    path = chapter_path(chapter)
    prefix = start_chapter(section_prefix(chapter, config), config, state)
    chapter.content = find_and_replace_eqs(
        chapter.content, prefix, path, labels, state
    )
    logger.debug(f"{path}: numbered up to {prefix}{state.counter}")


def number_equations(
    items: Any, config: NumEqConfig, labels: LabelTable  # noqa: ANN401
) -> NumberingState:
    """Run the numbering pass over a whole tree.

    Args:
        items: A ``Book`` or an ordered list of book items.
        config: Numbering options.
        labels: Label table to fill.

    Returns:
        The state after the last chapter.
    """

    state = NumberingState()

    def visit(item: Any) -> None:  # noqa: ANN401
        if is_chapter(item) and not item.is_draft_chapter():
            number_chapter(item, config, labels, state)

    for_each_mut(getattr(items, "sections", items), visit)
    return state
