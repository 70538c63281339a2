"""Hierarchical section numbers such as ``1.2.3``."""

from __future__ import annotations

from typing import Iterable

from attrs import define, field

from ..errors import MalformedSectionNumber


def parse_components(text: str) -> list[int]:
    """Split a dotted section number into its numeric components.

    A single trailing dot is accepted, so both ``"1.2"`` and ``"1.2."``
    yield ``[1, 2]``.

    Args:
        text: Dotted section number.

    Returns:
        The components in order.

    Throws:
        MalformedSectionNumber: If a component is not a non-negative
            integer.
    """

    stripped = text[:-1] if text.endswith(".") else text
    components: list[int] = []
    for part in stripped.split("."):
        # ``isdigit`` also accepts superscripts, hence the ascii check.
        if not (part.isascii() and part.isdigit()):
            raise MalformedSectionNumber(text, part)
        components.append(int(part))
    return components


def _validate_parts(parts: Iterable[object]) -> tuple[int, ...]:
    items = list(parts)
    values: list[int] = []
    for part in items:
        if isinstance(part, bool) or not isinstance(part, int) or part < 0:
            raise MalformedSectionNumber(repr(items), str(part))
        values.append(part)
    return tuple(values)


@define(slots=True, frozen=True)
class SectionNumber:
    """Section number of a chapter.

    Attributes:
        parts: Numeric components, outermost first.
    """

    parts: tuple[int, ...] = field(converter=_validate_parts)

    @classmethod
    def parse(cls, text: str) -> SectionNumber:
        """Build a section number from its dotted representation."""

        return cls(tuple(parse_components(text)))

    def __str__(self) -> str:
        # mdBook renders every component followed by a dot: "1.2."
        return "".join(f"{part}." for part in self.parts)

    def __len__(self) -> int:
        return len(self.parts)
