"""Exceptions raised while numbering a book."""

from __future__ import annotations


class NumEqError(Exception):
    """Base class for every error that aborts a preprocessor run."""


class StructuralPreconditionError(NumEqError):
    """The book tree violates an assumption of the numbering passes."""


class MissingChapterPath(StructuralPreconditionError):
    """A chapter that is not a draft has no source path."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        label = f"`{name}'" if name else "<unnamed>"
        super().__init__(f"Chapter {label} is not a draft but has no path")


class MalformedSectionNumber(StructuralPreconditionError):
    """A section number component is not a non-negative integer."""

    def __init__(self, number: str, component: str) -> None:
        self.number = number
        self.component = component
        super().__init__(
            f"Malformed section number {number!r}: "
            f"component {component!r} is not a non-negative integer"
        )


class ConfigError(NumEqError):
    """Invalid value in the ``[preprocessor.numeq]`` table."""


class InputFormatError(NumEqError):
    """The preprocessor input does not follow the mdBook JSON layout."""
