"""mdBook preprocessor numbering centered equations."""

from __future__ import annotations

import logging

from attrs import define, field

from .book import Book
from .config import NAME, NumEqConfig
from .context import PreprocessorContext
from .labels import LabelTable
from .numbering import number_equations
from .references import resolve_references

logger = logging.getLogger(__name__)

# mdBook's convention for a renderer no preprocessor accepts.
UNSUPPORTED_RENDERER = "not-supported"


@define(slots=True)
class NumEqPreprocessor:
    """mdBook preprocessor numbering centered equations.

    Attributes:
        config: Numbering options.
    """

    config: NumEqConfig = field(factory=NumEqConfig)

    @classmethod
    def from_context(cls, ctx: PreprocessorContext) -> NumEqPreprocessor:
        """Create a preprocessor configured from ``book.toml``."""

        return cls(config=NumEqConfig.from_context(ctx))

    @property
    def name(self) -> str:
        return NAME

    def supports_renderer(self, renderer: str) -> bool:
        """Return whether the book can be preprocessed for ``renderer``."""

        return renderer != UNSUPPORTED_RENDERER

    def collect_labels(self, book: Book) -> LabelTable:
        """Number the equations of ``book`` and return the label table.

        The book is modified in place; references are left untouched.
        """

        labels: LabelTable = {}
        number_equations(book, self.config, labels)
        logger.debug(f"Collected {len(labels)} equation labels")
        return labels

    def run(self, ctx: PreprocessorContext | None, book: Book) -> Book:
        """Number equations, then resolve references to them.

        Both passes walk the whole book; references are resolved only once
        every label is known, since they may point forward.

        Args:
            ctx: Context of the mdBook invocation; unused beyond logging.
            book: Book to process, modified in place.

        Returns:
            The processed book.

        Throws:
            StructuralPreconditionError: If a chapter lacks a path or has a
                malformed section number.
        """

        if ctx is not None:
            logger.debug(f"Preprocessing for the {ctx.renderer} renderer")

        labels = self.collect_labels(book)
        resolve_references(book, labels)
        return book
