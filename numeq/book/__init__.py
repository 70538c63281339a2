"""Book model mirroring mdBook's chapter tree."""

from .book import Book, PartTitle, Separator
from .chapter import Chapter
from .section_number import SectionNumber
from .serialize import book_from_dict, book_to_dict
from .walk import for_each_mut, iter_chapters

__all__ = [
    "Book",
    "Chapter",
    "PartTitle",
    "SectionNumber",
    "Separator",
    "book_from_dict",
    "book_to_dict",
    "for_each_mut",
    "iter_chapters",
]
