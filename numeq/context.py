"""Context mdBook passes to preprocessors alongside the book."""

from __future__ import annotations

import re
from typing import Any

from attrs import define, field

from .book import Book, book_from_dict
from .book.types import JSONDict
from .errors import InputFormatError
from .json_utils import json_loads

# Version of mdBook whose JSON layout this package understands.
MDBOOK_VERSION = "0.4.40"

_VERSION_RE = re.compile(r"^\s*v?(\d+)\.(\d+)(?:\.(\d+))?")


@define(slots=True)
class PreprocessorContext:
    """Context mdBook passes to preprocessors alongside the book.

    Attributes:
        root: Directory containing ``book.toml``.
        config: Parsed ``book.toml`` contents.
        renderer: Name of the renderer the book is prepared for.
        mdbook_version: Version of the calling mdBook binary.
        extra: Context keys this model does not know about.
    """

    root: str = ""
    config: JSONDict = field(factory=dict, repr=False)
    renderer: str = "html"
    mdbook_version: str = MDBOOK_VERSION
    extra: JSONDict = field(factory=dict, repr=False)

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401
        """Look up a dotted key such as ``preprocessor.numeq.prefix``.

        Args:
            key: Dotted path into ``config``.
            default: Value returned when any segment is missing.

        Returns:
            The configured value or ``default``.
        """

        node: Any = self.config
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    @classmethod
    def from_dict(cls, data: JSONDict) -> PreprocessorContext:
        """Create a context from its serialized mapping."""

        if not isinstance(data, dict):
            raise InputFormatError("Preprocessor context must be an object")

        known = ("root", "config", "renderer", "mdbook_version")
        return cls(
            root=str(data.get("root") or ""),
            config=data.get("config") or {},
            renderer=str(data.get("renderer") or "html"),
            mdbook_version=str(data.get("mdbook_version") or MDBOOK_VERSION),
            extra={k: v for k, v in data.items() if k not in known},
        )


def parse_input(data: str | bytes) -> tuple[PreprocessorContext, Book]:
    """Decode the ``[context, book]`` pair mdBook writes to stdin.

    Args:
        data: Raw JSON input.

    Returns:
        The preprocessor context and the book.

    Throws:
        InputFormatError: If the input is not valid JSON or not a pair.
    """

    try:
        payload = json_loads(data)
    except ValueError as exc:
        raise InputFormatError(f"Unable to parse the input: {exc}") from exc

    if not isinstance(payload, list) or len(payload) != 2:
        raise InputFormatError("Expected a JSON array [context, book]")

    ctx_data, book_data = payload
    return PreprocessorContext.from_dict(ctx_data), book_from_dict(book_data)


def _version_key(text: str) -> tuple[int, int, int] | None:
    match = _VERSION_RE.match(text)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2)), int(match.group(3) or 0)


def version_compatible(mdbook_version: str) -> bool:
    """Return whether ``mdbook_version`` can talk to this preprocessor.

    Versions are compatible in the caret sense of ``^MDBOOK_VERSION``: at
    least ``MDBOOK_VERSION``, with the same major version, and the same
    minor version while the major version is 0. For ``0.4.40`` this is
    ``>=0.4.40, <0.5.0``.

    Args:
        mdbook_version: Version reported by the calling mdBook.

    Returns:
        ``True`` when compatible; unparsable versions are not.
    """

    caller = _version_key(mdbook_version)
    built = _version_key(MDBOOK_VERSION)
    if caller is None or built is None or caller < built:
        return False
    if built[0] == 0:
        return caller[:2] == built[:2]
    return caller[0] == built[0]
