"""JSON encoding for the two outputs of the preprocessor.

The processed book goes back to mdBook and is written compact on one line.
The label table printed by ``mdbook-numeq labels`` is read by people, so it
is written with two-space indentation. ``orjson`` is used when installed.
"""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json

_PRETTY_INDENT = 2


def json_dumps(data: object, *, pretty: bool = False) -> str:
    """Serialize data to a JSON string.

    Args:
        data: Book or label mapping to serialize.
        pretty: Indent nested values for a human reader instead of
            producing the compact form mdBook consumes.

    Returns:
        JSON representation of ``data``; non-ASCII text is kept as is.
    """

    if orjson is not None:
        option = orjson.OPT_INDENT_2 if pretty else 0
        return orjson.dumps(data, option=option).decode()

    if pretty:
        return json.dumps(data, ensure_ascii=False, indent=_PRETTY_INDENT)
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def json_loads(data: str | bytes) -> object:
    """Deserialize the ``[context, book]`` input.

    Both backends raise a ``ValueError`` subclass on malformed input.
    """

    if orjson is not None:
        return orjson.loads(data)
    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf-8")
    return json.loads(data)
