"""Relative links between chapters."""

from __future__ import annotations

import posixpath
from pathlib import PurePosixPath


def _parts(path: str) -> tuple[str, ...]:
    # mdBook on Windows serializes paths with backslashes.
    return PurePosixPath(posixpath.normpath(path.replace("\\", "/"))).parts


def relative_path(chapter_path: str, target_path: str) -> str:
    """Compute the link from one chapter to the file of another.

    The result is relative to the directory containing ``chapter_path``.
    The computation is purely lexical; the filesystem is never touched.

    Args:
        chapter_path: Path of the chapter holding the link.
        target_path: Path of the chapter the link points to.

    Returns:
        The relative path with forward slashes, or an empty string when
        both paths name the same chapter so the link stays in the page.
    """

    source = _parts(chapter_path)
    target = _parts(target_path)
    if source == target:
        return ""

    # Drop the file name to get the directory holding the link.
    start = source[:-1]

    common = 0
    for left, right in zip(start, target):
        if left != right:
            break
        common += 1

    parts = [posixpath.pardir] * (len(start) - common) + list(target[common:])
    return posixpath.join(*parts) if parts else posixpath.curdir
