"""Path parsing: ``a.b[0].c`` → ``("a", "b", "0", "c")``."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .errors import InvalidPathError

_SEGMENT_RE = re.compile(r"[^.\[\]]+")
_INDEX_RE = re.compile(r"[0-9]+")


def require_path(path: object) -> str:
    """Return *path* unchanged, or raise if it is not a non-empty string."""
    if not isinstance(path, str) or path == "":
        raise InvalidPathError("Path must be a non-empty string.")
    return path


def parse_path(path: str) -> tuple[str, ...]:
    """Split *path* into segments.

    Every maximal run of characters other than ``.``, ``[`` and ``]`` is one
    segment. Separators are dropped without checking that brackets match, so
    ``a[b].c``, ``a.b.c`` and ``a[b.c`` all give ``("a", "b", "c")``.
    """
    return tuple(_SEGMENT_RE.findall(require_path(path)))


def looks_like_index(segment: str) -> bool:
    """True when *segment* is a non-negative decimal integer."""
    return _INDEX_RE.fullmatch(segment) is not None


def format_path(segments: Iterable[str]) -> str:
    return ".".join(segments)
