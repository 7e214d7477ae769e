"""Read-side resolution of path segments."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .model import Empty, Kind, kind_of
from .path import looks_like_index


def child_of(node: Any, segment: str) -> Any:
    """Resolve a single segment on *node*.

    - mapping: the segment is a string key
    - list: the segment must look like an index and be in range
    - primitive / Empty: always Empty
    """
    kind = kind_of(node)
    if kind is Kind.MAPPING:
        return node.get(segment, Empty)
    if kind is Kind.LIST:
        if looks_like_index(segment):
            index = int(segment)
            if index < len(node):
                return node[index]
        return Empty
    return Empty


def resolve(root: Any, segments: Iterable[str]) -> Any:
    """Walk *segments* from *root*; Empty as soon as a step is missing."""
    current = root
    for segment in segments:
        current = child_of(current, segment)
        if current is Empty:
            return Empty
    return current
