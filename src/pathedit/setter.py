"""Write-side helpers: return a shallow copy of a container with one entry changed."""

from __future__ import annotations

from typing import Any

from .clone import clone_shallow
from .errors import InvalidPathError
from .model import Kind, kind_of
from .path import looks_like_index


def new_container(segment: str) -> list | dict:
    """Empty container suitable for being indexed by *segment*."""
    return [] if looks_like_index(segment) else {}


def _list_index(segment: str) -> int:
    if not looks_like_index(segment):
        raise InvalidPathError(f"'{segment}' is not a valid list index.")
    return int(segment)


def with_child(node: Any, segment: str, value: Any, fill: Any = None) -> Any:
    """Copy *node* and store *value* under *segment*.

    Assigning past the end of a list pads it with *fill* first.
    """
    kind = kind_of(node)
    if kind is Kind.MAPPING:
        copy = clone_shallow(node)
        copy[segment] = value
        return copy
    if kind is Kind.LIST:
        index = _list_index(segment)
        copy = clone_shallow(node)
        if index < len(copy):
            copy[index] = value
        else:
            copy.extend([fill] * (index - len(copy)))
            copy.append(value)
        return copy
    raise InvalidPathError(
        f"Cannot store '{segment}' on a {type(node).__name__} value."
    )


def without_child(node: Any, segment: str) -> Any:
    """Copy *node* with *segment* removed. List elements after it shift down."""
    kind = kind_of(node)
    if kind is Kind.MAPPING:
        copy = clone_shallow(node)
        del copy[segment]
        return copy
    if kind is Kind.LIST:
        copy = clone_shallow(node)
        copy.pop(_list_index(segment))
        return copy
    raise InvalidPathError(
        f"Cannot remove '{segment}' from a {type(node).__name__} value."
    )
