"""Deep and shallow cloning of nested values."""

from __future__ import annotations

from typing import Any

from .model import Kind, kind_of


def clone_deep(value: Any) -> Any:
    """Recursively copy every list and mapping under *value*.

    Primitives are shared. Mappings are rebuilt as plain ``dict`` objects in
    the source's enumeration order. Recurses once per nesting level, so
    structures deeper than the recursion limit raise ``RecursionError``.
    """
    kind = kind_of(value)
    if kind is Kind.MAPPING:
        return {key: clone_deep(item) for key, item in value.items()}
    if kind is Kind.LIST:
        return [clone_deep(item) for item in value]
    return value


def clone_shallow(value: Any) -> Any:
    """Copy the container itself; children are shared by reference."""
    kind = kind_of(value)
    if kind is Kind.MAPPING:
        return dict(value)
    if kind is Kind.LIST:
        return list(value)
    return value
