"""Value model: kinds, the Empty sentinel and the shared equality rule."""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum, auto
from typing import Any


# ---------------------------------------------------------------------------
# Empty — singleton for absent values
# ---------------------------------------------------------------------------

class _EmptyType:
    """Sentinel returned when a path cannot be resolved."""

    _instance: _EmptyType | None = None

    def __new__(cls) -> _EmptyType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _EmptyType:
        return self

    def __deepcopy__(self, memo: dict) -> _EmptyType:
        return self


Empty = _EmptyType()


# ---------------------------------------------------------------------------
# Kind
# ---------------------------------------------------------------------------

class Kind(Enum):
    PRIMITIVE = auto()
    LIST = auto()
    MAPPING = auto()


def kind_of(value: Any) -> Kind:
    """Classify *value*.

    - ``Mapping`` instances → MAPPING
    - ``list`` instances → LIST
    - everything else (str, numbers, bool, None, tuples, ...) → PRIMITIVE
    """
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, list):
        return Kind.LIST
    return Kind.PRIMITIVE


def is_container(value: Any) -> bool:
    return kind_of(value) is not Kind.PRIMITIVE


def same_value(a: Any, b: Any) -> bool:
    """Equality used to skip no-op writes.

    Containers compare by identity, primitives by type and value. ``1``,
    ``1.0`` and ``True`` are all different; so are ``0.0`` and ``-0.0``.
    """
    if a is b:
        return True
    if is_container(a) or is_container(b):
        return False
    if a is Empty or b is Empty:
        return False
    if type(a) is not type(b):
        return False
    try:
        equal = bool(a == b)
    except (TypeError, ValueError):
        # e.g. array-likes whose __eq__ is elementwise
        return False
    if equal and isinstance(a, float):
        return math.copysign(1.0, a) == math.copysign(1.0, b)
    return equal
