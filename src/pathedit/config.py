"""Editor configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Options shared by an editor and every editor derived from it.

    ``strict``
        When false (the default) ``set`` and ``merge`` create missing
        intermediate containers and ``delete`` of a missing path is a no-op.
        When true every segment must already hold a value, otherwise
        :class:`~pathedit.errors.PathNotFoundError` is raised.
    ``list_fill``
        Value used to pad a list when assigning past its end.
    """

    strict: bool = False
    list_fill: Any = None
