"""PathEditor — copy-on-write editing of nested values by path."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .clone import clone_deep
from .config import EditorConfig
from .errors import InvalidMergeValueError, PathNotFoundError
from .getter import child_of, resolve
from .model import Empty, Kind, is_container, kind_of, same_value
from .path import format_path, parse_path
from .setter import new_container, with_child, without_child

logger = logging.getLogger(__name__)

# (container, last segment) -> container after the edit
Leaf = Callable[[Any, str], Any]


@dataclass(frozen=True, slots=True, eq=False)
class PathEditor:
    """Immutable wrapper around a nested value.

    Usage::

        ed = PathEditor({"a": {"b": [1, 2, 3]}})
        ed2 = ed.set("a.b[1]", 9)
        ed2.get("a.b")   # → [1, 9, 3]
        ed.get("a.b")    # → [1, 2, 3]

    Every mutating call returns a new editor. Containers on the edited path
    are shallow-copied; everything else is shared with the previous root.
    Values returned by :meth:`get` are references and must not be mutated;
    use :meth:`snapshot` for a private copy.

    Editors compare and hash by identity. Paths and values nested deeper
    than the interpreter's recursion limit raise ``RecursionError``.
    """

    root: Any
    config: EditorConfig = field(default_factory=EditorConfig)

    # -- Read -----------------------------------------------------------

    def get(self, path: str | None = None, *, default: Any = Empty) -> Any:
        """Return the value at *path*, or *default* if any step is missing.

        With no path the root itself is returned.
        """
        if path is None:
            return self.root
        value = resolve(self.root, parse_path(path))
        return default if value is Empty else value

    def has(self, path: str) -> bool:
        return self.get(path) is not Empty

    def snapshot(self) -> Any:
        """Deep copy of the root that the caller may mutate freely."""
        return clone_deep(self.root)

    # -- Write ----------------------------------------------------------

    def set(self, path: str, value: Any) -> PathEditor:
        """Store *value* at *path*, creating missing containers on the way."""
        segments = parse_path(path)

        def leaf(node: Any, segment: str) -> Any:
            existing = self._existing(node, segments)
            if existing is not Empty and same_value(existing, value):
                logger.debug("set %r: value unchanged, skipping write", path)
                return node
            return with_child(node, segment, value, self.config.list_fill)

        logger.debug("set %r", path)
        return self._edit(segments, leaf, vivify=True)

    def delete(self, path: str) -> PathEditor:
        """Remove the entry at *path*. List elements after it shift down."""
        segments = parse_path(path)

        def leaf(node: Any, segment: str) -> Any:
            if self._existing(node, segments) is Empty:
                logger.debug("delete %r: nothing to remove", path)
                return node
            return without_child(node, segment)

        logger.debug("delete %r", path)
        return self._edit(segments, leaf, vivify=False)

    def merge(self, path: str, value: Mapping[str, Any]) -> PathEditor:
        """Shallow-merge *value* into the mapping at *path*.

        A non-mapping at *path* is replaced by an empty mapping first. Keys in
        *value* win; nested mappings are replaced, not merged.
        """
        segments = parse_path(path)
        if kind_of(value) is not Kind.MAPPING:
            raise InvalidMergeValueError("Value must be an object.")

        def leaf(node: Any, segment: str) -> Any:
            existing = self._existing(node, segments)
            base = existing if kind_of(existing) is Kind.MAPPING else {}
            return with_child(node, segment, {**base, **value}, self.config.list_fill)

        logger.debug("merge %r (%d keys)", path, len(value))
        return self._edit(segments, leaf, vivify=True)

    def with_config(self, **changes: Any) -> PathEditor:
        """Same root, with *changes* applied to the config."""
        return PathEditor(self.root, dataclasses.replace(self.config, **changes))

    # -- Internals ------------------------------------------------------

    def _existing(self, node: Any, segments: tuple[str, ...]) -> Any:
        """Value under the last segment; raises in strict mode when absent."""
        existing = child_of(node, segments[-1])
        if existing is Empty and self.config.strict:
            raise PathNotFoundError(format_path(segments))
        return existing

    def _edit(self, segments: tuple[str, ...], leaf: Leaf, *, vivify: bool) -> PathEditor:
        if not segments:
            return PathEditor(self.root, self.config)
        return PathEditor(self._rewrite(self.root, segments, 0, leaf, vivify), self.config)

    def _rewrite(
        self,
        node: Any,
        segments: tuple[str, ...],
        depth: int,
        leaf: Leaf,
        vivify: bool,
    ) -> Any:
        """Return *node* with the edit applied below it.

        *node* itself is returned when nothing below it changed, so untouched
        paths keep their identity all the way up to the root. Recurses once
        per segment.
        """
        segment = segments[depth]
        if not is_container(node):
            if self.config.strict:
                raise PathNotFoundError(format_path(segments[: depth + 1]))
            if not vivify:
                return node
            node = new_container(segment)

        if depth == len(segments) - 1:
            return leaf(node, segment)

        child = child_of(node, segment)
        if child is Empty and self.config.strict:
            raise PathNotFoundError(format_path(segments[: depth + 1]))
        new_child = self._rewrite(child, segments, depth + 1, leaf, vivify)
        if new_child is child:
            return node
        return with_child(node, segment, new_child, self.config.list_fill)
