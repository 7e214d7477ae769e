"""pathedit — copy-on-write editing of nested mappings and lists by path."""

import logging

from .clone import clone_deep, clone_shallow
from .config import EditorConfig
from .editor import PathEditor
from .errors import (
    InvalidMergeValueError,
    InvalidPathError,
    PathEditError,
    PathNotFoundError,
)
from .model import Empty, Kind, is_container, kind_of, same_value
from .path import format_path, looks_like_index, parse_path

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "PathEditor",
    "EditorConfig",
    "Empty",
    "Kind",
    "kind_of",
    "is_container",
    "same_value",
    "clone_deep",
    "clone_shallow",
    "parse_path",
    "looks_like_index",
    "format_path",
    "PathEditError",
    "InvalidPathError",
    "PathNotFoundError",
    "InvalidMergeValueError",
]
