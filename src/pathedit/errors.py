"""Exceptions raised by pathedit."""

from __future__ import annotations


class PathEditError(Exception):
    """Base class for all pathedit errors."""


class InvalidPathError(PathEditError, ValueError):
    """The path argument is missing, not a string, empty, or unusable."""


class PathNotFoundError(PathEditError, KeyError):
    """A segment required by a strict editor does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"Path '{self.path}' does not exist."


class InvalidMergeValueError(PathEditError, TypeError):
    """The value passed to merge() is not a mapping."""
