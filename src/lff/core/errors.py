"""Error taxonomy for the traversal-and-filter engine.

Only configuration-time and root-path errors are fatal. Per-entry read
failures are absorbed by the traversal engine and surface as ``UNREADABLE``
outcomes.
"""

from __future__ import annotations


class LffError(Exception):
    """Base class for every error raised by lff."""


class PathError(LffError):
    """The traversal root is missing, not a directory, or cannot be listed."""

    def __init__(self, root: str) -> None:
        super().__init__(f"Invalid supplied start directory: '{root}'")
        self.root = root


class GlobCompileError(LffError, ValueError):
    """The name pattern could not be compiled."""

    def __init__(self, pattern: str, detail: str = "") -> None:
        super().__init__(f"Invalid glob from name pattern flag: '{pattern}'")
        self.pattern = pattern
        self.detail = detail


class EntryReadError(LffError):
    """A single file or directory could not be read during traversal."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not retrieve metadata for '{path}': {reason}")
        self.path = path
        self.reason = reason
