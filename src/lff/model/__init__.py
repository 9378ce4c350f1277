"""Enums shared across the engine and presentation layers."""

from __future__ import annotations

from enum import Enum


class SortMethod(str, Enum):
    """How reported files are ordered once collection has finished."""

    SIZE = "size"
    NAME = "name"


class EntryStatus(str, Enum):
    """What the traversal engine decided about a single entry."""

    MATCHED = "matched"
    FILTERED = "filtered"
    UNREADABLE = "unreadable"
