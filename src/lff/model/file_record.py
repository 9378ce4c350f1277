"""FileRecord and EntryOutcome — the per-entry values produced by traversal."""

from __future__ import annotations

import os
from dataclasses import dataclass

from lff.model import EntryStatus


@dataclass(frozen=True, slots=True)
class FileRecord:
    """One matched regular file.

    ``size_bytes`` is read once, at discovery time, and never refreshed.
    """

    path: str
    size_bytes: int

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    def to_dict(self) -> dict:
        return {"path": self.path, "size_bytes": self.size_bytes}


@dataclass(frozen=True, slots=True)
class EntryOutcome:
    """Result of visiting one filesystem entry.

    Only ``MATCHED`` outcomes carry a record; only ``UNREADABLE`` ones carry
    a reason.
    """

    status: EntryStatus
    path: str
    record: FileRecord | None = None
    reason: str = ""

    @classmethod
    def matched(cls, record: FileRecord) -> EntryOutcome:
        return cls(EntryStatus.MATCHED, record.path, record=record)

    @classmethod
    def filtered(cls, path: str) -> EntryOutcome:
        return cls(EntryStatus.FILTERED, path)

    @classmethod
    def unreadable(cls, path: str, reason: str) -> EntryOutcome:
        return cls(EntryStatus.UNREADABLE, path, reason=reason)
