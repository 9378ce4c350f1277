"""Result collector — gathers traversal outcomes, then sorts and limits them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from lff.model import EntryStatus, SortMethod
from lff.model.file_record import EntryOutcome, FileRecord


def _size_key(f: FileRecord) -> tuple:
    return (-f.size_bytes, f.path)


def _name_key(f: FileRecord) -> tuple:
    return (f.name, f.path)


_SORT_KEYS = {
    SortMethod.SIZE: _size_key,
    SortMethod.NAME: _name_key,
}


def sort_files(files: list[FileRecord], sort: SortMethod | None) -> list[FileRecord]:
    """Return *files* ordered by *sort*; ``None`` keeps discovery order.

    ``SIZE`` is largest first with ties broken by path; ``NAME`` is by base
    name with ties broken by full path. Both compare strings by code point.
    """
    if sort is None:
        return list(files)
    return sorted(files, key=_SORT_KEYS[SortMethod(sort)])


@dataclass
class ResultCollector:
    """Owns the accumulating match list for one run.

    With no sort and a limit, :meth:`consume` stops pulling outcomes once
    ``limit`` matches are held, which also stops the (lazy) traversal.
    ``stopped_early`` is set only when the source still had outcomes left.
    With a sort, every outcome is consumed first so the limit applies to
    the sorted order.
    """

    sort: SortMethod | None = None
    limit: int | None = None
    files: list[FileRecord] = field(default_factory=list)
    matched: int = 0
    filtered: int = 0
    skipped: int = 0
    stopped_early: bool = False

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")
        if self.sort is not None:
            self.sort = SortMethod(self.sort)

    @property
    def _full(self) -> bool:
        return self.sort is None and self.limit is not None and len(self.files) >= self.limit

    def add(self, outcome: EntryOutcome) -> None:
        if outcome.status is EntryStatus.MATCHED:
            self.matched += 1
            self.files.append(outcome.record)
        elif outcome.status is EntryStatus.FILTERED:
            self.filtered += 1
        else:
            self.skipped += 1

    def consume(self, outcomes: Iterable[EntryOutcome]) -> ResultCollector:
        it = iter(outcomes)
        if not self._full:
            for outcome in it:
                self.add(outcome)
                if self._full:
                    break
        if self._full:
            # One more pull tells whether anything was left unseen; it is not tallied.
            self.stopped_early = next(it, None) is not None
        return self

    def finish(self) -> tuple[list[FileRecord], bool]:
        """Final ordered sequence and whether the limit cut anything off."""
        ordered = sort_files(self.files, self.sort)
        truncated = self.stopped_early
        if self.limit is not None and len(ordered) > self.limit:
            ordered = ordered[: self.limit]
            truncated = True
        return ordered, truncated
