"""Traversal engine — walk a directory tree and classify every regular file."""

from __future__ import annotations

import errno
import logging
import os
import stat as statmod
from typing import Iterator

from lff.core.config import FilterConfig
from lff.core.errors import EntryReadError, PathError
from lff.core.predicates import Candidate, PredicateSet
from lff.model.file_record import EntryOutcome, FileRecord

_logger = logging.getLogger(__name__)


def check_root(root: str | os.PathLike[str]) -> str:
    """Return *root* as a string if it is a listable directory.

    Raises ``PathError`` (with the OS error as ``__cause__``) otherwise.
    """
    root_s = os.fspath(root)
    try:
        st = os.stat(root_s)
    except OSError as exc:
        raise PathError(root_s) from exc
    if not statmod.S_ISDIR(st.st_mode):
        raise PathError(root_s) from NotADirectoryError(
            errno.ENOTDIR, os.strerror(errno.ENOTDIR), root_s
        )
    try:
        with os.scandir(root_s):
            pass
    except OSError as exc:
        raise PathError(root_s) from exc
    return root_s


def _stat_entry(entry: os.DirEntry[str], *, follow_symlinks: bool) -> os.stat_result:
    """Single metadata read for *entry*; the only place traversal stats files."""
    try:
        return entry.stat(follow_symlinks=follow_symlinks)
    except OSError as exc:
        raise EntryReadError(entry.path, _reason(exc)) from exc


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def _list_dir(path: str) -> list[os.DirEntry[str]]:
    with os.scandir(path) as it:
        return list(it)


def iter_entries(
    root: str,
    cfg: FilterConfig,
    predicates: PredicateSet | None = None,
) -> Iterator[EntryOutcome]:
    """Yield one ``EntryOutcome`` per regular file (or unreadable entry) under *root*.

    The walk is depth-first and lazy: each directory is listed only when
    the consumer asks for more outcomes, so stopping iteration stops the
    traversal. Directory handles are closed as soon as a listing is read.

    Policy:
      - symlinks are never descended into; a symlink to a regular file is
        reported at the link path with the size of its target
      - hidden directories are pruned before they are listed when
        ``cfg.exclude_hidden`` is set
      - unreadable directories and files are yielded as ``UNREADABLE`` and
        traversal continues with their siblings
    """
    preds = predicates if predicates is not None else PredicateSet.from_config(cfg)
    stack: list[str] = [root]

    while stack:
        dir_path = stack.pop()
        try:
            entries = _list_dir(dir_path)
        except OSError as exc:
            reason = _reason(exc)
            _logger.info("Skipping unreadable directory %s: %s", dir_path, reason)
            yield EntryOutcome.unreadable(dir_path, reason)
            continue

        subdirs: list[str] = []
        for entry in entries:
            try:
                is_link = entry.is_symlink()
                is_dir = not is_link and entry.is_dir(follow_symlinks=False)
            except OSError as exc:
                reason = _reason(exc)
                _logger.info("Skipping unreadable entry %s: %s", entry.path, reason)
                yield EntryOutcome.unreadable(entry.path, reason)
                continue

            if is_dir:
                if preds.prunes(entry.name):
                    _logger.debug("Pruned hidden directory %s", entry.path)
                    continue
                subdirs.append(entry.path)
                continue

            outcome = _visit_file(entry, is_link, preds)
            if outcome is not None:
                yield outcome

        # Reversed so that siblings are walked in listing order.
        stack.extend(reversed(subdirs))


def _visit_file(
    entry: os.DirEntry[str],
    is_link: bool,
    preds: PredicateSet,
) -> EntryOutcome | None:
    """Classify a non-directory entry; ``None`` means "not a regular file"."""
    candidate = Candidate(path=entry.path, name=entry.name)

    if is_link:
        # A rejected link is dropped unseen: its target may not even be a file.
        if not preds.accepts_name(candidate):
            return None
        try:
            st = _stat_entry(entry, follow_symlinks=True)
        except EntryReadError as exc:
            _logger.info("Skipping unreadable entry %s: %s", exc.path, exc.reason)
            return EntryOutcome.unreadable(exc.path, exc.reason)
        if not statmod.S_ISREG(st.st_mode):
            return None
        return _classify_size(candidate, st.st_size, preds)

    try:
        is_file = entry.is_file(follow_symlinks=False)
    except OSError as exc:
        reason = _reason(exc)
        _logger.info("Skipping unreadable entry %s: %s", entry.path, reason)
        return EntryOutcome.unreadable(entry.path, reason)
    if not is_file:
        return None

    if not preds.accepts_name(candidate):
        return EntryOutcome.filtered(entry.path)
    try:
        st = _stat_entry(entry, follow_symlinks=False)
    except EntryReadError as exc:
        _logger.info("Skipping unreadable entry %s: %s", exc.path, exc.reason)
        return EntryOutcome.unreadable(exc.path, exc.reason)
    return _classify_size(candidate, st.st_size, preds)


def _classify_size(candidate: Candidate, size: int, preds: PredicateSet) -> EntryOutcome:
    if not preds.accepts_size(size):
        return EntryOutcome.filtered(candidate.path)
    return EntryOutcome.matched(FileRecord(path=candidate.path, size_bytes=size))
