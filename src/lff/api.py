"""
lff.api
=======

Programmatic entrypoint for using lff as a library.

Goals:
  - No argparse / CLI dependencies
  - One streaming pass over the tree
  - Deterministic ordering whenever a sort method is given

Non-goals:
  - Owning presentation (size formatting, padding) — see ``lff.reports``

Usage::

    from lff.api import find_files
    from lff.core.config import FilterConfig
    from lff.model import SortMethod

    result = find_files("/var/log", FilterConfig.from_mib(10), sort=SortMethod.SIZE, limit=5)
    for f in result.files:
        print(f.size_bytes, f.path)
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from lff.core.collector import ResultCollector
from lff.core.config import FilterConfig
from lff.core.discover import check_root, iter_entries
from lff.core.predicates import PredicateSet
from lff.model import SortMethod
from lff.model.scan_result import ScanResult

_logger = logging.getLogger(__name__)


def find_files(
    root: str | os.PathLike[str],
    config: Optional[FilterConfig] = None,
    *,
    sort: SortMethod | str | None = None,
    limit: int | None = None,
    absolute: bool = False,
) -> ScanResult:
    """Scan *root* and return the filtered, ordered, limited matches.

    Parameters
    ----------
    root:
        Directory to scan.
    config:
        Active filters. Defaults to ``FilterConfig()`` (files of 50 MiB
        and above).
    sort:
        ``SortMethod.SIZE``, ``SortMethod.NAME`` or ``None`` for discovery
        order.
    limit:
        Keep at most this many files. Without a sort this is the first
        *limit* files discovered; with a sort it is the top *limit*.
    absolute:
        Report absolute paths. Forced on when *root* is absolute.

    Raises
    ------
    PathError
        If *root* does not exist, is not a directory or cannot be listed.
    GlobCompileError
        If ``config.name_pattern`` is malformed.
    ValueError
        If *limit* is negative.
    """
    cfg = config or FilterConfig()
    sort_method = SortMethod(sort) if sort is not None else None
    collector = ResultCollector(sort=sort_method, limit=limit)

    # Configuration errors win over path errors and happen before any I/O.
    predicates = PredicateSet.from_config(cfg)

    root_s = os.fspath(root)
    if absolute or os.path.isabs(root_s):
        root_s = os.path.abspath(root_s)
    root_s = check_root(root_s)

    _logger.debug(
        "Scanning %s (min_size_bytes=%d, extension=%r, name_pattern=%r, exclude_hidden=%s)",
        root_s,
        cfg.min_size_bytes,
        cfg.extension,
        cfg.name_pattern,
        cfg.exclude_hidden,
    )

    collector.consume(iter_entries(root_s, cfg, predicates))
    files, truncated = collector.finish()

    if collector.skipped:
        _logger.warning(
            "Skipped %d unreadable entr%s under %s",
            collector.skipped,
            "y" if collector.skipped == 1 else "ies",
            root_s,
        )
    _logger.debug(
        "Scan finished: matched=%d filtered=%d skipped=%d reported=%d",
        collector.matched,
        collector.filtered,
        collector.skipped,
        len(files),
    )

    return ScanResult(
        root=root_s,
        config=cfg.to_dict(),
        sort=sort_method,
        limit=limit,
        files=files,
        matched=collector.matched,
        filtered=collector.filtered,
        skipped=collector.skipped,
        truncated=truncated,
    )
