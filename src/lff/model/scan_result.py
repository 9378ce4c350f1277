"""ScanResult — the ordered, schema-aligned output of one run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lff import __version__
from lff.model import SortMethod
from lff.model.file_record import FileRecord


@dataclass(slots=True)
class ScanResult:
    """Assembled result matching ``scan_result.schema.json``.

    Constructed by ``lff.api.find_files`` once the collector has applied
    sorting and the limit.
    """

    # ── run metadata ────────────────────────────────────────────────
    root: str
    config: dict = field(default_factory=dict)
    sort: SortMethod | None = None
    limit: int | None = None
    tool_version: str = __version__

    # ── results ─────────────────────────────────────────────────────
    files: list[FileRecord] = field(default_factory=list)
    matched: int = 0
    filtered: int = 0
    skipped: int = 0
    truncated: bool = False

    @property
    def total_bytes(self) -> int:
        return sum(f.size_bytes for f in self.files)

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Produce the full ScanResult JSON matching the schema."""
        return {
            "schema_version": "scan_result_v1",
            "run": {
                "root": self.root,
                "tool_version": self.tool_version,
                "config": self.config,
                "sort": self.sort.value if self.sort is not None else None,
                "limit": self.limit,
            },
            "summary": {
                "counts": {
                    "reported": len(self.files),
                    "matched": self.matched,
                    "filtered": self.filtered,
                    "skipped": self.skipped,
                },
                "total_bytes": self.total_bytes,
                "truncated": self.truncated,
            },
            "files": [f.to_dict() for f in self.files],
        }
