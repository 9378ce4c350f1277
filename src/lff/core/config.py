"""Filter configuration dataclass."""

from __future__ import annotations

import math
from dataclasses import dataclass

MEBIBYTE = 1024 * 1024

DEFAULT_MIN_SIZE_MIB = 50.0

# Leading marker for hidden entries (POSIX dotfile convention on every platform).
HIDDEN_MARKER = "."


def mib_to_bytes(mib: float) -> int:
    """Smallest whole byte count that is at least *mib* MiB."""
    if mib < 0 or math.isnan(mib) or math.isinf(mib):
        raise ValueError(f"minimum size must be a finite non-negative number, got {mib!r}")
    return math.ceil(mib * MEBIBYTE)


@dataclass(frozen=True)
class FilterConfig:
    """Immutable set of active predicates for one run.

    Built once, before traversal starts, and passed explicitly to the
    traversal engine.
    """

    min_size_bytes: int = mib_to_bytes(DEFAULT_MIN_SIZE_MIB)
    extension: str | None = None     # compared case-sensitively, without the dot
    name_pattern: str | None = None  # glob against the base name
    exclude_hidden: bool = False

    def __post_init__(self) -> None:
        if self.min_size_bytes < 0:
            raise ValueError(f"min_size_bytes must be >= 0, got {self.min_size_bytes}")
        if self.extension is not None:
            object.__setattr__(self, "extension", normalize_extension(self.extension))

    @classmethod
    def from_mib(
        cls,
        min_size_mib: float = DEFAULT_MIN_SIZE_MIB,
        *,
        extension: str | None = None,
        name_pattern: str | None = None,
        exclude_hidden: bool = False,
    ) -> FilterConfig:
        return cls(
            min_size_bytes=mib_to_bytes(min_size_mib),
            extension=extension,
            name_pattern=name_pattern,
            exclude_hidden=exclude_hidden,
        )

    def to_dict(self) -> dict:
        return {
            "min_size_bytes": self.min_size_bytes,
            "extension": self.extension,
            "name_pattern": self.name_pattern,
            "exclude_hidden": self.exclude_hidden,
        }


def normalize_extension(ext: str) -> str:
    """Strip a single leading dot, so ``txt`` and ``.txt`` are equivalent."""
    return ext[1:] if ext.startswith(".") else ext
