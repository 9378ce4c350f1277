"""Shared utilities for lff."""

from lff.utils.exit_codes import ExitCode
from lff.utils.json_norm import stable_json_dump, stable_json_dumps
from lff.utils.size_format import format_size

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
    "format_size",
]
