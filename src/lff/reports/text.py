"""Plain-text report: one aligned ``<size>  <path>`` line per file."""

from __future__ import annotations

from lff.model.scan_result import ScanResult
from lff.utils.size_format import format_size

NO_FILES_FOUND = "No files found for the specified arguments!"


def display_path(path: str) -> str:
    """Make *path* printable; undecodable bytes become backslash escapes."""
    return path.encode("utf-8", "backslashreplace").decode("utf-8")


def render_lines(
    result: ScanResult,
    *,
    pretty: bool = False,
    base_ten: bool = False,
) -> list[str]:
    """Render *result* in its final order.

    The size column is left-aligned and padded to the widest size so that
    paths line up.
    """
    if not result.files:
        return [NO_FILES_FOUND]

    sizes = [format_size(f.size_bytes, pretty=pretty, base_ten=base_ten) for f in result.files]
    width = max(len(s) for s in sizes)
    return [
        f"{size:<{width}}  {display_path(f.path)}"
        for size, f in zip(sizes, result.files)
    ]
