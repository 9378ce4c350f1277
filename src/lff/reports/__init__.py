"""Presentation adapters for scan results."""

from lff.reports.text import NO_FILES_FOUND, render_lines

__all__ = ["NO_FILES_FOUND", "render_lines"]
