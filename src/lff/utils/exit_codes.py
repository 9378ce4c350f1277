"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — scan completed (including when nothing matched)
  2   Error — usage error, invalid root directory, malformed name pattern
130   Interrupted — the scan was cancelled with Ctrl-C
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 2
    INTERRUPTED = 130
