"""CLI entry-point for lff.

Usage:
    python -m lff <directory>
    python -m lff <directory> --min-size-mib 0.1 --sort-method size --limit 10
    python -m lff <directory> --extension iso --exclude-hidden --pretty
    python -m lff <directory> --name-pattern '*.{mkv,mp4}' --json
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from lff import __version__
from lff.api import find_files
from lff.contracts.load import validate_instance
from lff.core.config import DEFAULT_MIN_SIZE_MIB, FilterConfig
from lff.core.errors import LffError
from lff.model import SortMethod
from lff.reports.text import render_lines
from lff.utils.exit_codes import ExitCode
from lff.utils.json_norm import stable_json_dump

_logger = logging.getLogger("lff")

_LOG_FORMAT = "%(levelname)s: %(message)s"


# ── argument types ──────────────────────────────────────────────────


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {n}")
    return n


def _non_negative_float(value: str) -> float:
    try:
        x = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if not x >= 0 or x == float("inf"):
        raise argparse.ArgumentTypeError(f"must be a finite non-negative number, got {value}")
    return x


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lff",
        description="Recursively finds large files.",
    )
    p.add_argument("directory", help="The directory to begin searching in.")
    p.add_argument(
        "-a",
        "--absolute",
        action="store_true",
        default=False,
        help="Display absolute paths for files. "
        "Automatically true if the supplied directory isn't relative.",
    )
    p.add_argument(
        "--base-ten",
        dest="base_ten",
        action="store_true",
        default=False,
        help="Display file sizes in KB/MB/GB over KiB/MiB/GiB when pretty-printing.",
    )
    p.add_argument(
        "--exclude-hidden",
        dest="exclude_hidden",
        action="store_true",
        default=False,
        help="Exclude hidden files and directories.",
    )
    p.add_argument("-e", "--extension", default=None, help="Filter files by extension.")
    p.add_argument(
        "-l",
        "--limit",
        type=_non_negative_int,
        default=None,
        help="Return a maximum of this many files.",
    )
    p.add_argument(
        "-m",
        "--min-size-mib",
        dest="min_size_mib",
        type=_non_negative_float,
        default=DEFAULT_MIN_SIZE_MIB,
        help="The minimum size in MiB for displayed files, e.g. 10 = 10 MiB, 0.1 = 100 KiB "
        "(default: %(default)s).",
    )
    p.add_argument(
        "-n",
        "--name-pattern",
        dest="name_pattern",
        default=None,
        help="Filter file names by quoted glob patterns, e.g. '*abc*' will yield 1abc2.txt.",
    )
    p.add_argument(
        "-p",
        "--pretty",
        action="store_true",
        default=False,
        help="Pretty-print file sizes.",
    )
    p.add_argument(
        "-s",
        "--sort-method",
        dest="sort_method",
        choices=[m.value for m in SortMethod],
        default=None,
        help="How to sort found files.",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the full ScanResult JSON to stdout instead of text lines.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log skipped entries (-v) and scan details (-vv) to stderr.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        name = os.getenv("LFF_LOG_LEVEL", "WARNING").upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)
    _logger.setLevel(level)


def _print_error(exc: BaseException) -> None:
    print(f"error: {exc}", file=sys.stderr)
    cause = exc.__cause__
    if cause is not None:
        print(f"Caused by: {cause}", file=sys.stderr)
    elif getattr(exc, "detail", ""):
        print(f"Caused by: {exc.detail}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = success, 2 = error)."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = FilterConfig.from_mib(
            args.min_size_mib,
            extension=args.extension,
            name_pattern=args.name_pattern,
            exclude_hidden=args.exclude_hidden,
        )
        result = find_files(
            args.directory,
            config,
            sort=args.sort_method,
            limit=args.limit,
            absolute=args.absolute,
        )
    except LffError as exc:
        _print_error(exc)
        return ExitCode.ERROR
    except KeyboardInterrupt:
        print("interrupted", file=sys.stderr)
        return ExitCode.INTERRUPTED

    if args.json_out:
        result_dict = result.to_dict()
        validate_instance(result_dict, "scan_result.schema.json")
        stable_json_dump(result_dict, sys.stdout)
        return ExitCode.SUCCESS

    for line in render_lines(result, pretty=args.pretty, base_ten=args.base_ten):
        print(line)
    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
