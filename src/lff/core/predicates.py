"""Filter predicates — composable boolean tests over a candidate file.

Every predicate works on a :class:`Candidate`. Name-based predicates never
touch the filesystem; the size predicate is evaluated last so that the
metadata read only happens for files that already passed everything else.

Matching policy:
  - Extension and glob matching are case-sensitive on every platform.
  - No Unicode normalization is applied to names or patterns.
  - Hidden means the base name starts with ``.``.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from lff.core.config import HIDDEN_MARKER, FilterConfig
from lff.core.errors import GlobCompileError


@dataclass(frozen=True, slots=True)
class Candidate:
    """A file seen by the traversal engine, before its size is known."""

    path: str
    name: str

    @classmethod
    def from_path(cls, path: str) -> Candidate:
        return cls(path=path, name=os.path.basename(path))


# ── individual predicates ───────────────────────────────────────────


def is_hidden(name: str) -> bool:
    """True for dotfiles / dot-directories. ``.`` and ``..`` are not hidden."""
    return name.startswith(HIDDEN_MARKER) and name not in (".", "..")


def file_extension(name: str) -> str | None:
    """Final extension component of *name*, without the dot.

    ``archive.tar.gz`` → ``gz``; ``.bashrc``, ``Makefile`` and ``notes.``
    → ``None``. Same rule as ``pathlib.PurePath.suffix``.
    """
    i = name.rfind(".")
    if 0 < i < len(name) - 1:
        return name[i + 1:]
    return None


def extension_matches(name: str, extension: str) -> bool:
    return file_extension(name) == extension


def size_matches(size_bytes: int, min_size_bytes: int) -> bool:
    return size_bytes >= min_size_bytes


# ── name pattern ────────────────────────────────────────────────────


class NamePattern:
    """A glob compiled once and matched against base names.

    Supported syntax: ``*``, ``?``, ``[...]``, ``[!...]``, ``{a,b}``
    alternation (not nested) and ``\\x`` escapes.
    """

    __slots__ = ("pattern", "_regex")

    def __init__(self, pattern: str, regex: re.Pattern[str]) -> None:
        self.pattern = pattern
        self._regex = regex

    def __repr__(self) -> str:
        return f"NamePattern({self.pattern!r})"

    @classmethod
    def compile(cls, pattern: str) -> NamePattern:
        """Compile *pattern*, raising ``GlobCompileError`` when it is malformed."""
        if not pattern:
            raise GlobCompileError(pattern, "empty pattern")
        try:
            regex = re.compile(f"(?s:{_translate(pattern)})\\Z")
        except re.error as exc:
            raise GlobCompileError(pattern, str(exc)) from exc
        return cls(pattern, regex)

    def matches(self, name: str) -> bool:
        return self._regex.match(name) is not None


def _translate(pattern: str) -> str:
    """Translate *pattern* into the body of one regular expression.

    Each ``{a,b}`` group becomes a ``(?:a|b)`` alternation in place, so the
    regex grows linearly with the pattern however many groups it holds.
    """
    out: list[str] = []
    alts: list[str] | None = None  # finished alternatives of the open group
    mark = 0                       # start of the open alternative in ``out``

    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "\\":
            if i + 1 >= n:
                raise GlobCompileError(pattern, "dangling escape")
            out.append(re.escape(pattern[i + 1]))
            i += 2
            continue
        if ch == "[":
            end = _class_end(pattern, i)
            if end < 0:
                raise GlobCompileError(pattern, "unclosed character class")
            out.append(_translate_class(pattern[i + 1:end]))
            i = end + 1
            continue
        if ch == "*":
            # A run of stars is one star.
            floor = mark if alts is not None else 0
            if len(out) == floor or out[-1] != ".*":
                out.append(".*")
        elif ch == "?":
            out.append(".")
        elif ch == "{":
            if alts is not None:
                raise GlobCompileError(pattern, "nested alternation")
            alts = []
            mark = len(out)
        elif ch == "}":
            if alts is None:
                raise GlobCompileError(pattern, "unopened alternation")
            alts.append("".join(out[mark:]))
            del out[mark:]
            out.append("(?:" + "|".join(alts) + ")")
            alts = None
        elif ch == "," and alts is not None:
            alts.append("".join(out[mark:]))
            del out[mark:]
        else:
            out.append(re.escape(ch))
        i += 1

    if alts is not None:
        raise GlobCompileError(pattern, "unclosed alternation")
    return "".join(out)


def _translate_class(body: str) -> str:
    """Regex set for the glob class ``[body]``; backslashes inside are literal."""
    negate = body.startswith("!")
    if negate:
        body = body[1:]
    body = body.replace("\\", "\\\\")
    body = re.sub(r"([\[&~|^])", r"\\\1", body)
    return f"[^{body}]" if negate else f"[{body}]"


def _class_end(pattern: str, start: int) -> int:
    """Index of the ``]`` closing the class opened at *start*, or -1."""
    j = start + 1
    if j < len(pattern) and pattern[j] == "!":
        j += 1
    if j < len(pattern) and pattern[j] == "]":
        j += 1
    return pattern.find("]", j)


# ── composition ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class PredicateSet:
    """All active predicates for one run, combined with logical AND.

    Built from a :class:`FilterConfig` before traversal starts, so a bad
    glob fails the run before any directory is read.
    """

    min_size_bytes: int = 0
    exclude_hidden: bool = False
    extension: str | None = None
    name_pattern: NamePattern | None = None

    @classmethod
    def from_config(cls, cfg: FilterConfig) -> PredicateSet:
        pattern = NamePattern.compile(cfg.name_pattern) if cfg.name_pattern is not None else None
        return cls(
            min_size_bytes=cfg.min_size_bytes,
            exclude_hidden=cfg.exclude_hidden,
            extension=cfg.extension,
            name_pattern=pattern,
        )

    def prunes(self, dir_name: str) -> bool:
        """Whether the directory called *dir_name* must not be descended into."""
        return self.exclude_hidden and is_hidden(dir_name)

    def accepts_name(self, candidate: Candidate) -> bool:
        """Evaluate the metadata-free predicates, cheapest first."""
        if self.exclude_hidden and is_hidden(candidate.name):
            return False
        if self.extension is not None and not extension_matches(candidate.name, self.extension):
            return False
        if self.name_pattern is not None and not self.name_pattern.matches(candidate.name):
            return False
        return True

    def accepts_size(self, size_bytes: int) -> bool:
        return size_matches(size_bytes, self.min_size_bytes)

    def accepts(self, candidate: Candidate, size_bytes: int) -> bool:
        return self.accepts_name(candidate) and self.accepts_size(size_bytes)
