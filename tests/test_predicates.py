"""Tests for the filter predicate set."""

from __future__ import annotations

import pytest

from lff.core.config import MEBIBYTE, FilterConfig, mib_to_bytes
from lff.core.errors import GlobCompileError
from lff.core.predicates import (
    Candidate,
    NamePattern,
    PredicateSet,
    extension_matches,
    file_extension,
    is_hidden,
    size_matches,
)


class TestSizePredicate:
    def test_threshold_is_inclusive(self):
        assert size_matches(100, 100)
        assert size_matches(101, 100)
        assert not size_matches(99, 100)

    def test_zero_threshold_matches_everything(self):
        assert size_matches(0, 0)
        assert size_matches(1, 0)

    def test_fractional_mib_rounds_up_to_whole_bytes(self):
        assert mib_to_bytes(0.1) == 104858  # ceil(0.1 * 1048576)
        assert mib_to_bytes(50) == 50 * MEBIBYTE
        assert mib_to_bytes(0) == 0

    def test_negative_mib_rejected(self):
        with pytest.raises(ValueError):
            mib_to_bytes(-1)

    def test_default_threshold_is_fifty_mib(self):
        assert FilterConfig().min_size_bytes == 50 * MEBIBYTE


class TestExtensionPredicate:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("snow.txt", "txt"),
            ("archive.tar.gz", "gz"),
            ("LICENCE", None),
            (".hidden", None),
            (".bashrc.bak", "bak"),
            ("trailing.", None),
        ],
    )
    def test_file_extension(self, name, expected):
        assert file_extension(name) == expected

    def test_match_is_case_sensitive(self):
        assert extension_matches("movie.mkv", "mkv")
        assert not extension_matches("MOVIE.MKV", "mkv")
        assert not extension_matches("movie.mkv", "MKV")

    def test_configured_leading_dot_is_stripped(self):
        assert FilterConfig(extension=".txt").extension == "txt"
        assert FilterConfig(extension="txt").extension == "txt"

    def test_only_final_component_counts(self):
        assert not extension_matches("archive.tar.gz", "tar")
        assert not extension_matches("archive.tar.gz", "tar.gz")


class TestHiddenPredicate:
    def test_dot_prefix_is_hidden(self):
        assert is_hidden(".hidden")
        assert is_hidden(".hidden_dir")
        assert not is_hidden("snow.txt")
        assert not is_hidden("visible")

    def test_dot_and_dotdot_are_not_hidden(self):
        assert not is_hidden(".")
        assert not is_hidden("..")


class TestNamePattern:
    def test_suffix_glob(self):
        pat = NamePattern.compile("*init.c")
        assert pat.matches("sysinit.c")
        assert pat.matches("init.c")
        assert not pat.matches("init.cpp")
        assert not pat.matches("my_init_c")

    def test_substring_glob(self):
        pat = NamePattern.compile("*no*")
        assert pat.matches("snow.txt")
        assert not pat.matches("mud.md")

    def test_question_mark_and_class(self):
        assert NamePattern.compile("file?.log").matches("file1.log")
        assert not NamePattern.compile("file?.log").matches("file10.log")
        assert NamePattern.compile("[ab]*.bin").matches("a1.bin")
        assert not NamePattern.compile("[!ab]*.bin").matches("a1.bin")
        assert NamePattern.compile("[!ab]*.bin").matches("c1.bin")

    def test_brace_alternation(self):
        pat = NamePattern.compile("*.{mkv,mp4}")
        assert pat.matches("film.mkv")
        assert pat.matches("clip.mp4")
        assert not pat.matches("song.mp3")

    def test_many_brace_groups_compile_to_one_alternation_each(self):
        pat = NamePattern.compile("{a,b}" * 30)
        assert pat.matches("ab" * 15)
        assert pat.matches("a" * 30)
        assert not pat.matches("c" * 30)
        assert not pat.matches("ab" * 14)

    def test_brace_alternatives_keep_glob_syntax(self):
        pat = NamePattern.compile("{*.iso,disk[0-9]}.{img,bin}")
        assert pat.matches("ubuntu.iso.img")
        assert pat.matches("disk7.bin")
        assert not pat.matches("diskA.bin")

    def test_empty_alternative(self):
        pat = NamePattern.compile("log{,.old}")
        assert pat.matches("log")
        assert pat.matches("log.old")

    def test_regex_metacharacters_are_literal(self):
        pat = NamePattern.compile("a+b(1).[|]")
        assert pat.matches("a+b(1).|")
        assert not pat.matches("aab1.|")

    def test_escaped_metacharacters_are_literal(self):
        pat = NamePattern.compile(r"report\*.txt")
        assert pat.matches("report*.txt")
        assert not pat.matches("report2024.txt")

    def test_matching_is_case_sensitive(self):
        pat = NamePattern.compile("*.ISO")
        assert pat.matches("disk.ISO")
        assert not pat.matches("disk.iso")

    def test_whole_name_must_match(self):
        pat = NamePattern.compile("data")
        assert pat.matches("data")
        assert not pat.matches("data.csv")
        assert not pat.matches("mydata")

    @pytest.mark.parametrize("bad", ["[", "abc[", "{a,b", "a}", "{a,{b}}", "trailing\\", ""])
    def test_malformed_patterns_raise(self, bad):
        with pytest.raises(GlobCompileError):
            NamePattern.compile(bad)

    def test_error_message_names_the_pattern(self):
        with pytest.raises(GlobCompileError) as exc_info:
            NamePattern.compile("[")
        assert str(exc_info.value) == "Invalid glob from name pattern flag: '['"


class TestPredicateSet:
    def test_from_config_compiles_pattern_eagerly(self):
        with pytest.raises(GlobCompileError):
            PredicateSet.from_config(FilterConfig(name_pattern="["))

    def test_all_predicates_are_anded(self):
        preds = PredicateSet.from_config(
            FilterConfig(min_size_bytes=10, extension="txt", name_pattern="s*", exclude_hidden=True)
        )
        assert preds.accepts(Candidate.from_path("d/snow.txt"), 10)
        assert not preds.accepts(Candidate.from_path("d/snow.txt"), 9)
        assert not preds.accepts(Candidate.from_path("d/snow.md"), 10)
        assert not preds.accepts(Candidate.from_path("d/mud.txt"), 10)
        assert not preds.accepts(Candidate.from_path("d/.snow.txt"), 10)

    def test_inactive_predicates_accept(self):
        preds = PredicateSet.from_config(FilterConfig(min_size_bytes=0))
        assert preds.accepts(Candidate.from_path(".hidden"), 0)
        assert preds.accepts(Candidate.from_path("LICENCE"), 0)

    def test_prunes_only_hidden_dirs_when_excluding(self):
        assert PredicateSet(exclude_hidden=True).prunes(".git")
        assert not PredicateSet(exclude_hidden=True).prunes("src")
        assert not PredicateSet(exclude_hidden=False).prunes(".git")

    def test_glob_sees_base_name_not_full_path(self):
        preds = PredicateSet.from_config(FilterConfig(min_size_bytes=0, name_pattern="*dir*"))
        assert not preds.accepts_name(Candidate.from_path("some_dir/file.txt"))
        assert preds.accepts_name(Candidate.from_path("x/dirt.txt"))
