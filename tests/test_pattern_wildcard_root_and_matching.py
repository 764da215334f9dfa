"""Wildcard compilation: traversal roots and anchored matching."""
from __future__ import annotations

import os
from pathlib import Path

import pytest

from txtfile_reader.pattern import compile_pattern, first_wildcard_index


def test_literal_spec_has_no_matcher_and_matches_everything() -> None:
    pattern = compile_pattern("/data/in/file.csv")
    assert pattern.is_wildcard is False
    assert pattern.root == "/data/in/file.csv"
    assert pattern.regex is None
    assert pattern.matches("/anything/at/all")


@pytest.mark.parametrize(
    ("spec", "root"),
    [
        ("/data/in/*.csv", "/data/in/"),
        ("/data/in/part-?.csv", "/data/in/"),
        ("/data/*/x.csv", "/data/"),
        ("/*.csv", "/"),
        ("rel/dir/*.csv", "rel/dir/"),
    ],
)
def test_wildcard_root_is_literal_prefix_up_to_last_separator(spec: str, root: str) -> None:
    pattern = compile_pattern(spec)
    assert pattern.is_wildcard is True
    assert pattern.root == root


def test_wildcard_without_separator_roots_at_current_directory() -> None:
    pattern = compile_pattern("*.csv")
    assert pattern.root == os.curdir + os.sep
    assert pattern.matches(os.path.join(os.getcwd(), "a.csv"))


def test_first_wildcard_index() -> None:
    assert first_wildcard_index("/a/b?c*") == 4
    assert first_wildcard_index("/a/b/c") == -1


def test_star_stays_within_one_segment() -> None:
    pattern = compile_pattern("/a/b/*.txt")
    assert pattern.matches("/a/b/x.txt")
    assert pattern.matches("/a/b/y.txt")
    assert pattern.matches("/a/b/.txt")
    assert not pattern.matches("/a/b/c/z.txt")
    assert not pattern.matches("/a/b/x.txt.bak")


def test_question_mark_matches_exactly_one_character() -> None:
    pattern = compile_pattern("/a/?.log")
    assert pattern.matches("/a/1.log")
    assert not pattern.matches("/a/12.log")
    assert not pattern.matches("/a/.log")


def test_wildcard_in_middle_segment() -> None:
    pattern = compile_pattern("/data/*/x.csv")
    assert pattern.matches("/data/2024/x.csv")
    assert not pattern.matches("/data/2024/01/x.csv")


def test_regex_metacharacters_in_spec_are_literal() -> None:
    pattern = compile_pattern("/data/v1.0+(old)/*.csv")
    assert pattern.matches("/data/v1.0+(old)/a.csv")
    assert not pattern.matches("/data/v1x0+(old)/a.csv")


def test_relative_spec_matches_absolute_candidates(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    pattern = compile_pattern("a/b/*.txt")
    assert pattern.matches(str(tmp_path / "a" / "b" / "x.txt"))
    assert not pattern.matches("a/b/x.txt")


def test_compile_is_pure() -> None:
    assert compile_pattern("/a/*.txt") == compile_pattern("/a/*.txt")
