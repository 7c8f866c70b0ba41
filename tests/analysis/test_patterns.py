"""Tests for shared-pattern matching."""

from __future__ import annotations

import pytest

from cousinlint.analysis import is_shared_ancestor, matches_shared_pattern
from cousinlint.types import FilePattern, FolderPattern


def test_pattern_segments_are_precomputed() -> None:
    assert FolderPattern("shared/ui").segments == ("shared", "ui")
    assert FilePattern("constants").segments == ("constants",)


@pytest.mark.parametrize(
    ("pattern", "segments", "expected"),
    [
        (FolderPattern("moduleB"), ("moduleB", "component"), True),
        (FolderPattern("moduleC"), ("moduleB", "component"), False),
        (FolderPattern("moduleB/internal"), ("moduleB", "internal", "helpers"), True),
        (FolderPattern("moduleB/internal"), ("moduleB", "helpers"), False),
        (FolderPattern("moduleB/internal/deep"), ("moduleB", "internal"), False),
        (FolderPattern("component"), ("moduleB", "component"), False),
    ],
    ids=["prefix", "other_folder", "multi_segment", "multi_segment_miss", "longer_than_path", "not_a_prefix"],
)
def test_folder_pattern_matches_as_prefix(pattern: FolderPattern, segments: tuple[str, ...], expected: bool) -> None:
    assert matches_shared_pattern(segments, [pattern]) is expected


@pytest.mark.parametrize(
    ("pattern", "segments", "expected"),
    [
        (FilePattern("constants"), ("moduleB", "constants"), True),
        (FilePattern("moduleB/constants"), ("moduleB", "constants"), True),
        (FilePattern("constants"), ("constants", "index"), False),
        (FilePattern("a/moduleB/constants"), ("moduleB", "constants"), False),
    ],
    ids=["file_name", "multi_segment", "not_a_suffix", "longer_than_path"],
)
def test_file_pattern_matches_as_suffix(pattern: FilePattern, segments: tuple[str, ...], expected: bool) -> None:
    assert matches_shared_pattern(segments, [pattern]) is expected


def test_empty_segments_never_match() -> None:
    assert matches_shared_pattern((), [FolderPattern("shared"), FilePattern("shared")]) is False


def test_any_pattern_match_is_enough() -> None:
    patterns = [FolderPattern("nope"), FilePattern("component")]

    assert matches_shared_pattern(("moduleB", "component"), patterns) is True


def test_matching_is_idempotent_and_order_independent() -> None:
    patterns = [FolderPattern("shared"), FilePattern("constants"), FolderPattern("moduleB/api")]
    cases = [("moduleB", "api", "client"), ("moduleB", "constants"), ("moduleC", "x"), ("shared", "utils")]

    first = [matches_shared_pattern(case, patterns) for case in cases]
    second = [matches_shared_pattern(case, patterns) for case in cases]
    reversed_order = [matches_shared_pattern(case, list(reversed(patterns))) for case in cases]

    assert first == second == reversed_order == [True, True, False, True]


def test_single_segment_folder_pattern_shares_ancestor() -> None:
    assert is_shared_ancestor(("src", "modules"), [FolderPattern("modules")]) is True


@pytest.mark.parametrize(
    "patterns",
    [
        [FolderPattern("src/modules")],
        [FilePattern("modules")],
        [FolderPattern("src")],
    ],
    ids=["multi_segment_folder", "file_pattern", "other_ancestor"],
)
def test_ancestor_not_shared(patterns: list) -> None:
    assert is_shared_ancestor(("src", "modules"), patterns) is False


def test_empty_ancestor_is_never_shared() -> None:
    assert is_shared_ancestor((), [FolderPattern("src")]) is False
