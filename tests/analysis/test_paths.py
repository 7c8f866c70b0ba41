"""Tests for path segmentation and zone membership."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from cousinlint.analysis import is_path_in_zone, is_under_root, path_segments
from cousinlint.types import ZoneConfig


def test_path_segments_are_relative_to_root(abs_path: Callable[[str], str], project_root: str) -> None:
    assert path_segments(abs_path("src/moduleA/file.js"), project_root) == ("src", "moduleA", "file.js")


def test_path_segments_of_root_is_empty(project_root: str) -> None:
    assert path_segments(project_root, project_root) == ()


@pytest.mark.parametrize(
    ("relative", "zones", "expected"),
    [
        ("src/moduleA/file.js", ("src",), True),
        ("src/file.js", ("src",), True),
        ("outside/file.js", ("src",), False),
        ("srcX/moduleA/file.js", ("src",), False),
        ("src", ("src",), False),
        ("app/moduleA/file.js", ("src", "app"), True),
        ("src/features/a/file.js", ("src/features",), True),
        ("src/moduleA/file.js", (), False),
    ],
    ids=[
        "nested",
        "direct_child",
        "outside",
        "partial_segment_name",
        "zone_directory_itself",
        "second_zone",
        "multi_segment_zone",
        "no_zones",
    ],
)
def test_is_path_in_zone(
    abs_path: Callable[[str], str],
    project_root: str,
    relative: str,
    zones: tuple[str, ...],
    expected: bool,
) -> None:
    zone_configs = [ZoneConfig(path=zone) for zone in zones]

    assert is_path_in_zone(abs_path(relative), zone_configs, project_root) is expected


def test_is_under_root_rejects_bare_specifiers(project_root: str) -> None:
    assert is_under_root("lodash", project_root) is False


def test_is_under_root_rejects_paths_escaping_root(abs_path: Callable[[str], str], project_root: str) -> None:
    assert is_under_root(abs_path("../elsewhere/file.js"), project_root) is False


def test_is_under_root_rejects_sibling_with_shared_prefix(project_root: str) -> None:
    assert is_under_root(project_root + "2/src/file.js", project_root) is False


def test_is_under_root_accepts_nested_path(abs_path: Callable[[str], str], project_root: str) -> None:
    assert is_under_root(abs_path("src/moduleB/component"), project_root) is True
