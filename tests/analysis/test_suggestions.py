"""Tests for remediation text."""

from __future__ import annotations

import os

from cousinlint.analysis import (
    common_ancestor_display,
    format_existing_shared_patterns,
    generate_violation_suggestions,
)
from cousinlint.constants.analysis import NO_PATTERNS_CONFIGURED, NO_SUGGESTIONS_NOTICE, PROJECT_ROOT_DISPLAY
from cousinlint.types import FilePattern, FolderPattern


def test_common_ancestor_display_joins_segments() -> None:
    assert common_ancestor_display(("src", "features")) == os.path.join("src", "features")


def test_common_ancestor_display_for_root() -> None:
    assert common_ancestor_display(()) == PROJECT_ROOT_DISPLAY


def test_all_three_suggestions_are_emitted() -> None:
    text = generate_violation_suggestions(("src",), ("moduleB", "component"))

    assert "{ pattern: 'src', type: 'folder' }" in text
    assert "{ pattern: 'moduleB', type: 'folder' }" in text
    assert "{ pattern: 'moduleB/component', type: 'file' }" in text
    assert "common directory like 'src'" in text
    assert len(text.splitlines()) == 6


def test_multi_segment_target_prefix_uses_forward_slashes() -> None:
    text = generate_violation_suggestions(("src", "features"), ("featureB", "components", "Button"))

    assert "{ pattern: 'featureB/components', type: 'folder' }" in text
    assert "{ pattern: 'featureB/components/Button', type: 'file' }" in text
    assert "{ pattern: 'features', type: 'folder' }" in text


def test_root_ancestor_skips_ancestor_suggestion() -> None:
    text = generate_violation_suggestions((), ("moduleB", "component"))

    assert "common ancestor directory" not in text
    assert f"common directory like {PROJECT_ROOT_DISPLAY}" in text
    assert f"'{PROJECT_ROOT_DISPLAY}'" not in text
    assert len(text.splitlines()) == 4


def test_fallback_notice_when_nothing_applies() -> None:
    assert generate_violation_suggestions((), ()) == NO_SUGGESTIONS_NOTICE


def test_existing_patterns_none_configured() -> None:
    assert format_existing_shared_patterns(()) == NO_PATTERNS_CONFIGURED


def test_existing_patterns_grouped_by_kind() -> None:
    summary = format_existing_shared_patterns(
        (FolderPattern("shared"), FilePattern("constants"), FolderPattern("modules"))
    )

    lines = summary.splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("     - Folder patterns")
    assert lines[1] == "       'shared', 'modules'"
    assert lines[2].startswith("     - File patterns")
    assert lines[3] == "       'constants'"


def test_existing_patterns_file_only() -> None:
    summary = format_existing_shared_patterns((FilePattern("a/b.js"),))

    assert "Folder patterns" not in summary
    assert summary.endswith("'a/b.js'")
