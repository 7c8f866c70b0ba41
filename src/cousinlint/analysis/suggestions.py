"""Remediation text for cousin import violations."""

from __future__ import annotations

import os
from collections.abc import Sequence

from cousinlint.constants.analysis import (
    FILE_PATTERNS_HEADING,
    FOLDER_PATTERNS_HEADING,
    NO_PATTERNS_CONFIGURED,
    NO_SUGGESTIONS_NOTICE,
    PROJECT_ROOT_DISPLAY,
)
from cousinlint.constants.config import PATTERN_SEPARATOR
from cousinlint.types import FilePattern, FolderPattern, SharedPattern


def common_ancestor_display(ancestor_segments: Sequence[str]) -> str:
    """Render the common ancestor path, or ``(project root)`` when it is empty."""
    return os.sep.join(ancestor_segments) or PROJECT_ROOT_DISPLAY


def generate_violation_suggestions(
    ancestor_segments: Sequence[str],
    imported_segments_after_ancestor: Sequence[str],
) -> str:
    """Suggest ``shared_patterns`` entries that would allow this import.

    Up to three independent suggestions are produced: sharing the common
    ancestor by name, sharing the target's directory prefix, and sharing the
    target file itself. Patterns are written with ``/`` regardless of platform.
    """
    ancestor = common_ancestor_display(ancestor_segments)
    quoted_ancestor = ancestor if ancestor == PROJECT_ROOT_DISPLAY else f"'{ancestor}'"
    relative_note = f"(This pattern is matched relative to a common directory like {quoted_ancestor})"

    suggestions: list[str] = []
    if ancestor_segments:
        name = ancestor_segments[-1]
        suggestions.append(
            f"     - To make the common ancestor directory {quoted_ancestor} a shared context for its direct "
            "children, add to 'shared_patterns':\n"
            f"       {{ pattern: '{name}', type: 'folder' }} (This pattern refers to the name of the directory "
            f"'{name}' when it acts as a common ancestor)"
        )

    if len(imported_segments_after_ancestor) > 1:
        parent_pattern = PATTERN_SEPARATOR.join(imported_segments_after_ancestor[:-1])
        suggestions.append(
            f"     - To make the target's path prefix '{parent_pattern}' (found under common ancestors like "
            f"{quoted_ancestor}) shared, add to 'shared_patterns':\n"
            f"       {{ pattern: '{parent_pattern}', type: 'folder' }} {relative_note}"
        )

    if imported_segments_after_ancestor:
        file_pattern = PATTERN_SEPARATOR.join(imported_segments_after_ancestor)
        suggestions.append(
            f"     - To share only the specific file path '{file_pattern}' (found under common ancestors like "
            f"{quoted_ancestor}), add to 'shared_patterns':\n"
            f"       {{ pattern: '{file_pattern}', type: 'file' }} {relative_note}"
        )

    if not suggestions:
        return NO_SUGGESTIONS_NOTICE
    return "\n".join(suggestions)


def format_existing_shared_patterns(patterns: Sequence[SharedPattern]) -> str:
    """Summarize configured shared patterns grouped by kind."""
    if not patterns:
        return NO_PATTERNS_CONFIGURED

    folders = [f"'{p.pattern}'" for p in patterns if isinstance(p, FolderPattern)]
    files = [f"'{p.pattern}'" for p in patterns if isinstance(p, FilePattern)]

    parts: list[str] = []
    if folders:
        parts.append(f"{FOLDER_PATTERNS_HEADING}\n       {', '.join(folders)}")
    if files:
        parts.append(f"{FILE_PATTERNS_HEADING}\n       {', '.join(files)}")
    return "\n".join(parts)
