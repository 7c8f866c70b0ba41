"""Shared-pattern matching against path segments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cousinlint.types import FolderPattern, SharedPattern


def matches_shared_pattern(segments: Sequence[str], patterns: Iterable[SharedPattern]) -> bool:
    """Return True when any pattern matches ``segments``.

    Folder patterns match as a prefix and file patterns as a suffix. An empty
    segment sequence never matches.
    """
    if not segments:
        return False
    return any(pattern.matches(segments) for pattern in patterns)


def is_shared_ancestor(ancestor_segments: Sequence[str], patterns: Iterable[SharedPattern]) -> bool:
    """Whether the ancestor's own directory name is a single-segment folder pattern."""
    if not ancestor_segments:
        return False
    name = ancestor_segments[-1]
    return any(
        isinstance(pattern, FolderPattern) and pattern.is_single_segment and pattern.pattern == name
        for pattern in patterns
    )
