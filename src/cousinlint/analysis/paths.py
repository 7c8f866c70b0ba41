"""Path segmentation and zone membership.

Paths are always compared component by component, never through raw string
prefixes, so ``src/moduleAX`` is not treated as living under ``src/moduleA``.
"""

from __future__ import annotations

import os
from collections.abc import Iterable

from cousinlint.types import PathSegments, ZoneConfig


def path_segments(path: str, project_root: str) -> PathSegments:
    """Return the components of ``path`` relative to ``project_root``."""
    relative = os.path.relpath(path, project_root)
    if relative == os.curdir:
        return ()
    return tuple(relative.split(os.sep))


def is_path_in_zone(path: str, zones: Iterable[ZoneConfig], project_root: str) -> bool:
    """Whether ``path`` lies strictly inside at least one configured zone."""
    for zone in zones:
        relative = _relative_within(path, os.path.join(project_root, zone.path))
        if relative is not None and relative != os.curdir:
            return True
    return False


def is_under_root(path: str, project_root: str) -> bool:
    """Whether ``path`` is absolute and does not escape ``project_root``."""
    return os.path.isabs(path) and _relative_within(path, project_root) is not None


def _relative_within(path: str, base: str) -> str | None:
    """Return ``path`` relative to ``base``, or None when it lies outside ``base``."""
    try:
        relative = os.path.relpath(path, base)
    except ValueError:
        # Different drives on Windows.
        return None
    if os.path.isabs(relative):
        return None
    if relative == os.pardir or relative.startswith(os.pardir + os.sep):
        return None
    return relative
