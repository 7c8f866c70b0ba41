"""Source file discovery."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def discover_source_files(
    root: Path,
    source_globs: tuple[str, ...],
    exclude_dirs: tuple[str, ...],
    max_file_mb: int,
) -> list[Path]:
    """Discover source files by configured glob patterns."""
    discovered: set[Path] = set()
    size_limit_bytes = max_file_mb * 1024 * 1024
    resolved_root = root.resolve()
    excluded = frozenset(exclude_dirs)

    for pattern in source_globs:
        for path in resolved_root.glob(pattern):
            if not path.is_file():
                continue
            if _is_excluded(path, resolved_root, excluded):
                continue
            try:
                if path.stat().st_size > size_limit_bytes:
                    logger.warning("Skipping %s: larger than %d MB", stable_path_key(path, resolved_root), max_file_mb)
                    continue
            except OSError:
                continue
            discovered.add(path)

    return sorted(discovered, key=lambda path: stable_path_key(path, resolved_root))


def stable_path_key(file_path: Path, root: Path) -> str:
    """Return a deterministic path key relative to *root* when possible."""
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()


def _is_excluded(path: Path, root: Path, excluded: frozenset[str]) -> bool:
    """Whether any directory between *root* and *path* is an excluded name."""
    if not excluded:
        return False
    try:
        parts = path.relative_to(root).parts[:-1]
    except ValueError:
        return False
    return any(part in excluded for part in parts)
