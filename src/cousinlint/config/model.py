"""Config data model for cousin import checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from cousinlint.constants.config import DEFAULT_EXCLUDE_DIRS, DEFAULT_MAX_FILE_MB, DEFAULT_SOURCE_GLOBS
from cousinlint.types.config import AliasMap, SharedPattern, ZoneConfig


@dataclass(frozen=True)
class CousinLintConfig:
    """Resolved checker config.

    Every field has an empty (or default) value so that an absent key in
    ``cousinlint.yaml`` behaves exactly like an empty one. ``aliases`` keeps
    insertion order, which decides which alias wins when several prefixes
    match the same specifier.
    """

    zones: tuple[ZoneConfig, ...] = ()
    shared_patterns: tuple[SharedPattern, ...] = ()
    aliases: AliasMap = field(default_factory=dict)
    source_globs: tuple[str, ...] = DEFAULT_SOURCE_GLOBS
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
    max_file_mb: int = DEFAULT_MAX_FILE_MB
    project_root_override: Path | None = None

    @property
    def is_inert(self) -> bool:
        """Whether no file can ever be checked because no zone is configured."""
        return not self.zones
