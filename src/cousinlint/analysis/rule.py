"""Per-run and per-file entry points for the cousin import check."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from cousinlint.analysis.aliases import resolve_aliased_path
from cousinlint.analysis.paths import is_path_in_zone, is_under_root
from cousinlint.analysis.relationship import analyze_import_relationship
from cousinlint.analysis.suggestions import (
    common_ancestor_display,
    format_existing_shared_patterns,
    generate_violation_suggestions,
)
from cousinlint.config.model import CousinLintConfig
from cousinlint.model import ImportContext, RelationshipResult, Violation
from cousinlint.types import AliasMap, SharedPattern, ZoneConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CousinImportRule:
    """Configuration resolved once per run and shared read-only by every file check."""

    project_root: str
    zones: tuple[ZoneConfig, ...]
    shared_patterns: tuple[SharedPattern, ...]
    aliases: AliasMap

    @classmethod
    def from_config(cls, config: CousinLintConfig, project_root: str | os.PathLike[str]) -> CousinImportRule:
        """Build the rule; ``config.project_root_override`` wins over ``project_root``."""
        root = config.project_root_override if config.project_root_override is not None else project_root
        return cls(
            project_root=os.path.normpath(os.fspath(root)),
            zones=config.zones,
            shared_patterns=config.shared_patterns,
            aliases=dict(config.aliases),
        )

    def for_file(self, importer_path: str | os.PathLike[str]) -> FileCheck | None:
        """Return the check for one file, or None when the file is outside every zone."""
        if not self.zones:
            return None
        importer = os.path.normpath(os.fspath(importer_path))
        if not is_path_in_zone(importer, self.zones, self.project_root):
            return None
        return FileCheck(rule=self, importer_path=importer)


@dataclass(frozen=True)
class FileCheck:
    """Cousin import check bound to a single importer file inside a zone."""

    rule: CousinImportRule
    importer_path: str

    def check(self, specifier: str, *, is_type_only: bool = False) -> Violation | None:
        """Classify one import statement; return a Violation or None when allowed."""
        if is_type_only:
            return None

        rule = self.rule
        resolved = resolve_aliased_path(specifier, self.importer_path, rule.aliases, rule.project_root)
        if not is_under_root(resolved, rule.project_root):
            logger.debug("Skipping %r from %s: not a path inside the project", specifier, self.importer_path)
            return None
        if os.path.normpath(resolved) == self.importer_path:
            logger.debug("Skipping self import %r in %s", specifier, self.importer_path)
            return None

        relationship = analyze_import_relationship(
            self.importer_path,
            resolved,
            rule.project_root,
            rule.shared_patterns,
        )
        if not relationship.is_violation:
            return None
        return self._build_violation(resolved, relationship)

    def _build_violation(self, imported_path: str, relationship: RelationshipResult) -> Violation:
        root = self.rule.project_root
        return Violation(
            importer_relative_path=os.path.relpath(self.importer_path, root),
            imported_relative_path=os.path.relpath(imported_path, root),
            common_ancestor_display=common_ancestor_display(relationship.common_ancestor_segments),
            suggestions=generate_violation_suggestions(
                relationship.common_ancestor_segments,
                relationship.imported_segments_after_ancestor,
            ),
            existing_patterns_summary=format_existing_shared_patterns(self.rule.shared_patterns),
            imported_path=imported_path,
            relationship=relationship,
        )


def check_import(rule: CousinImportRule, context: ImportContext) -> Violation | None:
    """Classify a single statement without holding on to a per-file check."""
    file_check = rule.for_file(context.importer_path)
    if file_check is None:
        return None
    return file_check.check(context.specifier, is_type_only=context.is_type_only)
