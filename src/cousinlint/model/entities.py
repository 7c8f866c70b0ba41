"""Dataclasses passed between the analysis core, the scanner and the reporters."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from cousinlint.constants.analysis import RULE_TITLE, VIOLATION_MESSAGE_TEMPLATE
from cousinlint.types import JsonObject, PathSegments


@dataclass(frozen=True)
class ImportContext:
    """One import statement under analysis."""

    importer_path: str
    specifier: str
    is_type_only: bool = False


@dataclass(frozen=True)
class RelationshipResult:
    """Classification of an importer/imported pair relative to their common ancestor."""

    is_cousin: bool
    is_import_target_shared: bool
    is_common_ancestor_shared: bool
    common_ancestor_segments: PathSegments
    imported_segments_after_ancestor: PathSegments

    @property
    def is_violation(self) -> bool:
        """Cousin import with neither the target nor the ancestor declared shared."""
        return self.is_cousin and not self.is_import_target_shared and not self.is_common_ancestor_shared


@dataclass(frozen=True)
class Violation:
    """Payload describing a reportable cousin import."""

    importer_relative_path: str
    imported_relative_path: str
    common_ancestor_display: str
    suggestions: str
    existing_patterns_summary: str
    imported_path: str = ""
    relationship: RelationshipResult | None = field(default=None, compare=False)

    def message(self) -> str:
        """Render the full diagnostic text for this violation."""
        return VIOLATION_MESSAGE_TEMPLATE.format(
            imported_relative=self.imported_relative_path,
            importer_relative=self.importer_relative_path,
            common_ancestor=self.common_ancestor_display,
            existing_patterns=self.existing_patterns_summary,
            suggestions=self.suggestions,
        )


@dataclass(frozen=True)
class ImportStatement:
    """An import declaration extracted from a source file."""

    specifier: str
    line: int
    is_type_only: bool = False


@dataclass(frozen=True)
class ParsedSource:
    """A source file reduced to its import declarations."""

    path: Path
    imports: tuple[ImportStatement, ...]


@dataclass(frozen=True)
class Finding:
    """A violation located in a scanned file."""

    id: str
    rule_id: str
    path: str
    line: int | None
    specifier: str
    violation: Violation
    title: str = RULE_TITLE

    def to_dict(self) -> JsonObject:
        return {
            "id": self.id,
            "rule_id": self.rule_id,
            "title": self.title,
            "path": self.path,
            "line": self.line,
            "specifier": self.specifier,
            "imported_path": self.violation.imported_relative_path,
            "common_ancestor": self.violation.common_ancestor_display,
            "suggestions": self.violation.suggestions,
            "existing_patterns": self.violation.existing_patterns_summary,
            "message": self.violation.message(),
        }


@dataclass(frozen=True)
class Summary:
    """Aggregate report for a scan."""

    schema_version: str
    scanned_files: int
    checked_files: int
    finding_count: int
    counts_by_path: dict[str, int]
    counts_by_ancestor: dict[str, int]
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> JsonObject:
        return {
            "schema_version": self.schema_version,
            "scanned_files": self.scanned_files,
            "checked_files": self.checked_files,
            "finding_count": self.finding_count,
            "counts_by_path": dict(self.counts_by_path),
            "counts_by_ancestor": dict(self.counts_by_ancestor),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class ScanResult:
    """Result of scanning a workspace."""

    scanned_files: int
    checked_files: int
    total_findings: int
    findings: tuple[Finding, ...]
    duration_seconds: float
    warnings: tuple[str, ...] = ()

    @property
    def has_violations(self) -> bool:
        return self.total_findings > 0
