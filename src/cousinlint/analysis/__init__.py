"""Cousin import analysis: alias resolution, path relationships, exemptions, and suggestions."""

from __future__ import annotations

from .aliases import resolve_aliased_path
from .paths import is_path_in_zone, is_under_root, path_segments
from .patterns import is_shared_ancestor, matches_shared_pattern
from .relationship import analyze_import_relationship, common_ancestor_length
from .rule import CousinImportRule, FileCheck, check_import
from .suggestions import (
    common_ancestor_display,
    format_existing_shared_patterns,
    generate_violation_suggestions,
)

__all__ = [
    "CousinImportRule",
    "FileCheck",
    "analyze_import_relationship",
    "check_import",
    "common_ancestor_display",
    "common_ancestor_length",
    "format_existing_shared_patterns",
    "generate_violation_suggestions",
    "is_path_in_zone",
    "is_shared_ancestor",
    "is_under_root",
    "matches_shared_pattern",
    "path_segments",
    "resolve_aliased_path",
]
