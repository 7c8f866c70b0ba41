"""Classification of importer/imported pairs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cousinlint.analysis.paths import path_segments
from cousinlint.analysis.patterns import is_shared_ancestor, matches_shared_pattern
from cousinlint.model import RelationshipResult
from cousinlint.types import SharedPattern


def common_ancestor_length(importer: Sequence[str], imported: Sequence[str]) -> int:
    """Number of leading directory components shared by both paths.

    The last segment of each path is its file and is never compared. When no
    mismatch occurs the whole shorter directory prefix is shared.
    """
    shared_depth = max(0, min(len(importer) - 1, len(imported) - 1))
    for index in range(shared_depth):
        if importer[index] != imported[index]:
            return index
    return shared_depth


def analyze_import_relationship(
    importer_path: str,
    imported_path: str,
    project_root: str,
    shared_patterns: Iterable[SharedPattern],
) -> RelationshipResult:
    """Classify an import as cousin or not and evaluate both shared exemptions."""
    patterns = tuple(shared_patterns)
    importer = path_segments(importer_path, project_root)
    imported = path_segments(imported_path, project_root)

    ancestor_length = common_ancestor_length(importer, imported)
    ancestor = importer[:ancestor_length]
    importer_after = importer[ancestor_length:]
    imported_after = imported[ancestor_length:]

    is_cousin = len(importer_after) > 1 and len(imported_after) > 1 and importer_after[0] != imported_after[0]

    return RelationshipResult(
        is_cousin=is_cousin,
        is_import_target_shared=matches_shared_pattern(imported_after, patterns),
        is_common_ancestor_shared=is_shared_ancestor(ancestor, patterns),
        common_ancestor_segments=ancestor,
        imported_segments_after_ancestor=imported_after,
    )
