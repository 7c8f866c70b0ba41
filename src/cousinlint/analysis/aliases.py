"""Resolution of import specifiers to candidate absolute paths."""

from __future__ import annotations

import os

from cousinlint.constants.config import ALIAS_WILDCARD, PATTERN_SEPARATOR
from cousinlint.types import AliasMap

_WILDCARD_SUFFIX = PATTERN_SEPARATOR + ALIAS_WILDCARD


def resolve_aliased_path(
    specifier: str,
    importer_path: str,
    aliases: AliasMap,
    project_root: str,
) -> str:
    """Resolve ``specifier`` as seen from ``importer_path``.

    Relative specifiers are joined onto the importer's directory. Otherwise the
    first alias (in configuration order) whose prefix starts the specifier is
    applied against its first target under ``project_root``. Anything else is
    returned unchanged. Only string arithmetic is performed; the filesystem is
    never consulted.
    """
    if specifier.startswith(os.curdir):
        return os.path.normpath(os.path.join(os.path.dirname(importer_path), specifier))

    for alias, targets in aliases.items():
        prefix = _strip_wildcard(alias)
        if not specifier.startswith(prefix):
            continue

        remainder = specifier[len(prefix) :]
        if remainder.startswith(PATTERN_SEPARATOR):
            remainder = remainder[len(PATTERN_SEPARATOR) :]

        # Later targets are never tried.
        target_base = _strip_wildcard(targets[0])
        if remainder:
            return os.path.normpath(os.path.join(project_root, target_base, remainder))
        return os.path.normpath(os.path.join(project_root, target_base))

    return specifier


def _strip_wildcard(value: str) -> str:
    """Turn ``"@/*"`` into ``"@/"``; other values are returned as-is."""
    if value.endswith(_WILDCARD_SUFFIX):
        return value[: -len(ALIAS_WILDCARD)]
    return value
