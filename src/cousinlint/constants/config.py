"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "cousinlint.yaml"
DEFAULT_MAX_FILE_MB: int = 2

DEFAULT_SOURCE_GLOBS: tuple[str, ...] = (
    "**/*.js",
    "**/*.jsx",
    "**/*.mjs",
    "**/*.cjs",
    "**/*.ts",
    "**/*.tsx",
    "**/*.mts",
    "**/*.cts",
)

DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (
    "node_modules",
    ".git",
    "dist",
    "build",
    "coverage",
)

PATTERN_KIND_FOLDER: str = "folder"
PATTERN_KIND_FILE: str = "file"
VALID_PATTERN_KINDS: frozenset[str] = frozenset({PATTERN_KIND_FOLDER, PATTERN_KIND_FILE})

# Shared patterns and alias prefixes are always written with forward slashes.
PATTERN_SEPARATOR: str = "/"
ALIAS_WILDCARD: str = "*"
