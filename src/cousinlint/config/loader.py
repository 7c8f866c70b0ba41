"""Config loading and normalization for cousin import checks."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from cousinlint.config.model import CousinLintConfig
from cousinlint.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_SOURCE_GLOBS,
    PATTERN_KIND_FILE,
    PATTERN_KIND_FOLDER,
    VALID_PATTERN_KINDS,
)
from cousinlint.exceptions import ConfigError
from cousinlint.types.config import FilePattern, FolderPattern, SharedPattern, ZoneConfig

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> CousinLintConfig:
    """Load and validate checker config from ``cousinlint.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No %s found under %s; using defaults", CONFIG_FILENAME, root)
        return CousinLintConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    return config_from_mapping(raw)


def config_from_mapping(raw: Mapping[str, Any]) -> CousinLintConfig:
    """Build a config from an already-parsed mapping, raising ConfigError on bad shapes."""
    max_file_mb = raw.get("max_file_mb", DEFAULT_MAX_FILE_MB)
    if isinstance(max_file_mb, bool) or not isinstance(max_file_mb, int) or max_file_mb <= 0:
        raise ConfigError("max_file_mb must be a positive integer")

    return CousinLintConfig(
        zones=_build_zones(raw.get("zones")),
        shared_patterns=tuple(_build_shared_patterns(raw.get("shared_patterns"))),
        aliases=_build_aliases(raw.get("aliases")),
        source_globs=tuple(_ensure_string_list(raw.get("source_globs", DEFAULT_SOURCE_GLOBS), "source_globs")),
        exclude_dirs=tuple(_ensure_string_list(raw.get("exclude_dirs", DEFAULT_EXCLUDE_DIRS), "exclude_dirs")),
        max_file_mb=max_file_mb,
    )


def build_shared_pattern(pattern: str, kind: str) -> SharedPattern:
    """Create the pattern variant for ``kind`` (``folder`` or ``file``)."""
    if kind == PATTERN_KIND_FOLDER:
        return FolderPattern(pattern)
    if kind == PATTERN_KIND_FILE:
        return FilePattern(pattern)
    raise ConfigError(f"shared pattern type must be one of {sorted(VALID_PATTERN_KINDS)}, got {kind!r}")


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _build_zones(value: Any) -> tuple[ZoneConfig, ...]:
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        raise ConfigError("zones must be a list of mappings with a `path` key")
    zones: list[ZoneConfig] = []
    for index, item in enumerate(value):
        if not isinstance(item, dict) or not isinstance(item.get("path"), str) or not item["path"].strip():
            raise ConfigError(f"zones[{index}] must be a mapping with a non-empty string `path`")
        zones.append(ZoneConfig(path=item["path"].strip()))
    return tuple(zones)


def _build_shared_patterns(value: Any) -> list[SharedPattern]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ConfigError("shared_patterns must be a list of mappings with `pattern` and `type` keys")
    patterns: list[SharedPattern] = []
    for index, item in enumerate(value):
        if not isinstance(item, dict):
            raise ConfigError(f"shared_patterns[{index}] must be a mapping")
        pattern = item.get("pattern")
        if not isinstance(pattern, str) or not pattern.strip():
            raise ConfigError(f"shared_patterns[{index}].pattern must be a non-empty string")
        kind = item.get("type")
        if not isinstance(kind, str):
            raise ConfigError(f"shared_patterns[{index}].type must be one of {sorted(VALID_PATTERN_KINDS)}")
        patterns.append(build_shared_pattern(pattern.strip(), kind))
    return patterns


def _build_aliases(value: Any) -> dict[str, tuple[str, ...]]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError("aliases must be a mapping of alias prefix to a list of target paths")
    aliases: dict[str, tuple[str, ...]] = {}
    for alias, targets in value.items():
        if not isinstance(alias, str) or not alias:
            raise ConfigError("aliases keys must be non-empty strings")
        target_list = _ensure_string_list(targets, f"aliases.{alias}")
        if not target_list:
            raise ConfigError(f"aliases.{alias} must list at least one target path")
        if len(target_list) > 1:
            logger.debug("Alias %s declares %d targets; only the first is used", alias, len(target_list))
        aliases[alias] = tuple(target_list)
    return aliases
