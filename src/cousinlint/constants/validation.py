"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # value out of range
CFG008: str = "CFG008"  # missing required field
CFG009: str = "CFG009"  # invalid nested mapping
CFG010: str = "CFG010"  # root directory not found

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "zones",
        "shared_patterns",
        "aliases",
        "source_globs",
        "exclude_dirs",
        "max_file_mb",
    }
)

ALLOWED_ZONE_KEYS: frozenset[str] = frozenset({"path"})
ALLOWED_SHARED_PATTERN_KEYS: frozenset[str] = frozenset({"pattern", "type"})

LIST_OF_STRINGS_KEYS: tuple[str, ...] = (
    "source_globs",
    "exclude_dirs",
)
