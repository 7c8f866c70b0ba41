"""Config file validation for cousin import checks."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from cousinlint.constants.config import CONFIG_FILENAME, VALID_PATTERN_KINDS
from cousinlint.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_SHARED_PATTERN_KEYS,
    ALLOWED_ZONE_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
    LIST_OF_STRINGS_KEYS,
)
from cousinlint.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a cousinlint.yaml file and return all validation errors.

    This is the collect-all entry point used by both ``cousinlint validate-config``
    and ``cousinlint scan`` preflight.  It never raises; all problems are returned
    as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    if "max_file_mb" in raw:
        val = raw["max_file_mb"]
        if isinstance(val, bool) or not isinstance(val, int):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="max_file_mb",
                    message="invalid type for `max_file_mb`",
                    hint="expected a positive integer",
                )
            )
        elif val <= 0:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="max_file_mb",
                    message=f"`max_file_mb` must be a positive integer, got {val}",
                )
            )

    for key in LIST_OF_STRINGS_KEYS:
        if key in raw:
            val = raw[key]
            if val is not None and (not isinstance(val, (list, tuple)) or not all(isinstance(i, str) for i in val)):
                errors.append(
                    ValidationError(
                        code=CFG005,
                        path=path_str,
                        field=key,
                        message=f"invalid type for `{key}`",
                        hint="expected a list of strings",
                    )
                )

    _validate_zones_block(raw, path_str, errors)
    _validate_shared_patterns_block(raw, path_str, errors)
    _validate_aliases_block(raw, path_str, errors)

    return errors


def _validate_zones_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``zones`` list in cousinlint.yaml."""
    zones = raw.get("zones")
    if zones is None:
        return
    if not isinstance(zones, list):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="zones",
                message="invalid type for `zones`",
                hint="expected a list of mappings like `{path: src}`",
            )
        )
        return

    for index, zone in enumerate(zones):
        field_name = f"zones[{index}]"
        if not isinstance(zone, dict):
            errors.append(
                ValidationError(
                    code=CFG009,
                    path=path_str,
                    field=field_name,
                    message=f"`{field_name}` must be a mapping",
                )
            )
            continue
        _check_unknown_keys(zone, ALLOWED_ZONE_KEYS, field_name, path_str, errors)
        if "path" not in zone:
            errors.append(
                ValidationError(
                    code=CFG008,
                    path=path_str,
                    field=f"{field_name}.path",
                    message=f"missing required key `path` in `{field_name}`",
                )
            )
        elif not isinstance(zone["path"], str) or not zone["path"].strip():
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{field_name}.path",
                    message=f"invalid type for `{field_name}.path`",
                    hint="expected a non-empty root-relative directory",
                )
            )


def _validate_shared_patterns_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``shared_patterns`` list in cousinlint.yaml."""
    patterns = raw.get("shared_patterns")
    if patterns is None:
        return
    if not isinstance(patterns, list):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="shared_patterns",
                message="invalid type for `shared_patterns`",
                hint="expected a list of mappings like `{pattern: shared, type: folder}`",
            )
        )
        return

    for index, entry in enumerate(patterns):
        field_name = f"shared_patterns[{index}]"
        if not isinstance(entry, dict):
            errors.append(
                ValidationError(
                    code=CFG009,
                    path=path_str,
                    field=field_name,
                    message=f"`{field_name}` must be a mapping",
                )
            )
            continue
        _check_unknown_keys(entry, ALLOWED_SHARED_PATTERN_KEYS, field_name, path_str, errors)
        for required in sorted(ALLOWED_SHARED_PATTERN_KEYS):
            if required not in entry:
                errors.append(
                    ValidationError(
                        code=CFG008,
                        path=path_str,
                        field=f"{field_name}.{required}",
                        message=f"missing required key `{required}` in `{field_name}`",
                    )
                )
        pattern = entry.get("pattern")
        if "pattern" in entry and (not isinstance(pattern, str) or not pattern.strip()):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{field_name}.pattern",
                    message=f"invalid type for `{field_name}.pattern`",
                    hint="expected a non-empty string",
                )
            )
        kind = entry.get("type")
        if "type" in entry and kind not in VALID_PATTERN_KINDS:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=f"{field_name}.type",
                    message=f"invalid value for `{field_name}.type`",
                    hint=f"expected one of: {', '.join(sorted(VALID_PATTERN_KINDS))}; got: {kind!r}",
                )
            )


def _validate_aliases_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``aliases`` mapping in cousinlint.yaml."""
    aliases = raw.get("aliases")
    if aliases is None:
        return
    if not isinstance(aliases, dict):
        errors.append(
            ValidationError(
                code=CFG009,
                path=path_str,
                field="aliases",
                message="`aliases` must be a mapping",
            )
        )
        return

    for alias, targets in aliases.items():
        if not isinstance(alias, str) or not alias:
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="aliases",
                    message="aliases keys must be non-empty strings",
                )
            )
            continue
        if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"aliases.{alias}",
                    message=f"invalid type for `aliases.{alias}`",
                    hint="expected a list of strings",
                )
            )
        elif not targets:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=f"aliases.{alias}",
                    message=f"`aliases.{alias}` must list at least one target path",
                )
            )


def _check_unknown_keys(
    entry: dict[str, Any],
    allowed: frozenset[str],
    field_name: str,
    path_str: str,
    errors: list[ValidationError],
) -> None:
    for key in sorted(entry.keys(), key=str):
        if key not in allowed:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"{field_name}.{key}",
                    message=f"unknown key `{key}` in `{field_name}`",
                    hint=_suggest_key(str(key), allowed),
                )
            )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
