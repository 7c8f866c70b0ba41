"""Configuration loading, validation, and normalization for Cousinlint.

This package facade re-exports all public names so that callers can use
``from cousinlint.config import ...``.
"""

from __future__ import annotations

from cousinlint.config.loader import build_shared_pattern, config_from_mapping, load_config
from cousinlint.config.model import CousinLintConfig
from cousinlint.config.validator import _suggest_key, validate_config_file

__all__ = [
    "CousinLintConfig",
    "_suggest_key",
    "build_shared_pattern",
    "config_from_mapping",
    "load_config",
    "validate_config_file",
]
