"""Shared exception hierarchy for Cousinlint."""

from __future__ import annotations

from .base import CousinLintError
from .config import ConfigError
from .parsing import SourceParseError

__all__ = [
    "ConfigError",
    "CousinLintError",
    "SourceParseError",
]
