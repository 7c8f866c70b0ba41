"""Configuration-related exceptions."""

from __future__ import annotations

from cousinlint.exceptions.base import CousinLintError


class ConfigError(CousinLintError, ValueError):
    """Raised when checker configuration is invalid."""
