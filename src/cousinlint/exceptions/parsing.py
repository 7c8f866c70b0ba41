"""Parsing-related exceptions."""

from __future__ import annotations

from cousinlint.exceptions.base import CousinLintError


class SourceParseError(CousinLintError, ValueError):
    """Raised when a source file cannot be read for import extraction."""
