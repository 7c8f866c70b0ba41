"""Root exception type for Cousinlint."""

from __future__ import annotations


class CousinLintError(Exception):
    """Base class for all errors raised by Cousinlint."""
