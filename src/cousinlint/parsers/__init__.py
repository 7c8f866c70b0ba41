"""Source parsers that reduce files to their import declarations."""

from __future__ import annotations

from .imports import extract_imports, parse_source_file

__all__ = ["extract_imports", "parse_source_file"]
