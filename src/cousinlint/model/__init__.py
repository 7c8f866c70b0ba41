"""Core data models for Cousinlint."""

from .entities import (
    Finding,
    ImportContext,
    ImportStatement,
    ParsedSource,
    RelationshipResult,
    ScanResult,
    Summary,
    Violation,
)

__all__ = [
    "Finding",
    "ImportContext",
    "ImportStatement",
    "ParsedSource",
    "RelationshipResult",
    "ScanResult",
    "Summary",
    "Violation",
]
