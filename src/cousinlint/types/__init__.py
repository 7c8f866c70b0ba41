"""Shared type aliases for Cousinlint."""

from .common import JsonObject, JsonScalar, JsonValue, PathSegments
from .config import AliasMap, FilePattern, FolderPattern, SharedPattern, ZoneConfig

__all__ = [
    "AliasMap",
    "FilePattern",
    "FolderPattern",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "PathSegments",
    "SharedPattern",
    "ZoneConfig",
]
