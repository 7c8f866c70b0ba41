"""Typed configuration structures for cousin import checks."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from cousinlint.constants.config import PATTERN_SEPARATOR

AliasMap: TypeAlias = Mapping[str, tuple[str, ...]]


@dataclass(frozen=True)
class ZoneConfig:
    """A root-relative directory in which the cousin check is enforced."""

    path: str


@dataclass(frozen=True)
class _SegmentPattern:
    pattern: str
    segments: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.pattern.split(PATTERN_SEPARATOR)))

    @property
    def is_single_segment(self) -> bool:
        return PATTERN_SEPARATOR not in self.pattern


@dataclass(frozen=True)
class FolderPattern(_SegmentPattern):
    """Shared folder: matches when its segments are a prefix of the checked path."""

    def matches(self, segments: Sequence[str]) -> bool:
        """Return True if ``segments`` start with this pattern's segments."""
        size = len(self.segments)
        if size > len(segments):
            return False
        return tuple(segments[:size]) == self.segments


@dataclass(frozen=True)
class FilePattern(_SegmentPattern):
    """Shared file: matches when its segments are a suffix of the checked path."""

    def matches(self, segments: Sequence[str]) -> bool:
        """Return True if ``segments`` end with this pattern's segments."""
        size = len(self.segments)
        if size > len(segments):
            return False
        return tuple(segments[len(segments) - size :]) == self.segments


SharedPattern: TypeAlias = FolderPattern | FilePattern
