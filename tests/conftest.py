"""Shared pytest fixtures for cousin import tests."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from cousinlint.analysis import CousinImportRule
from cousinlint.config import CousinLintConfig, build_shared_pattern
from cousinlint.types import ZoneConfig


@pytest.fixture()
def project_root(tmp_path: Path) -> str:
    """Return an absolute project root; nothing is created on disk."""
    return os.path.join(str(tmp_path), "mock", "project")


@pytest.fixture()
def abs_path(project_root: str) -> Callable[[str], str]:
    """Turn a ``/``-separated root-relative path into an absolute one."""

    def _abs(relative: str) -> str:
        return os.path.join(project_root, *relative.split("/"))

    return _abs


@pytest.fixture()
def make_rule(project_root: str) -> Callable[..., CousinImportRule]:
    """Build a rule rooted at ``project_root`` from keyword-style options."""

    def _make(
        *,
        zones: tuple[str, ...] = ("src",),
        shared: tuple[tuple[str, str], ...] = (),
        aliases: dict[str, tuple[str, ...]] | None = None,
    ) -> CousinImportRule:
        config = CousinLintConfig(
            zones=tuple(ZoneConfig(path=zone) for zone in zones),
            shared_patterns=tuple(build_shared_pattern(pattern, kind) for pattern, kind in shared),
            aliases=aliases or {},
        )
        return CousinImportRule.from_config(config, project_root)

    return _make


@pytest.fixture()
def write_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Write ``{relative_path: content}`` files under a fresh workspace and return its root."""

    def _write(files: dict[str, str]) -> Path:
        root = tmp_path / "workspace"
        for relative, content in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        root.mkdir(parents=True, exist_ok=True)
        return root

    return _write
