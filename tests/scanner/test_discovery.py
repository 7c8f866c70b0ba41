"""Tests for source file discovery."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from cousinlint.constants.config import DEFAULT_EXCLUDE_DIRS, DEFAULT_SOURCE_GLOBS
from cousinlint.scanner.discovery import discover_source_files, stable_path_key


def test_discovers_sources_sorted_and_skips_excluded(write_tree: Callable[[dict[str, str]], Path]) -> None:
    root = write_tree(
        {
            "src/b/y.ts": "",
            "src/a/x.js": "",
            "src/a/view.tsx": "",
            "index.mjs": "",
            "README.md": "",
            "node_modules/pkg/index.js": "",
            "src/dist/bundle.js": "",
        }
    )

    files = discover_source_files(root, DEFAULT_SOURCE_GLOBS, DEFAULT_EXCLUDE_DIRS, 2)

    assert [stable_path_key(path, root) for path in files] == [
        "index.mjs",
        "src/a/view.tsx",
        "src/a/x.js",
        "src/b/y.ts",
    ]


def test_custom_globs_and_excludes(write_tree: Callable[[dict[str, str]], Path]) -> None:
    root = write_tree({"src/a/x.js": "", "src/a/x.ts": "", "src/generated/z.ts": ""})

    files = discover_source_files(root, ("src/**/*.ts",), ("generated",), 2)

    assert [stable_path_key(path, root) for path in files] == ["src/a/x.ts"]


def test_overlapping_globs_do_not_duplicate(write_tree: Callable[[dict[str, str]], Path]) -> None:
    root = write_tree({"src/a/x.js": ""})

    files = discover_source_files(root, ("**/*.js", "src/**/*.js"), (), 2)

    assert len(files) == 1


def test_oversize_files_are_skipped(write_tree: Callable[[dict[str, str]], Path]) -> None:
    root = write_tree({"src/a/small.js": "import a from './a';\n", "src/a/big.js": "x" * (1024 * 1024 + 1)})

    files = discover_source_files(root, ("**/*.js",), (), 1)

    assert [stable_path_key(path, root) for path in files] == ["src/a/small.js"]


def test_stable_path_key_outside_root(tmp_path: Path) -> None:
    other = tmp_path / "elsewhere" / "file.js"

    assert stable_path_key(other, tmp_path / "root") == other.as_posix()
