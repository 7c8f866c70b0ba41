"""Tests for the per-run rule and per-file checks."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from cousinlint.analysis import CousinImportRule, check_import
from cousinlint.config import CousinLintConfig
from cousinlint.constants.analysis import NO_PATTERNS_CONFIGURED
from cousinlint.model import ImportContext
from cousinlint.types import ZoneConfig


def test_cousin_import_reports_violation(
    make_rule: Callable[..., CousinImportRule],
    abs_path: Callable[[str], str],
) -> None:
    file_check = make_rule().for_file(abs_path("src/moduleA/file.js"))
    assert file_check is not None

    violation = file_check.check("../moduleB/component")

    assert violation is not None
    assert violation.importer_relative_path == os.path.join("src", "moduleA", "file.js")
    assert violation.imported_relative_path == os.path.join("src", "moduleB", "component")
    assert violation.common_ancestor_display == "src"
    assert violation.existing_patterns_summary == NO_PATTERNS_CONFIGURED
    assert violation.relationship is not None
    assert violation.relationship.imported_segments_after_ancestor == ("moduleB", "component")

    message = violation.message()
    assert message.startswith(
        f"Import from cousin directory '{violation.imported_relative_path}' "
        f"by '{violation.importer_relative_path}' is not allowed."
    )
    assert "under the common ancestor: 'src'" in message
    assert "{ pattern: 'moduleB/component', type: 'file' }" in message


@pytest.mark.parametrize(
    ("shared", "specifier"),
    [
        ((("shared", "folder"),), "../shared/utils"),
        ((("constants", "file"),), "../moduleB/constants"),
        ((("moduleB/component", "file"),), "../moduleB/component"),
        ((("src", "folder"),), "../moduleB/component"),
    ],
    ids=["shared_folder", "shared_file", "shared_file_path", "shared_ancestor"],
)
def test_shared_patterns_allow_import(
    make_rule: Callable[..., CousinImportRule],
    abs_path: Callable[[str], str],
    shared: tuple[tuple[str, str], ...],
    specifier: str,
) -> None:
    file_check = make_rule(shared=shared).for_file(abs_path("src/moduleA/file.js"))
    assert file_check is not None

    assert file_check.check(specifier) is None


def test_alias_and_relative_specifiers_are_equivalent(
    make_rule: Callable[..., CousinImportRule],
    abs_path: Callable[[str], str],
) -> None:
    rule = make_rule(aliases={"@/*": ("src/*",)})
    file_check = rule.for_file(abs_path("src/moduleA/file.js"))
    assert file_check is not None

    via_alias = file_check.check("@/moduleB/component")
    via_relative = file_check.check("../moduleB/component")

    assert via_alias is not None
    assert via_alias == via_relative
    assert via_alias.relationship == via_relative.relationship


def test_no_zones_checks_nothing(
    make_rule: Callable[..., CousinImportRule],
    abs_path: Callable[[str], str],
) -> None:
    rule = make_rule(zones=())

    assert rule.for_file(abs_path("src/moduleA/file.js")) is None
    context = ImportContext(importer_path=abs_path("src/moduleA/file.js"), specifier="../moduleB/component")
    assert check_import(rule, context) is None


def test_file_outside_zones_is_skipped(
    make_rule: Callable[..., CousinImportRule],
    abs_path: Callable[[str], str],
) -> None:
    rule = make_rule(zones=("src",))

    assert rule.for_file(abs_path("scripts/moduleA/build.js")) is None


def test_type_only_imports_are_ignored(
    make_rule: Callable[..., CousinImportRule],
    abs_path: Callable[[str], str],
) -> None:
    file_check = make_rule().for_file(abs_path("src/moduleA/file.ts"))
    assert file_check is not None

    assert file_check.check("../moduleB/types", is_type_only=True) is None
    assert file_check.check("../moduleB/types") is not None


@pytest.mark.parametrize(
    "specifier",
    ["lodash", "@scope/pkg", "../../../../outside/module", "./file.js"],
    ids=["package", "scoped_package", "escapes_root", "self_import"],
)
def test_non_project_and_self_imports_are_allowed(
    make_rule: Callable[..., CousinImportRule],
    abs_path: Callable[[str], str],
    specifier: str,
) -> None:
    file_check = make_rule().for_file(abs_path("src/moduleA/file.js"))
    assert file_check is not None

    assert file_check.check(specifier) is None


def test_multiple_zones_each_apply(
    make_rule: Callable[..., CousinImportRule],
    abs_path: Callable[[str], str],
) -> None:
    rule = make_rule(zones=("src", "app"))

    app_check = rule.for_file(abs_path("app/pages/home.js"))
    assert app_check is not None
    violation = app_check.check("../widgets/button")

    assert violation is not None
    assert violation.common_ancestor_display == "app"


def test_check_import_matches_file_check(
    make_rule: Callable[..., CousinImportRule],
    abs_path: Callable[[str], str],
) -> None:
    rule = make_rule()
    importer = abs_path("src/moduleA/file.js")
    file_check = rule.for_file(importer)
    assert file_check is not None

    context = ImportContext(importer_path=importer, specifier="../moduleB/component")

    assert check_import(rule, context) == file_check.check("../moduleB/component")


def test_project_root_override_wins(tmp_path: Path) -> None:
    override = tmp_path / "real"
    config = CousinLintConfig(zones=(ZoneConfig(path="src"),), project_root_override=override)

    rule = CousinImportRule.from_config(config, tmp_path / "ignored")

    assert rule.project_root == os.path.normpath(str(override))
    assert rule.for_file(override / "src" / "a" / "x.js") is not None
    assert rule.for_file(tmp_path / "ignored" / "src" / "a" / "x.js") is None
