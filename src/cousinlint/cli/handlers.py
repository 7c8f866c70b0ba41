"""CLI subcommand handlers and exit-code evaluation."""

from __future__ import annotations

import argparse
import sys

from cousinlint.analysis import CousinImportRule
from cousinlint.config import load_config
from cousinlint.exceptions import ConfigError
from cousinlint.exceptions.validation import format_errors
from cousinlint.model import ScanResult
from cousinlint.validation import preflight_validate


def evaluate_exit_code(result: ScanResult, *, exit_zero: bool = False) -> int:
    """Return 1 if the scan found violations (unless ``exit_zero``), 0 otherwise."""
    if exit_zero:
        return 0
    return 1 if result.has_violations else 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def handle_check(args: argparse.Namespace) -> int:
    """Classify one import statement and print the verdict."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    root = args.root.resolve()
    try:
        config = load_config(root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    importer = args.importer if args.importer.is_absolute() else root / args.importer
    rule = CousinImportRule.from_config(config, root)
    file_check = rule.for_file(importer)
    if file_check is None:
        print(f"allowed: {importer} is not inside any configured zone")
        return 0

    violation = file_check.check(args.specifier, is_type_only=args.type_only)
    if violation is None:
        print("allowed")
        return 0

    print(violation.message())
    return 1
