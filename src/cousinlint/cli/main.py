"""CLI entrypoint for Cousinlint."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cousinlint import __version__
from cousinlint.cli.handlers import evaluate_exit_code, handle_check, handle_validate_config
from cousinlint.constants.branding import CLI_DESCRIPTION
from cousinlint.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS
from cousinlint.exceptions import ConfigError, CousinLintError
from cousinlint.exceptions.validation import format_errors
from cousinlint.reporting.stdout import StdoutReporter
from cousinlint.scanner import scan_workspace
from cousinlint.validation import preflight_validate


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="cousinlint",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="Scan a source tree for cousin imports")
    scan.add_argument("-r", "--root", type=Path, required=True, help="Project root path")
    scan.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory for report files (no files written if omitted)",
    )
    scan.add_argument("-c", "--config", type=Path, help="Explicit config file")
    scan.add_argument("--max-file-mb", type=int, help="Skip source files larger than this size")
    scan.add_argument(
        "--output-format",
        default=DEFAULT_OUTPUT_FORMAT,
        help="Comma-separated output formats: json, csv, sarif (default: json)",
    )
    scan.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    scan.add_argument("--no-color", action="store_true", help="Disable colored output")
    scan.add_argument("--exit-zero", action="store_true", help="Exit with 0 even when violations are found")
    scan.add_argument("-v", "--verbose", action="store_true", help="Show warnings and debug logging")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without scanning")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Project root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    check = subparsers.add_parser("check", help="Classify a single import statement")
    check.add_argument("-r", "--root", type=Path, required=True, help="Project root path")
    check.add_argument("-c", "--config", type=Path, help="Explicit config file")
    check.add_argument("-i", "--importer", type=Path, required=True, help="File containing the import")
    check.add_argument("-s", "--specifier", required=True, help="Import specifier, e.g. '../moduleB/component'")
    check.add_argument("--type-only", action="store_true", help="Treat the import as `import type`")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)
    if args.command == "check":
        return handle_check(args)

    if args.command != "scan":
        parser.error(f"Unsupported command: {args.command}")

    raw_tokens = args.output_format.split(",")
    output_formats = tuple(fmt for fmt in (t.strip() for t in raw_tokens) if fmt)
    if not output_formats or len(output_formats) != len(raw_tokens):
        print(
            "Configuration error: --output-format contains empty or malformed tokens",
            file=sys.stderr,
        )
        return 2
    invalid_formats = set(output_formats) - VALID_OUTPUT_FORMATS
    if invalid_formats:
        print(
            f"Configuration error: unknown output format(s): {', '.join(sorted(invalid_formats))}. "
            f"Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}",
            file=sys.stderr,
        )
        return 2

    validation_errors = preflight_validate(root=args.root, config_path=args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        result = scan_workspace(
            root=args.root,
            out=args.output_dir,
            config_path=args.config,
            max_file_mb=args.max_file_mb,
            output_formats=output_formats,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except CousinLintError as exc:
        print(f"Scanner error: {exc}", file=sys.stderr)
        return 1

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = StdoutReporter(result, color=use_color, verbose=verbose)
        print(reporter.render())

    return evaluate_exit_code(result, exit_zero=args.exit_zero)


if __name__ == "__main__":
    raise SystemExit(main())
