"""End-to-end scan orchestration for Cousinlint.

The ``scan_workspace`` function is the primary entry point used by the CLI.
"""

from __future__ import annotations

import hashlib
import logging
import time
from dataclasses import replace
from pathlib import Path

from cousinlint.analysis import CousinImportRule
from cousinlint.config import load_config
from cousinlint.constants.analysis import FINDING_ID_HASH_LENGTH, FINDING_ID_PREFIX, RULE_ID
from cousinlint.constants.reporting import VALID_OUTPUT_FORMATS
from cousinlint.exceptions import ConfigError, SourceParseError
from cousinlint.model import Finding, ImportStatement, ScanResult, Violation
from cousinlint.parsers import parse_source_file
from cousinlint.scanner.discovery import discover_source_files, stable_path_key

logger = logging.getLogger(__name__)


def scan_workspace(
    *,
    root: Path,
    out: Path | None = None,
    config_path: Path | None = None,
    max_file_mb: int | None = None,
    output_formats: tuple[str, ...] = ("json",),
) -> ScanResult:
    """Scan a workspace for cousin imports and optionally write reports."""
    invalid_formats = set(output_formats) - VALID_OUTPUT_FORMATS
    if invalid_formats:
        raise ConfigError(
            f"Unknown output format(s): {', '.join(sorted(invalid_formats))}. "
            f"Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}"
        )

    started_at = time.perf_counter()
    root = root.resolve()
    if out is not None:
        out = out.resolve()

    if not root.is_dir():
        raise ConfigError(f"Scan root does not exist or is not a directory: {root}")

    config = load_config(root, config_path)
    if max_file_mb is not None:
        if max_file_mb <= 0:
            raise ConfigError("max_file_mb must be a positive integer")
        config = replace(config, max_file_mb=max_file_mb)

    rule = CousinImportRule.from_config(config, root)
    warnings: list[str] = []
    if config.is_inert:
        warning = "No zones configured; cousin import checks are disabled."
        warnings.append(warning)
        logger.warning(warning)

    source_files = discover_source_files(root, config.source_globs, config.exclude_dirs, config.max_file_mb)
    logger.info("Discovered %d source files under %s", len(source_files), root)

    findings: list[Finding] = []
    checked_files = 0
    for path in source_files:
        file_check = rule.for_file(path)
        if file_check is None:
            continue
        checked_files += 1

        try:
            parsed = parse_source_file(path)
        except SourceParseError as exc:
            warning = f"Parse error in {stable_path_key(path, root)}: {exc}"
            warnings.append(warning)
            logger.warning(warning)
            continue

        relative_path = stable_path_key(path, root)
        for statement in parsed.imports:
            violation = file_check.check(statement.specifier, is_type_only=statement.is_type_only)
            if violation is not None:
                findings.append(_build_finding(relative_path, statement, violation))

    findings.sort(key=lambda f: (f.path, f.line or 0, f.id))

    if out is not None:
        _write_reports(
            out,
            findings,
            output_formats,
            scanned_files=len(source_files),
            checked_files=checked_files,
            warnings=tuple(warnings),
        )

    return ScanResult(
        scanned_files=len(source_files),
        checked_files=checked_files,
        total_findings=len(findings),
        findings=tuple(findings),
        duration_seconds=time.perf_counter() - started_at,
        warnings=tuple(warnings),
    )


def finding_id(relative_path: str, line: int, specifier: str) -> str:
    """Return a stable identifier for a violation at a source location."""
    seed = f"{RULE_ID}:{relative_path}:{line}:{specifier}".encode("utf-8")
    return f"{FINDING_ID_PREFIX}-{hashlib.sha256(seed).hexdigest()[:FINDING_ID_HASH_LENGTH]}"


def _build_finding(relative_path: str, statement: ImportStatement, violation: Violation) -> Finding:
    return Finding(
        id=finding_id(relative_path, statement.line, statement.specifier),
        rule_id=RULE_ID,
        path=relative_path,
        line=statement.line,
        specifier=statement.specifier,
        violation=violation,
    )


def _write_reports(
    out: Path,
    findings: list[Finding],
    output_formats: tuple[str, ...],
    *,
    scanned_files: int,
    checked_files: int,
    warnings: tuple[str, ...] = (),
) -> None:
    try:
        out.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigError(f"Output directory is not writable: {out} ({exc})") from exc

    if "json" in output_formats:
        from cousinlint.reporting.writer import write_reports

        write_reports(
            out,
            findings,
            scanned_files=scanned_files,
            checked_files=checked_files,
            warnings=warnings,
        )

    if "csv" in output_formats:
        from cousinlint.reporting.csv_writer import write_csv_findings

        write_csv_findings(out, findings)

    if "sarif" in output_formats:
        from cousinlint.reporting.sarif_writer import write_sarif_findings

        write_sarif_findings(out, findings)
