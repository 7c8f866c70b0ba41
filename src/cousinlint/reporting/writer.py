"""Output writers for findings and summary JSON artifacts."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

from cousinlint.constants.reporting import (
    FINDINGS_FILENAME,
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
    SCHEMA_VERSION,
    SUMMARY_FILENAME,
)
from cousinlint.io import write_json_atomic
from cousinlint.model import Finding, Summary


def write_reports(
    out_root: Path,
    findings: list[Finding],
    *,
    scanned_files: int,
    checked_files: int,
    warnings: tuple[str, ...] = (),
) -> Summary:
    """Write findings and summary JSON under ``out_root`` and return the summary."""
    sorted_findings = sorted(findings, key=lambda finding: finding.id)
    write_json_atomic(
        path=out_root / FINDINGS_FILENAME,
        payload=[finding.to_dict() for finding in sorted_findings],
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )

    summary = build_summary(
        sorted_findings,
        scanned_files=scanned_files,
        checked_files=checked_files,
        warnings=warnings,
    )
    write_json_atomic(
        path=out_root / SUMMARY_FILENAME,
        payload=summary.to_dict(),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    return summary


def build_summary(
    findings: list[Finding],
    *,
    scanned_files: int,
    checked_files: int,
    warnings: tuple[str, ...] = (),
) -> Summary:
    """Build a deterministic scan summary from findings."""
    by_path = Counter(finding.path for finding in findings)
    by_ancestor = Counter(finding.violation.common_ancestor_display for finding in findings)
    return Summary(
        schema_version=SCHEMA_VERSION,
        scanned_files=scanned_files,
        checked_files=checked_files,
        finding_count=len(findings),
        counts_by_path=dict(sorted(by_path.items())),
        counts_by_ancestor=dict(sorted(by_ancestor.items())),
        warnings=warnings,
    )
