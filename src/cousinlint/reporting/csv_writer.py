"""CSV export writer for scan findings."""

from __future__ import annotations

import csv
import io
from pathlib import Path

from cousinlint.constants.reporting import CSV_COLUMNS, CSV_FINDINGS_FILENAME
from cousinlint.io import write_text_atomic
from cousinlint.model import Finding


def write_csv_findings(out_root: Path, findings: list[Finding]) -> Path:
    """Write a global findings.csv under the output root and return the path."""
    csv_path = out_root / CSV_FINDINGS_FILENAME
    write_text_atomic(
        path=csv_path,
        content=render_csv_string(findings),
        temp_prefix=".csv_tmp_",
        temp_suffix=".csv",
    )
    return csv_path


def render_csv_string(findings: list[Finding]) -> str:
    """Render findings as a CSV string (useful for testing)."""
    sorted_findings = sorted(findings, key=lambda f: (f.path, f.line or 0, f.id))

    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(CSV_COLUMNS)
    for f in sorted_findings:
        writer.writerow(
            (
                f.id,
                f.rule_id,
                f.path,
                f.line if f.line is not None else "",
                f.specifier,
                f.violation.imported_relative_path,
                f.violation.common_ancestor_display,
            )
        )
    return buf.getvalue()
