"""SARIF 2.1.0 export writer for scan findings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from cousinlint import __version__
from cousinlint.constants.analysis import RULE_ID, RULE_TITLE
from cousinlint.constants.reporting import (
    SARIF_FINDINGS_FILENAME,
    SARIF_LEVEL,
    SARIF_SCHEMA_URI,
    SARIF_TOOL_NAME,
    SARIF_VERSION,
)
from cousinlint.io import write_text_atomic
from cousinlint.model import Finding


def _build_sarif_result(finding: Finding) -> dict[str, Any]:
    """Map a single Finding to a SARIF result object."""
    result: dict[str, Any] = {
        "ruleId": finding.rule_id,
        "level": SARIF_LEVEL,
        "message": {"text": finding.violation.message()},
        "locations": [
            {
                "physicalLocation": {
                    "artifactLocation": {"uri": finding.path},
                },
            },
        ],
        "partialFingerprints": {"findingId": finding.id},
        "properties": {
            "specifier": finding.specifier,
            "importedPath": finding.violation.imported_relative_path,
            "commonAncestor": finding.violation.common_ancestor_display,
        },
    }
    if finding.line is not None:
        result["locations"][0]["physicalLocation"]["region"] = {"startLine": finding.line}
    return result


def build_sarif_envelope(findings: list[Finding]) -> dict[str, Any]:
    """Build a complete SARIF 2.1.0 document from findings."""
    sorted_findings = sorted(findings, key=lambda f: (f.path, f.line or 0, f.id))
    return {
        "$schema": SARIF_SCHEMA_URI,
        "version": SARIF_VERSION,
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": SARIF_TOOL_NAME,
                        "version": __version__,
                        "rules": [{"id": RULE_ID, "shortDescription": {"text": RULE_TITLE}}],
                    },
                },
                "results": [_build_sarif_result(f) for f in sorted_findings],
            }
        ],
    }


def write_sarif_findings(out_root: Path, findings: list[Finding]) -> Path:
    """Write a global findings.sarif under the output root and return the path."""
    sarif_path = out_root / SARIF_FINDINGS_FILENAME
    write_text_atomic(
        path=sarif_path,
        content=json.dumps(build_sarif_envelope(findings), indent=2) + "\n",
        temp_prefix=".sarif_tmp_",
        temp_suffix=".sarif",
    )
    return sarif_path
