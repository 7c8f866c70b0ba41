"""Human-readable stdout reporter for scan results."""

from __future__ import annotations

from collections import Counter

from cousinlint.constants.branding import ASCII_LOGO_LINES, SCAN_SUMMARY_TITLE
from cousinlint.constants.reporting import ANSI_BOLD, ANSI_DIM, ANSI_GREEN, ANSI_RED, ANSI_RESET
from cousinlint.model import Finding, ScanResult


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats scan results as readable terminal output."""

    def __init__(self, result: ScanResult, *, color: bool = True, verbose: bool = False) -> None:
        """Initialise the reporter."""
        self._result = result
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_findings()]
        if self._verbose:
            sections.append(self._render_warnings())
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._result
        sep = "  " + "─" * 38
        files_with_findings = len({finding.path for finding in r.findings})

        if r.total_findings:
            verdict = f"FAIL ({r.total_findings} cousin import(s))"
            verdict = _colorize(verdict, ANSI_RED) if self._color else verdict
        else:
            verdict = _colorize("PASS", ANSI_GREEN) if self._color else "PASS"

        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {SCAN_SUMMARY_TITLE}",
            sep,
            "",
            (
                f"  Files       {r.scanned_files} scanned / {r.checked_files} in zones / "
                f"{files_with_findings} with violations"
            ),
            f"  Violations  {r.total_findings}",
            f"  Ancestors   {self._format_top_ancestors(r.findings)}",
            f"  Verdict     {verdict}",
            f"  Duration    {r.duration_seconds:.3f}s",
            "",
        ]
        if r.warnings and not self._verbose:
            lines.insert(-1, f"  Warnings    {len(r.warnings)} (use -v to show)")
        return "\n".join(lines)

    def _render_findings(self) -> str:
        if not self._result.findings:
            return ""
        blocks: list[str] = []
        for finding in self._result.findings:
            location = f"{finding.path}:{finding.line}" if finding.line is not None else finding.path
            heading = f"  {location}  {finding.rule_id}  import '{finding.specifier}'"
            if self._color:
                heading = _colorize(heading, ANSI_BOLD)
            body = "\n".join(f"    {line}" if line else "" for line in finding.violation.message().splitlines())
            blocks.append(f"{heading}\n{body}\n")
        return "\n".join(blocks)

    def _render_warnings(self) -> str:
        if not self._result.warnings:
            return ""
        lines = ["  Warnings"]
        for warning in self._result.warnings:
            text = f"    - {warning}"
            lines.append(_colorize(text, ANSI_DIM) if self._color else text)
        return "\n".join(lines)

    @staticmethod
    def _format_top_ancestors(findings: tuple[Finding, ...], limit: int = 5) -> str:
        """Render the most frequent common ancestors, descending by count then name."""
        if not findings:
            return "none"
        counts = Counter(finding.violation.common_ancestor_display for finding in findings)
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        head = ranked[:limit]
        parts = [f"{ancestor} {count}" for ancestor, count in head]
        remaining = len(ranked) - len(head)
        if remaining > 0:
            parts.append(f"(+{remaining} more)")
        return " · ".join(parts)
