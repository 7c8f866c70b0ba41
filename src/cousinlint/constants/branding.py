"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "COUSINLINT"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ COUSINLINT",
    "     // module boundary checks for JS/TS trees",
)
SCAN_SUMMARY_TITLE: str = "Scan summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} cousin import checker"))
