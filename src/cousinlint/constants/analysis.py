"""Rule identity and message text for cousin import analysis."""

from __future__ import annotations

RULE_ID: str = "NO_COUSIN_IMPORTS"
RULE_TITLE: str = "Cousin import across sibling directory trees"

PROJECT_ROOT_DISPLAY: str = "(project root)"

NO_PATTERNS_CONFIGURED: str = "     None configured."
NO_SUGGESTIONS_NOTICE: str = (
    "     (No specific pattern suggestions for this case; "
    "review project structure or global shared locations.)"
)

FOLDER_PATTERNS_HEADING: str = (
    "     - Folder patterns (pattern segments must be a prefix of path segments after common ancestor; "
    "or a single-segment pattern can BE the common ancestor name itself):"
)
FILE_PATTERNS_HEADING: str = (
    "     - File patterns (pattern segments must match the end of path segments after common ancestor, "
    "e.g., 'dir/file.js' or 'file.js'):"
)

VIOLATION_MESSAGE_TEMPLATE: str = "\n".join(
    (
        "Import from cousin directory '{imported_relative}' by '{importer_relative}' is not allowed.",
        "\nThis import crosses module boundaries under the common ancestor: '{common_ancestor}'.",
        "\nTo resolve this, you have a few options:",
        "1. Reorganize code (Often the preferred architectural solution): Move the shared logic to a common "
        "ancestor directory (e.g., within or above '{common_ancestor}') or a designated global shared location.",
        "\n   Your project currently has the following shared patterns defined "
        "(patterns are matched relative to the common ancestor of an import):",
        "{existing_patterns}",
        "\n2. OR, explicitly allow this import pattern by updating the 'shared_patterns' option in your "
        "configuration. Based on this specific import, you could consider:",
        "{suggestions}",
    )
)

FINDING_ID_PREFIX: str = "cousin"
FINDING_ID_HASH_LENGTH: int = 12
