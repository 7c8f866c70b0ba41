"""Import declaration extraction for JavaScript and TypeScript sources."""

from __future__ import annotations

from pathlib import Path

from cousinlint.constants.parsing import (
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_OPEN,
    IMPORT_DECLARATION_RE,
    LINE_COMMENT_OPEN,
    NON_NEWLINE_RE,
    STRING_QUOTES,
    TEMPLATE_EXPRESSION_OPEN,
    TEMPLATE_QUOTE,
)
from cousinlint.exceptions import SourceParseError
from cousinlint.model import ImportStatement, ParsedSource


def parse_source_file(path: Path) -> ParsedSource:
    """Read ``path`` and extract its import declarations."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceParseError(f"Cannot read {path}: {exc}") from exc
    return ParsedSource(path=path, imports=extract_imports(text))


def extract_imports(text: str) -> tuple[ImportStatement, ...]:
    """Extract ES import declarations in source order.

    ``import type ... from`` declarations are flagged as type-only. Dynamic
    ``import()`` calls, ``export ... from`` re-exports and anything inside
    comments or template literals are ignored.
    """
    text = _blank_non_code(text.lstrip("\ufeff"))
    statements: list[ImportStatement] = []
    for match in IMPORT_DECLARATION_RE.finditer(text):
        statements.append(
            ImportStatement(
                specifier=match.group("specifier"),
                line=text.count("\n", 0, match.start()) + 1,
                is_type_only=match.group("type") is not None,
            )
        )
    return tuple(statements)


def _blank_non_code(text: str) -> str:
    """Blank comments and template literals while keeping every newline.

    Quote state is tracked so comment markers inside ``'...'`` and ``"..."``
    strings are left alone. Those strings are kept verbatim because import
    specifiers live in them. Template literals, including their ``${...}``
    expressions, are blanked as a whole.
    """
    out: list[str] = []
    # One entry per open template: TEMPLATE_QUOTE while in literal text,
    # otherwise the brace depth inside the current ``${...}`` expression.
    templates: list[str | int] = []
    quote: str | None = None
    index = 0
    size = len(text)

    def emit(chunk: str) -> None:
        out.append(_blank(chunk) if templates else chunk)

    while index < size:
        char = text[index]

        if quote is not None:
            if char == "\\":
                emit(text[index : index + 2])
                index += 2
                continue
            if char == quote or char == "\n":
                quote = None
            emit(char)
            index += 1
            continue

        if templates and templates[-1] == TEMPLATE_QUOTE:
            if char == "\\":
                emit(text[index : index + 2])
                index += 2
            elif char == TEMPLATE_QUOTE:
                emit(char)
                templates.pop()
                index += 1
            elif text.startswith(TEMPLATE_EXPRESSION_OPEN, index):
                emit(TEMPLATE_EXPRESSION_OPEN)
                templates[-1] = 0
                index += len(TEMPLATE_EXPRESSION_OPEN)
            else:
                emit(char)
                index += 1
            continue

        if text.startswith(LINE_COMMENT_OPEN, index):
            end = text.find("\n", index)
            end = size if end == -1 else end
            out.append(_blank(text[index:end]))
            index = end
            continue
        if text.startswith(BLOCK_COMMENT_OPEN, index):
            end = text.find(BLOCK_COMMENT_CLOSE, index + len(BLOCK_COMMENT_OPEN))
            end = size if end == -1 else end + len(BLOCK_COMMENT_CLOSE)
            out.append(_blank(text[index:end]))
            index = end
            continue

        emit(char)
        if char in STRING_QUOTES:
            quote = char
        elif char == TEMPLATE_QUOTE:
            templates.append(TEMPLATE_QUOTE)
        elif templates and char == "{":
            templates[-1] += 1
        elif templates and char == "}":
            if templates[-1] == 0:
                templates[-1] = TEMPLATE_QUOTE
            else:
                templates[-1] -= 1
        index += 1

    return "".join(out)


def _blank(chunk: str) -> str:
    return NON_NEWLINE_RE.sub(" ", chunk)
