"""Regular expressions and lexer markers used to extract import declarations from JS/TS sources."""

from __future__ import annotations

import re

# `import x from "a"`, `import {a, b} from 'a'`, `import * as ns from "a"`,
# `import type {T} from "a"` and bare `import "a"`. Specifier lists may span lines.
IMPORT_DECLARATION_RE: re.Pattern[str] = re.compile(
    r"""
    (?:^|(?<=[;}]))[ \t]*
    import
    (?P<type>[ \t\r\n]+type(?=[ \t\r\n{*]))?
    [ \t\r\n]*
    (?:(?P<bindings>[\w$*{}, \t\r\n]+?)[ \t\r\n]*from[ \t\r\n]*)?
    (?P<quote>["'])(?P<specifier>[^"'\r\n]+)(?P=quote)
    """,
    re.MULTILINE | re.VERBOSE,
)

NON_NEWLINE_RE: re.Pattern[str] = re.compile(r"[^\r\n]")

STRING_QUOTES: frozenset[str] = frozenset({"'", '"'})
TEMPLATE_QUOTE: str = "`"
TEMPLATE_EXPRESSION_OPEN: str = "${"
LINE_COMMENT_OPEN: str = "//"
BLOCK_COMMENT_OPEN: str = "/*"
BLOCK_COMMENT_CLOSE: str = "*/"
