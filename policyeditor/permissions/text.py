"""Shared permission-statement normalization helpers."""

from __future__ import annotations

import re

STATEMENT_KEYWORD = "permission"
STATEMENT_TERMINATOR = ";"
COMMENT_END = "*/"

_WS_RE = re.compile(r"\s+")
_STATEMENT_RE = re.compile(rf"^{STATEMENT_KEYWORD}\s+\S.*{STATEMENT_TERMINATOR}$", re.DOTALL)


def collapse_whitespace(value: str) -> str:
    return _WS_RE.sub(" ", (value or "").strip())


def looks_like_statement(line: str) -> bool:
    """True when ``line`` has the ``permission ... ;`` shape once trimmed."""
    return bool(_STATEMENT_RE.match((line or "").strip()))


def normalize_statement(line: str) -> str:
    """Trim, collapse whitespace and drop the terminator of a statement."""
    text = collapse_whitespace(line)
    if text.endswith(STATEMENT_TERMINATOR):
        text = text[: -len(STATEMENT_TERMINATOR)].rstrip()
    return text
