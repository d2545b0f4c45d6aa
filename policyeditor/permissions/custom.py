"""Verbatim permission statements the catalog does not recognize."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .text import COMMENT_END, STATEMENT_TERMINATOR, looks_like_statement, normalize_statement


@dataclass(frozen=True)
class CustomPermission:
    """One unrecognized ``permission ...;`` statement.

    ``statement`` holds the normalized text without the terminator, so two
    lines that differ only in whitespace compare (and hash) equal. The
    constructor normalizes whatever it is given and accepts the text with or
    without the trailing ``;``.
    """

    statement: str

    def __post_init__(self) -> None:
        statement = normalize_statement(self.statement)
        if statement.endswith(STATEMENT_TERMINATOR) or not looks_like_statement(statement + STATEMENT_TERMINATOR):
            raise ValueError(f"Not a permission statement: {self.statement!r}")
        # The parser skips any line containing a comment terminator.
        if COMMENT_END in statement:
            raise ValueError(f"Permission statement contains {COMMENT_END!r}: {self.statement!r}")
        object.__setattr__(self, "statement", statement)

    @classmethod
    def parse(cls, line: str) -> Optional["CustomPermission"]:
        if not looks_like_statement(line):
            return None
        try:
            return cls(line)
        except ValueError:
            return None

    @classmethod
    def from_statement(cls, text: str) -> "CustomPermission":
        if not looks_like_statement(text):
            raise ValueError(f"Not a permission statement: {text!r}")
        return cls(text)

    def to_text(self) -> str:
        return self.statement + STATEMENT_TERMINATOR

    def __str__(self) -> str:
        return self.to_text()
