"""Line-oriented parsing of policy text into a PolicyModel.

The parser only understands the simplest grant blocks: zero or one plain
``codeBase`` clause, no principals, no signers. Anything richer is dropped
rather than shown to the user in a form the editor cannot reproduce.

Comments are handled one line at a time. A line that opens a block comment
or contains ``*/`` is skipped whole, so a block comment sharing a line with
functional text takes that text with it, and text after a closing ``*/``
on the same line is lost.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Tuple

from policyeditor.permissions import CustomPermission, match_permission

from .config import GLOBAL_CODEBASE
from .models import PolicyModel

# Matches eg `grant {` as well as `grant codeBase "http://example.com" {`.
# Leading and trailing whitespace around the header is accepted; anything
# beyond one plain codeBase clause (signedBy, principal) is not.
OPEN_BLOCK_RE = re.compile(r'\s*grant\s*"?\s*(?:codeBase)?\s*"?([^"\s]*)"?\s*\{\s*')
CLOSE_BLOCK_RE = re.compile(r"\s*\};\s*")
BLOCK_COMMENT_START_RE = re.compile(r"\s*/\*.*")
BLOCK_COMMENT_END_RE = re.compile(r".*\*/.*")
LINE_COMMENT_RE = re.compile(r"\s*//.*")
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def numbered_lines(text: str) -> List[Tuple[int, str]]:
    """Non-empty lines with their 1-based line numbers, for any newline style."""
    return [(idx, line) for idx, line in enumerate(LINE_BREAK_RE.split(text or ""), start=1) if line]


def parse_block_open(line: str) -> Optional[str]:
    """Codebase named by a grant header line, ``""`` for global, else None."""
    match = OPEN_BLOCK_RE.fullmatch(line)
    if match is None:
        return None
    return match.group(1)


def is_ignorable_line(line: str) -> bool:
    return bool(
        CLOSE_BLOCK_RE.fullmatch(line)
        or BLOCK_COMMENT_START_RE.fullmatch(line)
        or BLOCK_COMMENT_END_RE.fullmatch(line)
        or LINE_COMMENT_RE.fullmatch(line)
    )


def parse_policy_with_report(
    text: str,
    *,
    path: Optional[Path | str] = None,
    global_alias: Optional[str] = None,
) -> Tuple[PolicyModel, List[Tuple[int, str]]]:
    model = PolicyModel(path, global_alias=global_alias)
    discarded: List[Tuple[int, str]] = []
    codebase = GLOBAL_CODEBASE

    for lineno, line in numbered_lines(text):
        opened = parse_block_open(line)
        if opened is not None:
            codebase = opened
            model.ensure_codebase(codebase)
            continue

        if is_ignorable_line(line):
            continue

        entry = model.ensure_codebase(codebase)
        kind = match_permission(line)
        if kind is not None:
            entry.set_permission(kind, True)
            continue

        custom = CustomPermission.parse(line.strip())
        if custom is not None:
            entry.add_custom(custom)
            continue

        if line.strip():
            discarded.append((lineno, line))

    model.dirty = False
    return model, discarded


def parse_policy(
    text: str,
    *,
    path: Optional[Path | str] = None,
    global_alias: Optional[str] = None,
) -> PolicyModel:
    model, _discarded = parse_policy_with_report(text, path=path, global_alias=global_alias)
    return model
