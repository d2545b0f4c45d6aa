"""Permission catalog and custom-statement semantics shared by parser and renderer."""

from .catalog import (
    PERMISSION_KIND_ORDER,
    PermissionKind,
    all_kinds,
    canonical_text,
    kind_by_name,
)
from .custom import CustomPermission
from .matching import match_permission
from .text import (
    COMMENT_END,
    STATEMENT_KEYWORD,
    STATEMENT_TERMINATOR,
    collapse_whitespace,
    looks_like_statement,
    normalize_statement,
)

__all__ = [
    "COMMENT_END",
    "PERMISSION_KIND_ORDER",
    "PermissionKind",
    "all_kinds",
    "canonical_text",
    "kind_by_name",
    "CustomPermission",
    "match_permission",
    "STATEMENT_KEYWORD",
    "STATEMENT_TERMINATOR",
    "collapse_whitespace",
    "looks_like_statement",
    "normalize_statement",
]
