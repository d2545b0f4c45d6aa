"""Invariant checks for the policy model and rendered block ordering."""

from __future__ import annotations

from typing import List

from policyeditor.permissions import PERMISSION_KIND_ORDER

from .config import GLOBAL_CODEBASE
from .models import PolicyModel


def _validate_model(model: PolicyModel) -> None:
    codebases = model.codebases()
    if GLOBAL_CODEBASE not in codebases:
        raise ValueError("Missing global codebase entry")
    if len(set(codebases)) != len(codebases):
        raise ValueError(f"Duplicate codebase entries: {codebases}")

    expected_kinds = set(PERMISSION_KIND_ORDER)
    for entry in model.entries():
        if set(entry.permissions) != expected_kinds:
            missing = expected_kinds - set(entry.permissions)
            raise ValueError(f"Incomplete permission map for {entry.codebase!r}: {missing}")
        customs = entry.custom_permissions
        if len(set(customs)) != len(customs):
            raise ValueError(f"Duplicate custom permissions for {entry.codebase!r}")


def _grant_header(codebase: str) -> str:
    if codebase == GLOBAL_CODEBASE:
        return "grant {"
    return f'grant codeBase "{codebase}" {{'


def _validate_rendered(text: str, model: PolicyModel) -> None:
    lines = text.splitlines()
    positions: List[int] = []
    for codebase in model.codebases():
        header = _grant_header(codebase)
        matches = [idx for idx, line in enumerate(lines) if line == header]
        if not matches:
            raise ValueError(f"Missing grant block {header}")
        if len(matches) > 1:
            raise ValueError(f"Duplicate grant block {header}")
        positions.append(matches[0])

    if positions != sorted(positions):
        raise ValueError("Grant block order incorrect")
