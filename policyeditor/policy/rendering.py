"""Policy text rendering for a PolicyModel."""

from __future__ import annotations

import datetime as _dt
from typing import Dict, List, Optional

from policyeditor.permissions import canonical_text

from .config import AUTOGENERATED_NOTICE, merge_cfg
from .models import CodebaseEntry, PolicyModel
from .validate import _grant_header, _validate_model, _validate_rendered


def render_policy(
    model: PolicyModel,
    *,
    cfg: Dict | None = None,
    now: Optional[_dt.datetime] = None,
) -> str:
    """Render ``model`` into canonical policy text.

    Enabled kinds are written in catalog order, then custom statements in
    insertion order. Comments and unrecognized constructs from the source
    file never reappear.
    """
    merged = merge_cfg(cfg, None)
    _validate_model(model)

    lines: List[str] = []
    lines.extend(_preamble(merged, now))
    for entry in model.entries():
        lines.extend(_render_entry(entry, merged))

    text = "\n".join(lines) + "\n"
    _validate_rendered(text, model)
    return text


def _preamble(cfg: Dict, now: Optional[_dt.datetime]) -> List[str]:
    stamp = (now or _dt.datetime.now()).strftime(cfg["timestampFormat"])
    return [
        AUTOGENERATED_NOTICE,
        f"/* Generated by {cfg['generatorName']} at {stamp} */",
    ]


def _render_entry(entry: CodebaseEntry, cfg: Dict) -> List[str]:
    indent = cfg["indent"]
    lines = [_grant_header(entry.codebase)]
    for kind in entry.enabled_kinds():
        lines.append(canonical_text(kind, indent=indent))
    for perm in entry.custom_permissions:
        lines.append(f"{indent}{perm.to_text()}")
    lines.append("};")
    return lines
