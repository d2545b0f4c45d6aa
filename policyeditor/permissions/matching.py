"""Line matching against the recognized permission catalog."""

from __future__ import annotations

from typing import Optional

from .catalog import PERMISSION_KIND_ORDER, PermissionKind


def match_permission(line: str) -> Optional[PermissionKind]:
    text = str(line or "").strip()
    if not text:
        return None
    for kind in PERMISSION_KIND_ORDER:
        if kind.statement == text:
            return kind
    return None
