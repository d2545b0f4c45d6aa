"""Verbose diagnostics written to stderr."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Optional, TextIO

from .config import _env_flag

VERBOSE = _env_flag("POLICY_EDITOR_VERBOSE", default=False)


def set_verbose(enabled: bool) -> None:
    global VERBOSE
    VERBOSE = bool(enabled)


def log(msg: str, *, stderr: Optional[TextIO] = None) -> None:
    if not VERBOSE:
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[policyeditor] {ts} {msg}", file=stderr or sys.stderr)
