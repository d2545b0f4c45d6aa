"""Load and save entry points used by editing front ends."""

from __future__ import annotations

import datetime as _dt
from pathlib import Path
from typing import Dict, Optional

from .config import config_from_env, resolve_policy_path
from .errors import PathLike, PolicyFileError
from .fileio import check_path, is_writable, read_text, write_text
from .log import log
from .models import PolicyModel
from .parsing import parse_policy_with_report
from .rendering import render_policy


def _target_path(path: Optional[PathLike], cfg: Dict) -> Path:
    if path is None or path == "":
        return check_path(resolve_policy_path(cfg))
    return check_path(path)


def load_policy(path: Optional[PathLike] = None, *, cfg: Dict | None = None) -> PolicyModel:
    """Read and parse a policy file.

    ``path=None`` opens the configured default policy file. Raises a
    ``PolicyFileError`` subclass when the text cannot be obtained; malformed
    content never raises.
    """
    merged = config_from_env(cfg)
    target = _target_path(path, merged)
    try:
        text = read_text(target, encoding=merged["encoding"], blocking=bool(merged["lockBlocking"]))
    except PolicyFileError as exc:
        log(f"could not open {target}: {exc}")
        raise

    model, discarded = parse_policy_with_report(text, path=target, global_alias=merged["globalDisplayName"])
    for lineno, line in discarded:
        log(f"{target}:{lineno}: discarded unrecognized line: {line.strip()}")

    if not is_writable(target):
        model.read_only = True
        log(f"{target} is read-only; changes cannot be saved in place")
    return model


def save_policy(
    path: Optional[PathLike],
    model: PolicyModel,
    *,
    cfg: Dict | None = None,
    now: Optional[_dt.datetime] = None,
    force: bool = False,
) -> bool:
    """Render ``model`` and write it to ``path`` (or ``model.path``).

    Returns False without touching the file when there is nothing to save.
    """
    if not model.dirty and not force:
        return False

    merged = config_from_env(cfg)
    target = _target_path(path if path not in (None, "") else model.path, merged)
    text = render_policy(model, cfg=merged, now=now)
    try:
        write_text(target, text, encoding=merged["encoding"], blocking=bool(merged["lockBlocking"]))
    except PolicyFileError as exc:
        log(f"could not write {target}: {exc}")
        raise

    model.mark_saved(target)
    model.read_only = False
    log(f"saved {len(model.codebases())} grant block(s) to {target}")
    return True
