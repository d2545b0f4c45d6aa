"""Editor configuration, defaults and environment overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict

AUTOGENERATED_NOTICE = "/* DO NOT MODIFY! AUTO-GENERATED */"
GLOBAL_CODEBASE = ""

DEFAULT_CFG: Dict = {
    "policyPath": "",
    "encoding": "utf-8",
    "lockBlocking": True,
    "globalDisplayName": "All Applets",
    "generatorName": "PolicyEditor",
    "timestampFormat": "%Y-%m-%d %H:%M:%S",
    "indent": "\t",
}

# Schemes accepted by add_codebase; anything else is not a codebase URL.
CODEBASE_SCHEMES = ("http", "https", "ftp", "file", "jar")
HOSTLESS_SCHEMES = ("file", "jar")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on", "y"}


def _env_str(name: str, default: str = "") -> str:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def default_policy_path() -> Path:
    """User policy file location, honoring ``XDG_CONFIG_HOME``."""
    base = _env_str("XDG_CONFIG_HOME") or str(Path("~/.config").expanduser())
    return Path(base) / "icedtea-web" / "security" / "java.policy"


def merge_cfg(base_cfg: Dict | None, override_cfg: Dict | None) -> Dict:
    merged = dict(DEFAULT_CFG)
    if base_cfg:
        merged.update(base_cfg)
    if override_cfg:
        merged.update(override_cfg)
    return merged


def config_from_env(override_cfg: Dict | None = None) -> Dict:
    env_cfg: Dict = {
        "encoding": _env_str("POLICY_EDITOR_ENCODING", DEFAULT_CFG["encoding"]),
        "lockBlocking": _env_flag("POLICY_EDITOR_LOCK_BLOCKING", default=DEFAULT_CFG["lockBlocking"]),
    }
    policy_path = _env_str("POLICY_EDITOR_FILE")
    if policy_path:
        env_cfg["policyPath"] = policy_path
    return merge_cfg(env_cfg, override_cfg)


def resolve_policy_path(cfg: Dict) -> Path:
    configured = str(cfg.get("policyPath") or "").strip()
    if configured:
        return Path(configured).expanduser()
    return default_policy_path()
