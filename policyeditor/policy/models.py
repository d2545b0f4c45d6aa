"""In-memory policy model: ordered codebase entries and their permissions."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional
from urllib.parse import urlsplit

from policyeditor.permissions import (
    PERMISSION_KIND_ORDER,
    CustomPermission,
    PermissionKind,
    match_permission,
)

from .config import CODEBASE_SCHEMES, DEFAULT_CFG, GLOBAL_CODEBASE, HOSTLESS_SCHEMES
from .log import log


def _default_permissions() -> Dict[PermissionKind, bool]:
    return {kind: False for kind in PERMISSION_KIND_ORDER}


def is_valid_codebase_url(url: str) -> bool:
    value = str(url or "")
    if not value or value != value.strip():
        return False
    if any(ch.isspace() or ch == '"' for ch in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    scheme = parts.scheme.lower()
    if scheme not in CODEBASE_SCHEMES:
        return False
    if scheme in HOSTLESS_SCHEMES:
        return bool(parts.netloc or parts.path)
    return bool(parts.netloc)


class CodebaseEntry:
    """Permissions granted to one codebase; ``""`` is the global entry."""

    def __init__(self, codebase: str) -> None:
        self.codebase = codebase
        self.permissions: Dict[PermissionKind, bool] = _default_permissions()
        self._custom: List[CustomPermission] = []

    @property
    def is_global(self) -> bool:
        return self.codebase == GLOBAL_CODEBASE

    @property
    def custom_permissions(self) -> List[CustomPermission]:
        return list(self._custom)

    def enabled_kinds(self) -> List[PermissionKind]:
        return [kind for kind in PERMISSION_KIND_ORDER if self.permissions[kind]]

    def set_permission(self, kind: PermissionKind, enabled: bool) -> bool:
        if not isinstance(kind, PermissionKind):
            raise TypeError(f"Unknown permission kind: {kind!r}")
        enabled = bool(enabled)
        if self.permissions[kind] == enabled:
            return False
        self.permissions[kind] = enabled
        return True

    def add_custom(self, perm: CustomPermission) -> bool:
        # A custom statement identical to a catalog statement is that kind.
        kind = match_permission(perm.to_text())
        if kind is not None:
            return self.set_permission(kind, True)
        if perm in self._custom:
            return False
        self._custom.append(perm)
        return True

    def replace_custom(self, perms: Iterable[CustomPermission]) -> bool:
        incoming = list(perms)
        for perm in incoming:
            if not isinstance(perm, CustomPermission):
                raise TypeError(f"Expected CustomPermission, got {perm!r}")
        before_custom = list(self._custom)
        before_perms = dict(self.permissions)
        self._custom = []
        for perm in incoming:
            self.add_custom(perm)
        return self._custom != before_custom or self.permissions != before_perms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodebaseEntry):
            return NotImplemented
        return (
            self.codebase == other.codebase
            and self.permissions == other.permissions
            and set(self._custom) == set(other._custom)
        )

    def __repr__(self) -> str:
        enabled = ", ".join(kind.name for kind in self.enabled_kinds())
        return f"CodebaseEntry({self.codebase!r}, enabled=[{enabled}], custom={len(self._custom)})"


class PolicyModel:
    """Ordered collection of codebase entries for one policy file.

    The model does no locking of its own; callers serialize access between
    an editing context and the background load or save working on it.
    """

    def __init__(self, path: Optional[Path | str] = None, *, global_alias: Optional[str] = None) -> None:
        self.path: Optional[Path] = Path(path) if path else None
        self.global_alias = DEFAULT_CFG["globalDisplayName"] if global_alias is None else global_alias
        self.dirty = False
        self.read_only = False
        self._entries: Dict[str, CodebaseEntry] = {}
        self.ensure_codebase(GLOBAL_CODEBASE)

    def _key(self, codebase: str) -> str:
        if codebase == self.global_alias:
            return GLOBAL_CODEBASE
        return codebase

    def _require(self, codebase: str) -> CodebaseEntry:
        key = self._key(codebase)
        entry = self._entries.get(key)
        if entry is None:
            raise KeyError(f"Unknown codebase: {codebase!r}")
        return entry

    def ensure_codebase(self, codebase: str) -> CodebaseEntry:
        """Return the entry for ``codebase``, creating it unvalidated if needed."""
        key = self._key(codebase)
        entry = self._entries.get(key)
        if entry is None:
            entry = CodebaseEntry(key)
            self._entries[key] = entry
        return entry

    def codebases(self) -> List[str]:
        return list(self._entries)

    def has_codebase(self, codebase: str) -> bool:
        return self._key(codebase) in self._entries

    def entry(self, codebase: str) -> CodebaseEntry:
        return self._require(codebase)

    def entries(self) -> List[CodebaseEntry]:
        return list(self._entries.values())

    def display_name(self, codebase: str) -> str:
        key = self._key(codebase)
        return self.global_alias if key == GLOBAL_CODEBASE else key

    def permissions_for(self, codebase: str) -> Dict[PermissionKind, bool]:
        return dict(self._require(codebase).permissions)

    def custom_permissions_for(self, codebase: str) -> List[CustomPermission]:
        return self._require(codebase).custom_permissions

    def set_permission(self, codebase: str, kind: PermissionKind, enabled: bool) -> bool:
        changed = self._require(codebase).set_permission(kind, enabled)
        if changed:
            self.dirty = True
        return changed

    def set_custom_permissions(self, codebase: str, perms: Iterable[CustomPermission]) -> bool:
        changed = self._require(codebase).replace_custom(perms)
        if changed:
            self.dirty = True
        return changed

    def add_codebase(self, url: str) -> bool:
        if self.has_codebase(url):
            return False
        if not is_valid_codebase_url(url):
            log(f"Could not add codebase {url!r}: not a valid URL")
            return False
        self.ensure_codebase(url)
        self.dirty = True
        return True

    def add_codebases(self, urls: Iterable[str]) -> List[str]:
        return [url for url in urls if self.add_codebase(url)]

    def remove_codebase(self, codebase: str) -> bool:
        key = self._key(codebase)
        if key == GLOBAL_CODEBASE or key not in self._entries:
            return False
        del self._entries[key]
        self.dirty = True
        return True

    def mark_saved(self, path: Optional[Path | str] = None) -> None:
        if path:
            self.path = Path(path)
        self.dirty = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolicyModel):
            return NotImplemented
        return self.entries() == other.entries()

    def __repr__(self) -> str:
        return f"PolicyModel(path={self.path!s}, codebases={self.codebases()!r}, dirty={self.dirty})"
