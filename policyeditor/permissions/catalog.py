"""Recognized permission kinds and their canonical policy statements."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple


class PermissionKind(Enum):
    """Closed, ordered set of permissions the editor can toggle.

    Each member's value is ``(title, description, statement)``. Declaration
    order is the catalog order used for display and serialization.
    """

    ALL_PERMISSIONS = (
        "All permissions",
        "Grant every permission. Overrides all other settings.",
        "permission java.security.AllPermission;",
    )
    READ_LOCAL_FILES = (
        "Read local files",
        "Read files in the user's home directory.",
        'permission java.io.FilePermission "${user.home}${/}*", "read";',
    )
    WRITE_LOCAL_FILES = (
        "Write to local files",
        "Create and modify files in the user's home directory.",
        'permission java.io.FilePermission "${user.home}${/}*", "write";',
    )
    DELETE_LOCAL_FILES = (
        "Delete local files",
        "Delete files in the user's home directory.",
        'permission java.io.FilePermission "${user.home}${/}*", "delete";',
    )
    READ_SYSTEM_FILES = (
        "Read all system files",
        "Read any file the user can read.",
        'permission java.io.FilePermission "<<ALL FILES>>", "read";',
    )
    WRITE_SYSTEM_FILES = (
        "Write all system files",
        "Modify any file the user can write.",
        'permission java.io.FilePermission "<<ALL FILES>>", "write";',
    )
    READ_TMP_FILES = (
        "Read temporary files",
        "Read files in the temporary directory.",
        'permission java.io.FilePermission "${java.io.tmpdir}${/}*", "read";',
    )
    WRITE_TMP_FILES = (
        "Write temporary files",
        "Create and modify files in the temporary directory.",
        'permission java.io.FilePermission "${java.io.tmpdir}${/}*", "write";',
    )
    DELETE_TMP_FILES = (
        "Delete temporary files",
        "Delete files in the temporary directory.",
        'permission java.io.FilePermission "${java.io.tmpdir}${/}*", "delete";',
    )
    READ_PROPERTIES = (
        "Read system properties",
        "Read Java system properties.",
        'permission java.util.PropertyPermission "*", "read";',
    )
    WRITE_PROPERTIES = (
        "Write system properties",
        "Change Java system properties.",
        'permission java.util.PropertyPermission "*", "write";',
    )
    NETWORK = (
        "Network access",
        "Open network connections to any host.",
        'permission java.net.SocketPermission "*", "connect";',
    )
    EXEC_COMMANDS = (
        "Execute commands",
        "Run programs on the local system.",
        'permission java.io.FilePermission "<<ALL FILES>>", "execute";',
    )
    GET_ENV = (
        "Read environment variables",
        "Read the process environment.",
        'permission java.lang.RuntimePermission "getenv.*";',
    )
    JAVA_REFLECTION = (
        "Java reflection",
        "Bypass access checks through reflection.",
        'permission java.lang.reflect.ReflectPermission "suppressAccessChecks";',
    )
    GET_CLASSLOADER = (
        "Get class loader",
        "Obtain the class loader of loaded code.",
        'permission java.lang.RuntimePermission "getClassLoader";',
    )
    ACCESS_CLASS_IN_PACKAGE = (
        "Access classes in any package",
        "Load classes from restricted packages.",
        'permission java.lang.RuntimePermission "accessClassInPackage.*";',
    )
    ACCESS_DECLARED_MEMBERS = (
        "Access declared members",
        "Inspect private fields and methods of classes.",
        'permission java.lang.RuntimePermission "accessDeclaredMembers";',
    )
    ALL_AWT = (
        "All AWT permissions",
        "Full access to the windowing toolkit.",
        'permission java.awt.AWTPermission "*";',
    )
    CLIPBOARD = (
        "Clipboard access",
        "Read and write the system clipboard.",
        'permission java.awt.AWTPermission "accessClipboard";',
    )
    PRINT = (
        "Print documents",
        "Send jobs to a printer.",
        'permission java.lang.RuntimePermission "queuePrintJob";',
    )
    PLAY_AUDIO = (
        "Play sounds",
        "Play audio through the sound system.",
        'permission javax.sound.sampled.AudioPermission "play";',
    )
    RECORD_AUDIO = (
        "Record audio",
        "Capture audio from input devices.",
        'permission javax.sound.sampled.AudioPermission "record";',
    )

    def __init__(self, title: str, description: str, statement: str) -> None:
        self.title = title
        self.description = description
        self.statement = statement

    @property
    def order(self) -> int:
        return _KIND_ORDER_INDEX[self]

    def __lt__(self, other: "PermissionKind") -> bool:
        if not isinstance(other, PermissionKind):
            return NotImplemented
        return self.order < other.order


PERMISSION_KIND_ORDER: Tuple[PermissionKind, ...] = tuple(PermissionKind)
_KIND_ORDER_INDEX = {kind: idx for idx, kind in enumerate(PERMISSION_KIND_ORDER)}


def all_kinds() -> Tuple[PermissionKind, ...]:
    return PERMISSION_KIND_ORDER


def canonical_text(kind: PermissionKind, *, indent: str = "\t") -> str:
    """Exact text emitted for an enabled ``kind`` inside a grant block."""
    return f"{indent}{kind.statement}"


def kind_by_name(name: str) -> Optional[PermissionKind]:
    value = str(name or "").strip().upper()
    if not value:
        return None
    return PermissionKind.__members__.get(value)
