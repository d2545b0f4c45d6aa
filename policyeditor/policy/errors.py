"""File-level failures surfaced by load and save."""

from __future__ import annotations

import errno
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class PolicyFileError(Exception):
    """Base for every failure to obtain or store policy text."""

    def __init__(self, message: str, path: PathLike | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path not in (None, "") else None


class PolicyFileNotFound(PolicyFileError):
    pass


class PolicyPermissionDenied(PolicyFileError):
    pass


class MalformedPolicyPath(PolicyFileError):
    pass


class PolicyLockUnavailable(PolicyFileError):
    pass


class PolicyIOFailure(PolicyFileError):
    pass


def classify_os_error(exc: OSError, path: PathLike) -> PolicyFileError:
    """Map an ``OSError`` from file access onto the policy error taxonomy."""
    detail = exc.strerror or str(exc)
    if isinstance(exc, FileNotFoundError):
        return PolicyFileNotFound(f"Policy file not found: {path}", path)
    if isinstance(exc, PermissionError):
        return PolicyPermissionDenied(f"Permission denied: {path} ({detail})", path)
    if isinstance(exc, (IsADirectoryError, NotADirectoryError)) or exc.errno in (errno.ENAMETOOLONG, errno.EINVAL):
        return MalformedPolicyPath(f"Not a valid policy file path: {path} ({detail})", path)
    if isinstance(exc, BlockingIOError):
        return PolicyLockUnavailable(f"Policy file is locked by another process: {path}", path)
    return PolicyIOFailure(f"I/O error on {path}: {detail}", path)
