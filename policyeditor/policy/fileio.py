"""Locked reads and writes of policy files.

Locks are advisory ``flock`` locks on the policy file itself. They only
coordinate processes that take the same locks (other editor instances);
they do not stop unrelated writers. Writes truncate in place, so a failure
partway through can leave a short file behind.
"""

from __future__ import annotations

import fcntl
import os
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator

from .errors import (
    MalformedPolicyPath,
    PathLike,
    PolicyIOFailure,
    PolicyLockUnavailable,
    classify_os_error,
)
from .log import log


def check_path(path: PathLike) -> Path:
    raw = str(path) if path is not None else ""
    if not raw.strip():
        raise MalformedPolicyPath("Policy file path is empty", None)
    if "\x00" in raw:
        raise MalformedPolicyPath(f"Policy file path contains a NUL byte: {raw!r}", None)
    try:
        resolved = Path(raw).expanduser()
    except RuntimeError as exc:
        raise MalformedPolicyPath(f"Cannot expand home directory in policy file path: {raw!r}", None) from exc
    if resolved.is_dir():
        raise MalformedPolicyPath(f"Policy file path is a directory: {resolved}", resolved)
    return resolved


def is_writable(path: PathLike) -> bool:
    target = check_path(path)
    if target.exists():
        return os.access(target, os.W_OK)
    return os.access(target.parent, os.W_OK)


@contextmanager
def policy_lock(
    path: PathLike,
    *,
    exclusive: bool,
    blocking: bool = True,
    create: bool = False,
    encoding: str = "utf-8",
) -> Iterator[IO[str]]:
    """Hold an advisory lock on ``path`` for the duration of the block.

    Yields the open text handle the lock was taken on. Shared locks open the
    file for reading; exclusive locks open it for appending, creating it when
    ``create`` is set.
    """
    target = check_path(path)
    mode = "a+" if create else ("r+" if exclusive else "r")
    try:
        fh = open(target, mode, encoding=encoding)
    except OSError as exc:
        raise classify_os_error(exc, target) from exc

    try:
        flags = fcntl.LOCK_EX if exclusive else fcntl.LOCK_SH
        if not blocking:
            flags |= fcntl.LOCK_NB
        try:
            fcntl.flock(fh, flags)
        except BlockingIOError as exc:
            log(f"lock busy: {target}")
            raise PolicyLockUnavailable(f"Policy file is locked by another process: {target}", target) from exc
        except OSError as exc:
            raise classify_os_error(exc, target) from exc
        try:
            yield fh
        finally:
            fcntl.flock(fh, fcntl.LOCK_UN)
    finally:
        fh.close()


def read_text(path: PathLike, *, encoding: str = "utf-8", blocking: bool = True) -> str:
    with policy_lock(path, exclusive=False, blocking=blocking, encoding=encoding) as fh:
        try:
            return fh.read()
        except UnicodeDecodeError as exc:
            raise PolicyIOFailure(f"Policy file is not valid {encoding}: {exc.reason}", fh.name) from exc
        except OSError as exc:
            raise classify_os_error(exc, path) from exc


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8", blocking: bool = True) -> None:
    target = check_path(path)
    try:
        content.encode(encoding)
    except UnicodeEncodeError as exc:
        raise PolicyIOFailure(f"Policy text cannot be encoded as {encoding}: {exc.reason}", target) from exc
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise classify_os_error(exc, target) from exc

    with policy_lock(target, exclusive=True, blocking=blocking, create=True, encoding=encoding) as fh:
        try:
            fh.seek(0)
            fh.truncate()
            fh.write(content)
            fh.flush()
            os.fsync(fh.fileno())
        except OSError as exc:
            raise classify_os_error(exc, target) from exc


__all__ = [
    "check_path",
    "is_writable",
    "policy_lock",
    "read_text",
    "write_text",
]
