import errno
from pathlib import Path

import pytest

from policyeditor.policy import errors, fileio


def test_check_path_rejects_malformed_paths(tmp_path: Path):
    with pytest.raises(errors.MalformedPolicyPath, match="empty"):
        fileio.check_path("")
    with pytest.raises(errors.MalformedPolicyPath, match="NUL"):
        fileio.check_path("bad\x00name")
    with pytest.raises(errors.MalformedPolicyPath, match="directory"):
        fileio.check_path(tmp_path)

    assert fileio.check_path(tmp_path / "java.policy") == tmp_path / "java.policy"


def test_read_text_missing_file_is_not_found(policy_path: Path):
    with pytest.raises(errors.PolicyFileNotFound) as excinfo:
        fileio.read_text(policy_path)

    assert excinfo.value.path == policy_path


def test_write_then_read_round_trips_and_creates_parents(tmp_path: Path):
    target = tmp_path / "nested" / "dir" / "java.policy"

    fileio.write_text(target, "grant {\n};\n")
    assert fileio.read_text(target) == "grant {\n};\n"

    fileio.write_text(target, "short\n")
    assert target.read_text(encoding="utf-8") == "short\n"


@pytest.mark.flock
def test_nonblocking_lock_contention_raises(policy_path: Path):
    policy_path.write_text("grant {\n};\n", encoding="utf-8")

    with fileio.policy_lock(policy_path, exclusive=True):
        with pytest.raises(errors.PolicyLockUnavailable):
            fileio.read_text(policy_path, blocking=False)
        with pytest.raises(errors.PolicyLockUnavailable):
            fileio.write_text(policy_path, "x", blocking=False)

    assert fileio.read_text(policy_path, blocking=False) == "grant {\n};\n"


@pytest.mark.flock
def test_shared_locks_do_not_block_each_other(policy_path: Path):
    policy_path.write_text("data", encoding="utf-8")

    with fileio.policy_lock(policy_path, exclusive=False) as fh:
        assert fh.read() == "data"
        assert fileio.read_text(policy_path, blocking=False) == "data"


@pytest.mark.flock
def test_lock_is_released_when_body_raises(policy_path: Path):
    policy_path.write_text("data", encoding="utf-8")

    with pytest.raises(RuntimeError):
        with fileio.policy_lock(policy_path, exclusive=True):
            raise RuntimeError("boom")

    fileio.write_text(policy_path, "after", blocking=False)
    assert policy_path.read_text(encoding="utf-8") == "after"


def test_write_text_permission_denied_is_classified(monkeypatch, policy_path: Path):
    def _deny(*_args, **_kwargs):
        raise PermissionError(errno.EACCES, "Permission denied", str(policy_path))

    monkeypatch.setattr(fileio, "open", _deny, raising=False)

    with pytest.raises(errors.PolicyPermissionDenied):
        fileio.write_text(policy_path, "x")


def test_is_writable_checks_file_or_parent(policy_path: Path):
    assert fileio.is_writable(policy_path) is True
    policy_path.write_text("x", encoding="utf-8")
    assert fileio.is_writable(policy_path) is True


@pytest.mark.parametrize(
    "exc,expected",
    [
        (FileNotFoundError(errno.ENOENT, "missing"), errors.PolicyFileNotFound),
        (PermissionError(errno.EACCES, "denied"), errors.PolicyPermissionDenied),
        (IsADirectoryError(errno.EISDIR, "dir"), errors.MalformedPolicyPath),
        (OSError(errno.ENAMETOOLONG, "too long"), errors.MalformedPolicyPath),
        (BlockingIOError(errno.EAGAIN, "busy"), errors.PolicyLockUnavailable),
        (OSError(errno.EIO, "io"), errors.PolicyIOFailure),
    ],
)
def test_classify_os_error(exc, expected):
    classified = errors.classify_os_error(exc, "/tmp/java.policy")

    assert type(classified) is expected
    assert isinstance(classified, errors.PolicyFileError)
    assert classified.path == Path("/tmp/java.policy")


def test_check_path_unknown_home_directory_is_malformed():
    with pytest.raises(errors.MalformedPolicyPath, match="home directory"):
        fileio.check_path("~no_such_user_zz/java.policy")


def test_read_text_rejects_undecodable_bytes(policy_path: Path):
    raw = b'grant {\n\tpermission x.Y "caf\xe9";\n};\n'
    policy_path.write_bytes(raw)

    with pytest.raises(errors.PolicyIOFailure, match="not valid utf-8") as excinfo:
        fileio.read_text(policy_path)

    assert excinfo.value.path == policy_path
    assert policy_path.read_bytes() == raw


def test_write_text_rejects_unencodable_text_without_touching_file(policy_path: Path):
    policy_path.write_text("grant {\n};\n", encoding="utf-8")

    with pytest.raises(errors.PolicyIOFailure, match="cannot be encoded"):
        fileio.write_text(policy_path, 'permission x.Y "café";', encoding="ascii")

    assert policy_path.read_text(encoding="utf-8") == "grant {\n};\n"
