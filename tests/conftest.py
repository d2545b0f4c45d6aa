"""Pytest configuration for shared markers and policy-file fixtures."""

from pathlib import Path

import pytest

from policyeditor.policy import log as policy_log

POLICY_ENV_VARS = (
    "POLICY_EDITOR_FILE",
    "POLICY_EDITOR_ENCODING",
    "POLICY_EDITOR_LOCK_BLOCKING",
    "POLICY_EDITOR_VERBOSE",
)


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "flock: takes real advisory locks on files under tmp_path.",
    )


@pytest.fixture(autouse=True)
def _isolate_policy_env(monkeypatch, tmp_path: Path):
    for name in POLICY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setattr(policy_log, "VERBOSE", False)


@pytest.fixture
def policy_path(tmp_path: Path) -> Path:
    return tmp_path / "java.policy"
