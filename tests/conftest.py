"""Shared pytest fixtures for workfriends tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from workfriends.config.settings import WorkFriendsSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of every test."""
    for name in (
        "WORKFRIENDS_CONFIG",
        "WORKFRIENDS_JSON_OUTPUT",
        "WORKFRIENDS_QUIET",
        "WORKFRIENDS_VERBOSE",
        "WORKFRIENDS_LOG_JSON",
        "WORKFRIENDS_ORGANIZATION__KNOWN_DOMAINS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> WorkFriendsSettings:
    """Settings with no config file and code defaults."""
    return WorkFriendsSettings.from_cli(start=tmp_path)


@pytest.fixture
def org_config(tmp_path: Path) -> Path:
    """A workfriends.toml declaring two known domains."""
    path = tmp_path / "workfriends.toml"
    path.write_text('[organization]\nknown_domains = ["worktionary.com", "worktionary.ai"]\n')
    return path


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so config discovery starts there.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes. Tests that need the path can also request ``tmp_path`` directly.
    """
    monkeypatch.chdir(tmp_path)
