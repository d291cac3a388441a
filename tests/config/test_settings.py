"""Tests for WorkFriendsSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from workfriends.config.settings import (
    CONFIG_FILENAME,
    WorkFriendsSettings,
    resolve_config_path,
)


class TestDefaults:
    def test_all_defaults(self, settings: WorkFriendsSettings) -> None:
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.organization.known_domains == []

    def test_frozen(self, settings: WorkFriendsSettings) -> None:
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestResolveConfigPath:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[organization]\nknown_domains = ["a.com"]\n')
        assert resolve_config_path(start=tmp_path) == config_file.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert resolve_config_path(start=child) == config_file.resolve()

    def test_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert resolve_config_path(start=child) is None

    def test_explicit_path_wins_over_discovery(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        custom = tmp_path / "custom.toml"
        custom.write_text("")
        assert resolve_config_path(str(custom), start=tmp_path) == custom

    def test_env_var_wins_over_discovery(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        custom = tmp_path / "custom.toml"
        custom.write_text("")
        monkeypatch.setenv("WORKFRIENDS_CONFIG", str(custom))
        assert resolve_config_path(start=tmp_path) == custom

    def test_explicit_path_wins_over_env_var(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from_env = tmp_path / "env.toml"
        from_env.write_text("")
        explicit = tmp_path / "explicit.toml"
        explicit.write_text("")
        monkeypatch.setenv("WORKFRIENDS_CONFIG", str(from_env))
        assert resolve_config_path(str(explicit)) == explicit

    def test_missing_explicit_path_raises(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        missing = tmp_path / "missing.toml"
        with pytest.raises(click.ClickException, match="--config"):
            resolve_config_path(str(missing), start=tmp_path)

    def test_env_var_pointing_nowhere_raises(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv("WORKFRIENDS_CONFIG", str(tmp_path / "missing.toml"))
        with pytest.raises(click.ClickException, match="WORKFRIENDS_CONFIG"):
            resolve_config_path(start=tmp_path)


class TestTomlSource:
    def test_loads_explicit_path(self, org_config: Path) -> None:
        settings = WorkFriendsSettings.from_cli(config_path=str(org_config))
        assert settings.config_path == org_config
        assert settings.organization.known_domains == ["worktionary.com", "worktionary.ai"]

    def test_discovers_by_walking_up(self, org_config: Path) -> None:
        child = org_config.parent / "team" / "notes"
        child.mkdir(parents=True)
        settings = WorkFriendsSettings.from_cli(start=child)
        assert settings.config_path == org_config.resolve()
        assert settings.organization.known_domains == ["worktionary.com", "worktionary.ai"]

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        toml = tmp_path / "workfriends.toml"
        toml.write_text("")
        settings = WorkFriendsSettings.from_cli(config_path=str(toml))
        assert settings.organization.known_domains == []

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        toml = tmp_path / "workfriends.toml"
        toml.write_text("[organization\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            WorkFriendsSettings.from_cli(config_path=str(toml))

    def test_missing_explicit_path_is_an_error(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            WorkFriendsSettings.from_cli(config_path=str(tmp_path / "missing.toml"))


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = WorkFriendsSettings.from_cli(
            start=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_set_flag_overrides_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "workfriends.toml"
        toml.write_text("verbose = false\n")
        settings = WorkFriendsSettings.from_cli(config_path=str(toml), verbose=True)
        assert settings.verbose is True

    def test_unset_flag_does_not_mask_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "workfriends.toml"
        toml.write_text("quiet = true\n")
        settings = WorkFriendsSettings.from_cli(config_path=str(toml), quiet=False)
        assert settings.quiet is True

    def test_unset_flag_does_not_mask_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WORKFRIENDS_JSON_OUTPUT", "true")
        settings = WorkFriendsSettings.from_cli(start=tmp_path, json_output=False)
        assert settings.json_output is True


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WORKFRIENDS_QUIET", "true")
        settings = WorkFriendsSettings.from_cli(start=tmp_path)
        assert settings.quiet is True

    def test_env_var_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        toml = tmp_path / "workfriends.toml"
        toml.write_text("quiet = false\n")
        monkeypatch.setenv("WORKFRIENDS_QUIET", "true")
        settings = WorkFriendsSettings.from_cli(config_path=str(toml))
        assert settings.quiet is True

    def test_nested_env_var_overrides_toml(
        self, org_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WORKFRIENDS_ORGANIZATION__KNOWN_DOMAINS", '["example.org"]')
        settings = WorkFriendsSettings.from_cli(config_path=str(org_config))
        assert settings.organization.known_domains == ["example.org"]
