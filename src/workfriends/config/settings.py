"""Unified settings — CLI flags, env vars, and workfriends.toml in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — flags the user actually passed on the command line
  2. Env vars     — ``WORKFRIENDS_*`` prefix
  3. TOML file    — ``workfriends.toml``, explicit or found by walking up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from workfriends.config.models import OrganizationConfig

CONFIG_FILENAME = "workfriends.toml"
CONFIG_ENV_VAR = "WORKFRIENDS_CONFIG"


def resolve_config_path(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the TOML file for this invocation.

    An explicit ``--config`` wins, then ``WORKFRIENDS_CONFIG``; either must
    name an existing file. Otherwise the nearest ``workfriends.toml`` in
    *start* (default: cwd) or one of its parents is used, if any.

    Raises:
        click.ClickException: If an explicitly named file does not exist.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        if not path.is_file():
            source = "--config" if explicit else CONFIG_ENV_VAR
            msg = f"Config file not found ({source}): {path}"
            raise click.ClickException(msg)
        return path

    here = (start or Path.cwd()).resolve()
    return next(
        (d / CONFIG_FILENAME for d in (here, *here.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the parsed ``workfriends.toml`` to pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is not None:
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# pydantic-settings builds sources inside the constructor; the TOML path
# reaches settings_customise_sources through here.
_tls = threading.local()


class WorkFriendsSettings(BaseSettings):
    """Settings for the workfriends CLI and services.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        organization: Known organization domains used when a check is run
            without explicit domains.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "WORKFRIENDS_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    organization: OrganizationConfig = Field(default_factory=OrganizationConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_path = getattr(_tls, "toml_path", None)
        return (init_settings, env_settings, TomlSettingsSource(settings_cls, toml_path))

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: bool,
    ) -> WorkFriendsSettings:
        """Build settings for one CLI invocation.

        Only flags that are switched on are treated as overrides. A flag
        left at its default must not mask ``WORKFRIENDS_*`` or TOML values.
        """
        toml_path = resolve_config_path(config_path, start)
        overrides = {name: value for name, value in cli_flags.items() if value}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
