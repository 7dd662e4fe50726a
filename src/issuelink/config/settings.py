"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ISSUELINK_*`` prefix
  3. TOML file    — ``issuelink.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reads the file located by ``find_config`` through ``read_config`` from
:mod:`issuelink.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from issuelink.config.discovery import find_config, read_config
from issuelink.config.models import LinkConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``issuelink.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is not None:
            self._data = read_config(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class IssueLinkSettings(BaseSettings):
    """Unified settings for the issuelink CLI.

    Merges CLI flags, environment variables, the ``[link]`` TOML section
    and code-baked defaults into a single frozen object. Stored on the
    :class:`~issuelink.commands._context.AppContext` at the CLI root.

    Attributes:
        repo_root: Directory git commands run in (``--repo``, or CWD).
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ISSUELINK_",
        "env_nested_delimiter": "__",
    }

    repo_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    link: LinkConfig = Field(default_factory=LinkConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        repo_root: Path | None = None,
        **cli_flags: Any,
    ) -> IssueLinkSettings:
        """Construct settings from a CLI invocation.

        Discovers ``issuelink.toml`` by walking up from *repo_root* (or
        uses the explicit *config_path*) and merges CLI flags as the
        highest-priority overrides.
        """
        toml_path = find_config(repo_root, explicit=config_path)

        _tls.toml_path = toml_path
        try:
            return cls(
                repo_root=repo_root or Path.cwd(),
                config_path=toml_path,
                **cli_flags,
            )
        except ValidationError as exc:
            source = toml_path or "settings"
            msg = f"Invalid configuration in {source}: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None
