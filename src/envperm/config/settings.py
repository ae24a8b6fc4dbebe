"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click (or API callers)
  2. Env vars     — ``ENVPERM_*`` prefix, ``__`` for nesting
  3. TOML file    — ``envperm.toml`` from :mod:`envperm.config.discovery`
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from envperm.config.discovery import find_config
from envperm.config.models import ProfileConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``envperm.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class EnvPermSettings(BaseSettings):
    """Settings for the envperm CLI and API.

    Attributes:
        home: Directory holding the profile files. None means the
            user's home directory, resolved at write time.
        config_path: The TOML file the settings were loaded from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ENVPERM_",
        "env_nested_delimiter": "__",
    }

    home: Path | None = None
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    profile: ProfileConfig = Field(default_factory=ProfileConfig)

    @field_validator("home", mode="before")
    @classmethod
    def _blank_home_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

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
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        **overrides: Any,
    ) -> EnvPermSettings:
        """Construct settings, reading the TOML config if one is found.

        *overrides* with a value of None are dropped so unset CLI options
        don't mask env vars or the config file.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config()

        kwargs = {k: v for k, v in overrides.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **kwargs)
        finally:
            _tls.toml_path = None
