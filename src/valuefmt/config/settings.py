"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``VALUEFMT_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``valuefmt.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from valuefmt.config.discovery import find_config, resolve_config_path
from valuefmt.config.models import DateConfig, FontsConfig, L10nConfig, SizeConfig, TextConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``valuefmt.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
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


class ValuefmtSettings(BaseSettings):
    """Unified settings for the valuefmt CLI.

    Attributes:
        base_dir: Directory relative paths in the config resolve against
            (parent of ``valuefmt.toml``, or CWD if no config found).
        config_path: The TOML file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "VALUEFMT_",
        "env_nested_delimiter": "__",
    }

    base_dir: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    date: DateConfig = Field(default_factory=DateConfig)
    size: SizeConfig = Field(default_factory=SizeConfig)
    text: TextConfig = Field(default_factory=TextConfig)
    fonts: FontsConfig = Field(default_factory=FontsConfig)
    l10n: L10nConfig = Field(default_factory=L10nConfig)

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
        base_dir: Path | None = None,
        **cli_flags: Any,
    ) -> ValuefmtSettings:
        """Construct settings from a CLI invocation.

        Discovers ``valuefmt.toml`` via walk-up (or explicit *config_path*)
        and merges CLI flags as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(base_dir)

        resolved_dir = base_dir
        if resolved_dir is None:
            resolved_dir = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                base_dir=resolved_dir,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

    @property
    def l10n_table_path(self) -> Path | None:
        """Configured string table, resolved against :attr:`base_dir`."""
        return resolve_config_path(self.l10n.table, self.base_dir)

    @property
    def font_path(self) -> Path | None:
        """Configured font file, resolved against :attr:`base_dir`."""
        return resolve_config_path(self.fonts.path, self.base_dir)
