"""Unified settings — CLI flags, env vars, and JSON config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — flags passed by the CLI
  2. Env vars     — ``APIZZA_*`` prefix
  3. JSON file    — ``config.json`` in the config directory
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`JsonSettingsSource` that
reads the file located by :mod:`apizza.config.discovery`.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Literal

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from apizza.config.discovery import (
    config_file,
    default_config_dir,
    read_config_data,
    validate_config_data,
)
from apizza.config.models import AddressConfig, ApizzaConfig, CardConfig

logger = logging.getLogger(__name__)


class JsonSettingsSource(PydanticBaseSettingsSource):
    """Read the user-config sections of ``config.json``.

    Process flags (``no_cache``, ``verbose`` and the like) only come from the
    CLI or the environment; the file is validated as an :class:`ApizzaConfig`.
    """

    def __init__(self, settings_cls: type[BaseSettings], json_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if json_path is None:
            return
        data = read_config_data(json_path)
        process_only = set(settings_cls.model_fields) - set(ApizzaConfig.model_fields)
        ignored = sorted(process_only.intersection(data))
        if ignored:
            logger.warning("Ignoring process settings in %s: %s", json_path, ", ".join(ignored))
        user_data = {k: v for k, v in data.items() if k not in process_only}
        validate_config_data(user_data, json_path)
        self._data = user_data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full JSON data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for the JSON path during construction.
_tls = threading.local()


class ApizzaSettings(BaseSettings):
    """Process-wide settings for one apizza invocation.

    Attributes:
        config_dir: Directory holding ``config.json`` and ``cache/``.
        no_cache: Run without the persistent cache (``db()`` is None).
    """

    model_config = {
        "frozen": True,
        "env_prefix": "APIZZA_",
        "env_nested_delimiter": "__",
    }

    config_dir: Path = Field(default_factory=default_config_dir)

    # --- CLI flags ---
    verbose: bool = False
    log_json: bool = False
    no_cache: bool = False

    # --- config.json sections ---
    name: str = ""
    email: str = ""
    phone: str = ""
    address: AddressConfig = Field(default_factory=AddressConfig)
    card: CardConfig = Field(default_factory=CardConfig)
    service: Literal["Delivery", "Carryout"] = "Delivery"
    editor: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the JSON source between env vars and defaults."""
        json_path = getattr(_tls, "json_path", None)
        return (
            init_settings,
            env_settings,
            JsonSettingsSource(settings_cls, json_path),
        )

    @classmethod
    def from_cli(cls, *, config_dir: Path | None = None, **cli_flags: Any) -> ApizzaSettings:
        """Construct settings for a CLI invocation.

        *config_dir* overrides discovery; flags in *cli_flags* take priority
        over everything else.
        """
        resolved_dir = config_dir or default_config_dir()
        _tls.json_path = config_file(resolved_dir)
        try:
            return cls(config_dir=resolved_dir, **cli_flags)
        except ValidationError as exc:
            msg = f"Invalid config in {_tls.json_path} or APIZZA_* environment: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.json_path = None

    @property
    def config_path(self) -> Path:
        return config_file(self.config_dir)

    @property
    def cache_path(self) -> Path:
        return self.config_dir / "cache" / "apizza.db"

    def user_config(self) -> ApizzaConfig:
        """Return the persisted-config sections as an :class:`ApizzaConfig`."""
        return ApizzaConfig.model_validate(
            self.model_dump(include=set(ApizzaConfig.model_fields))
        )
