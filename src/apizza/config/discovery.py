"""Config directory discovery and loading.

The config directory is resolved from ``APIZZA_CONFIG``, then
``$XDG_CONFIG_HOME/apizza``, then ``~/.config/apizza``.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

import click
from pydantic import ValidationError

from apizza.config.models import ApizzaConfig

CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "APIZZA_CONFIG"


def default_config_dir() -> Path:
    """Return the directory holding ``config.json`` and the cache."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    return base / "apizza"


def config_file(config_dir: Path | None = None) -> Path:
    return (config_dir or default_config_dir()) / CONFIG_FILENAME


def read_config_data(path: Path) -> dict:
    """Read the raw JSON object stored at *path*, or ``{}`` when absent."""
    if not path.is_file():
        return {}
    raw = path.read_text(encoding="utf-8")
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in {path}: {exc}"
        raise click.ClickException(msg) from exc
    if not isinstance(data, dict):
        msg = f"Invalid config in {path}: expected a JSON object"
        raise click.ClickException(msg)
    return data


def validate_config_data(data: dict, path: Path) -> ApizzaConfig:
    """Validate raw config *data* read from *path*."""
    try:
        return ApizzaConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid config in {path}: {exc}"
        raise click.ClickException(msg) from exc
