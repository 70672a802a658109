"""Config capability and its file-backed implementation.

Keys are dotted paths into :class:`~apizza.config.models.ApizzaConfig`
(``name``, ``address.street``) and are matched case-insensitively.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol

import click
from pydantic import BaseModel, ValidationError

from apizza.config.discovery import CONFIG_FILENAME
from apizza.config.models import ApizzaConfig

logger = logging.getLogger(__name__)


class ConfigKeyError(click.ClickException):
    """Raised when a config key does not name a field."""

    def __init__(self, key: str) -> None:
        super().__init__(f"no such config key: {key!r}")
        self.key = key


class Config(Protocol):
    """Settings accessor handed out by :meth:`Builder.config`."""

    def get(self, key: str) -> Any: ...  # pragma: no cover

    def set(self, key: str, value: Any) -> None: ...  # pragma: no cover

    def save(self) -> None: ...  # pragma: no cover

    def file(self) -> Path: ...  # pragma: no cover

    def dir(self) -> Path: ...  # pragma: no cover


def _split_key(key: str) -> list[str]:
    parts = [p.strip().lower() for p in key.split(".")]
    if not key or any(not p for p in parts):
        raise ConfigKeyError(key)
    return parts


def _lookup(model: BaseModel, parts: list[str], key: str) -> Any:
    value: Any = model
    for part in parts:
        if not isinstance(value, BaseModel) or part not in type(value).model_fields:
            raise ConfigKeyError(key)
        value = getattr(value, part)
    return value


class FileConfig:
    """A :class:`Config` persisted as ``config.json`` in *config_dir*.

    The models are frozen; :meth:`set` swaps in a re-validated copy so the
    handle itself stays the same object for the whole process.
    """

    def __init__(self, config_dir: Path, data: ApizzaConfig | None = None) -> None:
        self._dir = config_dir
        self._data = data if data is not None else ApizzaConfig()

    def get(self, key: str) -> Any:
        """Return the value at dotted *key*; nested sections come back as dicts."""
        value = _lookup(self._data, _split_key(key), key)
        if isinstance(value, BaseModel):
            return value.model_dump()
        return value

    def set(self, key: str, value: Any) -> None:
        """Set dotted *key* to *value* (in memory; call :meth:`save` to persist)."""
        parts = _split_key(key)
        current = _lookup(self._data, parts, key)
        if isinstance(current, BaseModel):
            msg = f"cannot set section {key!r}; set one of its fields instead"
            raise click.ClickException(msg)

        raw = self._data.model_dump()
        node = raw
        for part in parts[:-1]:
            node = node[part]
        node[parts[-1]] = value
        try:
            self._data = ApizzaConfig.model_validate(raw)
        except ValidationError as exc:
            msg = f"invalid value for {key!r}: {exc.errors()[0]['msg']}"
            raise click.ClickException(msg) from exc
        logger.debug("Config key set: %s", key)

    def save(self) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)
        self.file().write_text(self._data.model_dump_json(indent=2) + "\n", encoding="utf-8")
        logger.debug("Config saved to %s", self.file())

    def file(self) -> Path:
        return self._dir / CONFIG_FILENAME

    def dir(self) -> Path:
        return self._dir
