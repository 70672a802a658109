"""Shared pytest fixtures for apizza tests."""

from __future__ import annotations

from collections.abc import Iterator
from io import StringIO
from pathlib import Path

import pytest
from click.testing import CliRunner

from apizza.commands._context import AppBuilder
from apizza.config.settings import ApizzaSettings
from apizza.infrastructure.cache import DataBase, open_database


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from the real ~/.config and any APIZZA_* variables."""
    monkeypatch.delenv("APIZZA_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    path = tmp_path / "apizza"
    path.mkdir()
    return path


@pytest.fixture
def settings(config_dir: Path) -> ApizzaSettings:
    return ApizzaSettings.from_cli(config_dir=config_dir)


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def app_builder(settings: ApizzaSettings, output: StringIO) -> Iterator[AppBuilder]:
    """Full builder over a temporary config dir, writing to a buffer."""
    builder = AppBuilder(settings, output=output)
    try:
        yield builder
    finally:
        builder.close()


@pytest.fixture
def db(tmp_path: Path) -> Iterator[DataBase]:
    """Freshly initialized cache database."""
    database = open_database(tmp_path / "cache" / "apizza.db")
    try:
        yield database
    finally:
        database.close()
