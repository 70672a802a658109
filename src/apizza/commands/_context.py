"""AppBuilder — the production Builder.

Created once by :func:`apizza.cli.main` and handed to every command module.
The config handle exists from construction; the cache is opened on the
first ``db()`` call and the same handle is returned from then on.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import IO, TYPE_CHECKING

from apizza.commands._builder import Builder
from apizza.config.store import FileConfig

if TYPE_CHECKING:
    from types import TracebackType

    import click

    from apizza.commands._base import Command, Runner
    from apizza.config.settings import ApizzaSettings
    from apizza.infrastructure.cache import DataBase

logger = logging.getLogger(__name__)


class AppBuilder(Builder):
    """Builder backed by the user's config file and the on-disk cache.

    ``db()`` returns None when ``settings.no_cache`` is set.
    """

    def __init__(self, settings: ApizzaSettings, *, output: IO[str] | None = None) -> None:
        self.settings = settings
        self._config = FileConfig(settings.config_dir, settings.user_config())
        self._output = output if output is not None else sys.stdout
        self._db: DataBase | None = None

    def config(self) -> FileConfig:
        return self._config

    def db(self) -> DataBase | None:
        """The cache (opened on first access, then reused)."""
        if self.settings.no_cache:
            return None
        if self._db is None:
            from apizza.infrastructure.cache import open_database

            self._db = open_database(self.settings.cache_path)
        return self._db

    def output(self) -> IO[str]:
        return self._output

    def build(
        self,
        use: str,
        short: str,
        runner: Runner,
        *,
        params: Sequence[click.Parameter] | None = None,
        examples: str | None = None,
    ) -> Command:
        logger.debug("Built command %s (%s)", use, type(runner).__name__)
        return super().build(use, short, runner, params=params, examples=examples)

    def close(self) -> None:
        """Release the cache engine if it was opened."""
        if self._db is not None:
            self._db.close()

    def __enter__(self) -> AppBuilder:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
