"""Builder — factory for commands plus access to shared resources.

Command modules are written once against :class:`Builder` and never care
which variant backs it.  The application constructs exactly one builder at
startup (see :func:`apizza.cli.main`) and passes it to
:func:`apizza.commands.register_commands`.

``config()`` and ``db()`` may return ``None``: that means the feature is
unavailable, and callers branch on it rather than treating it as an error.
``output()`` always returns a writable stream.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import IO, TYPE_CHECKING

from apizza.commands._base import Command, Runner, new_command

if TYPE_CHECKING:
    import click

    from apizza.config.store import Config
    from apizza.infrastructure.cache import DataBase


class Builder(ABC):
    """Abstract capability set ``{config, db, output, build}``."""

    @abstractmethod
    def config(self) -> Config | None:
        """Return the configuration handle, or None when unsupported."""

    @abstractmethod
    def db(self) -> DataBase | None:
        """Return the cache handle, or None when unsupported."""

    @abstractmethod
    def output(self) -> IO[str]:
        """Return the stream commands write their results to."""

    def build(
        self,
        use: str,
        short: str,
        runner: Runner,
        *,
        params: Sequence[click.Parameter] | None = None,
        examples: str | None = None,
    ) -> Command:
        """Build a command that dispatches to ``runner.run``.

        The runner is not modified and no resource accessor is called.
        """
        return new_command(use, short, runner.run, params=params, examples=examples)


class BasicBuilder(Builder):
    """Builder with no config, no database and plain stdout output.

    Used by commands and test harnesses that need no shared state.
    """

    def __init__(self, output: IO[str] | None = None) -> None:
        self._output = output if output is not None else sys.stdout

    def config(self) -> None:
        return None

    def db(self) -> None:
        return None

    def output(self) -> IO[str]:
        return self._output
