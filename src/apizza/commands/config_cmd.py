"""Command group: read and edit the user's configuration.

Each subcommand is built through the builder and closes over the handle
returned by ``builder.config()``.  When the builder has no config support
the commands report ``config unavailable`` and exit cleanly.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import IO, TYPE_CHECKING, Any

import click

from apizza.commands._base import ApizzaGroup

if TYPE_CHECKING:
    from apizza.commands._base import Command
    from apizza.commands._builder import Builder
    from apizza.config.store import Config

UNAVAILABLE = "config unavailable"

_CONFIG_EXAMPLES = """\
  apizza config get name
  apizza config get address
  apizza config set name=Alice address.zipcode=20500
  apizza config path
  apizza config edit"""


def _render(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, indent=2)
    return str(value)


class _ConfigRunner(ABC):
    """Base for runners that need a config handle."""

    def __init__(self, conf: Config | None, out: IO[str]) -> None:
        self.conf = conf
        self.out = out

    def run(self, cmd: Command, args: list[str]) -> None:
        if self.conf is None:
            click.echo(UNAVAILABLE, file=self.out)
            return
        self.run_with(self.conf, cmd, args)

    @abstractmethod
    def run_with(self, conf: Config, cmd: Command, args: list[str]) -> None:
        """Run with a config handle that is known to be present."""


class ConfigGetRunner(_ConfigRunner):
    """Print the value of each key given."""

    def run_with(self, conf: Config, cmd: Command, args: list[str]) -> None:
        if not args:
            raise click.UsageError("no config keys given")
        for key in args:
            click.echo(_render(conf.get(key)), file=self.out)


class ConfigSetRunner(_ConfigRunner):
    """Apply ``key=value`` pairs and persist them."""

    def run_with(self, conf: Config, cmd: Command, args: list[str]) -> None:
        if not args:
            raise click.UsageError("no key=value pairs given")
        pairs: list[tuple[str, str]] = []
        for arg in args:
            key, sep, value = arg.partition("=")
            if not sep or not key:
                raise click.UsageError(f"use 'key=value', got {arg!r}")
            pairs.append((key, value))
        for key, value in pairs:
            conf.set(key, value)
        conf.save()


class ConfigPathRunner(_ConfigRunner):
    """Print where the config lives."""

    def run_with(self, conf: Config, cmd: Command, args: list[str]) -> None:
        if cmd.option("dir"):
            click.echo(str(conf.dir()), file=self.out)
        else:
            click.echo(str(conf.file()), file=self.out)


class ConfigEditRunner(_ConfigRunner):
    """Open the config file in the configured editor."""

    def run_with(self, conf: Config, cmd: Command, args: list[str]) -> None:
        if not conf.file().exists():
            conf.save()
        editor = conf.get("editor") or None
        click.edit(filename=str(conf.file()), editor=editor)


def config(builder: Builder) -> click.Group:
    """Build the ``config`` group and its subcommands."""
    conf = builder.config()
    out = builder.output()

    group = ApizzaGroup("config", help="Manage the apizza configuration.", examples=_CONFIG_EXAMPLES)
    group.add_command(
        builder.build(
            "get",
            "Print config values.",
            ConfigGetRunner(conf, out),
            examples="  apizza config get name email address.street",
        )
    )
    group.add_command(
        builder.build(
            "set",
            "Set config values from key=value pairs.",
            ConfigSetRunner(conf, out),
            examples="  apizza config set name=Alice service=Carryout",
        )
    )
    group.add_command(
        builder.build(
            "path",
            "Print the config file location.",
            ConfigPathRunner(conf, out),
            params=[click.Option(["--dir", "dir"], is_flag=True, help="Print the directory.")],
        )
    )
    group.add_command(
        builder.build("edit", "Open the config file in an editor.", ConfigEditRunner(conf, out))
    )
    return group
