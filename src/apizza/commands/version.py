"""Command: print the installed version."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from apizza import __version__

if TYPE_CHECKING:
    from apizza.commands._base import Command
    from apizza.commands._builder import Builder


class VersionRunner:
    def __init__(self, out: IO[str], version: str = __version__) -> None:
        self.out = out
        self.version = version

    def run(self, cmd: Command, args: list[str]) -> None:
        if args:
            raise click.UsageError(f"unexpected arguments: {' '.join(args)}")
        click.echo(self.version, file=self.out)


def version(builder: Builder) -> Command:
    return builder.build(
        "version",
        "Show the version and exit.",
        VersionRunner(builder.output()),
        examples="  apizza version",
    )
