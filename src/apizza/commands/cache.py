"""Command: inspect and prune the persistent cache."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click
from rich.table import Table

from apizza.output.console import create_console

if TYPE_CHECKING:
    from apizza.commands._base import Command
    from apizza.commands._builder import Builder
    from apizza.infrastructure.cache import DataBase

UNAVAILABLE = "cache unavailable"


class CacheRunner:
    """List cached keys, or clear/delete entries."""

    def __init__(self, db: DataBase | None, out: IO[str]) -> None:
        self.db = db
        self.out = out

    def run(self, cmd: Command, args: list[str]) -> None:
        console = create_console(self.out)
        if self.db is None:
            console.print(UNAVAILABLE)
            return
        if args:
            raise click.UsageError(f"unexpected arguments: {' '.join(args)}")

        if cmd.option("clear"):
            removed = self.db.clear()
            console.print(f"[apizza.ok]cleared[/] {removed} entries")
            return

        to_delete: tuple[str, ...] = cmd.option("delete", ())
        if to_delete:
            for key in to_delete:
                if not self.db.exists(key):
                    raise click.ClickException(f"no cache entry for {key!r}")
                self.db.delete(key)
                console.print(f"[apizza.ok]deleted[/] [apizza.key]{key}[/]")
            return

        keys = self.db.keys()
        if not keys:
            console.print("cache is empty")
            return
        table = Table(show_header=True, header_style="bold")
        table.add_column("key", style="apizza.key")
        table.add_column("updated", style="apizza.time")
        for key in keys:
            stamp = self.db.timestamp(key)
            table.add_row(key, stamp.isoformat(timespec="seconds") if stamp else "")
        console.print(table)


def cache(builder: Builder) -> Command:
    return builder.build(
        "cache",
        "Show or prune cached data.",
        CacheRunner(builder.db(), builder.output()),
        params=[
            click.Option(["--clear"], is_flag=True, help="Delete every cache entry."),
            click.Option(["--delete"], multiple=True, metavar="KEY", help="Delete one entry."),
        ],
        examples="""\
  apizza cache
  apizza cache --delete menu
  apizza cache --clear""",
    )
