"""Subcommand modules for apizza.

Provides register_commands(), which builds every command through the one
builder the application constructed at startup and adds it to the root
group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apizza.commands._base import ApizzaGroup, Command, Runner, new_command
from apizza.commands._builder import BasicBuilder, Builder

if TYPE_CHECKING:
    import click

__all__ = [
    "ApizzaGroup",
    "BasicBuilder",
    "Builder",
    "Command",
    "Runner",
    "new_command",
    "register_commands",
]


def register_commands(cli: click.Group, builder: Builder) -> None:
    """Build all commands with *builder* and register them on *cli*."""
    from apizza.commands.cache import cache
    from apizza.commands.config_cmd import config
    from apizza.commands.version import version

    cli.add_command(version(builder))
    cli.add_command(config(builder))
    cli.add_command(cache(builder))
