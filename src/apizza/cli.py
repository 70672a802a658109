"""Root CLI group for apizza and the process entry point."""

from __future__ import annotations

import sys

import click

from apizza import __version__
from apizza.commands import ApizzaGroup, Builder, register_commands
from apizza.commands._context import AppBuilder
from apizza.config.logging import configure_logging
from apizza.config.settings import ApizzaSettings


def create_cli(builder: Builder) -> click.Group:
    """Create the root group with every command built by *builder*."""

    @click.group("apizza", cls=ApizzaGroup, invoke_without_command=True)
    @click.version_option(version=__version__, prog_name="apizza")
    @click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
    @click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
    @click.pass_context
    def cli(ctx: click.Context, verbose: bool, log_json: bool) -> None:
        """apizza — order pizza from the command line."""
        if verbose or log_json:
            configure_logging(verbose=verbose, log_json=log_json)
        if ctx.invoked_subcommand is None:
            click.echo(ctx.get_help())

    register_commands(cli, builder)
    return cli


def main(argv: list[str] | None = None) -> None:
    """Console-script entry point: one builder per process."""
    try:
        settings = ApizzaSettings.from_cli()
    except click.ClickException as exc:
        exc.show()
        sys.exit(exc.exit_code)
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    with AppBuilder(settings) as builder:
        cli = create_cli(builder)
        cli.main(args=argv, prog_name="apizza")
