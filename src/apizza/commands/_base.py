"""Command and Runner — the unit a Builder produces.

A :class:`Runner` carries the business logic of one command.  A
:class:`Command` binds that logic to a name and a one-line description so
the application's Click tree can dispatch it.  Commands are built through a
:class:`~apizza.commands._builder.Builder`; they never hold a reference back
to it.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol

import click

RunFunc = Callable[["Command", list[str]], None]


class Runner(Protocol):
    """Behavior executed when a built command is dispatched.

    ``run`` returns normally on success and raises on failure.  Any object
    with a compatible ``run`` method satisfies the protocol structurally.
    """

    def run(self, cmd: Command, args: list[str]) -> None: ...  # pragma: no cover


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class Command(click.Command):
    """A named, describable command bound to a runner's ``run``.

    Positional arguments are passed through verbatim as ``list[str]``.
    Options declared at build time are parsed by Click and readable from
    inside ``run`` via :meth:`option`.
    """

    def __init__(
        self,
        use: str,
        short: str,
        run: RunFunc,
        *,
        params: Sequence[click.Parameter] | None = None,
        examples: str | None = None,
    ) -> None:
        super().__init__(
            use,
            context_settings={"ignore_unknown_options": True},
            callback=self._dispatch,
            params=[
                *(params or ()),
                click.Argument(["args"], nargs=-1, type=click.UNPROCESSED),
            ],
            help=short,
            short_help=short,
        )
        self.short = short
        self.examples = examples
        self._run = run
        if examples:
            _add_examples_option(self, examples)

    @property
    def use(self) -> str:
        return self.name or ""

    def _dispatch(self, args: tuple[str, ...], **_options: Any) -> Any:
        return self._run(self, list(args))

    def option(self, name: str, default: Any = None) -> Any:
        """Return the parsed value of option *name* for the current invocation."""
        ctx = click.get_current_context(silent=True)
        if ctx is None or ctx.command is not self:
            return default
        return ctx.params.get(name, default)


class ApizzaGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def new_command(
    use: str,
    short: str,
    run: RunFunc,
    *,
    params: Sequence[click.Parameter] | None = None,
    examples: str | None = None,
) -> Command:
    """Create a :class:`Command` whose behavior is exactly *run*.

    No I/O happens here and nothing wraps *run*: its return value and any
    exception it raises reach the dispatcher unchanged.
    """
    return Command(use, short, run, params=params, examples=examples)
