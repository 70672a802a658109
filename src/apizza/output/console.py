"""Rich Console factory and theme for apizza output.

Consoles write to the stream a builder hands out via ``output()``.  In
non-TTY environments (tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from typing import IO

from rich.console import Console
from rich.theme import Theme

APIZZA_THEME = Theme(
    {
        "apizza.ok": "bold green",
        "apizza.error": "bold red",
        "apizza.warning": "bold yellow",
        "apizza.key": "cyan",
        "apizza.value": "bold",
        "apizza.path": "dim",
        "apizza.time": "magenta",
    }
)


def create_console(
    file: IO[str], *, no_color: bool = False, width: int | None = None
) -> Console:
    """Create a Console bound to *file*.

    Args:
        file: Destination stream, normally ``builder.output()``.
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=file,
        theme=APIZZA_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )
