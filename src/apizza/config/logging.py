"""Logging setup for the apizza and apizza-release entry points.

Modules log through ``logging.getLogger(__name__)``; this module routes
those records through structlog so they come out either as console lines or
as JSON (``--log-json``). Log output never goes to the builder's output
stream, which carries command results only.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

# HTTP and database libraries used by the cache and the release tool.
_QUIET_LOGGERS = ("urllib3", "requests", "sqlalchemy")

_HANDLER_NAME = "apizza"


def _processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(stream: TextIO, log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    isatty = getattr(stream, "isatty", None)
    return structlog.dev.ConsoleRenderer(colors=bool(isatty and isatty()))


def _build_handler(stream: TextIO, log_json: bool) -> logging.Handler:
    """Return a stream handler that renders stdlib records with structlog."""
    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(stream, log_json),
            ],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Install the apizza log handler on the root logger.

    Calling this again replaces the handler installed by the previous call;
    handlers added by anything else are left alone.

    Args:
        verbose: Let ``apizza.*`` debug records through. Otherwise only
            warnings and errors are shown.
        log_json: Render one JSON object per line.
        stream: Where log lines go. Defaults to the current ``sys.stderr``.
    """
    stream = stream if stream is not None else sys.stderr

    structlog.configure(
        processors=[
            *_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for old in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(old)
    root.addHandler(_build_handler(stream, log_json))
    root.setLevel(logging.WARNING)

    logging.getLogger("apizza").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
