"""Logging helpers for kvconf.

The library only emits records through module-level loggers and never
installs handlers. ``setup_logging`` is meant for applications such as
the bundled CLI.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

#: Level below DEBUG used for per-line parser tracing.
TRACE_LEVEL = 5

logging.addLevelName(TRACE_LEVEL, "TRACE")

#: Root logger name for the package.
LOGGER_NAME = "kvconf"


def level_for_verbosity(verbosity: int) -> int:
    """Map a ``-v`` count to a logging level.

    Examples:
        >>> level_for_verbosity(0) == logging.WARNING
        True
        >>> level_for_verbosity(2)
        5
    """
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.DEBUG
    return TRACE_LEVEL


def setup_logging(verbosity: int = 0, *, console: Console | None = None) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Calling it again replaces the handler installed by a previous call.

    Args:
        verbosity: Number of ``-v`` flags given on the command line.
        console: Console the handler writes to (stderr by default).

    Returns:
        The configured ``kvconf`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level_for_verbosity(verbosity))
    return logger


__all__ = [
    "LOGGER_NAME",
    "TRACE_LEVEL",
    "level_for_verbosity",
    "setup_logging",
]
