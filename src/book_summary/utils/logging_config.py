"""Logging setup shared by the library and the command line."""

from __future__ import annotations

import logging
import sys
from typing import Final, TextIO

from book_summary.config import BOOK_SUMMARY_LOG_LEVEL

_ROOT_LOGGER: Final[str] = "book_summary"
_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS: Final[frozenset[str]] = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


class ExtraFormatter(logging.Formatter):
    """Formatter that appends ``extra={...}`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if not extras:
            return message
        pairs = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{message} [{pairs}]"


def get_logger(name: str) -> logging.Logger:
    """Return a logger living under the package's logger hierarchy."""
    if name != _ROOT_LOGGER and not name.startswith(_ROOT_LOGGER + "."):
        name = f"{_ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def level_for(verbosity: int, *, debug: bool = False) -> int:
    """Map ``-v`` occurrences and the debug flag to a logging level."""
    if debug or verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    level = logging.getLevelName(BOOK_SUMMARY_LOG_LEVEL.upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(
    verbosity: int = 0,
    *,
    debug: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Install a single stream handler on the package logger.

    Calling this more than once replaces the previous handler, so the CLI
    can be invoked repeatedly in one process (as the tests do).
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ExtraFormatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level_for(verbosity, debug=debug))
    return logger
