"""Logging setup for the word search CLI and library."""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"

LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def resolve_level(level: int | str) -> int:
    """Turn a level name such as ``"info"`` into its numeric value."""

    if isinstance(level, int):
        return level
    try:
        return LEVEL_NAMES[level.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level!r}") from None


def configure_logging(level: int | str = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Send log records to stderr, replacing any handler set up earlier.

    The grid and word list go to stdout, so diagnostics such as unplaced words
    or unreadable files must stay on a separate stream.
    """

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordsearch")
