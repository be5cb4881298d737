"""Logging configuration for printr.

printr usually sits at the end of a pipeline, so nothing reaches stdout
unless asked for with -v. Warnings and errors always go to stderr, where
the job outcome message ends up.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Package-level logger name
LOGGER_NAME = "printr"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Console level for each -v count; anything above the last entry is DEBUG
VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)

_PREFIXES = {
    logging.DEBUG: "[debug] ",
    logging.WARNING: "Warning: ",
    logging.ERROR: "Error: ",
    logging.CRITICAL: "Error: ",
}


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger for a printr module.

    Args:
        name: Module name (e.g., __name__). If None, returns root printr logger.
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


class ConsoleFormatter(logging.Formatter):
    """Bare message, prefixed by level for anything but INFO."""

    def format(self, record: logging.LogRecord) -> str:
        return _PREFIXES.get(record.levelno, "") + record.getMessage()


class BelowLevelFilter(logging.Filter):
    """Pass only records below a level, so stdout and stderr never both print one."""

    def __init__(self, level: int = logging.WARNING):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def console_level(verbosity: int = 0, quiet: bool = False) -> int:
    """Map -v/-q flags to the console logging level."""
    if quiet:
        return logging.ERROR
    index = min(max(verbosity, 0), len(VERBOSITY_LEVELS) - 1)
    return VERBOSITY_LEVELS[index]


def _console_handler(stream, level: int) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ConsoleFormatter())
    return handler


def reset_logging() -> None:
    """Close and remove every handler setup_logging() installed."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            continue
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    verbosity: int = 0,
    quiet: bool = False,
    log_file: Path | None = None,
) -> None:
    """Configure logging for the printr CLI.

    Args:
        verbosity: 0=warnings only, 1=verbose (-v), 2=debug (-vv)
        quiet: If True, suppress all output except errors
        log_file: Optional file receiving every level with timestamps
    """
    reset_logging()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    level = console_level(verbosity, quiet)

    if level < logging.WARNING:
        stdout_handler = _console_handler(sys.stdout, level)
        stdout_handler.addFilter(BelowLevelFilter(logging.WARNING))
        logger.addHandler(stdout_handler)

    logger.addHandler(_console_handler(sys.stderr, max(level, logging.WARNING)))

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)
