"""Logging helpers for gtfs-translations."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGING_INITIALIZED = False
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_PACKAGE_LOGGERS = ("gtfs_translations_core", "gtfs_translations_io")


def configure_logging(verbosity: str = "info", log_file: Path | None = None) -> None:
    """Configure global logging with console and optional file handlers.

    Args:
        verbosity: Logging verbosity for stdout (info, verbose, debug).
        log_file: Optional path for a debug-level log file.
    """
    global _LOGGING_INITIALIZED

    verbosity = verbosity.lower()
    level_map = {"info": logging.INFO, "verbose": logging.DEBUG, "debug": logging.DEBUG}
    console_level = level_map.get(verbosity, logging.INFO)

    root = logging.getLogger()
    if not _LOGGING_INITIALIZED:
        root.setLevel(logging.DEBUG)
        root.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(console_handler)

        if log_file:
            root.addHandler(_file_handler(log_file))

        _LOGGING_INITIALIZED = True
    else:
        for handler in root.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(console_level)
        if log_file and not any(isinstance(h, logging.FileHandler) for h in root.handlers):
            root.addHandler(_file_handler(log_file))


def get_logger(name: str) -> logging.Logger:
    """Return a logger for *name* without touching handler configuration."""
    return logging.getLogger(name)


def apply_log_level(verbosity: str = "info") -> None:
    """Set the level of the gtfs_translations loggers, leaving root handlers alone.

    Args:
        verbosity: Logging verbosity (info, verbose, debug).
    """
    level_map = {"info": logging.INFO, "verbose": logging.DEBUG, "debug": logging.DEBUG}
    level = level_map.get(verbosity.lower(), logging.INFO)
    for name in _PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(level)


def _file_handler(log_file: Path) -> logging.FileHandler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FORMAT))
    return handler
