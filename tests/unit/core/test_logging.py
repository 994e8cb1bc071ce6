"""Tests for gtfs_translations_core.util logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import gtfs_translations_core.util.logging as logging_util
from gtfs_translations_core.util.logging import apply_log_level, configure_logging, get_logger


def test_configure_logging_creates_file_and_sets_level(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """configure_logging should set root level and create the log file."""
    log_path = tmp_path / "logs" / "test.log"

    monkeypatch.setattr(logging_util, "_LOGGING_INITIALIZED", False)
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])

    configure_logging("debug", log_path)

    assert root.level == logging.DEBUG
    assert log_path.exists()
    console = [h for h in root.handlers if not isinstance(h, logging.FileHandler)]
    assert console[0].level == logging.DEBUG
    for handler in root.handlers:
        handler.close()


def test_reconfigure_updates_console_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """A second call should only adjust the console handler level."""
    monkeypatch.setattr(logging_util, "_LOGGING_INITIALIZED", False)
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])

    configure_logging("info")
    configure_logging("verbose")

    assert len(root.handlers) == 1
    assert root.handlers[0].level == logging.DEBUG


def test_get_logger_leaves_root_handlers_alone(monkeypatch: pytest.MonkeyPatch) -> None:
    """get_logger should not install or clear root handlers."""
    monkeypatch.setattr(logging_util, "_LOGGING_INITIALIZED", False)
    root = logging.getLogger()
    host_handler = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [host_handler])

    logger = get_logger("gtfs_translations_core.test")

    assert logger.name == "gtfs_translations_core.test"
    assert root.handlers == [host_handler]


def test_apply_log_level_sets_package_loggers(monkeypatch: pytest.MonkeyPatch) -> None:
    """apply_log_level should only adjust the package loggers."""
    core_logger = logging.getLogger("gtfs_translations_core")
    io_logger = logging.getLogger("gtfs_translations_io")
    monkeypatch.setattr(core_logger, "level", core_logger.level)
    monkeypatch.setattr(io_logger, "level", io_logger.level)
    root = logging.getLogger()
    host_handler = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [host_handler])

    apply_log_level("debug")

    assert core_logger.level == logging.DEBUG
    assert io_logger.level == logging.DEBUG
    assert root.handlers == [host_handler]
