"""Unit tests for runtime settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gtfs_translations_core.config.settings import Settings, get_settings
from gtfs_translations_schemas.primitives import LogVerbosity


def test_defaults() -> None:
    """Use unlimited rows, BOM-tolerant UTF-8 and info logging by default."""
    settings = Settings(_env_file=None)

    assert settings.max_rows is None
    assert settings.csv_encoding == "utf-8-sig"
    assert settings.log_level == LogVerbosity.INFO


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read GTFS_TRANSLATIONS_* variables."""
    monkeypatch.setenv("GTFS_TRANSLATIONS_MAX_ROWS", "500")
    monkeypatch.setenv("GTFS_TRANSLATIONS_LOG_LEVEL", "verbose")

    settings = get_settings()

    assert settings.max_rows == 500
    assert settings.log_level == LogVerbosity.VERBOSE
    assert get_settings() is settings


def test_rejects_non_positive_row_cap(monkeypatch: pytest.MonkeyPatch) -> None:
    """Refuse a row cap below one."""
    monkeypatch.setenv("GTFS_TRANSLATIONS_MAX_ROWS", "0")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_rejects_unknown_encoding(monkeypatch: pytest.MonkeyPatch) -> None:
    """Refuse an encoding name the codec registry does not know."""
    with pytest.raises(ValidationError, match="Unknown text encoding"):
        Settings(csv_encoding="not-a-codec", _env_file=None)

    monkeypatch.setenv("GTFS_TRANSLATIONS_CSV_ENCODING", "latin-1")
    assert Settings(_env_file=None).csv_encoding == "latin-1"
