"""Common pytest configuration."""

from collections.abc import Iterator

import pytest
from gtfs_translations_core.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings and GTFS_TRANSLATIONS_* overrides around each test."""
    for name in ("LOG_LEVEL", "CSV_ENCODING", "MAX_ROWS"):
        monkeypatch.delenv(f"GTFS_TRANSLATIONS_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
