"""Runtime settings and environment loading utilities."""

from __future__ import annotations

import codecs
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gtfs_translations_schemas.primitives import LogVerbosity

_ENV_PATH = Path(".env")


class Settings(BaseSettings):
    """Settings loaded from GTFS_TRANSLATIONS_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="GTFS_TRANSLATIONS_",
        env_file=_ENV_PATH,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogVerbosity = Field(default=LogVerbosity.INFO)
    # utf-8-sig tolerates the BOM many feed exporters write
    csv_encoding: str = Field(default="utf-8-sig", min_length=1)
    # Cells longer than the csv module default field limit (131072 chars) are
    # rejected as parse errors regardless of max_rows.
    max_rows: int | None = Field(default=None, ge=1)

    @field_validator("csv_encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown text encoding: {value}") from exc
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings loaded from the environment."""
    return Settings()
