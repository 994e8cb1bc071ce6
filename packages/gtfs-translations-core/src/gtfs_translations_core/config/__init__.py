"""Configuration loading for gtfs-translations."""

from gtfs_translations_core.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
