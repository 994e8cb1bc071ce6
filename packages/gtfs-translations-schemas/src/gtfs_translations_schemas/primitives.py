"""Primitive types and enums shared across gtfs-translations schemas."""

from __future__ import annotations

from enum import StrEnum

type RecordId = str
type RecordSubId = str
type FieldValue = str


class GtfsTable(StrEnum):
    """GTFS tables whose columns may carry translations."""

    AGENCY = "agency"
    AREAS = "areas"
    CALENDAR = "calendar"
    FARE_PRODUCTS = "fare_products"
    FEED_INFO = "feed_info"
    ROUTES = "routes"
    STOP_TIMES = "stop_times"
    STOPS = "stops"
    TRIPS = "trips"


class SkipReason(StrEnum):
    """Why a raw translation row was left out of the index."""

    INVALID_LANGUAGE = "invalid_language"
    UNTRANSLATABLE_FIELD = "untranslatable_field"
    MISSING_KEY = "missing_key"


class FileFormat(StrEnum):
    """Supported file formats for ingest."""

    CSV = "csv"


class LogVerbosity(StrEnum):
    """Console verbosity for the logging helpers."""

    INFO = "info"
    VERBOSE = "verbose"
    DEBUG = "debug"
