"""gtfs-translations-schemas: Data shapes for GTFS translations."""

from gtfs_translations_schemas.fields import (
    TABLE_COLUMNS,
    AgencyField,
    AreaField,
    CalendarField,
    FareProductField,
    FeedInfoField,
    RouteField,
    StopField,
    StopTimeField,
    TranslatableField,
    TripField,
)
from gtfs_translations_schemas.io import ErrorDetails, ErrorResponse, IngestSource
from gtfs_translations_schemas.keys import (
    RecordKey,
    RecordSubKey,
    TranslationKey,
    ValueKey,
)
from gtfs_translations_schemas.language import LanguageTag, LanguageTagError
from gtfs_translations_schemas.primitives import (
    FileFormat,
    GtfsTable,
    LogVerbosity,
    SkipReason,
)
from gtfs_translations_schemas.results import (
    SkippedRow,
    TranslationLookup,
    TranslationResult,
)
from gtfs_translations_schemas.rows import RawTranslation

__version__ = "0.1.0"

__all__ = [
    "TABLE_COLUMNS",
    "AgencyField",
    "AreaField",
    "CalendarField",
    "ErrorDetails",
    "ErrorResponse",
    "FareProductField",
    "FeedInfoField",
    "FileFormat",
    "GtfsTable",
    "IngestSource",
    "LanguageTag",
    "LanguageTagError",
    "LogVerbosity",
    "RawTranslation",
    "RecordKey",
    "RecordSubKey",
    "RouteField",
    "SkipReason",
    "SkippedRow",
    "StopField",
    "StopTimeField",
    "TranslatableField",
    "TranslationKey",
    "TranslationLookup",
    "TranslationResult",
    "TripField",
    "ValueKey",
]
