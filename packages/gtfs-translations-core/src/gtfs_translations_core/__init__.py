"""gtfs-translations-core: Resolution logic for GTFS translations."""

from gtfs_translations_core.index import (
    TranslationIndexBuilder,
    build_translation_index,
    find_translation,
)
from gtfs_translations_core.keys import resolve_translation_key
from gtfs_translations_core.ports import (
    IngestAdapterProtocol,
    IngestError,
    IngestErrorCode,
    IngestErrorDetails,
    IngestErrorInfo,
)
from gtfs_translations_core.taxonomy import (
    TRANSLATABLE_FIELDS,
    table_and_field_to_field,
)

__version__ = "0.1.0"

__all__ = [
    "TRANSLATABLE_FIELDS",
    "IngestAdapterProtocol",
    "IngestError",
    "IngestErrorCode",
    "IngestErrorDetails",
    "IngestErrorInfo",
    "TranslationIndexBuilder",
    "build_translation_index",
    "find_translation",
    "resolve_translation_key",
    "table_and_field_to_field",
]
