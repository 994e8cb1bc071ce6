"""Import adapters for ingesting translations.txt rows."""

from gtfs_translations_io.ingest.csv_adapter import (
    CsvTranslationIngestAdapter,
    load_translations_text,
    parse_translations_text,
)
from gtfs_translations_io.ingest.router import (
    get_ingest_adapter,
    load_source,
    load_translation_index,
)

__all__ = [
    "CsvTranslationIngestAdapter",
    "get_ingest_adapter",
    "load_source",
    "load_translation_index",
    "load_translations_text",
    "parse_translations_text",
]
