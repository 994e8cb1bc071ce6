"""gtfs-translations-io: Input adapters."""

from gtfs_translations_io.ingest import (
    CsvTranslationIngestAdapter,
    get_ingest_adapter,
    load_source,
    load_translation_index,
    load_translations_text,
    parse_translations_text,
)

__version__ = "0.1.0"

__all__ = [
    "CsvTranslationIngestAdapter",
    "get_ingest_adapter",
    "load_source",
    "load_translation_index",
    "load_translations_text",
    "parse_translations_text",
]
