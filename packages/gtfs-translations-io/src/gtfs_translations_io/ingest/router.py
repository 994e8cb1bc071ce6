"""Format router for translation ingest adapters."""

from __future__ import annotations

from gtfs_translations_core.index import build_translation_index
from gtfs_translations_core.ports.ingest import (
    IngestAdapterProtocol,
    IngestError,
    IngestErrorCode,
    IngestErrorDetails,
    IngestErrorInfo,
)
from gtfs_translations_io.ingest.csv_adapter import CsvTranslationIngestAdapter
from gtfs_translations_schemas.io import IngestSource
from gtfs_translations_schemas.primitives import FileFormat
from gtfs_translations_schemas.results import TranslationResult
from gtfs_translations_schemas.rows import RawTranslation

_ADAPTERS: dict[FileFormat, type[IngestAdapterProtocol]] = {
    FileFormat.CSV: CsvTranslationIngestAdapter,
}


def get_ingest_adapter(file_format: FileFormat | str) -> IngestAdapterProtocol:
    """Return the ingest adapter for a given file format.

    Args:
        file_format: Requested file format.

    Returns:
        IngestAdapterProtocol: Adapter implementation for the format.

    Raises:
        IngestError: If the format is unsupported.
    """
    try:
        normalized_format = FileFormat(file_format)
    except ValueError as exc:
        raise IngestError(
            IngestErrorInfo(
                code=IngestErrorCode.INVALID_FORMAT,
                message="Unsupported ingest format",
                details=IngestErrorDetails(
                    field="format",
                    provided=str(file_format),
                    valid_options=[item.value for item in _ADAPTERS],
                ),
            )
        ) from exc

    return _ADAPTERS[normalized_format]()


async def load_source(source: IngestSource) -> list[RawTranslation]:
    """Load a source file using the adapter registered for its format.

    Args:
        source: Ingest source descriptor.

    Returns:
        list[RawTranslation]: Parsed rows in file order.
    """
    adapter = get_ingest_adapter(source.format)
    return await adapter.load_source(source)


async def load_translation_index(source: IngestSource) -> TranslationResult:
    """Load a source file and resolve it into a translation index.

    Args:
        source: Ingest source descriptor.

    Returns:
        TranslationResult: The resolved translation index.
    """
    return build_translation_index(await load_source(source))
