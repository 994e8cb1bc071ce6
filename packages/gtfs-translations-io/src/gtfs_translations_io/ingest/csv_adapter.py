"""CSV ingest adapter for GTFS translations.txt files."""

from __future__ import annotations

import asyncio
import csv
import io
from collections.abc import Iterable
from typing import TextIO

from gtfs_translations_core.config.settings import Settings, get_settings
from gtfs_translations_core.index import build_translation_index
from gtfs_translations_core.ports.ingest import (
    IngestError,
    IngestErrorCode,
    IngestErrorDetails,
    IngestErrorInfo,
)
from gtfs_translations_core.util.logging import apply_log_level, get_logger
from gtfs_translations_schemas.io import IngestSource
from gtfs_translations_schemas.primitives import FileFormat
from gtfs_translations_schemas.results import TranslationResult
from gtfs_translations_schemas.rows import RawTranslation

REQUIRED_COLUMNS = ("table_name", "field_name", "language", "translation")
OPTIONAL_COLUMNS = ("record_id", "record_sub_id", "field_value")
EXPECTED_FIELDS = [*REQUIRED_COLUMNS, *OPTIONAL_COLUMNS]
CSV_HEADER_EXAMPLE = (
    "table_name,field_name,language,translation,record_id,record_sub_id,field_value"
)

logger = get_logger(__name__)


class CsvTranslationIngestAdapter:
    """CSV adapter implementation for translations.txt."""

    format = FileFormat.CSV

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the adapter.

        Args:
            settings: Settings override; defaults to the environment settings.
        """
        self._settings = settings or get_settings()
        apply_log_level(self._settings.log_level)

    async def load_source(self, source: IngestSource) -> list[RawTranslation]:
        """Load a translations.txt file into RawTranslation records.

        Args:
            source: Ingest source descriptor.

        Returns:
            list[RawTranslation]: Parsed rows in file order.
        """
        return await asyncio.to_thread(_load_csv_sync, source, self._settings)

    async def load_index(self, source: IngestSource) -> TranslationResult:
        """Load a translations.txt file and resolve it into an index.

        Args:
            source: Ingest source descriptor.

        Returns:
            TranslationResult: The resolved translation index.
        """
        rows = await self.load_source(source)
        return build_translation_index(rows)


def parse_translations_text(
    data: str, settings: Settings | None = None
) -> list[RawTranslation]:
    """Parse translations.txt content into RawTranslation records.

    Args:
        data: Full CSV text including the header row.
        settings: Settings override; defaults to the environment settings.

    Returns:
        list[RawTranslation]: Parsed rows in file order.

    Raises:
        IngestError: If the header is missing or the CSV cannot be tokenized.
    """
    settings = settings or get_settings()
    handle = io.StringIO(data.removeprefix("\ufeff"), newline="")
    return _read_rows(handle, settings.max_rows, source_path=None)


def load_translations_text(
    data: str, settings: Settings | None = None
) -> TranslationResult:
    """Parse translations.txt content and resolve it into an index.

    Args:
        data: Full CSV text including the header row.
        settings: Settings override; defaults to the environment settings.

    Returns:
        TranslationResult: The resolved translation index.
    """
    return build_translation_index(parse_translations_text(data, settings))


def _load_csv_sync(source: IngestSource, settings: Settings) -> list[RawTranslation]:
    try:
        with open(
            source.input_path, newline="", encoding=settings.csv_encoding
        ) as handle:
            rows = _read_rows(handle, settings.max_rows, source.input_path)
    except OSError as exc:
        raise IngestError(
            IngestErrorInfo(
                code=IngestErrorCode.IO_ERROR,
                message=str(exc),
                details=IngestErrorDetails(source_path=source.input_path),
            )
        ) from exc
    except UnicodeDecodeError as exc:
        raise IngestError(
            IngestErrorInfo(
                code=IngestErrorCode.PARSE_ERROR,
                message=f"File is not valid {settings.csv_encoding}",
                details=IngestErrorDetails(source_path=source.input_path),
            )
        ) from exc

    logger.info("Loaded %d translation rows from %s", len(rows), source.input_path)
    return rows


def _read_rows(
    handle: TextIO, max_rows: int | None, source_path: str | None
) -> list[RawTranslation]:
    reader = csv.DictReader(handle)
    try:
        fieldnames = reader.fieldnames
        if fieldnames is None:
            raise IngestError(
                IngestErrorInfo(
                    code=IngestErrorCode.MISSING_FIELD,
                    message="CSV header row is missing",
                    details=IngestErrorDetails(
                        field="header",
                        source_path=source_path,
                        expected_fields=EXPECTED_FIELDS,
                        example=CSV_HEADER_EXAMPLE,
                    ),
                )
            )
        reader.fieldnames = [name.strip() for name in fieldnames]

        missing = [name for name in REQUIRED_COLUMNS if name not in reader.fieldnames]
        if missing:
            raise IngestError(
                IngestErrorInfo(
                    code=IngestErrorCode.MISSING_FIELD,
                    message="CSV is missing required columns",
                    details=IngestErrorDetails(
                        field=", ".join(missing),
                        valid_options=list(REQUIRED_COLUMNS),
                        source_path=source_path,
                        expected_fields=EXPECTED_FIELDS,
                        example=CSV_HEADER_EXAMPLE,
                    ),
                )
            )

        return list(_iter_rows(reader, max_rows, source_path))
    except csv.Error as exc:
        raise IngestError(
            IngestErrorInfo(
                code=IngestErrorCode.PARSE_ERROR,
                message=str(exc),
                details=IngestErrorDetails(
                    row_number=max(reader.line_num, 1), source_path=source_path
                ),
            )
        ) from exc


def _iter_rows(
    reader: csv.DictReader[str], max_rows: int | None, source_path: str | None
) -> Iterable[RawTranslation]:
    for record_count, record in enumerate(reader, start=1):
        if max_rows is not None and record_count > max_rows:
            raise IngestError(
                IngestErrorInfo(
                    code=IngestErrorCode.ROW_LIMIT_EXCEEDED,
                    message=f"CSV has more than {max_rows} translation rows",
                    details=IngestErrorDetails(
                        row_number=reader.line_num,
                        provided=str(max_rows),
                        source_path=source_path,
                    ),
                )
            )

        row = _to_raw_translation(record)
        if row is None:
            logger.debug(
                "Dropping row %d with missing required cells", reader.line_num
            )
            continue
        yield row


def _to_raw_translation(record: dict[str | None, str | None]) -> RawTranslation | None:
    values = [record.get(name) for name in REQUIRED_COLUMNS]
    table_name, field_name, language, translation = values
    if table_name is None or field_name is None or language is None:
        return None
    if translation is None:
        return None
    return RawTranslation(
        table_name=table_name,
        field_name=field_name,
        language=language,
        translation=translation,
        record_id=_optional_str(record.get("record_id")),
        record_sub_id=_optional_str(record.get("record_sub_id")),
        field_value=_optional_str(record.get("field_value")),
    )


def _optional_str(value: str | None) -> str | None:
    if value is None:
        return None
    if value == "":
        return None
    return value
