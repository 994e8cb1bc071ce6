"""Build the resolved translation index from raw translations.txt rows."""

from __future__ import annotations

from collections.abc import Iterable

from gtfs_translations_core.keys import resolve_translation_key
from gtfs_translations_core.taxonomy import table_and_field_to_field
from gtfs_translations_core.util.logging import get_logger
from gtfs_translations_schemas.fields import TranslatableField
from gtfs_translations_schemas.keys import RecordKey, RecordSubKey, ValueKey
from gtfs_translations_schemas.language import LanguageTag, LanguageTagError
from gtfs_translations_schemas.primitives import SkipReason
from gtfs_translations_schemas.results import (
    CoveragePair,
    SkippedRow,
    TranslationLookup,
    TranslationResult,
)
from gtfs_translations_schemas.rows import RawTranslation

logger = get_logger(__name__)


class TranslationIndexBuilder:
    """Accumulates raw rows into a translation index.

    Rows are independent: a row that cannot be resolved is recorded as
    skipped and never affects the others. A later row with the same
    (language, field, key) replaces the earlier translation.
    """

    def __init__(self) -> None:
        """Initialize an empty builder."""
        self._translations: dict[TranslationLookup, str] = {}
        self._coverage: set[CoveragePair] = set()
        self._skipped: list[SkippedRow] = []
        self._row_count = 0

    def add(self, row: RawTranslation) -> SkipReason | None:
        """Fold a single row into the index.

        Args:
            row: Raw translations.txt row.

        Returns:
            SkipReason | None: Why the row was dropped, or None if indexed.
        """
        self._row_count += 1
        reason = self._index_row(row)
        if reason is not None:
            logger.debug(
                "Skipping translation row %d (%s): table=%r field=%r language=%r",
                self._row_count,
                reason.value,
                row.table_name,
                row.field_name,
                row.language,
            )
            self._skipped.append(
                SkippedRow(row_number=self._row_count, reason=reason, row=row)
            )
        return reason

    def build(self) -> TranslationResult:
        """Return the frozen index for the rows added so far.

        Returns:
            TranslationResult: Lookup map, coverage pairs and languages.
        """
        languages = frozenset(language for _, language in self._coverage)
        if self._skipped:
            logger.info(
                "Indexed %d translations from %d rows, skipped %d rows",
                len(self._translations),
                self._row_count,
                len(self._skipped),
            )
        return TranslationResult(
            translations=dict(self._translations),
            possible_translations=frozenset(self._coverage),
            available_languages=languages,
            skipped_rows=tuple(self._skipped),
        )

    def _index_row(self, row: RawTranslation) -> SkipReason | None:
        try:
            language = LanguageTag.parse(row.language)
        except LanguageTagError:
            return SkipReason.INVALID_LANGUAGE

        field = table_and_field_to_field(row.table_name, row.field_name)
        if field is None:
            return SkipReason.UNTRANSLATABLE_FIELD

        key = resolve_translation_key(row.record_id, row.record_sub_id, row.field_value)
        if key is None:
            return SkipReason.MISSING_KEY

        lookup = TranslationLookup(language=language, field=field, key=key)
        self._translations[lookup] = row.translation
        self._coverage.add((field, language))
        return None


def build_translation_index(rows: Iterable[RawTranslation]) -> TranslationResult:
    """Resolve a batch of raw rows into a translation index.

    Row-level problems drop the row and are reported in
    ``TranslationResult.skipped_rows``. Errors raised while iterating
    ``rows`` propagate to the caller.

    Args:
        rows: Raw translations.txt rows in file order.

    Returns:
        TranslationResult: The resolved index.
    """
    builder = TranslationIndexBuilder()
    for row in rows:
        builder.add(row)
    return builder.build()


def find_translation(
    result: TranslationResult,
    language: LanguageTag | str,
    field: TranslatableField,
    *,
    record_id: str | None = None,
    record_sub_id: str | None = None,
    field_value: str | None = None,
) -> str | None:
    """Find a translation for a record, preferring identifier-keyed rows.

    When a feed translates the same value both by identifier and by literal
    value, the identifier-keyed translation wins. Candidates are tried in
    order: (record_id, record_sub_id), record_id, field_value.

    Args:
        result: Resolved translation index.
        language: Target language.
        field: Translated field.
        record_id: Identifier of the record being rendered.
        record_sub_id: Secondary identifier of the record being rendered.
        field_value: Untranslated value of the field on that record.

    Returns:
        str | None: The best matching translation, or None.
    """
    candidates: list[RecordSubKey | RecordKey | ValueKey] = []
    if record_id is not None and record_sub_id is not None:
        candidates.append(RecordSubKey(record_id=record_id, record_sub_id=record_sub_id))
    if record_id is not None:
        candidates.append(RecordKey(record_id=record_id))
    if field_value is not None:
        candidates.append(ValueKey(field_value=field_value))

    for key in candidates:
        translation = result.lookup(language, field, key)
        if translation is not None:
            return translation
    return None
