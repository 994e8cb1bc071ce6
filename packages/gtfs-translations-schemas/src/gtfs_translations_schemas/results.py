"""Resolved translation index and its lookup keys."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import Field, field_serializer, field_validator, model_validator

from gtfs_translations_schemas.base import FrozenSchema
from gtfs_translations_schemas.fields import TranslatableField
from gtfs_translations_schemas.keys import TranslationKey
from gtfs_translations_schemas.language import LanguageTag, LanguageTagError
from gtfs_translations_schemas.primitives import SkipReason
from gtfs_translations_schemas.rows import RawTranslation

type CoveragePair = tuple[TranslatableField, LanguageTag]


class TranslationLookup(FrozenSchema):
    """Composite key of a single translation entry."""

    language: LanguageTag = Field(..., description="Target language")
    field: TranslatableField = Field(..., description="Translated field")
    key: TranslationKey = Field(..., description="Record or value reference")


class SkippedRow(FrozenSchema):
    """Diagnostic for a row that contributed nothing to the index."""

    row_number: int = Field(..., ge=1, description="1-based position in the input")
    reason: SkipReason = Field(..., description="Why the row was dropped")
    row: RawTranslation = Field(..., description="The dropped row")


class TranslationResult(FrozenSchema):
    """Resolved, queryable translation index built from one batch of rows."""

    translations: Mapping[TranslationLookup, str] = Field(
        default_factory=dict, description="Read-only translated text per lookup key"
    )
    possible_translations: frozenset[CoveragePair] = Field(
        frozenset(), description="(field, language) pairs with any translation"
    )
    available_languages: frozenset[LanguageTag] = Field(
        frozenset(), description="Languages with any translation"
    )
    skipped_rows: tuple[SkippedRow, ...] = Field(
        (), description="Rows dropped while building the index"
    )

    @field_validator("translations", mode="after")
    @classmethod
    def _read_only_translations(
        cls, value: Mapping[TranslationLookup, str]
    ) -> Mapping[TranslationLookup, str]:
        return MappingProxyType(dict(value))

    @field_serializer("translations")
    def _serialize_translations(
        self, value: Mapping[TranslationLookup, str]
    ) -> dict[TranslationLookup, str]:
        return dict(value)

    @model_validator(mode="after")
    def _coverage_is_consistent(self) -> TranslationResult:
        covered = {(lookup.field, lookup.language) for lookup in self.translations}
        if covered != self.possible_translations:
            raise ValueError("possible_translations does not match translations")
        languages = {language for _, language in self.possible_translations}
        if languages != self.available_languages:
            raise ValueError(
                "available_languages does not match possible_translations"
            )
        return self

    def lookup(
        self,
        language: LanguageTag | str,
        field: TranslatableField,
        key: TranslationKey,
    ) -> str | None:
        """Return the translation stored under an exact lookup key.

        Args:
            language: Target language, parsed when given as text.
            field: Translated field.
            key: Record or value reference.

        Returns:
            str | None: Translated text, or None when not found.
        """
        if isinstance(language, str):
            try:
                language = LanguageTag.parse(language)
            except LanguageTagError:
                return None
        entry = TranslationLookup(language=language, field=field, key=key)
        return self.translations.get(entry)

    def languages_for(self, field: TranslatableField) -> list[LanguageTag]:
        """List the languages that translate a field, sorted by tag."""
        languages = {
            language
            for covered_field, language in self.possible_translations
            if covered_field == field
        }
        return sorted(languages, key=str)

    def fields_for(self, language: LanguageTag | str) -> list[TranslatableField]:
        """List the fields translated into a language, sorted by name.

        Text that is not a well-formed language tag has no fields.
        """
        if isinstance(language, str):
            try:
                language = LanguageTag.parse(language)
            except LanguageTagError:
                return []
        fields = {
            field
            for field, covered_language in self.possible_translations
            if covered_language == language
        }
        return sorted(fields, key=str)
