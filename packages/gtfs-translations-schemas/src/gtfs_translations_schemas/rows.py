"""Raw translations.txt rows as handed over by the CSV reader."""

from __future__ import annotations

from pydantic import Field

from gtfs_translations_schemas.base import BaseSchema
from gtfs_translations_schemas.primitives import FieldValue, RecordId, RecordSubId


class RawTranslation(BaseSchema):
    """Single untyped row of translations.txt.

    Optional referencing columns use ``None`` for absent values, which is
    distinct from an empty string.
    """

    table_name: str = Field(..., description="GTFS table the row translates")
    field_name: str = Field(..., description="GTFS column the row translates")
    language: str = Field(..., description="BCP-47 language tag text")
    translation: str = Field(..., description="Translated text, may be empty")
    record_id: RecordId | None = Field(None, description="Record identifier")
    record_sub_id: RecordSubId | None = Field(
        None, description="Secondary record identifier"
    )
    field_value: FieldValue | None = Field(
        None, description="Untranslated value the row applies to"
    )
