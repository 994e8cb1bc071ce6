"""Reference keys identifying which record or value a translation targets."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

from gtfs_translations_schemas.base import FrozenSchema
from gtfs_translations_schemas.primitives import FieldValue, RecordId, RecordSubId


class RecordKey(FrozenSchema):
    """Translation keyed by a single record identifier."""

    kind: Literal["record"] = "record"
    record_id: RecordId = Field(..., description="Identifier of the record")


class RecordSubKey(FrozenSchema):
    """Translation keyed by a composite identifier.

    Used where the table has no single primary key, e.g. a stop_times row
    keyed by ``trip_id`` and ``stop_sequence``.
    """

    kind: Literal["record_sub"] = "record_sub"
    record_id: RecordId = Field(..., description="Identifier of the record")
    record_sub_id: RecordSubId = Field(
        ..., description="Secondary identifier of the record"
    )


class ValueKey(FrozenSchema):
    """Translation keyed by the untranslated literal text."""

    kind: Literal["value"] = "value"
    field_value: FieldValue = Field(..., description="Untranslated field value")


type TranslationKey = Annotated[
    RecordSubKey | RecordKey | ValueKey, Field(discriminator="kind")
]
