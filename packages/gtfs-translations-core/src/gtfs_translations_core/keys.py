"""Reference key resolution for translations.txt rows."""

from __future__ import annotations

from gtfs_translations_schemas.keys import (
    RecordKey,
    RecordSubKey,
    TranslationKey,
    ValueKey,
)


def resolve_translation_key(
    record_id: str | None,
    record_sub_id: str | None,
    field_value: str | None,
) -> TranslationKey | None:
    """Derive the single reference key a row uses.

    GTFS gives (record_id, record_sub_id) precedence over field_value when
    both referencing methods are present, so identifiers are checked first:

    1. record_id and record_sub_id -> RecordSubKey
    2. record_id -> RecordKey
    3. field_value -> ValueKey

    Args:
        record_id: Optional record identifier.
        record_sub_id: Optional secondary record identifier.
        field_value: Optional untranslated literal value.

    Returns:
        TranslationKey | None: The resolved key, or None when the row has no
        usable reference.
    """
    match (record_id, record_sub_id, field_value):
        case (str() as rid, str() as sub_id, _):
            return RecordSubKey(record_id=rid, record_sub_id=sub_id)
        case (str() as rid, _, _):
            return RecordKey(record_id=rid)
        case (_, _, str() as value):
            return ValueKey(field_value=value)
        case _:
            return None
