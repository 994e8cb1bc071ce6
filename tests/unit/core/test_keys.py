"""Unit tests for reference key resolution."""

from __future__ import annotations

import pytest

from gtfs_translations_core.keys import resolve_translation_key
from gtfs_translations_schemas.keys import RecordKey, RecordSubKey, ValueKey


@pytest.mark.parametrize("field_value", [None, "Main St"])
def test_record_and_sub_id_win(field_value: str | None) -> None:
    """Prefer the composite key whenever both identifiers are present."""
    key = resolve_translation_key("T1", "3", field_value)

    assert key == RecordSubKey(record_id="T1", record_sub_id="3")


@pytest.mark.parametrize("field_value", [None, "Main St"])
def test_record_id_beats_field_value(field_value: str | None) -> None:
    """Use the record id when no sub id is present."""
    assert resolve_translation_key("S1", None, field_value) == RecordKey(record_id="S1")


def test_field_value_used_without_identifiers() -> None:
    """Fall back to the literal value when no record id is present."""
    assert resolve_translation_key(None, None, "Main St") == ValueKey(field_value="Main St")


def test_sub_id_alone_does_not_form_a_key() -> None:
    """Ignore a sub id that has no record id."""
    assert resolve_translation_key(None, "3", "Main St") == ValueKey(field_value="Main St")
    assert resolve_translation_key(None, "3", None) is None


def test_no_reference_yields_none() -> None:
    """Return None when all referencing columns are absent."""
    assert resolve_translation_key(None, None, None) is None


def test_empty_strings_are_present_values() -> None:
    """Treat empty strings as present, unlike None."""
    assert resolve_translation_key("", None, "x") == RecordKey(record_id="")
    assert resolve_translation_key(None, None, "") == ValueKey(field_value="")
