"""Unit tests for the translatable field types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gtfs_translations_schemas.fields import (
    TABLE_COLUMNS,
    RouteField,
    StopField,
    TranslatableField,
    TripField,
)
from gtfs_translations_schemas.primitives import GtfsTable


def test_field_rejects_column_from_other_table() -> None:
    """Reject a column that belongs to a different table."""
    with pytest.raises(ValidationError, match="not part of table"):
        TranslatableField(table=GtfsTable.STOPS, column=RouteField.URL)


def test_field_equality_is_structural() -> None:
    """Compare and hash fields by table and column."""
    first = TranslatableField(table=GtfsTable.STOPS, column=StopField.NAME)
    second = TranslatableField(table=GtfsTable.STOPS, column=StopField.NAME)

    assert first == second
    assert hash(first) == hash(second)
    assert first != TranslatableField(table=GtfsTable.STOPS, column=StopField.CODE)


def test_field_is_immutable() -> None:
    """Refuse attribute assignment on a frozen field."""
    field = TranslatableField(table=GtfsTable.TRIPS, column=TripField.HEADSIGN)

    with pytest.raises(ValidationError):
        field.column = TripField.SHORT_NAME


def test_field_str_uses_gtfs_names() -> None:
    """Render the field as table.column."""
    field = TranslatableField(table=GtfsTable.ROUTES, column=RouteField.LONG_NAME)

    assert str(field) == "routes.route_long_name"


def test_every_table_has_columns() -> None:
    """Map every translatable table to its column enumeration."""
    assert set(TABLE_COLUMNS) == set(GtfsTable)
    assert {column.value for column in TABLE_COLUMNS[GtfsTable.STOPS]} == {
        "stop_code",
        "stop_name",
        "tts_stop_name",
        "platform_code",
        "stop_desc",
    }
