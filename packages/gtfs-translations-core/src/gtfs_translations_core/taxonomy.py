"""Lookup from raw table/column names to typed translatable fields."""

from __future__ import annotations

from gtfs_translations_schemas.fields import (
    TABLE_COLUMNS,
    AgencyField,
    AreaField,
    CalendarField,
    ColumnField,
    FareProductField,
    FeedInfoField,
    RouteField,
    StopField,
    StopTimeField,
    TranslatableField,
    TripField,
)
from gtfs_translations_schemas.primitives import GtfsTable


def table_and_field_to_field(
    table_name: str, field_name: str
) -> TranslatableField | None:
    """Resolve a translations.txt table/field pair to a translatable field.

    Only the pairs listed below are translatable; anything else, including a
    known table with an unknown column, returns None.

    Args:
        table_name: Value of the ``table_name`` column, e.g. ``stops``.
        field_name: Value of the ``field_name`` column, e.g. ``stop_name``.

    Returns:
        TranslatableField | None: The typed field, or None if the pair is
        not translatable.
    """
    column: ColumnField
    match (table_name, field_name):
        case ("agency", "agency_name"):
            column = AgencyField.NAME
        case ("agency", "agency_url"):
            column = AgencyField.URL
        case ("agency", "agency_fare_url"):
            column = AgencyField.FARE_URL
        case ("areas", "area_name"):
            column = AreaField.NAME
        case ("routes", "route_long_name"):
            column = RouteField.LONG_NAME
        case ("routes", "route_short_name"):
            column = RouteField.SHORT_NAME
        case ("routes", "route_url"):
            column = RouteField.URL
        case ("stop_times", "stop_headsign"):
            column = StopTimeField.HEADSIGN
        case ("stops", "stop_code"):
            column = StopField.CODE
        case ("stops", "stop_name"):
            column = StopField.NAME
        case ("stops", "tts_stop_name"):
            column = StopField.TTS_NAME
        case ("stops", "stop_desc"):
            column = StopField.DESC
        case ("stops", "platform_code"):
            column = StopField.PLATFORM_CODE
        case ("trips", "trip_headsign"):
            column = TripField.HEADSIGN
        case ("trips", "trip_short_name"):
            column = TripField.SHORT_NAME
        case ("calendar", "service_id"):
            column = CalendarField.SERVICE_ID
        case ("fare_products", "fare_product_name"):
            column = FareProductField.PRODUCT_NAME
        case ("feed_info", "feed_publisher_name"):
            column = FeedInfoField.PUBLISHER_NAME
        case _:
            return None
    return TranslatableField(table=GtfsTable(table_name), column=column)


def _registry() -> tuple[TranslatableField, ...]:
    fields: list[TranslatableField] = []
    for table, columns in TABLE_COLUMNS.items():
        for column in columns:
            field = table_and_field_to_field(table.value, column.value)
            if field is not None:
                fields.append(field)
    return tuple(fields)


TRANSLATABLE_FIELDS = _registry()
