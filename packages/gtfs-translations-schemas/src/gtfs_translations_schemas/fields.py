"""Closed taxonomy of translatable GTFS columns.

Each table has its own column enumeration whose values are the GTFS column
names. A ``TranslatableField`` pairs a table with one of its columns and is
only produced by the taxonomy lookup in ``gtfs_translations_core.taxonomy``.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field, model_validator

from gtfs_translations_schemas.base import FrozenSchema
from gtfs_translations_schemas.primitives import GtfsTable


class AgencyField(StrEnum):
    """Translatable columns of agency.txt."""

    NAME = "agency_name"
    URL = "agency_url"
    FARE_URL = "agency_fare_url"


class AreaField(StrEnum):
    """Translatable columns of areas.txt."""

    NAME = "area_name"


class CalendarField(StrEnum):
    """Translatable columns of calendar.txt."""

    SERVICE_ID = "service_id"


class FareProductField(StrEnum):
    """Translatable columns of fare_products.txt."""

    PRODUCT_NAME = "fare_product_name"


class FeedInfoField(StrEnum):
    """Translatable columns of feed_info.txt."""

    PUBLISHER_NAME = "feed_publisher_name"


class RouteField(StrEnum):
    """Translatable columns of routes.txt."""

    LONG_NAME = "route_long_name"
    SHORT_NAME = "route_short_name"
    URL = "route_url"


class StopTimeField(StrEnum):
    """Translatable columns of stop_times.txt."""

    HEADSIGN = "stop_headsign"


class StopField(StrEnum):
    """Translatable columns of stops.txt."""

    CODE = "stop_code"
    NAME = "stop_name"
    TTS_NAME = "tts_stop_name"
    PLATFORM_CODE = "platform_code"
    DESC = "stop_desc"


class TripField(StrEnum):
    """Translatable columns of trips.txt."""

    HEADSIGN = "trip_headsign"
    SHORT_NAME = "trip_short_name"


type ColumnField = (
    AgencyField
    | AreaField
    | CalendarField
    | FareProductField
    | FeedInfoField
    | RouteField
    | StopTimeField
    | StopField
    | TripField
)

TABLE_COLUMNS: dict[GtfsTable, type[StrEnum]] = {
    GtfsTable.AGENCY: AgencyField,
    GtfsTable.AREAS: AreaField,
    GtfsTable.CALENDAR: CalendarField,
    GtfsTable.FARE_PRODUCTS: FareProductField,
    GtfsTable.FEED_INFO: FeedInfoField,
    GtfsTable.ROUTES: RouteField,
    GtfsTable.STOP_TIMES: StopTimeField,
    GtfsTable.STOPS: StopField,
    GtfsTable.TRIPS: TripField,
}


class TranslatableField(FrozenSchema):
    """A (table, column) pair that may carry translations."""

    table: GtfsTable = Field(..., description="GTFS table")
    column: ColumnField = Field(..., description="Column within the table")

    @model_validator(mode="after")
    def _column_belongs_to_table(self) -> TranslatableField:
        if not isinstance(self.column, TABLE_COLUMNS[self.table]):
            raise ValueError(
                f"Column {self.column.value!r} is not part of table "
                f"{self.table.value!r}"
            )
        return self

    def __str__(self) -> str:
        return f"{self.table.value}.{self.column.value}"
