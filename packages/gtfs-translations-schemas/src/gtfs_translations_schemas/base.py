"""Base schema configuration for gtfs-translations Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with strict validation defaults.

    Note: whitespace is preserved because translated text and literal field
    values are matched verbatim against the feed.
    """

    model_config = ConfigDict(
        extra="ignore",
        validate_assignment=True,
        validate_default=True,
        str_strip_whitespace=False,
        strict=True,
    )


class FrozenSchema(BaseSchema):
    """Immutable schema usable as a dictionary key or set member."""

    model_config = ConfigDict(frozen=True)
