"""Input data shapes for ingest."""

from __future__ import annotations

from pydantic import Field

from gtfs_translations_schemas.base import BaseSchema
from gtfs_translations_schemas.primitives import FileFormat


class IngestSource(BaseSchema):
    """Input source definition for ingest into RawTranslation records."""

    input_path: str = Field(
        ..., min_length=1, description="Path to the translations file"
    )
    format: FileFormat = Field(FileFormat.CSV, description="Input file format")


class ErrorDetails(BaseSchema):
    """Detailed error context for responses."""

    field: str | None = Field(None, description="Field name if applicable")
    provided: str | None = Field(None, description="Provided value")
    valid_options: list[str] | None = Field(
        None, description="Valid options if applicable"
    )


class ErrorResponse(BaseSchema):
    """Error information in response."""

    code: str = Field(..., min_length=1, description="Error code")
    message: str = Field(..., min_length=1, description="Error message")
    details: ErrorDetails | None = Field(None, description="Optional error details")
