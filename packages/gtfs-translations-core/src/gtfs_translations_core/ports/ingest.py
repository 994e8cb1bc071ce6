"""Protocol definitions and errors for translation ingest adapters."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol, runtime_checkable

from pydantic import Field

from gtfs_translations_schemas.base import BaseSchema
from gtfs_translations_schemas.io import ErrorDetails, ErrorResponse, IngestSource
from gtfs_translations_schemas.primitives import FileFormat
from gtfs_translations_schemas.rows import RawTranslation


class IngestErrorCode(StrEnum):
    """Categorized error codes for ingest failures."""

    INVALID_FORMAT = "invalid_format"
    PARSE_ERROR = "parse_error"
    MISSING_FIELD = "missing_field"
    IO_ERROR = "io_error"
    ROW_LIMIT_EXCEEDED = "row_limit_exceeded"


class IngestErrorDetails(BaseSchema):
    """Detailed ingest error context."""

    field: str | None = Field(None, description="Field associated with the error")
    row_number: int | None = Field(
        None, ge=1, description="CSV row number if applicable"
    )
    provided: str | None = Field(None, description="Provided value if available")
    valid_options: list[str] | None = Field(
        None, description="Valid options if applicable"
    )
    source_path: str | None = Field(None, description="Source file path")
    expected_fields: list[str] | None = Field(
        None, description="Expected field names for the record"
    )
    example: str | None = Field(None, description="Example input snippet for guidance")


class IngestErrorInfo(BaseSchema):
    """Structured ingest error data."""

    code: IngestErrorCode = Field(..., description="Ingest error code")
    message: str = Field(..., min_length=1, description="Error message")
    details: IngestErrorDetails | None = Field(None, description="Error details")

    def to_error_response(self) -> ErrorResponse:
        """Convert ingest error info to the standard error response schema.

        Returns:
            ErrorResponse: Standard response error payload.
        """
        details: ErrorDetails | None = None
        if self.details is not None:
            details = ErrorDetails(
                field=self.details.field,
                provided=self.details.provided,
                valid_options=self.details.valid_options,
            )

        message = self.message
        if self.details is not None and self.details.row_number is not None:
            message = f"row {self.details.row_number}: {message}"

        return ErrorResponse(code=self.code.value, message=message, details=details)


class IngestError(Exception):
    """Ingest error with structured details."""

    def __init__(self, info: IngestErrorInfo) -> None:
        """Initialize the ingest error.

        Args:
            info: Structured ingest error information.
        """
        super().__init__(info.message)
        self.info = info


@runtime_checkable
class IngestAdapterProtocol(Protocol):
    """Protocol for translation ingest adapters."""

    format: FileFormat

    async def load_source(self, source: IngestSource) -> list[RawTranslation]:
        """Load a translations file into RawTranslation records.

        Raises:
            IngestError: For fatal ingest errors.
        """
        raise NotImplementedError
