"""Ports for adapters plugged into the core."""

from gtfs_translations_core.ports.ingest import (
    IngestAdapterProtocol,
    IngestError,
    IngestErrorCode,
    IngestErrorDetails,
    IngestErrorInfo,
)

__all__ = [
    "IngestAdapterProtocol",
    "IngestError",
    "IngestErrorCode",
    "IngestErrorDetails",
    "IngestErrorInfo",
]
