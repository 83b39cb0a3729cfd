"""Public SDK surface for the HF radar ledger.

This module provides a stable import path for library users.
It re-exports the client, typed models, and pipeline entry points.
"""

from __future__ import annotations

from core.clock import FixedClock, SystemClock
from core.config import HfrConfig
from core.errors import (
    AssetExistsError,
    AssetNotFoundError,
    DigestFailureError,
    EmptyTableError,
    HfrError,
    HfrIngestError,
    HfrLedgerError,
    NumericParseError,
    RowArityError,
    TableMarkerNotFoundError,
)
from core.types import (
    HeaderMap,
    IngestOptions,
    MeasurementRecord,
    RawDocument,
    StatisticsSummary,
    SubmissionReceipt,
    UpdateOptions,
    VectorTable,
)
from ingest.pipeline import build_measurement_record
from store.ledger_payload import record_to_payload
from store.ledger_sdk import HfrClient
from transforms.change_detection import classify_change
from transforms.content_fingerprint import compute_fingerprint

__all__ = [
    "AssetExistsError",
    "AssetNotFoundError",
    "DigestFailureError",
    "EmptyTableError",
    "FixedClock",
    "HeaderMap",
    "HfrClient",
    "HfrConfig",
    "HfrError",
    "HfrIngestError",
    "HfrLedgerError",
    "IngestOptions",
    "MeasurementRecord",
    "NumericParseError",
    "RawDocument",
    "RowArityError",
    "StatisticsSummary",
    "SubmissionReceipt",
    "SystemClock",
    "TableMarkerNotFoundError",
    "UpdateOptions",
    "VectorTable",
    "build_measurement_record",
    "classify_change",
    "compute_fingerprint",
    "record_to_payload",
]
