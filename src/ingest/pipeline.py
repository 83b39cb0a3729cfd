"""Measurement ingest orchestration.

This module turns raw radar files into MeasurementRecord values and
submits create, update, and transfer transactions to the ledger.
"""

from __future__ import annotations

from typing import Protocol

from core.clock import Clock, SystemClock
from core.config import HfrConfig
from core.logging_config import get_logger
from core.types import (
    HeaderMap,
    IngestOptions,
    LedgerTransaction,
    MeasurementRecord,
    RawDocument,
    SubmissionReceipt,
    UpdateOptions,
)
from ingest.column_projector import project_columns
from ingest.document_text import read_document_lines
from ingest.header_parser import parse_header_map
from ingest.input_reader import read_single_document, read_source_documents
from ingest.table_extractor import extract_data_lines
from store.ledger_payload import record_to_payload
from transforms.change_detection import resolve_change
from transforms.content_fingerprint import compute_fingerprint
from transforms.identity import generate_identity
from transforms.vector_statistics import compute_statistics

_LOGGER = get_logger(__name__)


class LedgerGateway(Protocol):
    """Ledger collaborator used by ingest and update flows."""

    def read_asset(self, asset_id: str) -> MeasurementRecord:
        """Return the stored record for an asset id."""

    def submit(self, transaction: LedgerTransaction) -> str:
        """Dispatch a transaction and return its job id."""


class MeasurementBuilder:
    """Stateless builder from raw document bytes to measurement records."""

    def __init__(self, config: HfrConfig, clock: Clock | None = None) -> None:
        self._config = config
        self._clock = clock or SystemClock()

    def build(self, document: RawDocument, owner: str | None = None) -> MeasurementRecord:
        """Parse, summarize, and fingerprint one document.

        Args:
            document: Raw document bytes and filename.
            owner: Owner of the new asset; config default if omitted.

        Returns:
            Measurement record ready for ledger submission.

        Raises:
            HfrIngestError: If decoding, table extraction, row parsing,
                or statistics fail.
            DigestFailureError: If the digest cannot be computed.
        """
        fingerprint = compute_fingerprint(document.data, self._config.digest_algorithm)
        lines = read_document_lines(document)
        header = parse_header_map(lines, self._config.header_scope)
        data_lines = extract_data_lines(lines, document.filename)
        projection = project_columns(data_lines, self._config.parse_policy, document.filename)
        statistics = compute_statistics(projection.table, document.filename)
        asset_id = generate_identity(
            document.filename,
            fingerprint,
            scheme=self._config.identity_scheme,
            algorithm=self._config.digest_algorithm,
            clock=self._clock,
        )
        record = MeasurementRecord(
            asset_id=asset_id,
            owner=owner or self._config.default_owner,
            fingerprint=fingerprint,
            filename=document.filename,
            file_unique_id=asset_id,
            creation_timestamp=header.timestamp,
            header=header,
            longitude=projection.table.column("Longitude"),
            latitude=projection.table.column("Latitude"),
            processed_timestamp=header.processed_timestamp,
            statistics=statistics,
            row_count=_resolve_row_count(
                header,
                projection.table.row_count,
                len(projection.diagnostics),
                document.filename,
            ),
            diagnostics=projection.diagnostics,
        )
        _LOGGER.info(
            "measurement_built",
            source=document.source_uri or document.filename,
            asset_id=asset_id,
            fingerprint=fingerprint,
            row_count=statistics.row_count,
            rejected_rows=len(projection.diagnostics),
        )
        return record


def build_measurement_record(
    document: RawDocument,
    config: HfrConfig,
    owner: str | None = None,
    clock: Clock | None = None,
) -> MeasurementRecord:
    """Build a measurement record from one raw document.

    Args:
        document: Raw document.
        config: Runtime configuration.
        owner: Optional owner.
        clock: Optional time source for identity generation.

    Returns:
        Measurement record.
    """
    return MeasurementBuilder(config, clock).build(document, owner)


def inspect_source(
    source_uri: str,
    config: HfrConfig,
    clock: Clock | None = None,
) -> list[MeasurementRecord]:
    """Build records for every document at a source without submitting them."""
    builder = MeasurementBuilder(config, clock)
    return [builder.build(document) for document in read_source_documents(source_uri, config)]


def ingest_source(
    options: IngestOptions,
    config: HfrConfig,
    ledger: LedgerGateway,
    clock: Clock | None = None,
) -> list[SubmissionReceipt]:
    """Build and submit a create transaction for each source document.

    All documents are built before anything is submitted, so a parse
    failure in one file submits nothing.

    Args:
        options: Ingest request options.
        config: Runtime configuration.
        ledger: Ledger collaborator.
        clock: Optional time source.

    Returns:
        One receipt per created asset.

    Raises:
        HfrIngestError: If reading or parsing fails.
        HfrLedgerError: If submission fails.
    """
    builder = MeasurementBuilder(config, clock)
    documents = read_source_documents(options.source_uri, config)
    records = [builder.build(document, options.owner) for document in documents]
    receipts: list[SubmissionReceipt] = []
    for record in records:
        transaction = LedgerTransaction(
            name="CreateAsset",
            asset_id=record.asset_id,
            payload=record_to_payload(record),
        )
        job_id = ledger.submit(transaction)
        receipts.append(
            SubmissionReceipt(asset_id=record.asset_id, job_id=job_id, transaction=transaction.name)
        )
    _LOGGER.info(
        "ingest_completed",
        source_uri=options.source_uri,
        document_count=len(documents),
        submitted_count=len(receipts),
    )
    return receipts


def update_measurement(
    options: UpdateOptions,
    config: HfrConfig,
    ledger: LedgerGateway,
    clock: Clock | None = None,
) -> SubmissionReceipt:
    """Re-submit an asset with a new file and owner.

    Identical content becomes an ownership transfer, changed content a
    full update that keeps the stored identity id.

    Args:
        options: Update request options.
        config: Runtime configuration.
        ledger: Ledger collaborator.
        clock: Optional time source.

    Returns:
        Receipt carrying the change classification.

    Raises:
        AssetNotFoundError: If the asset is not stored.
        HfrIngestError: If reading or parsing the new file fails.
    """
    stored = ledger.read_asset(options.asset_id)
    document = read_single_document(options.source_uri, config)
    incoming = MeasurementBuilder(config, clock).build(document, options.new_owner)
    decision = resolve_change(stored, incoming, options.new_owner)
    if decision.kind == "transfer":
        transaction = LedgerTransaction(
            name="TransferAsset",
            asset_id=stored.asset_id,
            payload={"Owner": options.new_owner},
        )
    else:
        transaction = LedgerTransaction(
            name="UpdateAsset",
            asset_id=stored.asset_id,
            payload=record_to_payload(decision.record),
        )
    job_id = ledger.submit(transaction)
    return SubmissionReceipt(
        asset_id=stored.asset_id,
        job_id=job_id,
        transaction=transaction.name,
        change_kind=decision.kind,
    )


def _resolve_row_count(
    header: HeaderMap,
    extracted_count: int,
    rejected_count: int,
    source_name: str,
) -> int:
    """Read the declared ``TableRows`` count, falling back to extracted rows.

    When rows were rejected the surviving count is returned, so the count
    always matches the stored coordinate series.
    """
    raw_value = header.table_rows
    tokens = raw_value.split() if raw_value else []
    declared_count = _parse_declared_count(tokens[0]) if tokens else None
    if declared_count is None:
        _LOGGER.warning(
            "table_rows_missing",
            source=source_name,
            raw_value=raw_value,
            extracted_count=extracted_count,
        )
        return extracted_count
    if declared_count != extracted_count:
        _LOGGER.warning(
            "table_rows_mismatch",
            source=source_name,
            declared_count=declared_count,
            extracted_count=extracted_count,
        )
    if rejected_count:
        return extracted_count
    return declared_count


def _parse_declared_count(token: str) -> int | None:
    # isdigit also admits superscripts, which int rejects
    return int(token) if token.isdecimal() else None
