"""Shared typed models.

This module defines immutable data models used by the ingest,
transform, and ledger layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

from core.constants import (
    DEFAULT_LINKS,
    HEADER_KEY_PROCESSED_TIMESTAMP,
    HEADER_KEY_TABLE_ROWS,
    HEADER_KEY_TIMESTAMP,
    SOFTWARE_VERSION,
    VECTOR_COLUMN_NAMES,
)

ChangeKind = Literal["transfer", "update"]
LedgerTransactionName = Literal[
    "CreateAsset",
    "UpdateAsset",
    "TransferAsset",
    "DeleteAsset",
]


@dataclass(frozen=True)
class RawDocument:
    """Raw measurement file bytes handed over by a storage layer.

    Attributes:
        filename: Original file name, used for identity generation.
        data: Unmodified file content.
        source_uri: Path or URI the bytes were loaded from.
    """

    filename: str
    data: bytes
    source_uri: str = ""


@dataclass(frozen=True)
class DocumentLine:
    """One trimmed document line with its one-based line number."""

    line_number: int
    text: str


@dataclass(frozen=True)
class HeaderMap(Mapping[str, str]):
    """Key/value metadata extracted from colon-delimited lines.

    Well-known keys consumed downstream are exposed as properties.
    """

    entries: Mapping[str, str] = field(default_factory=dict)

    def __getitem__(self, key: str) -> str:
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def timestamp(self) -> str | None:
        """File creation timestamp."""
        return self.entries.get(HEADER_KEY_TIMESTAMP)

    @property
    def processed_timestamp(self) -> str | None:
        """Processing timestamp."""
        return self.entries.get(HEADER_KEY_PROCESSED_TIMESTAMP)

    @property
    def table_rows(self) -> str | None:
        """Declared table row count, unparsed."""
        return self.entries.get(HEADER_KEY_TABLE_ROWS)

    def to_dict(self) -> dict[str, str]:
        return dict(self.entries)


@dataclass(frozen=True)
class VectorRow:
    """One parsed data row of the vector table.

    Attributes:
        line_number: One-based document line number.
        values: Exactly one float per vector column, in schema order.
    """

    line_number: int
    values: tuple[float, ...]


@dataclass(frozen=True)
class RowDiagnostic:
    """Parse diagnostic for a data row rejected under the lenient policy.

    Attributes:
        line_number: One-based document line number.
        reason: ``arity`` or ``numeric``.
        message: Human readable failure description.
        token: Offending token when one exists.
    """

    line_number: int
    reason: str
    message: str
    token: str | None = None


@dataclass(frozen=True)
class VectorTable:
    """Ordered vector rows over the fixed column schema."""

    rows: tuple[VectorRow, ...] = ()

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def column(self, name: str) -> tuple[float, ...]:
        """Return every value of one named column in row order.

        Args:
            name: Column name from the vector schema.

        Returns:
            Column values.

        Raises:
            KeyError: If the column name is not in the schema.
        """
        if name not in VECTOR_COLUMN_NAMES:
            raise KeyError(name)
        index = VECTOR_COLUMN_NAMES.index(name)
        return tuple(row.values[index] for row in self.rows)


@dataclass(frozen=True)
class ProjectionResult:
    """Column projection output: accepted rows plus rejected-row diagnostics."""

    table: VectorTable
    diagnostics: tuple[RowDiagnostic, ...] = ()


@dataclass(frozen=True)
class StatisticsSummary:
    """Per-column summary statistics.

    Attributes:
        mean: Arithmetic mean per column.
        minimum: Minimum per column.
        maximum: Maximum per column.
        standard_deviation: Population standard deviation per column.
        row_count: Number of rows the statistics were computed over.
    """

    mean: Mapping[str, float]
    minimum: Mapping[str, float]
    maximum: Mapping[str, float]
    standard_deviation: Mapping[str, float]
    row_count: int


@dataclass(frozen=True)
class MeasurementRecord:
    """Ledger-ready measurement asset built from one radar file.

    Attributes:
        asset_id: Measurement identity id.
        owner: Current owner of the asset.
        fingerprint: Hex digest of the raw file bytes.
        filename: Original file name.
        file_unique_id: Identity issued when the file was first recorded.
        creation_timestamp: ``TimeStamp`` header value.
        header: Extracted header map.
        longitude: Longitude column values.
        latitude: Latitude column values.
        processed_timestamp: ``ProcessedTimeStamp`` header value.
        statistics: Per-column summary statistics.
        row_count: Declared table row count.
        software_version: Record schema version.
        links: Reserved free-form links field.
        diagnostics: Rows rejected under the lenient parse policy.
    """

    asset_id: str
    owner: str
    fingerprint: str
    filename: str
    file_unique_id: str
    creation_timestamp: str | None
    header: HeaderMap
    longitude: tuple[float, ...]
    latitude: tuple[float, ...]
    processed_timestamp: str | None
    statistics: StatisticsSummary
    row_count: int
    software_version: int = SOFTWARE_VERSION
    links: str = DEFAULT_LINKS
    diagnostics: tuple[RowDiagnostic, ...] = ()


@dataclass(frozen=True)
class ChangeDecision:
    """Outcome of comparing a stored asset with an incoming file.

    Attributes:
        kind: ``transfer`` when fingerprints match, else ``update``.
        record: Record value that should replace the stored one.
        previous_owner: Owner before the change.
    """

    kind: ChangeKind
    record: MeasurementRecord
    previous_owner: str


@dataclass(frozen=True)
class IngestOptions:
    """Ingest command options.

    Attributes:
        source_uri: Input file path, directory, or S3 URI.
        owner: Optional owner; config default if omitted.
    """

    source_uri: str
    owner: str | None = None


@dataclass(frozen=True)
class UpdateOptions:
    """Update command options.

    Attributes:
        asset_id: Stored asset to update.
        source_uri: Input file path or S3 object URI.
        new_owner: Owner after the update.
    """

    asset_id: str
    source_uri: str
    new_owner: str


@dataclass(frozen=True)
class LedgerTransaction:
    """Named ledger transaction submitted to the dispatch layer.

    Attributes:
        name: Transaction name.
        asset_id: Target asset id.
        payload: Transaction arguments in ledger asset JSON form.
    """

    name: LedgerTransactionName
    asset_id: str
    payload: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SubmissionReceipt:
    """Dispatch acknowledgement for one submitted transaction.

    Attributes:
        asset_id: Asset the transaction targets.
        job_id: Job handle returned by the dispatch layer.
        transaction: Submitted transaction name.
        change_kind: Change classification for update submissions.
    """

    asset_id: str
    job_id: str
    transaction: LedgerTransactionName
    change_kind: ChangeKind | None = None


@dataclass(frozen=True)
class HistoryEntry:
    """One ledger history row for an asset.

    Attributes:
        tx_id: Transaction id that produced this state.
        timestamp: UTC transaction timestamp.
        record: Asset state after the transaction, None on delete.
        is_delete: Whether the transaction deleted the asset.
    """

    tx_id: str
    timestamp: datetime
    record: MeasurementRecord | None
    is_delete: bool
