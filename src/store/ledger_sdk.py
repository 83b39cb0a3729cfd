"""Python SDK for measurement ledger operations.

This module exposes high-level APIs for inspecting radar files and
creating, updating, reading, and deleting ledger assets.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.clock import Clock
from core.config import HfrConfig
from core.types import (
    HistoryEntry,
    IngestOptions,
    LedgerTransaction,
    MeasurementRecord,
    SubmissionReceipt,
    UpdateOptions,
)
from ingest.pipeline import ingest_source, inspect_source, update_measurement
from store.ledger_store import LocalLedger


class HfrClient:
    """Primary SDK entry point for ledger workflows."""

    def __init__(self, config: HfrConfig | None = None, clock: Clock | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            clock: Optional time source for identity generation.
        """
        self._config = config or HfrConfig.from_env()
        self._clock = clock
        self._ledger = LocalLedger(self._config)

    @property
    def config(self) -> HfrConfig:
        return self._config

    def inspect(self, source_uri: str) -> list[MeasurementRecord]:
        """Build records for a source without touching the ledger.

        Args:
            source_uri: File, directory, or S3 URI.

        Returns:
            One record per radar file.
        """
        return inspect_source(source_uri, self._config, self._clock)

    def ingest(self, options: IngestOptions) -> list[SubmissionReceipt]:
        """Create ledger assets for every radar file at a source.

        Args:
            options: Ingest options.

        Returns:
            Submission receipts.

        Raises:
            HfrIngestError: If the source cannot be parsed.
            HfrLedgerError: If an asset cannot be created.
        """
        return ingest_source(options, self._config, self._ledger, self._clock)

    def update(self, options: UpdateOptions) -> SubmissionReceipt:
        """Transfer or update an asset from a re-submitted file.

        Args:
            options: Update options.

        Returns:
            Submission receipt with the change classification.
        """
        return update_measurement(options, self._config, self._ledger, self._clock)

    def read(self, asset_id: str) -> MeasurementRecord:
        """Return the stored record for an asset id."""
        return self._ledger.read_asset(asset_id)

    def exists(self, asset_id: str) -> bool:
        return self._ledger.asset_exists(asset_id)

    def history(self, asset_id: str) -> list[HistoryEntry]:
        """Return an asset's transaction history, oldest first."""
        return self._ledger.asset_history(asset_id)

    def list(self, start_key: str = "", end_key: str = "") -> list[MeasurementRecord]:
        """Return stored assets, optionally bounded by an id range."""
        return self._ledger.list_assets_by_range(start_key, end_key)

    def delete(self, asset_id: str) -> SubmissionReceipt:
        """Submit a delete transaction for an asset.

        Raises:
            AssetNotFoundError: If the asset is not stored.
        """
        transaction = LedgerTransaction(name="DeleteAsset", asset_id=asset_id)
        job_id = self._ledger.submit(transaction)
        return SubmissionReceipt(asset_id=asset_id, job_id=job_id, transaction=transaction.name)

    def with_data_root(self, data_root: str) -> "HfrClient":
        """Clone the client with a different local data root.

        Args:
            data_root: New data root path.

        Returns:
            New SDK client instance.
        """
        resolved_root = Path(data_root).expanduser().resolve()
        return HfrClient(replace(self._config, data_root=resolved_root), self._clock)
