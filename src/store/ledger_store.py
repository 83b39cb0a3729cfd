"""File-backed ledger for measurement assets.

This module stands in for the distributed ledger: it keeps a world
state of asset payloads, an append-only history per asset, and applies
submitted transactions under a returned job handle.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any

from core.config import HfrConfig
from core.constants import HISTORY_FILE_NAME, LEDGER_DIR_NAME, WORLD_STATE_FILE_NAME
from core.errors import AssetExistsError, AssetNotFoundError, HfrLedgerError
from core.logging_config import get_logger
from core.types import HistoryEntry, LedgerTransaction, MeasurementRecord
from store.ledger_io import (
    append_history_entry,
    build_transaction_id,
    read_history_entries,
    read_world_state,
    utc_now,
    write_world_state,
)
from store.ledger_payload import record_from_payload, record_to_payload

_LOGGER = get_logger(__name__)


class LocalLedger:
    """Ledger implementation persisted under the configured data root."""

    def __init__(self, config: HfrConfig) -> None:
        """Initialize the ledger directory.

        Args:
            config: Runtime configuration.
        """
        self._ledger_root = config.data_root / LEDGER_DIR_NAME
        self._ledger_root.mkdir(parents=True, exist_ok=True)
        self._state_path = self._ledger_root / WORLD_STATE_FILE_NAME
        self._history_path = self._ledger_root / HISTORY_FILE_NAME

    def submit(self, transaction: LedgerTransaction) -> str:
        """Apply a named transaction and return its job id.

        Args:
            transaction: Transaction to apply.

        Returns:
            Job id, also recorded as the history transaction id.

        Raises:
            HfrLedgerError: If the transaction fails or is unknown.
        """
        job_id = build_transaction_id()
        if transaction.name == "CreateAsset":
            self.create_asset(record_from_payload(transaction.payload), tx_id=job_id)
        elif transaction.name == "UpdateAsset":
            self.update_asset(record_from_payload(transaction.payload), tx_id=job_id)
        elif transaction.name == "TransferAsset":
            self.transfer_asset(
                transaction.asset_id, str(transaction.payload["Owner"]), tx_id=job_id
            )
        elif transaction.name == "DeleteAsset":
            self.delete_asset(transaction.asset_id, tx_id=job_id)
        else:
            raise HfrLedgerError(f"Unsupported ledger transaction: {transaction.name}")
        _LOGGER.info(
            "ledger_transaction_applied",
            transaction=transaction.name,
            asset_id=transaction.asset_id,
            job_id=job_id,
        )
        return job_id

    def asset_exists(self, asset_id: str) -> bool:
        return asset_id in read_world_state(self._state_path)

    def create_asset(self, record: MeasurementRecord, tx_id: str | None = None) -> None:
        """Store a new asset.

        Raises:
            AssetExistsError: If the asset id is already stored.
        """
        state = read_world_state(self._state_path)
        if record.asset_id in state:
            raise AssetExistsError(f"The asset {record.asset_id} already exists.")
        self._put(state, record, tx_id)

    def read_asset(self, asset_id: str) -> MeasurementRecord:
        """Return the stored asset.

        Raises:
            AssetNotFoundError: If the asset id is not stored.
        """
        state = read_world_state(self._state_path)
        return record_from_payload(self._require(state, asset_id))

    def update_asset(self, record: MeasurementRecord, tx_id: str | None = None) -> None:
        """Overwrite an existing asset with a new record value.

        Raises:
            AssetNotFoundError: If the asset id is not stored.
        """
        state = read_world_state(self._state_path)
        self._require(state, record.asset_id)
        self._put(state, record, tx_id)

    def transfer_asset(self, asset_id: str, new_owner: str, tx_id: str | None = None) -> str:
        """Change the owner of a stored asset.

        Args:
            asset_id: Asset to transfer.
            new_owner: Owner after the transfer.
            tx_id: Optional transaction id.

        Returns:
            Previous owner.

        Raises:
            AssetNotFoundError: If the asset id is not stored.
        """
        state = read_world_state(self._state_path)
        record = record_from_payload(self._require(state, asset_id))
        self._put(state, replace(record, owner=new_owner), tx_id)
        return record.owner

    def delete_asset(self, asset_id: str, tx_id: str | None = None) -> None:
        """Remove an asset from the world state, keeping its history.

        Raises:
            AssetNotFoundError: If the asset id is not stored.
        """
        state = read_world_state(self._state_path)
        self._require(state, asset_id)
        del state[asset_id]
        write_world_state(self._state_path, state)
        self._record_history(asset_id, None, tx_id)

    def list_assets(self) -> list[MeasurementRecord]:
        """Return every stored asset ordered by id."""
        return self.list_assets_by_range("", "")

    def list_assets_by_range(self, start_key: str, end_key: str) -> list[MeasurementRecord]:
        """Return assets with ``start_key <= id < end_key``.

        Empty bounds are open-ended.
        """
        state = read_world_state(self._state_path)
        return [
            record_from_payload(state[asset_id])
            for asset_id in sorted(state)
            if asset_id >= start_key and (not end_key or asset_id < end_key)
        ]

    def asset_history(self, asset_id: str) -> list[HistoryEntry]:
        """Return the transaction history of an asset, oldest first."""
        return [
            _history_entry_from_row(row)
            for row in read_history_entries(self._history_path)
            if row.get("asset_id") == asset_id
        ]

    def _require(self, state: dict[str, dict[str, Any]], asset_id: str) -> dict[str, Any]:
        payload = state.get(asset_id)
        if payload is None:
            raise AssetNotFoundError(f"The asset {asset_id} does not exist.")
        return payload

    def _put(
        self,
        state: dict[str, dict[str, Any]],
        record: MeasurementRecord,
        tx_id: str | None,
    ) -> None:
        payload = record_to_payload(record)
        state[record.asset_id] = payload
        write_world_state(self._state_path, state)
        self._record_history(record.asset_id, payload, tx_id)

    def _record_history(
        self,
        asset_id: str,
        payload: dict[str, object] | None,
        tx_id: str | None,
    ) -> None:
        append_history_entry(
            self._history_path,
            {
                "tx_id": tx_id or build_transaction_id(),
                "timestamp": utc_now().isoformat(),
                "asset_id": asset_id,
                "is_delete": payload is None,
                "record": payload,
            },
        )


def _history_entry_from_row(row: dict[str, Any]) -> HistoryEntry:
    payload = row.get("record")
    return HistoryEntry(
        tx_id=str(row["tx_id"]),
        timestamp=datetime.fromisoformat(str(row["timestamp"])),
        record=record_from_payload(payload) if payload else None,
        is_delete=bool(row.get("is_delete", False)),
    )
