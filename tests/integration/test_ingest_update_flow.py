"""Integration tests for ingest, transfer, and update workflows."""

from __future__ import annotations

from pathlib import Path
import shutil

import pytest

from core.clock import FixedClock
from core.config import HfrConfig
from core.errors import AssetExistsError
from core.types import IngestOptions, UpdateOptions
from store.ledger_sdk import HfrClient
from tests.fixture_paths import CHANGED_TUV, VALID_TUV, fixture_path


def _client(tmp_path: Path, millis: int = 1682899200000) -> HfrClient:
    return HfrClient(HfrConfig(data_root=tmp_path / "hfr"), clock=FixedClock(millis))


def test_resubmitting_identical_file_transfers_ownership(tmp_path: Path) -> None:
    """Byte-identical re-submission should only change the owner."""
    client = _client(tmp_path)
    options = IngestOptions(source_uri=str(fixture_path(VALID_TUV)), owner="SOCIB")
    receipt = client.ingest(options)[0]
    stored = client.read(receipt.asset_id)

    update_receipt = _client(tmp_path, millis=1682902800000).update(
        UpdateOptions(
            asset_id=receipt.asset_id,
            source_uri=str(fixture_path(VALID_TUV)),
            new_owner="IMEDEA",
        )
    )
    transferred = client.read(receipt.asset_id)

    assert update_receipt.transaction == "TransferAsset"
    assert update_receipt.change_kind == "transfer"
    assert transferred.owner == "IMEDEA"
    assert transferred.fingerprint == stored.fingerprint
    assert transferred.statistics == stored.statistics


def test_resubmitting_changed_file_updates_content_under_same_id(tmp_path: Path) -> None:
    """A one-byte change should replace the payload and keep the identity."""
    client = _client(tmp_path)
    receipt = client.ingest(IngestOptions(source_uri=str(fixture_path(VALID_TUV))))[0]
    stored = client.read(receipt.asset_id)

    update_receipt = client.update(
        UpdateOptions(
            asset_id=receipt.asset_id,
            source_uri=str(fixture_path(CHANGED_TUV)),
            new_owner="IMEDEA",
        )
    )
    updated = client.read(receipt.asset_id)

    assert (update_receipt.transaction, update_receipt.change_kind) == ("UpdateAsset", "update")
    assert updated.asset_id == updated.file_unique_id == stored.asset_id
    assert updated.fingerprint != stored.fingerprint
    assert updated.filename == "TOTL_IBIZ_2023_05_01_0100.tuv"
    assert updated.statistics.minimum["UComp"] == -31.0
    assert len(client.history(receipt.asset_id)) == 2


def test_ingest_directory_creates_one_asset_per_file(tmp_path: Path) -> None:
    """Directory ingest should create an asset for every radar file."""
    source_dir = tmp_path / "incoming"
    source_dir.mkdir()
    shutil.copy(fixture_path(VALID_TUV), source_dir)
    shutil.copy(fixture_path(CHANGED_TUV), source_dir)
    client = _client(tmp_path)

    receipts = client.ingest(IngestOptions(source_uri=str(source_dir)))

    assert len(receipts) == 2
    assert sorted(record.asset_id for record in client.list()) == sorted(
        receipt.asset_id for receipt in receipts
    )


def test_content_identity_rejects_duplicate_ingest(tmp_path: Path) -> None:
    """With content identities the same file maps to one ledger asset."""
    config = HfrConfig(data_root=tmp_path / "hfr", identity_scheme="content")
    client = HfrClient(config)
    client.ingest(IngestOptions(source_uri=str(fixture_path(VALID_TUV))))

    with pytest.raises(AssetExistsError):
        client.ingest(IngestOptions(source_uri=str(fixture_path(VALID_TUV))))
