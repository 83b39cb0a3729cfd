"""Change classification for re-submitted measurement assets.

This module compares a stored fingerprint with an incoming one. Equal
digests mean an ownership transfer, anything else a content update.
"""

from __future__ import annotations

from dataclasses import replace

from core.logging_config import get_logger
from core.types import ChangeDecision, ChangeKind, MeasurementRecord

_LOGGER = get_logger(__name__)


def classify_change(stored_fingerprint: str, new_fingerprint: str) -> ChangeKind:
    """Classify an update by exact fingerprint equality.

    Args:
        stored_fingerprint: Fingerprint held by the ledger.
        new_fingerprint: Fingerprint of the incoming file.

    Returns:
        ``transfer`` for identical digests, else ``update``.
    """
    if stored_fingerprint == new_fingerprint:
        return "transfer"
    return "update"


def resolve_change(
    stored: MeasurementRecord,
    incoming: MeasurementRecord,
    new_owner: str,
) -> ChangeDecision:
    """Build the record that replaces a stored asset.

    A transfer changes only the owner of the stored record. An update
    takes the incoming payload but keeps the stored identity id.

    Args:
        stored: Record currently held by the ledger.
        incoming: Record built from the new file.
        new_owner: Owner after the change.

    Returns:
        Change decision with the replacement record.
    """
    kind = classify_change(stored.fingerprint, incoming.fingerprint)
    if kind == "transfer":
        record = replace(stored, owner=new_owner)
    else:
        record = replace(
            incoming,
            asset_id=stored.asset_id,
            file_unique_id=stored.asset_id,
            owner=new_owner,
        )
    _LOGGER.info(
        "change_classified",
        asset_id=stored.asset_id,
        kind=kind,
        previous_owner=stored.owner,
        new_owner=new_owner,
    )
    return ChangeDecision(kind=kind, record=record, previous_owner=stored.owner)
