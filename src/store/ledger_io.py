"""World state and history persistence helpers.

This module isolates JSON file IO and transaction id generation.
It keeps the ledger store focused on asset semantics.
"""

from __future__ import annotations

from datetime import datetime, timezone
import json
from pathlib import Path
from typing import Any
import uuid

from core.errors import HfrLedgerError


def build_transaction_id() -> str:
    """Return a new random transaction id."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def read_world_state(state_path: Path) -> dict[str, dict[str, Any]]:
    """Read the asset world state keyed by asset id.

    Args:
        state_path: World state JSON path.

    Returns:
        Asset payloads keyed by id; empty when the file is absent.

    Raises:
        HfrLedgerError: If the file is not a JSON object.
    """
    if not state_path.exists():
        return {}
    try:
        payload = json.loads(state_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        raise HfrLedgerError(
            f"Failed to parse ledger world state at {state_path}: {error.msg}. "
            "Restore the file from the ledger history."
        ) from error
    if not isinstance(payload, dict):
        raise HfrLedgerError(
            f"Failed to parse ledger world state at {state_path}: "
            "expected JSON object at top level."
        )
    return payload


def write_world_state(state_path: Path, state: dict[str, dict[str, Any]]) -> None:
    """Write the asset world state.

    Args:
        state_path: World state JSON path.
        state: Asset payloads keyed by id.
    """
    state_path.write_text(json.dumps(state, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def append_history_entry(history_path: Path, entry: dict[str, Any]) -> None:
    """Append one transaction row to the history JSONL file.

    Args:
        history_path: History JSONL path.
        entry: Serializable history row.
    """
    with history_path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(entry, sort_keys=True) + "\n")


def read_history_entries(history_path: Path) -> list[dict[str, Any]]:
    """Read all history rows in append order.

    Args:
        history_path: History JSONL path.

    Returns:
        Parsed history rows; empty when the file is absent.

    Raises:
        HfrLedgerError: If a row is invalid JSON.
    """
    if not history_path.exists():
        return []
    entries: list[dict[str, Any]] = []
    for line_number, line in enumerate(history_path.read_text(encoding="utf-8").splitlines(), 1):
        if not line.strip():
            continue
        try:
            entries.append(json.loads(line))
        except json.JSONDecodeError as error:
            raise HfrLedgerError(
                f"Invalid ledger history row at {history_path}:{line_number}: {error.msg}."
            ) from error
    return entries
