"""HF radar ledger CLI entry points.

This module exposes inspect, ingest, update, and asset query commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
from pathlib import Path
from typing import Any, Sequence

from core.config import HfrConfig
from core.errors import HfrError
from core.types import HistoryEntry, IngestOptions, UpdateOptions
from store.ledger_payload import record_to_payload
from store.ledger_sdk import HfrClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="hfr", description="HF radar measurement ledger CLI")
    parser.add_argument("--data-root", help="Override HFR_DATA_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_inspect_command(subparsers)
    _add_ingest_command(subparsers)
    _add_update_command(subparsers)
    _add_show_command(subparsers)
    _add_history_command(subparsers)
    _add_list_command(subparsers)
    _add_delete_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the HF radar ledger CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.data_root)
        return _dispatch(client, args)
    except HfrError as error:
        print(f"error={error}")
        return 1


def _dispatch(client: HfrClient, args: argparse.Namespace) -> int:
    if args.command == "inspect":
        return _run_inspect_command(client, args)
    if args.command == "ingest":
        return _run_ingest_command(client, args)
    if args.command == "update":
        return _run_update_command(client, args)
    if args.command == "show":
        return _run_show_command(client, args)
    if args.command == "history":
        return _run_history_command(client, args)
    if args.command == "list":
        return _run_list_command(client, args)
    if args.command == "delete":
        return _run_delete_command(client, args)
    raise HfrError(f"Unsupported command: {args.command}")


def _build_client(data_root: str | None) -> HfrClient:
    """Build SDK client with optional data-root override.

    Args:
        data_root: Optional override path.

    Returns:
        Configured SDK client.
    """
    config = HfrConfig.from_env()
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    return HfrClient(config)


def _run_inspect_command(client: HfrClient, args: argparse.Namespace) -> int:
    """Print ledger payloads for a source without submitting them."""
    payloads = [record_to_payload(record) for record in client.inspect(args.source)]
    print(json.dumps(payloads, indent=2))
    return 0


def _run_ingest_command(client: HfrClient, args: argparse.Namespace) -> int:
    """Handle ingest command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    receipts = client.ingest(IngestOptions(source_uri=args.source, owner=args.owner))
    for receipt in receipts:
        print(f"{receipt.asset_id}\t{receipt.job_id}")
    return 0


def _run_update_command(client: HfrClient, args: argparse.Namespace) -> int:
    """Handle update command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = UpdateOptions(
        asset_id=args.asset_id,
        source_uri=args.source,
        new_owner=args.new_owner,
    )
    receipt = client.update(options)
    print(f"{receipt.asset_id}\t{receipt.job_id}\t{receipt.change_kind}")
    return 0


def _run_show_command(client: HfrClient, args: argparse.Namespace) -> int:
    record = client.read(args.asset_id)
    print(json.dumps(record_to_payload(record), indent=2))
    return 0


def _run_history_command(client: HfrClient, args: argparse.Namespace) -> int:
    for entry in client.history(args.asset_id):
        print(_format_history_entry(entry))
    return 0


def _run_list_command(client: HfrClient, args: argparse.Namespace) -> int:
    for record in client.list(args.start, args.end):
        print(f"{record.asset_id}\t{record.owner}\t{record.filename}\t{record.row_count}")
    return 0


def _run_delete_command(client: HfrClient, args: argparse.Namespace) -> int:
    receipt = client.delete(args.asset_id)
    print(f"{receipt.asset_id}\t{receipt.job_id}")
    return 0


def _format_history_entry(entry: HistoryEntry) -> str:
    owner = entry.record.owner if entry.record else "-"
    fingerprint = entry.record.fingerprint if entry.record else "-"
    return (
        f"{entry.tx_id}\t{entry.timestamp.isoformat()}\t"
        f"{'delete' if entry.is_delete else 'put'}\t{owner}\t{fingerprint}"
    )


def _add_inspect_command(subparsers: Any) -> None:
    """Register inspect subcommand."""
    parser = subparsers.add_parser("inspect", help="Parse radar files and print ledger payloads")
    parser.add_argument("source", help="Source file, directory, or s3:// URI")


def _add_ingest_command(subparsers: Any) -> None:
    """Register ingest subcommand."""
    parser = subparsers.add_parser("ingest", help="Create ledger assets from radar files")
    parser.add_argument("source", help="Source file, directory, or s3:// URI")
    parser.add_argument("--owner", help="Asset owner, defaults to HFR_DEFAULT_OWNER")


def _add_update_command(subparsers: Any) -> None:
    """Register update subcommand."""
    parser = subparsers.add_parser(
        "update",
        help="Re-submit an asset: transfer if content is unchanged, else update",
    )
    parser.add_argument("asset_id", help="Stored asset id")
    parser.add_argument("source", help="Radar file path or s3:// object URI")
    parser.add_argument("--new-owner", required=True, help="Owner after the change")


def _add_show_command(subparsers: Any) -> None:
    """Register show subcommand."""
    parser = subparsers.add_parser("show", help="Print a stored asset")
    parser.add_argument("asset_id", help="Stored asset id")


def _add_history_command(subparsers: Any) -> None:
    """Register history subcommand."""
    parser = subparsers.add_parser("history", help="List transactions for an asset")
    parser.add_argument("asset_id", help="Asset id")


def _add_list_command(subparsers: Any) -> None:
    """Register list subcommand."""
    parser = subparsers.add_parser("list", help="List stored assets")
    parser.add_argument("--start", default="", help="Inclusive lower asset id bound")
    parser.add_argument("--end", default="", help="Exclusive upper asset id bound")


def _add_delete_command(subparsers: Any) -> None:
    """Register delete subcommand."""
    parser = subparsers.add_parser("delete", help="Delete a stored asset")
    parser.add_argument("asset_id", help="Stored asset id")
