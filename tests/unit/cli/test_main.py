"""Unit tests for CLI command handling."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cli.main import main
from tests.fixture_paths import CHANGED_TUV, NO_MARKER_TUV, VALID_TUV, fixture_path


def _run(tmp_path: Path, *args: str) -> int:
    return main(["--data-root", str(tmp_path), *args])


def test_cli_inspect_prints_ledger_payload(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Inspect should print one payload per radar file without storing it."""
    exit_code = _run(tmp_path, "inspect", str(fixture_path(VALID_TUV)))
    payloads = json.loads(capsys.readouterr().out)

    assert exit_code == 0 and payloads[0]["NumberOfSeries"] == 3


def test_cli_ingest_prints_asset_and_job(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Ingest should print the created asset id and job id."""
    exit_code = _run(tmp_path, "ingest", str(fixture_path(VALID_TUV)), "--owner", "SOCIB")
    asset_id, job_id = capsys.readouterr().out.strip().split("\t")

    assert exit_code == 0 and len(asset_id) == 64 and bool(job_id)


def test_cli_update_reports_change_kind(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Update should print whether the asset was transferred or updated."""
    _run(tmp_path, "ingest", str(fixture_path(VALID_TUV)))
    asset_id = capsys.readouterr().out.split("\t")[0]

    exit_code = _run(
        tmp_path, "update", asset_id, str(fixture_path(CHANGED_TUV)), "--new-owner", "IMEDEA"
    )

    assert exit_code == 0 and capsys.readouterr().out.strip().endswith("\tupdate")


def test_cli_reports_missing_marker_as_error(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Domain errors should print an error line and exit non-zero."""
    exit_code = _run(tmp_path, "ingest", str(fixture_path(NO_MARKER_TUV)))

    assert exit_code == 1 and capsys.readouterr().out.startswith("error=")


def test_cli_show_missing_asset_fails(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Showing an unknown asset should fail cleanly."""
    exit_code = _run(tmp_path, "show", "unknown-id")

    assert exit_code == 1 and "does not exist" in capsys.readouterr().out


def test_cli_history_lists_put_and_delete(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """History should show each transaction in order."""
    _run(tmp_path, "ingest", str(fixture_path(VALID_TUV)))
    asset_id = capsys.readouterr().out.split("\t")[0]
    _run(tmp_path, "delete", asset_id)
    capsys.readouterr()

    _run(tmp_path, "history", asset_id)
    rows = [line.split("\t") for line in capsys.readouterr().out.strip().splitlines()]

    assert [row[2] for row in rows] == ["put", "delete"]
