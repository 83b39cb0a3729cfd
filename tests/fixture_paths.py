"""Shared fixture path helpers for tests."""

from __future__ import annotations

from pathlib import Path

VALID_TUV = "tuv/TOTL_IBIZ_2023_05_01_0000.tuv"
CHANGED_TUV = "tuv/TOTL_IBIZ_2023_05_01_0100.tuv"
NO_MARKER_TUV = "tuv/no_table_marker.tuv"
SHORT_ROW_TUV = "tuv/short_row.tuv"


def fixture_path(relative_path: str) -> Path:
    """Resolve a fixture path relative to tests/fixtures.

    Args:
        relative_path: Path under fixtures root.

    Returns:
        Absolute fixture path.
    """
    tests_root = Path(__file__).resolve().parent
    return tests_root / "fixtures" / relative_path
