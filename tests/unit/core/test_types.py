"""Unit tests for shared typed models."""

from __future__ import annotations

import pytest

from core.clock import FixedClock, SystemClock
from core.types import HeaderMap, VectorRow, VectorTable


def test_header_map_exposes_well_known_keys() -> None:
    """Header map should surface timestamp and row count keys."""
    header = HeaderMap(
        entries={
            "TimeStamp": "2023 05 01  00 00 00",
            "ProcessedTimeStamp": "2023 05 01  00 14 22",
            "TableRows": "3",
        }
    )

    assert (header.timestamp, header.processed_timestamp, header.table_rows) == (
        "2023 05 01  00 00 00",
        "2023 05 01  00 14 22",
        "3",
    )


def test_header_map_behaves_as_mapping() -> None:
    """Header map should support mapping access and conversion."""
    header = HeaderMap(entries={"Site": "TOTL"})

    assert header["Site"] == "TOTL" and dict(header) == {"Site": "TOTL"} and "Site" in header


def test_vector_table_column_returns_values_in_row_order() -> None:
    """Column access should be positional over the fixed schema."""
    rows = (
        VectorRow(line_number=10, values=tuple(float(index) for index in range(20))),
        VectorRow(line_number=11, values=tuple(float(index) * 2 for index in range(20))),
    )
    table = VectorTable(rows=rows)

    assert table.column("Latitude") == (1.0, 2.0)


def test_vector_table_column_rejects_unknown_name() -> None:
    """Unknown column names should raise KeyError."""
    with pytest.raises(KeyError):
        VectorTable().column("Temperature")


def test_fixed_clock_returns_pinned_value() -> None:
    """Fixed clock should always return its instant."""
    clock = FixedClock(1682899200000)

    assert clock.now_millis() == clock.now_millis() == 1682899200000


def test_system_clock_returns_epoch_millis() -> None:
    """System clock should return a plausible millisecond timestamp."""
    assert SystemClock().now_millis() > 1_600_000_000_000
