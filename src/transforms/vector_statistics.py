"""Per-column summary statistics for vector tables.

Mean, minimum, maximum and population standard deviation are computed
column-wise with numpy over the accepted rows.
"""

from __future__ import annotations

import numpy as np

from core.constants import VECTOR_COLUMN_NAMES
from core.errors import EmptyTableError
from core.types import StatisticsSummary, VectorTable


def compute_statistics(table: VectorTable, source_name: str = "<document>") -> StatisticsSummary:
    """Summarize every schema column of a vector table.

    Args:
        table: Parsed vector table.
        source_name: File name for error context.

    Returns:
        Statistics keyed by column name.

    Raises:
        EmptyTableError: If the table has no rows.
    """
    if table.row_count == 0:
        raise EmptyTableError(
            f"No usable data rows in {source_name}: statistics are undefined. "
            "Check the table section and the rejected-row diagnostics."
        )
    matrix = np.asarray([row.values for row in table.rows], dtype=np.float64)
    minimum = matrix.min(axis=0)
    maximum = matrix.max(axis=0)
    # columns are scaled into [-1, 1] so sums and squares cannot overflow
    scale = np.maximum(np.abs(minimum), np.abs(maximum))
    scale = np.where(scale == 0.0, 1.0, scale)
    scaled = matrix / scale
    # rounding can push the mean of equal values outside [min, max]
    scaled_mean = np.clip(scaled.mean(axis=0), scaled.min(axis=0), scaled.max(axis=0))
    mean = np.clip(scaled_mean * scale, minimum, maximum)
    standard_deviation = np.sqrt(np.mean((scaled - scaled_mean) ** 2, axis=0)) * scale
    return StatisticsSummary(
        mean=_by_column(mean),
        minimum=_by_column(minimum),
        maximum=_by_column(maximum),
        standard_deviation=_by_column(standard_deviation),
        row_count=table.row_count,
    )


def _by_column(values: np.ndarray) -> dict[str, float]:
    return {name: float(value) for name, value in zip(VECTOR_COLUMN_NAMES, values)}
