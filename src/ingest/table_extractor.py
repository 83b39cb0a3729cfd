"""Vector table region extraction.

This module locates the ``%TableStart:`` marker and slices the data
rows between the column annotation lines and the fixed footer block.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import (
    TABLE_FOOTER_LINE_COUNT,
    TABLE_HEADER_LINE_COUNT,
    TABLE_START_MARKER,
)
from core.errors import TableMarkerNotFoundError
from core.types import DocumentLine


def find_table_marker(lines: Sequence[DocumentLine]) -> int | None:
    """Return the index of the first table marker line, if any.

    Args:
        lines: Trimmed document lines.

    Returns:
        Index into ``lines`` or None when no marker exists.
    """
    for index, line in enumerate(lines):
        if line.text.startswith(TABLE_START_MARKER):
            return index
    return None


def extract_data_lines(
    lines: Sequence[DocumentLine],
    source_name: str = "<document>",
) -> tuple[DocumentLine, ...]:
    """Slice data rows out of the table region.

    Args:
        lines: Trimmed document lines.
        source_name: File name for error context.

    Returns:
        Data row lines, possibly empty.

    Raises:
        TableMarkerNotFoundError: If no marker line exists.
    """
    marker_index = find_table_marker(lines)
    if marker_index is None:
        raise TableMarkerNotFoundError(
            f"No '{TABLE_START_MARKER}' line found in {source_name}. "
            "Provide a radar vector file with a table section."
        )
    region = lines[marker_index + 1 :]
    data_end = len(region) - TABLE_FOOTER_LINE_COUNT
    if data_end <= TABLE_HEADER_LINE_COUNT:
        return ()
    return tuple(region[TABLE_HEADER_LINE_COUNT:data_end])
