"""Header metadata extraction.

This module turns ``%Key: Value`` lines into a header map. Lines
without a colon are ignored and later keys overwrite earlier ones.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import (
    EXCLUDED_HEADER_KEYS,
    HEADER_KEY_PREFIX,
    HEADER_SCOPE_DOCUMENT,
    HEADER_SCOPE_PREAMBLE,
)
from core.types import DocumentLine, HeaderMap
from ingest.table_extractor import find_table_marker


def parse_header_map(
    lines: Sequence[DocumentLine],
    scope: str = HEADER_SCOPE_DOCUMENT,
) -> HeaderMap:
    """Extract colon-delimited key/value pairs.

    Args:
        lines: Trimmed document lines.
        scope: ``document`` scans every line, ``preamble`` only the lines
            before the table marker.

    Returns:
        Header map without excluded keys.
    """
    entries: dict[str, str] = {}
    for line in _scoped_lines(lines, scope):
        pair = split_header_line(line.text)
        if pair is None:
            continue
        key, value = pair
        if key in EXCLUDED_HEADER_KEYS:
            continue
        entries[key] = value
    return HeaderMap(entries=entries)


def split_header_line(text: str) -> tuple[str, str] | None:
    """Split one line at its first colon into a cleaned key and value.

    Args:
        text: Trimmed line text.

    Returns:
        Key/value pair, or None when the line has no colon.
    """
    raw_key, separator, raw_value = text.partition(":")
    if not separator:
        return None
    key = raw_key.strip().removeprefix(HEADER_KEY_PREFIX).strip()
    return key, raw_value.strip()


def _scoped_lines(lines: Sequence[DocumentLine], scope: str) -> Sequence[DocumentLine]:
    if scope != HEADER_SCOPE_PREAMBLE:
        return lines
    marker_index = find_table_marker(lines)
    if marker_index is None:
        return lines
    return lines[:marker_index]
