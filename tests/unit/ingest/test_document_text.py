"""Unit tests for the document text view."""

from __future__ import annotations

import pytest

from core.errors import DocumentDecodeError
from core.types import RawDocument
from ingest.document_text import decode_document, read_document_lines, split_document_lines


def test_split_document_lines_trims_and_numbers_lines() -> None:
    """Lines should be trimmed, one-based, and keep the trailing empty line."""
    lines = split_document_lines("  %Site: TOTL \r\nrow\n")

    assert [(line.line_number, line.text) for line in lines] == [
        (1, "%Site: TOTL"),
        (2, "row"),
        (3, ""),
    ]


def test_decode_document_rejects_invalid_utf8() -> None:
    """Invalid bytes should raise a decode error naming the file."""
    document = RawDocument(filename="bad.tuv", data=b"%Site: \xff\xfe\n")

    with pytest.raises(DocumentDecodeError, match="bad.tuv"):
        decode_document(document)


def test_read_document_lines_decodes_utf8() -> None:
    """Non-ASCII UTF-8 content should decode cleanly."""
    document = RawDocument(filename="ok.tuv", data="%Operator: Sóller\n".encode("utf-8"))

    lines = read_document_lines(document)

    assert lines[0].text == "%Operator: Sóller"
