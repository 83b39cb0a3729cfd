"""UTF-8 text view over raw document bytes."""

from __future__ import annotations

from core.errors import DocumentDecodeError
from core.types import DocumentLine, RawDocument


def decode_document(document: RawDocument) -> str:
    """Decode document bytes as strict UTF-8.

    Args:
        document: Raw document.

    Returns:
        Decoded text.

    Raises:
        DocumentDecodeError: If the bytes are not valid UTF-8.
    """
    try:
        return document.data.decode("utf-8")
    except UnicodeDecodeError as error:
        raise DocumentDecodeError(
            f"Failed to decode {document.filename} as UTF-8 at byte {error.start}: "
            f"{error.reason}. Re-export the file with UTF-8 encoding."
        ) from error


def split_document_lines(text: str) -> tuple[DocumentLine, ...]:
    """Split text on ``\\n`` and trim surrounding whitespace of each line.

    A trailing newline yields a final empty line, which the table
    footer accounts for.

    Args:
        text: Decoded document text.

    Returns:
        Numbered, trimmed lines.
    """
    return tuple(
        DocumentLine(line_number=index, text=raw_line.strip())
        for index, raw_line in enumerate(text.split("\n"), 1)
    )


def read_document_lines(document: RawDocument) -> tuple[DocumentLine, ...]:
    """Decode a document and return its trimmed lines."""
    return split_document_lines(decode_document(document))
