"""HF radar ledger exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class HfrError(Exception):
    """Base exception for all HF radar ledger failures."""


class HfrConfigError(HfrError):
    """Raised for invalid runtime configuration."""


class HfrIngestError(HfrError):
    """Raised for source reading and document parsing failures."""


class DocumentDecodeError(HfrIngestError):
    """Raised when document bytes are not valid UTF-8."""


class TableMarkerNotFoundError(HfrIngestError):
    """Raised when a document has no ``%TableStart:`` marker line."""


class RowParseError(HfrIngestError):
    """Raised when a data row does not match the vector table schema.

    Attributes:
        line_number: One-based document line number of the row.
        token: Offending token, or None for whole-row failures.
        reason: Short machine-readable failure reason.
    """

    def __init__(
        self,
        message: str,
        line_number: int,
        reason: str,
        token: str | None = None,
    ) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.reason = reason
        self.token = token


class RowArityError(RowParseError):
    """Raised when a data row has the wrong number of tokens."""


class NumericParseError(RowParseError):
    """Raised when a data row token is not a finite number."""


class EmptyTableError(HfrIngestError):
    """Raised when no usable data rows remain for statistics."""


class DigestFailureError(HfrError):
    """Raised when the configured digest cannot be computed."""


class HfrLedgerError(HfrError):
    """Raised for ledger read, write, and dispatch failures."""


class AssetNotFoundError(HfrLedgerError):
    """Raised when a ledger asset id does not exist."""


class AssetExistsError(HfrLedgerError):
    """Raised when creating an asset whose id is already stored."""


class HfrDependencyError(HfrError):
    """Raised when an optional runtime dependency is missing."""
