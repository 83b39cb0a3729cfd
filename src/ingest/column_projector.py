"""Positional projection of data rows onto the vector schema.

This module tokenizes table rows on whitespace and parses every token
into a finite float. Malformed rows either abort ingestion (strict) or
are rejected with a diagnostic (lenient); they never yield NaN values.
"""

from __future__ import annotations

import math
from typing import Sequence

from core.constants import PARSE_POLICY_LENIENT, VECTOR_COLUMN_COUNT, VECTOR_COLUMN_NAMES
from core.errors import NumericParseError, RowArityError, RowParseError
from core.logging_config import get_logger
from core.types import DocumentLine, ProjectionResult, RowDiagnostic, VectorRow, VectorTable

_LOGGER = get_logger(__name__)


def project_columns(
    data_lines: Sequence[DocumentLine],
    parse_policy: str,
    source_name: str = "<document>",
) -> ProjectionResult:
    """Parse data lines into a vector table.

    Args:
        data_lines: Data rows sliced from the table region.
        parse_policy: ``strict`` or ``lenient``.
        source_name: File name for log context.

    Returns:
        Accepted rows and diagnostics for rejected rows.

    Raises:
        RowArityError: Strict policy, row token count is not the schema width.
        NumericParseError: Strict policy, token is not a finite number.
    """
    rows: list[VectorRow] = []
    diagnostics: list[RowDiagnostic] = []
    for line in data_lines:
        try:
            rows.append(parse_vector_row(line))
        except RowParseError as error:
            if parse_policy != PARSE_POLICY_LENIENT:
                raise
            diagnostics.append(_diagnostic_from_error(error))
    if diagnostics:
        _LOGGER.warning(
            "rows_rejected",
            source=source_name,
            rejected_count=len(diagnostics),
            accepted_count=len(rows),
            first_line_number=diagnostics[0].line_number,
        )
    return ProjectionResult(table=VectorTable(rows=tuple(rows)), diagnostics=tuple(diagnostics))


def parse_vector_row(line: DocumentLine) -> VectorRow:
    """Parse one data line into a vector row.

    Args:
        line: Trimmed data line.

    Returns:
        Row with one float per schema column.

    Raises:
        RowArityError: If the token count differs from the schema width.
        NumericParseError: If a token is not a finite number.
    """
    tokens = line.text.split()
    if len(tokens) != VECTOR_COLUMN_COUNT:
        raise RowArityError(
            f"Line {line.line_number}: expected {VECTOR_COLUMN_COUNT} columns, "
            f"found {len(tokens)}.",
            line_number=line.line_number,
            reason="arity",
        )
    values = tuple(
        _parse_token(token, column, line.line_number)
        for token, column in zip(tokens, VECTOR_COLUMN_NAMES)
    )
    return VectorRow(line_number=line.line_number, values=values)


def _parse_token(token: str, column: str, line_number: int) -> float:
    try:
        value = float(token)
    except ValueError as error:
        raise NumericParseError(
            f"Line {line_number}: column {column} value '{token}' is not a number.",
            line_number=line_number,
            reason="numeric",
            token=token,
        ) from error
    if not math.isfinite(value):
        raise NumericParseError(
            f"Line {line_number}: column {column} value '{token}' is not finite.",
            line_number=line_number,
            reason="numeric",
            token=token,
        )
    return value


def _diagnostic_from_error(error: RowParseError) -> RowDiagnostic:
    return RowDiagnostic(
        line_number=error.line_number,
        reason=error.reason,
        message=str(error),
        token=error.token,
    )
