"""Ledger asset JSON serialization for MeasurementRecord values.

Map-valued fields travel as JSON-encoded strings and coordinate
sequences as comma-joined strings, which is how the ledger contract
stores them.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from core.constants import DEFAULT_LINKS, SOFTWARE_VERSION
from core.types import HeaderMap, MeasurementRecord, RowDiagnostic, StatisticsSummary


def record_to_payload(record: MeasurementRecord) -> dict[str, object]:
    """Serialize a record into a ledger asset payload.

    Args:
        record: Measurement record.

    Returns:
        Dictionary payload for JSON encoding.
    """
    statistics = record.statistics
    return {
        "ID": record.asset_id,
        "Owner": record.owner,
        "FileHash": record.fingerprint,
        "FileName": record.filename,
        "FileUniqueID": record.file_unique_id,
        "FileCreationTime": record.creation_timestamp or "",
        "CommonVariables": json.dumps(record.header.to_dict()),
        "Longitude": _join_floats(record.longitude),
        "Latitude": _join_floats(record.latitude),
        "Time": record.processed_timestamp or "",
        "Mean": json.dumps(dict(statistics.mean)),
        "Min": json.dumps(dict(statistics.minimum)),
        "Max": json.dumps(dict(statistics.maximum)),
        "StandardDeviation": json.dumps(dict(statistics.standard_deviation)),
        "NumberOfSeries": record.row_count,
        "SoftwareVersion": record.software_version,
        "Links": record.links,
        "Diagnostics": json.dumps([_diagnostic_to_dict(item) for item in record.diagnostics]),
    }


def record_from_payload(payload: Mapping[str, Any]) -> MeasurementRecord:
    """Deserialize a ledger asset payload into a record.

    Args:
        payload: Ledger asset payload.

    Returns:
        Parsed MeasurementRecord.

    Raises:
        ValueError: If an encoded field is not valid JSON or numeric text.
    """
    longitude = _split_floats(str(payload.get("Longitude", "")))
    statistics = StatisticsSummary(
        mean=_decode_float_map(payload.get("Mean")),
        minimum=_decode_float_map(payload.get("Min")),
        maximum=_decode_float_map(payload.get("Max")),
        standard_deviation=_decode_float_map(payload.get("StandardDeviation")),
        row_count=len(longitude),
    )
    asset_id = str(payload.get("ID", ""))
    return MeasurementRecord(
        asset_id=asset_id,
        owner=str(payload.get("Owner", "")),
        fingerprint=str(payload.get("FileHash", "")),
        filename=str(payload.get("FileName", "")),
        file_unique_id=str(payload.get("FileUniqueID") or asset_id),
        creation_timestamp=payload.get("FileCreationTime") or None,
        header=HeaderMap(entries=_decode_string_map(payload.get("CommonVariables"))),
        longitude=longitude,
        latitude=_split_floats(str(payload.get("Latitude", ""))),
        processed_timestamp=payload.get("Time") or None,
        statistics=statistics,
        row_count=int(payload.get("NumberOfSeries", 0)),
        software_version=int(payload.get("SoftwareVersion", SOFTWARE_VERSION)),
        links=str(payload.get("Links", DEFAULT_LINKS)),
        diagnostics=tuple(
            _diagnostic_from_dict(item) for item in _decode_json(payload.get("Diagnostics"), [])
        ),
    )


def _join_floats(values: tuple[float, ...]) -> str:
    return ",".join(repr(value) for value in values)


def _split_floats(text: str) -> tuple[float, ...]:
    if not text:
        return ()
    return tuple(float(item) for item in text.split(","))


def _decode_json(raw_value: Any, default: Any) -> Any:
    if raw_value is None or raw_value == "":
        return default
    if not isinstance(raw_value, str):
        return raw_value
    return json.loads(raw_value)


def _decode_float_map(raw_value: Any) -> dict[str, float]:
    return {str(key): float(value) for key, value in dict(_decode_json(raw_value, {})).items()}


def _decode_string_map(raw_value: Any) -> dict[str, str]:
    return {str(key): str(value) for key, value in dict(_decode_json(raw_value, {})).items()}


def _diagnostic_to_dict(diagnostic: RowDiagnostic) -> dict[str, object]:
    return {
        "line_number": diagnostic.line_number,
        "reason": diagnostic.reason,
        "message": diagnostic.message,
        "token": diagnostic.token,
    }


def _diagnostic_from_dict(payload: Mapping[str, Any]) -> RowDiagnostic:
    token = payload.get("token")
    return RowDiagnostic(
        line_number=int(payload.get("line_number", 0)),
        reason=str(payload.get("reason", "")),
        message=str(payload.get("message", "")),
        token=None if token is None else str(token),
    )
