"""Schema+data JSON encoding for frames.

This module renders a frame into the ``schema.fields`` / ``data.values``
shape consumed by golden-file comparison. Key order and null handling are
fixed so the same frame always encodes to the same bytes.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from core.types import CellValue, Field, FieldType, Frame
from ingest.time_fields import datetime_to_epoch_millis

_SCHEMA_TYPE_NAMES: dict[FieldType, str] = {
    "boolean": "boolean",
    "integer": "number",
    "float": "number",
    "string": "string",
    "time": "time",
}
_FRAME_TYPE_NAMES: dict[FieldType, str] = {
    "boolean": "bool",
    "integer": "int64",
    "float": "float64",
    "string": "string",
    "time": "time.Time",
}


def frame_to_json(frame: Frame) -> dict[str, Any]:
    """Build the schema+data payload for a frame.

    Args:
        frame: Frame to encode.

    Returns:
        JSON-compatible payload with ``schema`` and ``data`` keys.
    """
    schema: dict[str, Any] = {}
    if frame.name:
        schema["name"] = frame.name
    schema["fields"] = [_field_schema(field) for field in frame.fields]
    values = [[_encode_value(value) for value in field.values] for field in frame.fields]
    return {"schema": schema, "data": {"values": values}}


def frame_to_json_bytes(frame: Frame) -> bytes:
    """Encode a frame to compact, deterministic UTF-8 JSON bytes."""
    payload = frame_to_json(frame)
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def _field_schema(field: Field) -> dict[str, Any]:
    schema: dict[str, Any] = {}
    if field.name:
        schema["name"] = field.name
    schema["type"] = _SCHEMA_TYPE_NAMES[field.type]
    schema["typeInfo"] = {"frame": _FRAME_TYPE_NAMES[field.type], "nullable": True}
    return schema


def _encode_value(value: CellValue) -> Any:
    if isinstance(value, datetime):
        return datetime_to_epoch_millis(value)
    return value
