"""Time field promotion.

This module converts fields whose name mentions ``time`` into UTC
timestamp fields. Numeric columns are read as epoch milliseconds and
string columns as RFC 3339 timestamps carrying an explicit offset.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from core.constants import TIME_FIELD_NAME_MARKER
from core.types import CellValue, Field

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def is_time_field_name(name: str) -> bool:
    """Return whether a field name marks a time column."""
    return TIME_FIELD_NAME_MARKER in name.lower()


def promote_time_field(field: Field) -> Field | None:
    """Convert a numeric or string field into a time field.

    Args:
        field: Classified field to convert.

    Returns:
        Time field, or ``None`` when the type is unsupported or no value converts.
    """
    if field.type in ("integer", "float"):
        converter = _epoch_millis_to_datetime
    elif field.type == "string":
        converter = _rfc3339_to_datetime
    else:
        return None
    values = tuple(None if value is None else converter(value) for value in field.values)
    if all(value is None for value in values):
        return None
    return Field(name=field.name, type="time", values=values)


def datetime_to_epoch_millis(value: datetime) -> int:
    """Return whole milliseconds since the Unix epoch for an aware datetime."""
    return (value - EPOCH) // timedelta(milliseconds=1)


def _epoch_millis_to_datetime(value: CellValue) -> datetime | None:
    try:
        return EPOCH + timedelta(milliseconds=int(value))
    except OverflowError:
        return None


def _rfc3339_to_datetime(value: CellValue) -> datetime | None:
    text = str(value)
    if "T" not in text.upper():
        return None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return None
    return parsed.astimezone(timezone.utc)
