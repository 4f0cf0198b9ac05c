"""Frame assembly from column token sequences."""

from __future__ import annotations

from typing import Iterable

from core.types import ColumnTokens, Field, Frame
from ingest.column_builder import build_field
from ingest.time_fields import is_time_field_name, promote_time_field


def assemble_frame(
    name: str,
    columns: Iterable[ColumnTokens],
    detect_time_fields: bool = True,
) -> Frame:
    """Build typed fields for each column and zip them into a frame.

    Args:
        name: Frame display name.
        columns: Column tokens in source order.
        detect_time_fields: Promote columns named like ``time`` to time fields.

    Returns:
        Frame preserving column order.
    """
    fields = tuple(_build_column_field(column, detect_time_fields) for column in columns)
    return Frame(name=name, fields=fields)


def _build_column_field(column: ColumnTokens, detect_time_fields: bool) -> Field:
    field = build_field(column.name, column.tokens)
    if detect_time_fields and is_time_field_name(column.name):
        time_field = promote_time_field(field)
        if time_field is not None:
            return time_field
    return field
