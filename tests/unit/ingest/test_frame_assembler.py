"""Unit tests for frame assembly."""

from __future__ import annotations

from core.types import ColumnTokens
from ingest.frame_assembler import assemble_frame


def _columns() -> tuple[ColumnTokens, ...]:
    return (
        ColumnTokens(name="flag", tokens=("t", "")),
        ColumnTokens(name="created_time", tokens=("0", "1000")),
        ColumnTokens(name="label", tokens=("x", "y")),
    )


def test_assemble_frame_preserves_column_order() -> None:
    """Fields should follow source column order under the given name."""
    frame = assemble_frame("demo", _columns())

    assert frame.name == "demo"
    assert frame.field_names == ("flag", "created_time", "label")
    assert [field.type for field in frame.fields] == ["boolean", "time", "string"]


def test_assemble_frame_can_skip_time_detection() -> None:
    """Time promotion should be optional."""
    frame = assemble_frame("demo", _columns(), detect_time_fields=False)

    assert frame.fields[1].type == "integer"
    assert frame.fields[1].values == (0, 1000)
