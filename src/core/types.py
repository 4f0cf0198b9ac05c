"""Shared typed models.

This module defines immutable data models used by the tokenizer,
classifier, assembler and encoder to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Union

from core.errors import FrameShapeError

FieldType = Literal["boolean", "integer", "float", "string", "time"]
CellValue = Union[bool, int, float, str, datetime, None]


@dataclass(frozen=True)
class ColumnTokens:
    """Raw trimmed tokens of one CSV column.

    Attributes:
        name: Column name from the header or positional placeholder.
        tokens: Ordered cell tokens, one per data row.
    """

    name: str
    tokens: tuple[str, ...]


@dataclass(frozen=True)
class ClassificationResult:
    """Inferred column type with its parsed values.

    Attributes:
        field_type: Type committed for every non-null value.
        values: Parsed value per token, ``None`` for null tokens.
    """

    field_type: FieldType
    values: tuple[CellValue, ...]


@dataclass(frozen=True)
class Field:
    """One typed, nullable column.

    Attributes:
        name: Column display name, may be empty.
        type: Semantic type of every non-null value.
        values: Ordered values, ``None`` marks null.
    """

    name: str
    type: FieldType
    values: tuple[CellValue, ...]

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class Frame:
    """Named, ordered collection of equal-length fields.

    Attributes:
        name: Advisory display name.
        fields: Fields in source column order.
    """

    name: str
    fields: tuple[Field, ...]

    def __post_init__(self) -> None:
        lengths = {len(field) for field in self.fields}
        if len(lengths) > 1:
            raise FrameShapeError(
                f"Failed to build frame '{self.name}': fields have unequal lengths "
                f"{sorted(lengths)}. Every field must carry one value per row."
            )

    @property
    def row_count(self) -> int:
        """Return the shared field length, zero for a frame without fields."""
        if not self.fields:
            return 0
        return len(self.fields[0])

    @property
    def field_names(self) -> tuple[str, ...]:
        """Return field names in column order."""
        return tuple(field.name for field in self.fields)
