"""Typed field construction from column tokens."""

from __future__ import annotations

from typing import Sequence

from core.constants import CSV_DELIMITER
from core.logging_config import get_logger
from core.types import Field
from ingest.tokenizer import split_line
from ingest.type_classifier import classify_column

_LOGGER = get_logger(__name__)


def build_field(name: str, tokens: Sequence[str]) -> Field:
    """Build a nullable typed field from trimmed column tokens.

    Args:
        name: Field display name.
        tokens: Trimmed tokens, one per row.

    Returns:
        Field typed by whole-column classification.
    """
    result = classify_column(tokens)
    _LOGGER.debug(
        "csv_column_classified",
        field_name=name,
        field_type=result.field_type,
        row_count=len(result.values),
    )
    return Field(name=name, type=result.field_type, values=result.values)


def csv_line_to_field(line: str, name: str = "") -> Field:
    """Build one field from a single comma-separated line of values.

    Args:
        line: Cell values of one column joined by commas.
        name: Optional field display name.

    Returns:
        Typed field with one value per token.
    """
    return build_field(name, split_line(line, CSV_DELIMITER))
