"""Row-major CSV text to per-column token sequences.

This module validates row widths and transposes text rows into one
named token tuple per column, ready for type classification.
"""

from __future__ import annotations

from core.constants import CSV_DELIMITER, DEFAULT_FIELD_NAME_TEMPLATE
from core.errors import EmptyContentError, RowWidthMismatchError
from core.types import ColumnTokens
from ingest.tokenizer import split_line


def read_columns(
    text: str,
    has_header: bool = True,
    delimiter: str = CSV_DELIMITER,
) -> tuple[ColumnTokens, ...]:
    """Transpose CSV text into named column token sequences.

    Args:
        text: Full CSV body.
        has_header: Whether the first non-blank line names the columns.
        delimiter: Cell separator.

    Returns:
        One ``ColumnTokens`` per column in source order.

    Raises:
        EmptyContentError: If a header is expected but the text has no lines.
        RowWidthMismatchError: If any row width differs from the first row.
    """
    rows = [
        (line_number, split_line(line, delimiter))
        for line_number, line in enumerate(_split_lines(text), 1)
        if line.strip()
    ]
    if not rows:
        if has_header:
            raise EmptyContentError(
                "Failed to read CSV header: input has no non-blank lines. "
                "Provide a header row naming each column."
            )
        return ()
    if has_header:
        _, header = rows.pop(0)
        names = list(header)
    else:
        names = [DEFAULT_FIELD_NAME_TEMPLATE.format(index=i) for i in range(1, len(rows[0][1]) + 1)]
    return _transpose(names, rows)


def _transpose(
    names: list[str],
    rows: list[tuple[int, tuple[str, ...]]],
) -> tuple[ColumnTokens, ...]:
    width = len(names)
    columns: list[list[str]] = [[] for _ in names]
    for row_index, (line_number, tokens) in enumerate(rows):
        if len(tokens) != width:
            raise RowWidthMismatchError(
                line_number=line_number,
                row_index=row_index,
                expected=width,
                actual=len(tokens),
            )
        for column, token in zip(columns, tokens):
            column.append(token)
    return tuple(
        ColumnTokens(name=name, tokens=tuple(column)) for name, column in zip(names, columns)
    )


def _split_lines(text: str) -> list[str]:
    """Split text on ``\\n`` and ``\\r\\n`` line endings only."""
    return [line.removesuffix("\r") for line in text.split("\n")]
