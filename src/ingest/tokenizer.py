"""Line tokenizer for comma-separated input."""

from __future__ import annotations

from core.constants import CSV_DELIMITER


def split_line(line: str, delimiter: str = CSV_DELIMITER) -> tuple[str, ...]:
    """Split one line into trimmed tokens.

    Trailing empty tokens are preserved. Quoted delimiters are not protected.

    Args:
        line: Raw text line without its line terminator.
        delimiter: Cell separator.

    Returns:
        Ordered whitespace-trimmed tokens.
    """
    return tuple(token.strip() for token in line.split(delimiter))
