"""csvframe exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each ingestion stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class CsvFrameError(Exception):
    """Base exception for all csvframe failures."""


class CsvFrameConfigError(CsvFrameError):
    """Raised for invalid runtime configuration."""


class InvalidFileNameError(CsvFrameError):
    """Raised when a file name is malformed or escapes the data directory."""


class CsvFileNotFoundError(CsvFrameError, FileNotFoundError):
    """Raised when a resolved CSV file does not exist."""


class CsvReadError(CsvFrameError):
    """Raised when CSV input cannot be read or decoded."""


class ContentTooLargeError(CsvFrameError):
    """Raised when CSV input exceeds the configured size limit."""


class EmptyContentError(CsvFrameError):
    """Raised when headed CSV input has no header line."""


class FrameShapeError(CsvFrameError):
    """Raised when a frame is built from fields of unequal length."""


class RowWidthMismatchError(CsvFrameError):
    """Raised when a CSV row has a different token count than the header.

    Attributes:
        line_number: One-based source line number of the offending row.
        row_index: Zero-based index of the offending data row.
        expected: Column count fixed by the header or first data row.
        actual: Token count found on the offending row.
    """

    def __init__(self, line_number: int, row_index: int, expected: int, actual: int) -> None:
        self.line_number = line_number
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row width mismatch at line {line_number} (data row {row_index}): "
            f"expected {expected} columns, got {actual}. "
            "Make every row carry the same number of comma-separated values."
        )
