"""Public SDK surface for csvframe.

This module provides a stable import path for library users.
It re-exports the loader entry points, typed models and encoder.
"""

from __future__ import annotations

from core.config import CsvFrameConfig
from core.constants import SAMPLE_CSV_FILE_NAMES
from core.errors import (
    ContentTooLargeError,
    CsvFileNotFoundError,
    CsvFrameConfigError,
    CsvFrameError,
    CsvReadError,
    EmptyContentError,
    FrameShapeError,
    InvalidFileNameError,
    RowWidthMismatchError,
)
from core.types import CellValue, ClassificationResult, Field, FieldType, Frame
from encode.frame_json import frame_to_json, frame_to_json_bytes
from ingest.column_builder import build_field, csv_line_to_field
from ingest.csv_loader import CsvFrameLoader, load_content, load_named_file

__all__ = [
    "CellValue",
    "ClassificationResult",
    "ContentTooLargeError",
    "CsvFileNotFoundError",
    "CsvFrameConfig",
    "CsvFrameConfigError",
    "CsvFrameError",
    "CsvFrameLoader",
    "CsvReadError",
    "EmptyContentError",
    "Field",
    "FieldType",
    "Frame",
    "FrameShapeError",
    "InvalidFileNameError",
    "RowWidthMismatchError",
    "SAMPLE_CSV_FILE_NAMES",
    "build_field",
    "csv_line_to_field",
    "frame_to_json",
    "frame_to_json_bytes",
    "load_content",
    "load_named_file",
]
