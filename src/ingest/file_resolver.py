"""Sandboxed resolution of CSV file names.

This module maps a short logical file name onto a path inside the
configured data directory. Containment is checked on normalized,
symlink-resolved absolute paths rather than on the input string.
"""

from __future__ import annotations

from pathlib import Path, PurePath

from core.constants import CSV_FILE_EXTENSION
from core.errors import InvalidFileNameError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def resolve_data_file(name: str, data_dir: Path) -> Path:
    """Resolve a CSV file name strictly inside the data directory.

    Args:
        name: Relative file name supplied by the caller.
        data_dir: Base directory for sample data files.

    Returns:
        Absolute path of the file inside ``data_dir``.

    Raises:
        InvalidFileNameError: If the name is malformed or escapes ``data_dir``.
    """
    _validate_name_shape(name)
    base_dir = data_dir.expanduser().resolve()
    candidate = (base_dir / name).resolve()
    if candidate == base_dir or not candidate.is_relative_to(base_dir):
        _LOGGER.warning("csv_file_rejected", file_name=name, reason="outside_data_dir")
        raise InvalidFileNameError(
            f"Invalid CSV file name '{name}': resolves outside the data directory. "
            "Use a file name relative to the data directory without '..'."
        )
    return candidate


def _validate_name_shape(name: str) -> None:
    if not name.strip():
        raise InvalidFileNameError("Invalid CSV file name: name is empty.")
    if "\x00" in name:
        raise InvalidFileNameError(
            f"Invalid CSV file name {name!r}: NUL bytes are not allowed."
        )
    if PurePath(name).is_absolute() or name.startswith(("/", "\\", "~")):
        _LOGGER.warning("csv_file_rejected", file_name=name, reason="absolute_path")
        raise InvalidFileNameError(
            f"Invalid CSV file name '{name}': absolute paths are not allowed."
        )
    if not name.lower().endswith(CSV_FILE_EXTENSION):
        raise InvalidFileNameError(
            f"Invalid CSV file name '{name}': expected a '{CSV_FILE_EXTENSION}' file."
        )
