"""Runtime configuration model for csvframe.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_DETECT_TIME_FIELDS,
    DEFAULT_MAX_FILE_BYTES,
)
from core.errors import CsvFrameConfigError

_TRUE_FLAG_VALUES = ("1", "true", "yes", "on")
_FALSE_FLAG_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class CsvFrameConfig:
    """Validated runtime configuration.

    Attributes:
        data_dir: Directory that named CSV files are resolved under.
        max_file_bytes: Upper bound on bytes read per ingestion call.
        detect_time_fields: Promote columns named like ``time`` to time fields.
    """

    data_dir: Path
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES
    detect_time_fields: bool = DEFAULT_DETECT_TIME_FIELDS

    @classmethod
    def from_env(cls) -> "CsvFrameConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CsvFrameConfigError: If environment values are invalid.
        """
        data_dir_value = os.getenv("CSVFRAME_DATA_DIR", str(DEFAULT_DATA_DIR))
        max_bytes_value = os.getenv("CSVFRAME_MAX_FILE_BYTES", str(DEFAULT_MAX_FILE_BYTES))
        detect_time_value = os.getenv(
            "CSVFRAME_DETECT_TIME_FIELDS", str(DEFAULT_DETECT_TIME_FIELDS).lower()
        )
        return cls(
            data_dir=Path(data_dir_value).expanduser().resolve(),
            max_file_bytes=_parse_max_file_bytes(max_bytes_value),
            detect_time_fields=_parse_flag("CSVFRAME_DETECT_TIME_FIELDS", detect_time_value),
        )


def _parse_max_file_bytes(raw_value: str) -> int:
    """Parse the read size limit environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive byte limit.

    Raises:
        CsvFrameConfigError: If value is not a positive integer.
    """
    try:
        max_bytes = int(raw_value)
    except ValueError as error:
        raise CsvFrameConfigError(
            "Invalid CSVFRAME_MAX_FILE_BYTES value: "
            f"expected integer, got '{raw_value}'. "
            "Set CSVFRAME_MAX_FILE_BYTES to a positive byte count."
        ) from error
    if max_bytes <= 0:
        raise CsvFrameConfigError(
            f"Invalid CSVFRAME_MAX_FILE_BYTES value: expected positive integer, got {max_bytes}."
        )
    return max_bytes


def _parse_flag(variable_name: str, raw_value: str) -> bool:
    """Parse a boolean environment flag.

    Args:
        variable_name: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Parsed flag value.

    Raises:
        CsvFrameConfigError: If value is not a recognized flag spelling.
    """
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_FLAG_VALUES:
        return True
    if normalized in _FALSE_FLAG_VALUES:
        return False
    raise CsvFrameConfigError(
        f"Invalid {variable_name} value: expected one of "
        f"{_TRUE_FLAG_VALUES + _FALSE_FLAG_VALUES}, got '{raw_value}'."
    )
