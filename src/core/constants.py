"""Core constants used across csvframe modules.

This module centralizes parsing literals and configuration defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_DIR = Path("data")
DEFAULT_MAX_FILE_BYTES = 50 * 1024 * 1024
DEFAULT_DETECT_TIME_FIELDS = True
CSV_DELIMITER = ","
CSV_FILE_EXTENSION = ".csv"
CSV_TEXT_ENCODING = "utf-8-sig"
NULL_TOKEN_LITERAL = "null"
TRUE_TOKENS = frozenset({"t", "true"})
FALSE_TOKENS = frozenset({"f", "false"})
DEFAULT_FIELD_NAME_TEMPLATE = "Field {index}"
TIME_FIELD_NAME_MARKER = "time"
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
SAMPLE_CSV_FILE_NAMES = ("population_by_state.csv", "city_stats.csv")
