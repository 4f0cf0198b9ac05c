"""Unit tests for structured logging setup."""

from __future__ import annotations

import json
import logging

import pytest

from core.logging_config import get_logger


def test_get_logger_renders_json_events(caplog: pytest.LogCaptureFixture) -> None:
    """Events should reach standard logging as JSON with their fields."""
    logger = get_logger("tests.logging")

    with caplog.at_level(logging.WARNING, logger="tests.logging"):
        logger.warning("csv_file_rejected", file_name="../x.csv")

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["event"] == "csv_file_rejected" and payload["file_name"] == "../x.csv"
