"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_CONFIG_ENV_VARS = (
    "CSVFRAME_DATA_DIR",
    "CSVFRAME_MAX_FILE_BYTES",
    "CSVFRAME_DETECT_TIME_FIELDS",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer csvframe environment settings out of tests."""
    for variable_name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(variable_name, raising=False)
