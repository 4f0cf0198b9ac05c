"""Integration tests comparing loaded frames against golden JSON files."""

from __future__ import annotations

from dataclasses import replace

import pytest

from core.config import CsvFrameConfig
from core.constants import SAMPLE_CSV_FILE_NAMES
from encode.frame_json import frame_to_json_bytes
from ingest.csv_loader import CsvFrameLoader
from tests.fixture_paths import fixture_path
from tests.golden import check_golden_frame


def _loader() -> CsvFrameLoader:
    config = replace(
        CsvFrameConfig.from_env(),
        data_dir=fixture_path("data"),
        detect_time_fields=True,
    )
    return CsvFrameLoader(config)


@pytest.mark.parametrize("name", SAMPLE_CSV_FILE_NAMES)
def test_sample_files_match_golden(name: str) -> None:
    """Each sample file should load into its reference frame."""
    frame = _loader().load_named_file(name)

    check_golden_frame(fixture_path(f"golden/{name.removesuffix('.csv')}.golden.json"), frame)


@pytest.mark.parametrize("name", ["simple", "mixed"])
def test_csv_content_matches_golden(name: str) -> None:
    """Inline content should load into its reference frame."""
    with fixture_path(f"content/{name}.csv").open("rb") as file_stream:
        frame = _loader().load_content(file_stream, name)

    check_golden_frame(fixture_path(f"golden/{name}.golden.json"), frame)


def test_repeated_loads_encode_identically() -> None:
    """Loading the same file twice should yield byte-identical JSON."""
    loader = _loader()

    first = frame_to_json_bytes(loader.load_named_file("population_by_state.csv"))
    second = frame_to_json_bytes(loader.load_named_file("population_by_state.csv"))

    assert first == second
