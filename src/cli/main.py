"""csvframe CLI entry points.
This module exposes commands for loading sample and local CSV files.
It maps argparse commands onto loader calls and prints frame JSON.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import CsvFrameConfig
from core.constants import SAMPLE_CSV_FILE_NAMES
from core.errors import CsvFrameError
from core.types import Frame
from encode.frame_json import frame_to_json_bytes
from ingest.csv_loader import CsvFrameLoader


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="csvframe", description="Typed CSV frame loader")
    parser.add_argument("--data-dir", help="Override CSVFRAME_DATA_DIR for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_load_command(subparsers)
    _add_read_command(subparsers)
    subparsers.add_parser("samples", help="List sample CSV file names")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the csvframe CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "samples":
        return _run_samples_command()
    try:
        loader = _build_loader(args.data_dir)
        if args.command == "load":
            return _print_frame(loader.load_named_file(args.name))
        if args.command == "read":
            frame = loader.load_path(
                Path(args.path).expanduser(),
                frame_name=args.name,
                has_header=not args.no_header,
            )
            return _print_frame(frame)
    except CsvFrameError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_loader(data_dir: str | None) -> CsvFrameLoader:
    """Build loader with optional data-dir override.

    Args:
        data_dir: Optional override path.

    Returns:
        Configured loader.
    """
    config = CsvFrameConfig.from_env()
    if data_dir:
        config = replace(config, data_dir=Path(data_dir).expanduser().resolve())
    return CsvFrameLoader(config)


def _run_samples_command() -> int:
    for name in SAMPLE_CSV_FILE_NAMES:
        print(name)
    return 0


def _print_frame(frame: Frame) -> int:
    print(frame_to_json_bytes(frame).decode("utf-8"))
    return 0


def _add_load_command(subparsers: Any) -> None:
    """Register load subcommand."""
    parser = subparsers.add_parser("load", help="Load a CSV file from the data directory")
    parser.add_argument("name", help="File name relative to the data directory")


def _add_read_command(subparsers: Any) -> None:
    """Register read subcommand."""
    parser = subparsers.add_parser("read", help="Load any local CSV file as inline content")
    parser.add_argument("path", help="Local CSV file path")
    parser.add_argument("--name", help="Frame display name, defaults to the file base name")
    parser.add_argument(
        "--no-header",
        action="store_true",
        help="Treat every line as data and name columns positionally",
    )
