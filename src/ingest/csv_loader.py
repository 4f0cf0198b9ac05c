"""CSV ingestion entry points.

This module loads CSV text from sandboxed data files or open streams
and returns fully typed frames. Each call reads its whole input once,
bounded by the configured size limit, and shares no mutable state.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO

from core.config import CsvFrameConfig
from core.constants import CSV_TEXT_ENCODING
from core.errors import ContentTooLargeError, CsvFileNotFoundError, CsvReadError
from core.logging_config import get_logger
from core.types import Frame
from ingest.file_resolver import resolve_data_file
from ingest.frame_assembler import assemble_frame
from ingest.transposer import read_columns

_LOGGER = get_logger(__name__)
_BYTE_ORDER_MARK = "\ufeff"


class CsvFrameLoader:
    """Configured loader for named data files and inline CSV content."""

    def __init__(self, config: CsvFrameConfig) -> None:
        self._config = config

    def load_named_file(self, name: str) -> Frame:
        """Load a CSV file with a header row from the data directory.

        Args:
            name: File name relative to the configured data directory.

        Returns:
            Frame named after the file's base name without extension.

        Raises:
            InvalidFileNameError: If the name escapes the data directory.
            CsvFileNotFoundError: If the file does not exist.
            CsvReadError: If the file cannot be opened or decoded.
        """
        file_path = resolve_data_file(name, self._config.data_dir)
        return self.load_path(file_path)

    def load_path(
        self,
        file_path: Path,
        frame_name: str | None = None,
        has_header: bool = True,
    ) -> Frame:
        """Load a local CSV file without data directory sandboxing.

        Args:
            file_path: Path of the CSV file.
            frame_name: Display name, defaults to the file's base name.
            has_header: Whether the first non-blank line names the columns.

        Returns:
            Typed frame with one field per column.

        Raises:
            CsvFileNotFoundError: If the file does not exist.
            CsvReadError: If the file cannot be opened or decoded.
        """
        name = frame_name if frame_name is not None else file_path.stem
        try:
            file_stream = file_path.open("rb")
        except FileNotFoundError as error:
            raise CsvFileNotFoundError(
                f"CSV file not found: {file_path}. "
                "Check the file name against the available sample files."
            ) from error
        except OSError as error:
            raise CsvReadError(
                f"Failed to open CSV file {file_path}: {error.strerror or error}. "
                "Check the path points to a readable file."
            ) from error
        with file_stream:
            return self.load_content(file_stream, name, has_header=has_header)

    def load_content(
        self,
        stream: IO[str] | IO[bytes],
        frame_name: str,
        has_header: bool = True,
    ) -> Frame:
        """Load CSV text from an already-open stream.

        The stream stays owned by the caller and is not closed here.

        Args:
            stream: Text or binary stream positioned at the CSV body.
            frame_name: Display name for the resulting frame.
            has_header: Whether the first non-blank line names the columns.

        Returns:
            Typed frame with one field per column.

        Raises:
            ContentTooLargeError: If the stream exceeds the size limit.
            CsvReadError: If binary content is not valid UTF-8.
            EmptyContentError: If a header is expected but missing.
            RowWidthMismatchError: If row widths disagree.
        """
        text = self._read_text(stream, frame_name)
        columns = read_columns(text, has_header=has_header)
        frame = assemble_frame(
            frame_name, columns, detect_time_fields=self._config.detect_time_fields
        )
        _LOGGER.info(
            "csv_frame_loaded",
            frame_name=frame_name,
            field_count=len(frame.fields),
            row_count=frame.row_count,
        )
        return frame

    def _read_text(self, stream: IO[str] | IO[bytes], frame_name: str) -> str:
        limit = self._config.max_file_bytes
        try:
            payload = stream.read(limit + 1)
        except OSError as error:
            raise CsvReadError(f"Failed to read CSV content for '{frame_name}': {error}.") from error
        if len(payload) > limit:
            raise ContentTooLargeError(
                f"Failed to load '{frame_name}': content exceeds the {limit} byte limit. "
                "Raise CSVFRAME_MAX_FILE_BYTES or split the input."
            )
        if isinstance(payload, str):
            return payload.removeprefix(_BYTE_ORDER_MARK)
        try:
            return payload.decode(CSV_TEXT_ENCODING)
        except UnicodeDecodeError as error:
            raise CsvReadError(
                f"Failed to decode '{frame_name}' as UTF-8 at byte {error.start}. "
                "Re-encode the file as UTF-8 and retry."
            ) from error


def load_named_file(name: str, config: CsvFrameConfig | None = None) -> Frame:
    """Load a named data file using environment config by default."""
    return CsvFrameLoader(config or CsvFrameConfig.from_env()).load_named_file(name)


def load_content(
    stream: IO[str] | IO[bytes],
    frame_name: str,
    has_header: bool = True,
    config: CsvFrameConfig | None = None,
) -> Frame:
    """Load CSV content from a stream using environment config by default."""
    loader = CsvFrameLoader(config or CsvFrameConfig.from_env())
    return loader.load_content(stream, frame_name, has_header=has_header)
