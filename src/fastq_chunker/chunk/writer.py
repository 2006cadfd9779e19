"""Rotating output handle used by chunking."""

import logging
from pathlib import Path
from typing import TextIO

from fastq_chunker.chunk.naming import chunk_file_name
from fastq_chunker.chunk.types import Mate
from fastq_chunker.errors import WriteError
from fastq_chunker.source.types import BUFFER_SIZE

logger = logging.getLogger(__name__)


class ChunkWriter:
    """
    Writes lines into sequentially numbered chunk files.

    Each chunk receives exactly ``lines_per_chunk`` lines before the handle
    is closed. Chunk 0 is created by ``open()``; later chunks are created
    when their first line arrives, so a full final chunk is never followed
    by an empty one.
    """

    def __init__(self, output_dir: Path, prefix: str, mate: Mate, lines_per_chunk: int):
        if lines_per_chunk < 1:
            raise ValueError(f"lines_per_chunk must be at least 1, got {lines_per_chunk}")
        self._output_dir = output_dir
        self._prefix = prefix
        self._mate = mate
        self._lines_per_chunk = lines_per_chunk
        self._handle: TextIO | None = None
        self._path: Path | None = None
        self.chunk_index = 0
        self.lines_in_chunk = 0
        self.paths: list[Path] = []

    def _get_path(self, chunk_index: int) -> Path:
        return self._output_dir / chunk_file_name(self._prefix, chunk_index, self._mate)

    def _open_chunk(self) -> None:
        path = self._get_path(self.chunk_index)
        try:
            self._handle = open(  # noqa: SIM115
                path, "w", encoding="utf-8", newline="\n", buffering=BUFFER_SIZE
            )
        except OSError as exc:
            raise WriteError(path, exc.strerror or str(exc)) from exc
        self._path = path
        self.paths.append(path)
        logger.debug("Opened %s", path)

    def _close_chunk(self) -> None:
        handle, path = self._handle, self._path
        self._handle = None
        self._path = None
        if handle is None:
            return
        try:
            handle.close()
        except OSError as exc:
            raise WriteError(path, exc.strerror or str(exc)) from exc

    def open(self) -> None:
        """Create chunk 0, truncating any existing file of that name."""
        if not self.paths:
            self._open_chunk()

    def write_line(self, line: str) -> None:
        """Write one line plus a newline, rotating when the chunk fills."""
        if self._handle is None:
            self._open_chunk()

        try:
            self._handle.write(line)
            self._handle.write("\n")
        except OSError as exc:
            raise WriteError(self._path, exc.strerror or str(exc)) from exc

        self.lines_in_chunk += 1
        if self.lines_in_chunk == self._lines_per_chunk:
            self._close_chunk()
            self.chunk_index += 1
            self.lines_in_chunk = 0

    def close(self) -> None:
        """Flush and close the current chunk, if one is open."""
        self._close_chunk()
