"""Streaming line reader over plain or gzip-compressed files."""

import gzip
import zlib
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from fastq_chunker.errors import DecodeError, OpenError
from fastq_chunker.source.types import BUFFER_SIZE, GZIP_SUFFIX, SourceKind


def detect_kind(path: str | Path) -> SourceKind:
    """Pick the source kind from the path's final suffix."""
    if str(path).endswith(GZIP_SUFFIX):
        return SourceKind.GZIP
    return SourceKind.PLAIN


class SourceReader:
    """
    Sequence of text lines read from one input file.

    Lines are yielded one at a time with the trailing newline (and a
    preceding carriage return, if any) stripped. The whole file is never
    held in memory.
    """

    def __init__(self, path: Path, kind: SourceKind, raw: BinaryIO):
        self.path = path
        self.kind = kind
        self._raw = raw
        self._stream: BinaryIO = raw
        if kind is SourceKind.GZIP:
            self._stream = gzip.GzipFile(fileobj=raw, mode="rb")

    def __iter__(self) -> Iterator[str]:
        try:
            for raw_line in self._stream:
                yield raw_line.rstrip(b"\n").removesuffix(b"\r").decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(self.path, f"invalid UTF-8 text: {exc.reason}") from exc
        except gzip.BadGzipFile as exc:
            raise DecodeError(self.path, f"corrupt gzip stream: {exc}") from exc
        except (EOFError, zlib.error) as exc:
            raise DecodeError(self.path, f"truncated or corrupt gzip stream: {exc}") from exc
        except OSError as exc:
            raise OpenError(self.path, exc.strerror or str(exc)) from exc

    def close(self) -> None:
        """Close the decompressor (if any) and the underlying file."""
        try:
            if self._stream is not self._raw:
                self._stream.close()
        finally:
            self._raw.close()

    def __enter__(self) -> "SourceReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_source(path: str | Path) -> SourceReader:
    """
    Open an input file for line-by-line reading.

    Raises OpenError if the file cannot be opened.
    """
    source_path = Path(path)
    kind = detect_kind(path)
    try:
        raw = open(source_path, "rb", buffering=BUFFER_SIZE)  # noqa: SIM115
    except OSError as exc:
        raise OpenError(source_path, exc.strerror or str(exc)) from exc
    return SourceReader(source_path, kind, raw)
