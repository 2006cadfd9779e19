"""Per-mate chunking pipeline."""

import logging
import time
from pathlib import Path

from fastq_chunker.chunk.types import LINES_PER_READ, ChunkResult, ChunkStats, Mate
from fastq_chunker.chunk.writer import ChunkWriter
from fastq_chunker.config import ChunkConfig
from fastq_chunker.errors import DirectoryCreateError
from fastq_chunker.source import open_source

logger = logging.getLogger(__name__)


def ensure_output_dir(output_dir: Path) -> None:
    """Create the output directory and its parents; no-op if it exists."""
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(output_dir, exc.strerror or str(exc)) from exc


def chunk_file(
    input_path: str | Path,
    mate: Mate,
    config: ChunkConfig | None = None,
) -> ChunkResult:
    """
    Split one FASTQ file into chunks of ``config.records_per_chunk`` records.

    Lines are copied in input order. Every chunk but the last holds exactly
    ``config.lines_per_chunk`` lines; the last holds the remainder. Empty
    input produces a single empty chunk 0. No FASTQ structure is validated.

    Raises OpenError, DecodeError, DirectoryCreateError or WriteError. Chunk
    files written before a failure are left on disk.
    """
    if config is None:
        config = ChunkConfig()

    start = time.perf_counter()
    stats = ChunkStats()

    with open_source(input_path) as source:
        ensure_output_dir(config.output_dir)

        writer = ChunkWriter(config.output_dir, config.prefix, mate, config.lines_per_chunk)
        try:
            writer.open()
            for line in source:
                writer.write_line(line)
                stats.lines_read += 1
        finally:
            writer.close()

    stats.chunks_written = len(writer.paths)
    stats.trailing_partial_lines = stats.lines_read % LINES_PER_READ
    stats.elapsed = time.perf_counter() - start
    return ChunkResult(mate=mate, paths=tuple(writer.paths), stats=stats)


def log_chunk_result(result: ChunkResult) -> None:
    """Log the per-mate summary, warning on a trailing partial record."""
    stats = result.stats
    if stats.trailing_partial_lines:
        logger.warning(
            "%s: %d trailing line(s) do not form a complete record (read=%d)",
            result.mate.value,
            stats.trailing_partial_lines,
            stats.lines_read,
        )

    logger.info(
        "%s done: %d lines into %d chunk(s) in %.2fs",
        result.mate.value,
        stats.lines_read,
        stats.chunks_written,
        stats.elapsed,
    )
