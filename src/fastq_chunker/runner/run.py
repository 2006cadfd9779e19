import logging
import os
import time
from concurrent.futures import Future, wait
from pathlib import Path

from fastq_chunker.chunk.chunk import chunk_file, log_chunk_result
from fastq_chunker.chunk.types import ChunkResult, Mate
from fastq_chunker.config import ChunkConfig
from fastq_chunker.errors import ChunkerError
from fastq_chunker.runner.execution import (
    EXECUTOR_ENV,
    ExecutorMode,
    create_executor,
    gil_enabled,
    resolve_mode,
)

logger = logging.getLogger(__name__)


def split_pair(
    r1_path: str | Path,
    r2_path: str | Path,
    config: ChunkConfig | None = None,
    mode: ExecutorMode | None = None,
) -> dict[Mate, ChunkResult]:
    """
    Chunk the R1 and R2 files of a read pair.

    The two mates run as independent tasks sharing no state and are both
    awaited. A failing mate does not stop the other one. Once both are done,
    each failure is logged and the first one (R1 before R2) is re-raised.
    ``mode`` defaults to the FQ_CHUNKER_EXECUTOR setting.
    """
    if config is None:
        config = ChunkConfig()
    mode = resolve_mode() if mode is None else resolve_mode(mode.value)

    total_start = time.perf_counter()
    inputs = {Mate.R1: str(r1_path), Mate.R2: str(r2_path)}

    gil_status = "enabled" if gil_enabled() else "disabled"
    executor_override = os.environ.get(EXECUTOR_ENV, "")
    override_info = f", {EXECUTOR_ENV}={executor_override}" if executor_override else ""

    logger.info(
        "Starting: r1=%s, r2=%s, records_per_chunk=%d, output=%s, executor=%s, GIL=%s%s",
        Path(inputs[Mate.R1]).name,
        Path(inputs[Mate.R2]).name,
        config.records_per_chunk,
        config.output_dir,
        mode.value,
        gil_status,
        override_info,
    )

    results: dict[Mate, ChunkResult] = {}
    failures: dict[Mate, ChunkerError] = {}

    executor = create_executor(mode)
    if executor is None:
        for mate, path in inputs.items():
            try:
                results[mate] = chunk_file(path, mate, config)
            except ChunkerError as exc:
                failures[mate] = exc
    else:
        with executor:
            futures: dict[Mate, Future[ChunkResult]] = {
                mate: executor.submit(chunk_file, path, mate, config)
                for mate, path in inputs.items()
            }
            wait(futures.values())

        for mate, future in futures.items():
            exc = future.exception()
            if exc is None:
                results[mate] = future.result()
            elif isinstance(exc, ChunkerError):
                failures[mate] = exc
            else:
                raise exc

    total_time = time.perf_counter() - total_start

    for result in results.values():
        log_chunk_result(result)
    for mate, exc in failures.items():
        logger.error("%s failed: %s", mate.value, exc)

    if failures:
        first = Mate.R1 if Mate.R1 in failures else Mate.R2
        raise failures[first]

    logger.info(
        "Result: R1=%d chunk(s), R2=%d chunk(s) (total %.2fs)",
        results[Mate.R1].stats.chunks_written,
        results[Mate.R2].stats.chunks_written,
        total_time,
    )
    return results
