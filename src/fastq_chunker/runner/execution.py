"""How the two mate pipelines are scheduled."""

import logging
import os
import sys
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from enum import Enum

from fastq_chunker.logging_setup import configure_logging

# Environment variable selecting the executor mode.
EXECUTOR_ENV = "FQ_CHUNKER_EXECUTOR"

# One worker per mate.
PAIR_WORKERS = 2


class ExecutorMode(Enum):
    """Where the R1 and R2 pipelines run."""

    AUTO = "auto"
    THREADS = "threads"
    PROCESSES = "processes"
    SERIAL = "serial"


def gil_enabled() -> bool:
    """Report whether this interpreter runs with the GIL."""
    check = getattr(sys, "_is_gil_enabled", None)
    return True if check is None else check()


def resolve_mode(value: str | None = None) -> ExecutorMode:
    """
    Turn a mode name (default: the FQ_CHUNKER_EXECUTOR env var) into a mode.

    An empty value means auto: threads on a free-threaded build, processes
    otherwise. Names are case-insensitive; anything else is a ValueError.
    """
    raw = os.environ.get(EXECUTOR_ENV, "") if value is None else value
    name = raw.strip().lower() or ExecutorMode.AUTO.value

    try:
        mode = ExecutorMode(name)
    except ValueError:
        choices = ", ".join(m.value for m in ExecutorMode)
        raise ValueError(f"{EXECUTOR_ENV} must be one of {choices}, got {raw!r}") from None

    if mode is ExecutorMode.AUTO:
        return ExecutorMode.PROCESSES if gil_enabled() else ExecutorMode.THREADS
    return mode


def create_executor(mode: ExecutorMode) -> Executor | None:
    """
    Build the two-worker executor for a resolved mode, or None for serial.

    Process workers get the parent's root log level so chunk-level records
    are emitted whatever the start method.
    """
    if mode is ExecutorMode.SERIAL:
        return None
    if mode is ExecutorMode.THREADS:
        return ThreadPoolExecutor(max_workers=PAIR_WORKERS, thread_name_prefix="mate")
    if mode is ExecutorMode.PROCESSES:
        return ProcessPoolExecutor(
            max_workers=PAIR_WORKERS,
            initializer=configure_logging,
            initargs=(logging.getLogger().getEffectiveLevel(),),
        )
    raise ValueError(f"executor mode must be resolved first, got {mode}")
