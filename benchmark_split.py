#!/usr/bin/env -S uv run --script
# /// script
# requires-python = ">=3.12"
# dependencies = ["psutil"]
# ///
"""
Benchmark fastq-chunker across executor modes.

Runs the CLI once per mode (threads, processes, serial) for several trials,
measuring wall-clock time and peak RSS summed over the process tree. Peak
RSS should stay flat as input size grows, since both mates are streamed.
"""

import argparse
import logging
import os
import shutil
import subprocess
import sys
import tempfile
import time
from pathlib import Path
from statistics import median

# Check for psutil early
try:
    import psutil
except ImportError:
    sys.stderr.write("ERROR: psutil is required for process-tree memory benchmarking.\n")
    sys.stderr.write("Install with: pip install psutil\n")
    sys.exit(1)

logger = logging.getLogger(__name__)

MODES = ["threads", "processes", "serial"]


def sample_tree_rss(root_proc: psutil.Process) -> int:
    """Sum RSS of a process and all of its descendants."""
    total_rss = 0
    try:
        total_rss += root_proc.memory_info().rss
        children = root_proc.children(recursive=True)
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        return total_rss

    for child in children:
        try:
            total_rss += child.memory_info().rss
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue
    return total_rss


def measure_peak_rss_tree(proc: subprocess.Popen, poll_interval_s: float) -> int:
    """Poll the process tree until it exits and return peak RSS in bytes."""
    try:
        root_proc = psutil.Process(proc.pid)
    except psutil.NoSuchProcess:
        return 0

    peak_bytes = 0
    while proc.poll() is None:
        peak_bytes = max(peak_bytes, sample_tree_rss(root_proc))
        time.sleep(poll_interval_s)
    return peak_bytes


def run_once(
    r1: str,
    r2: str,
    size: int,
    mode: str,
    mem_sample_ms: int,
) -> dict:
    """Run the CLI in one executor mode and capture timing and memory."""
    env = os.environ.copy()
    env["FQ_CHUNKER_EXECUTOR"] = mode

    out_dir = tempfile.mkdtemp(prefix="fastq_chunker_bench_")
    cmd = [
        sys.executable, "-m", "fastq_chunker.cli",
        "--r1", r1, "--r2", r2,
        "--size", str(size),
        "--output", out_dir,
        "--log-level", "WARNING",
    ]

    try:
        start = time.perf_counter()
        proc = subprocess.Popen(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            env=env,
        )
        peak_rss_bytes = measure_peak_rss_tree(proc, mem_sample_ms / 1000.0)
        _, stderr = proc.communicate()
        elapsed = time.perf_counter() - start

        if proc.returncode != 0:
            logger.error("Error running benchmark (%s):", mode)
            logger.error("%s", stderr)
            sys.exit(1)

        chunks = len(list(Path(out_dir).iterdir()))
    finally:
        shutil.rmtree(out_dir, ignore_errors=True)

    return {
        "mode": mode,
        "seconds": elapsed,
        "peak_rss_tree_mib": peak_rss_bytes / (1024 * 1024),
        "chunks": chunks,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark fastq-chunker executor modes.")
    parser.add_argument("--r1", required=True, help="R1 FASTQ file")
    parser.add_argument("--r2", required=True, help="R2 FASTQ file")
    parser.add_argument("--size", type=int, default=1000, help="Reads per chunk (default: 1000)")
    parser.add_argument(
        "--trials", type=int, default=5, help="Number of timed trials per mode (default: 5)"
    )
    parser.add_argument(
        "--mem-sample-ms",
        type=int,
        default=50,
        help="Memory sampling interval in milliseconds (default: 50)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)

    for path in (args.r1, args.r2):
        if not Path(path).exists():
            logger.error("Input file not found: %s", path)
            logger.error("  Hint: generate one with generate_synthetic_reads.py")
            sys.exit(1)

    logger.info("=" * 72)
    logger.info("fastq-chunker benchmark")
    logger.info("=" * 72)
    logger.info("Inputs: %s, %s", args.r1, args.r2)
    logger.info("Reads per chunk: %d | Trials: %d", args.size, args.trials)
    logger.info("Python: %s", sys.executable)
    logger.info("")

    results: dict[str, list[dict]] = {mode: [] for mode in MODES}
    for trial in range(1, args.trials + 1):
        # Rotate order to reduce bias
        rotation = (trial - 1) % len(MODES)
        for mode in MODES[rotation:] + MODES[:rotation]:
            results[mode].append(run_once(args.r1, args.r2, args.size, mode, args.mem_sample_ms))
        logger.info(
            "  Trial %d/%d: %s",
            trial,
            args.trials,
            ", ".join(f"{mode}={results[mode][-1]['seconds']:.2f}s" for mode in MODES),
        )

    logger.info("")
    logger.info(
        "%s %s %s %s",
        "Mode".ljust(12), "Median(s)".ljust(11), "Peak RSS(MiB)".ljust(14), "Chunks",
    )
    logger.info("-" * 72)
    for mode in MODES:
        runs = results[mode]
        logger.info(
            "%s %s %s %d",
            mode.ljust(12),
            f"{median(r['seconds'] for r in runs):.3f}".ljust(11),
            f"{median(r['peak_rss_tree_mib'] for r in runs):.1f}".ljust(14),
            runs[0]["chunks"],
        )
    logger.info("-" * 72)
    logger.info("Peak RSS = sum of RSS across parent + all child processes (via psutil)")


if __name__ == "__main__":
    main()
