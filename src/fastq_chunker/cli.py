"""Command-line interface for fastq-chunker."""

import argparse
import logging
import sys

from fastq_chunker import __version__
from fastq_chunker.config import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PREFIX,
    DEFAULT_RECORDS_PER_CHUNK,
    ChunkConfig,
)
from fastq_chunker.errors import ChunkerError
from fastq_chunker.logging_setup import configure_logging
from fastq_chunker.runner.execution import resolve_mode
from fastq_chunker.runner.run import split_pair


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fastq-chunker",
        description="Chunk paired-end FASTQ files into smaller files.",
    )

    parser.add_argument("--r1", required=True, help="Path to R1 FASTQ file (plain or .gz)")
    parser.add_argument("--r2", required=True, help="Path to R2 FASTQ file (plain or .gz)")

    parser.add_argument(
        "-s",
        "--size",
        type=int,
        default=DEFAULT_RECORDS_PER_CHUNK,
        help=f"Number of reads per chunk (default: {DEFAULT_RECORDS_PER_CHUNK})",
    )

    parser.add_argument(
        "-p",
        "--prefix",
        default=DEFAULT_PREFIX,
        help=f"File prefix for output (default: {DEFAULT_PREFIX})",
    )

    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.size < 1:
        parser.error(f"--size must be at least 1, got {args.size}")

    try:
        mode = resolve_mode()
    except ValueError as exc:
        parser.error(str(exc))

    config = ChunkConfig(
        records_per_chunk=args.size,
        prefix=args.prefix,
        output_dir=args.output,
    )

    try:
        split_pair(args.r1, args.r2, config, mode)
    except ChunkerError:
        # Each failed mate is already logged by split_pair.
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
