#!/usr/bin/env python3
"""
Synthetic paired-end FASTQ generator for chunking benchmarks.

Writes an R1 and an R2 file with the same read names, random bases and
constant-quality strings. Output ending in ".gz" is gzip-compressed.
"""

import argparse
import gzip
import random
import sys

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB

BASES = "ACGT"


def open_output(path: str):
    """Open an output file for text writing, compressing when it ends in .gz."""
    if path.endswith(".gz"):
        return gzip.open(path, "wt", encoding="utf-8", compresslevel=1)
    return open(path, "w", encoding="utf-8", buffering=BUFFER_SIZE)


def make_record(read_id: int, mate: int, read_length: int, rng: random.Random) -> str:
    """Build one four-line FASTQ record, newline-terminated."""
    seq = "".join(rng.choices(BASES, k=read_length))
    qual = "I" * read_length
    return f"@SYN:{read_id:09d} {mate}:N:0:1\n{seq}\n+\n{qual}\n"


def generate_pair(
    r1_path: str,
    r2_path: str,
    num_reads: int,
    read_length: int,
    seed: int,
) -> int:
    """
    Generate a synthetic read pair.

    Streams records to both files without holding them in memory.

    Returns:
        Number of records written per mate.
    """
    rng = random.Random(seed)

    with open_output(r1_path) as r1, open_output(r2_path) as r2:
        for read_id in range(num_reads):
            r1.write(make_record(read_id, 1, read_length, rng))
            r2.write(make_record(read_id, 2, read_length, rng))

            if (read_id + 1) % 1_000_000 == 0:
                print(f"  Generated {read_id + 1}/{num_reads} reads...", file=sys.stderr)

    return num_reads


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic paired-end FASTQ dataset.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 1M read pairs, plain text
  python generate_synthetic_reads.py --r1 data/r1.fastq --r2 data/r2.fastq --reads 1000000

  # Same, gzip-compressed
  python generate_synthetic_reads.py --r1 data/r1.fastq.gz --r2 data/r2.fastq.gz --reads 1000000
""",
    )

    parser.add_argument("--r1", required=True, help="R1 output path")
    parser.add_argument("--r2", required=True, help="R2 output path")
    parser.add_argument(
        "--reads",
        type=int,
        default=100_000,
        help="Number of read pairs (default: 100000)",
    )
    parser.add_argument(
        "--read-length",
        type=int,
        default=150,
        help="Bases per read (default: 150)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    if args.reads < 0:
        parser.error("--reads must not be negative")
    if args.read_length < 1:
        parser.error("--read-length must be at least 1")

    print(f"Generating {args.reads:,} read pairs of length {args.read_length}...", file=sys.stderr)
    total = generate_pair(args.r1, args.r2, args.reads, args.read_length, args.seed)
    print(f"Done! Wrote {total:,} records to {args.r1} and {args.r2}", file=sys.stderr)


if __name__ == "__main__":
    main()
