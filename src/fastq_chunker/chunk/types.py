"""Shared constants and result structures for chunking."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# A FASTQ record is header, sequence, separator and quality.
LINES_PER_READ = 4


class Mate(Enum):
    """Paired-end mate label, used in output file names."""

    R1 = "R1"
    R2 = "R2"


@dataclass
class ChunkStats:
    """Statistics from a chunk_file run."""

    lines_read: int = 0
    chunks_written: int = 0
    trailing_partial_lines: int = 0
    elapsed: float = 0.0


@dataclass(frozen=True, slots=True)
class ChunkResult:
    """Outcome of chunking one mate: output files in chunk-index order."""

    mate: Mate
    paths: tuple[Path, ...]
    stats: ChunkStats = field(default_factory=ChunkStats)
