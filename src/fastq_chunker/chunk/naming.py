"""Output file naming."""

from fastq_chunker.chunk.types import Mate


def chunk_file_name(prefix: str, chunk_index: int, mate: Mate) -> str:
    """Return the file name for one chunk, e.g. ``chunk_0_R1.fastq``."""
    return f"{prefix}_{chunk_index}_{mate.value}.fastq"
