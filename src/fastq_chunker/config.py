"""Run configuration and defaults."""

from dataclasses import dataclass, field
from pathlib import Path

from fastq_chunker.chunk.types import LINES_PER_READ

DEFAULT_RECORDS_PER_CHUNK = 1000
DEFAULT_PREFIX = "chunk"
DEFAULT_OUTPUT_DIR = "chunks"


@dataclass(frozen=True, slots=True)
class ChunkConfig:
    """Settings shared by both mate pipelines."""

    records_per_chunk: int = DEFAULT_RECORDS_PER_CHUNK
    prefix: str = DEFAULT_PREFIX
    output_dir: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT_DIR))

    def __post_init__(self) -> None:
        if self.records_per_chunk < 1:
            raise ValueError(
                f"records_per_chunk must be at least 1, got {self.records_per_chunk}"
            )
        # Accept plain strings from callers.
        object.__setattr__(self, "output_dir", Path(self.output_dir))

    @property
    def lines_per_chunk(self) -> int:
        return self.records_per_chunk * LINES_PER_READ
