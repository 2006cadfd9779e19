"""FASTQ Chunker - Split paired-end FASTQ files into fixed-size chunks."""

from importlib.metadata import version

from fastq_chunker.chunk.chunk import chunk_file
from fastq_chunker.chunk.types import ChunkResult, Mate
from fastq_chunker.config import ChunkConfig
from fastq_chunker.runner.run import split_pair

__version__ = version("fastq-chunker")

__all__ = ["ChunkConfig", "ChunkResult", "Mate", "chunk_file", "split_pair"]
