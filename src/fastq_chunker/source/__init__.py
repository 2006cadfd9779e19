"""Line sources over plain and gzip-compressed input files."""

from fastq_chunker.source.reader import SourceReader, detect_kind, open_source
from fastq_chunker.source.types import SourceKind

__all__ = ["SourceKind", "SourceReader", "detect_kind", "open_source"]
