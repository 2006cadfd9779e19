"""Shared constants and variants for input sources."""

from enum import Enum

# 1MB buffer for efficient I/O.
BUFFER_SIZE = 1024 * 1024

# Case-sensitive suffix marking gzip-compressed input.
GZIP_SUFFIX = ".gz"


class SourceKind(Enum):
    """How the raw byte stream of an input file is decoded."""

    PLAIN = "plain"
    GZIP = "gzip"
