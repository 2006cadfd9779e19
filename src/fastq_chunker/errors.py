"""Error hierarchy for the chunking pipeline."""

from pathlib import Path


class ChunkerError(Exception):
    """Base class for failures that abort one mate's pipeline."""

    def __init__(self, path: str | Path, reason: str):
        # Keep args as (path, reason) so instances survive pickling
        # across a ProcessPoolExecutor boundary.
        super().__init__(str(path), reason)
        self.path = str(path)
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class OpenError(ChunkerError):
    """Input file is missing or unreadable."""


class DecodeError(ChunkerError):
    """Input line is not valid text, or the compressed stream is corrupt."""


class DirectoryCreateError(ChunkerError):
    """Output directory cannot be created."""


class WriteError(ChunkerError):
    """Output file cannot be created or written."""
