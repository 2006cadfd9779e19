"""Root logger setup shared by the CLI and process-pool workers."""

import logging
import sys

LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
