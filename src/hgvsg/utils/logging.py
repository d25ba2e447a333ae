"""
Logging utilities for hgvsg.

Logging goes through the standard logging module; interactive runs get
rich console output via RichHandler, optionally mirrored to a log file.
"""

import logging
import time
from contextlib import contextmanager

from rich.console import Console
from rich.logging import RichHandler

__all__ = [
    "console",
    "setup_logging",
    "timed",
]

# Shared by log records and pipeline status messages; stdout stays free for HGVS output.
console = Console(stderr=True)

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False, log_file: str | None = None) -> None:
    """
    Configure logging for an hgvsg run.

    Args:
        verbose: Log at DEBUG (stage timings, fallback classifications) instead of INFO.
        log_file: Optional path that also receives every record as plain text.
    """
    # Variant text such as "[" in breakend alleles must not be read as rich markup.
    handlers: list[logging.Handler] = [
        RichHandler(console=console, rich_tracebacks=True, markup=False, show_path=verbose)
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )


@contextmanager
def timed(stage: str, logger: logging.Logger):
    """Log the wall time of a pipeline stage at DEBUG level."""
    start = time.perf_counter()
    logger.debug("Starting: %s", stage)
    try:
        yield
    finally:
        logger.debug("Completed: %s (%.3fs)", stage, time.perf_counter() - start)
