"""Core logging implementation for cms-render."""

import logging
import sys
from pathlib import Path
from typing import Optional

__all__ = ["get_logger", "setup_logging"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int | str = logging.INFO,
    stream=sys.stderr,
    log_file: Optional[Path] = None,
) -> None:
    """Configure basic logging.

    Args:
        level: Logging level, as a number or a level name ("DEBUG").
        stream: Output stream, used when no log file is given.
        log_file: Optional file to append log records to instead.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    if log_file is not None:
        logging.basicConfig(
            level=level, format=LOG_FORMAT, filename=str(log_file), filemode="a"
        )
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=stream)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name of the logger.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name or "cms-render")
