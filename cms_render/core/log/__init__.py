"""Logging micro API for cms-render."""

from .lib import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
