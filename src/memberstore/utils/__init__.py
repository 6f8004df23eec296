"""
Utility helpers shared across memberstore packages.
"""

from .files import StoreFile
from .logging import configure_logging, get_logger, set_correlation_id, time_call

__all__ = ["StoreFile", "configure_logging", "get_logger", "set_correlation_id", "time_call"]
