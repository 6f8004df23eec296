"""
Dialect strategy registry.
"""

from .base import Dialect
from .sqlite import RESERVED_WORDS, SQLiteDialect

__all__ = ["Dialect", "RESERVED_WORDS", "SQLiteDialect"]
