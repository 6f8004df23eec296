"""
Database adapter interfaces and the SQLite connection handle.
"""

from .base import (
    AdapterConfigurationError,
    AdapterConnectionError,
    AdapterError,
    AdapterExecutionError,
    AdapterTransactionError,
    ConnectionConfig,
    DatabaseAdapter,
    MigrationAbortedError,
    UnsupportedSchemaError,
)
from .sqlite import SQLiteAdapter, open_sqlite

__all__ = [
    "ConnectionConfig",
    "DatabaseAdapter",
    "AdapterError",
    "AdapterConfigurationError",
    "AdapterConnectionError",
    "AdapterExecutionError",
    "AdapterTransactionError",
    "MigrationAbortedError",
    "UnsupportedSchemaError",
    "SQLiteAdapter",
    "open_sqlite",
]
