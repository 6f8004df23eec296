"""
memberstore public package initialization.

Schema migration and introspection for the SQLite file that backs a
cluster-membership store.
"""

from .schema import (  # noqa: F401
    ColumnDefinition,
    MigrationEngine,
    MigrationOutcome,
    SchemaIntrospector,
    StatementExecutor,
    TableDefinition,
    TableDefinitions,
)
from .adapters import (  # noqa: F401
    AdapterConnectionError,
    AdapterError,
    AdapterExecutionError,
    ConnectionConfig,
    MigrationAbortedError,
    SQLiteAdapter,
    UnsupportedSchemaError,
)
from .database import SQLiteDatabase  # noqa: F401
from .validation import ValidationError  # noqa: F401

__all__ = [
    "ColumnDefinition",
    "TableDefinition",
    "TableDefinitions",
    "MigrationEngine",
    "MigrationOutcome",
    "SchemaIntrospector",
    "StatementExecutor",
    "ConnectionConfig",
    "SQLiteAdapter",
    "SQLiteDatabase",
    "AdapterError",
    "AdapterConnectionError",
    "AdapterExecutionError",
    "MigrationAbortedError",
    "UnsupportedSchemaError",
    "ValidationError",
]
