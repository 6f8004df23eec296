"""
Schema model, introspection and migration utilities.
"""

from .model import ColumnDefinition, TableDefinition, TableDefinitions
from .statements import (
    AddColumnStatement,
    CreateTableStatement,
    DestroyColumnPlan,
    RenameTableStatement,
)
from .executor import StatementExecutor
from .introspection import SchemaIntrospector
from .migration import MigrationEngine, MigrationOutcome

__all__ = [
    "ColumnDefinition",
    "TableDefinition",
    "TableDefinitions",
    "AddColumnStatement",
    "CreateTableStatement",
    "DestroyColumnPlan",
    "RenameTableStatement",
    "StatementExecutor",
    "SchemaIntrospector",
    "MigrationEngine",
    "MigrationOutcome",
]
