"""
File-backed member store exposing schema migration and introspection.
"""

from __future__ import annotations

import os
from typing import Optional

from .adapters.base import AdapterConnectionError, ConnectionConfig
from .adapters.sqlite import SQLiteAdapter
from .schema.executor import StatementExecutor
from .schema.introspection import SchemaIntrospector
from .schema.migration import MigrationEngine, MigrationOutcome
from .schema.model import ColumnDefinition, TableDefinition, TableDefinitions


class SQLiteDatabase:
    """
    Schema-level access to one member store file.

    Usage::

        with SQLiteDatabase() as db:
            db.open("members.db")
            db.create_table("kv", TableDefinition([ColumnDefinition("key", "text", True)]))

    Operations run synchronously on the calling thread. The store does not
    serialize concurrent callers; the owner applies one configuration
    change at a time.
    """

    def __init__(self, adapter: Optional[SQLiteAdapter] = None) -> None:
        self.adapter = adapter or SQLiteAdapter()
        self.executor = StatementExecutor(self.adapter)
        self.introspector = SchemaIntrospector(self.executor)
        self.migrations = MigrationEngine(
            self.adapter, executor=self.executor, introspector=self.introspector
        )

    # ------------------------------------------------------------------ #
    # Context management
    # ------------------------------------------------------------------ #
    def __enter__(self) -> "SQLiteDatabase":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open(self, target: str | os.PathLike[str] | ConnectionConfig) -> None:
        """
        Open the store file, creating an empty store if it does not exist.

        Raises :class:`AdapterConnectionError` if the engine cannot open or
        create the file.
        """
        if isinstance(target, ConnectionConfig):
            config = target
        else:
            config = ConnectionConfig(url=os.fspath(target))
        self.adapter.connect(config)

    def close(self) -> None:
        self.adapter.close()

    @property
    def is_open(self) -> bool:
        return self.adapter.is_open

    @property
    def path(self) -> Optional[str]:
        config = self.adapter.config
        return config.path if config else None

    def _require_open(self) -> None:
        if not self.adapter.is_open:
            raise AdapterConnectionError("Store is not open.")

    # ------------------------------------------------------------------ #
    # Schema operations
    # ------------------------------------------------------------------ #
    def create_table(self, name: str, definition: TableDefinition) -> None:
        self._require_open()
        self.migrations.create_table(name, definition)

    def rename_table(self, old_name: str, new_name: str) -> MigrationOutcome:
        self._require_open()
        return self.migrations.rename_table(old_name, new_name)

    def add_column(self, table_name: str, column: ColumnDefinition) -> MigrationOutcome:
        self._require_open()
        return self.migrations.add_column(table_name, column)

    def destroy_column(self, table_name: str, column_name: str) -> MigrationOutcome:
        self._require_open()
        return self.migrations.destroy_column(table_name, column_name)

    def describe_tables(self) -> TableDefinitions:
        self._require_open()
        return self.introspector.describe_tables()

    def serialize(self) -> bytes:
        """
        Return the serialized store, the artifact compared between members.
        """
        self._require_open()
        return self.adapter.serialize()
