"""
Read-only reconstruction of the schema model from a live store.
"""

from __future__ import annotations

from typing import List, Optional

from ..adapters.base import UnsupportedSchemaError
from ..utils import get_logger
from .executor import StatementExecutor
from .model import ColumnDefinition, TableDefinition, TableDefinitions

_TABLE_NAMES_SQL = (
    "SELECT name FROM sqlite_master "
    "WHERE type = 'table' AND name NOT LIKE 'sqlite\\_%' ESCAPE '\\' "
    "ORDER BY name"
)
# Table names are case-insensitive to the engine.
_TABLE_EXISTS_SQL = (
    "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ? COLLATE NOCASE"
)
_TABLE_INFO_SQL = (
    "SELECT name, type, pk FROM pragma_table_info(?) ORDER BY cid"
)


class SchemaIntrospector:
    """
    Builds :class:`TableDefinitions` from the engine's catalog.

    Every call queries the catalog afresh; nothing is cached, so the result
    always reflects what is physically recorded in the file.
    """

    def __init__(self, executor: StatementExecutor) -> None:
        self.executor = executor
        self.logger = get_logger("schema.introspection")

    def table_names(self) -> List[str]:
        return [row["name"] for row in self.executor.query(_TABLE_NAMES_SQL)]

    def canonical_name(self, name: str) -> Optional[str]:
        """
        Return the table name as the catalog spells it, or None if absent.
        """
        if not name:
            return None
        rows = self.executor.query(_TABLE_EXISTS_SQL, (name,))
        return rows[0]["name"] if rows else None

    def has_table(self, name: str) -> bool:
        return self.canonical_name(name) is not None

    def describe_table(self, name: str) -> Optional[TableDefinition]:
        if not self.has_table(name):
            return None
        rows = self.executor.query(_TABLE_INFO_SQL, (name,))
        key_columns = [row["name"] for row in rows if row["pk"]]
        if len(key_columns) > 1:
            raise UnsupportedSchemaError(
                f"Table {name!r} has a composite primary key "
                f"({', '.join(key_columns)}), which the schema model cannot represent."
            )
        return TableDefinition(
            ColumnDefinition(row["name"], row["type"], bool(row["pk"])) for row in rows
        )

    def describe_tables(self) -> TableDefinitions:
        tables: TableDefinitions = {}
        for name in self.table_names():
            definition = self.describe_table(name)
            if definition is not None:
                tables[name] = definition
        self.logger.debug("Described %d tables", len(tables))
        return tables
