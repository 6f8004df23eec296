"""
Migration engine applying structural changes to a live store.
"""

from __future__ import annotations

import enum

from ..adapters.base import AdapterError, DatabaseAdapter, MigrationAbortedError
from ..utils import get_logger
from .executor import StatementExecutor
from .introspection import SchemaIntrospector
from .model import ColumnDefinition, TableDefinition
from .statements import (
    AddColumnStatement,
    CreateTableStatement,
    DestroyColumnPlan,
    RenameTableStatement,
)


class MigrationOutcome(enum.Enum):
    """Terminal state of a mutator that defines no-op semantics."""

    SKIPPED = "skipped"
    APPLIED = "applied"


class MigrationEngine:
    """
    Validates and executes schema changes.

    Each change is either applied and committed, or not applied at all.
    Mutators whose preconditions do not hold return
    :attr:`MigrationOutcome.SKIPPED` without executing anything, which
    leaves the store file byte-identical. Nothing is recorded in the store
    besides the change itself: the file is compared byte for byte with
    peers, so there is no migration history table.
    """

    def __init__(
        self,
        adapter: DatabaseAdapter,
        *,
        executor: StatementExecutor | None = None,
        introspector: SchemaIntrospector | None = None,
    ) -> None:
        self.adapter = adapter
        self.dialect = adapter.dialect
        self.executor = executor or StatementExecutor(adapter)
        self.introspector = introspector or SchemaIntrospector(self.executor)
        self.logger = get_logger("schema.migration")

    def create_table(self, name: str, definition: TableDefinition) -> None:
        """
        Create ``name`` with the given columns.

        Unlike the other mutators this fails loudly: an invalid definition
        raises :class:`ValidationError` and an existing table of that name
        raises :class:`AdapterExecutionError`.
        """
        statement = CreateTableStatement(name, definition)
        self.executor.execute(statement)
        self.logger.info("Created table %s with %d columns", name, len(definition))

    def rename_table(self, old_name: str, new_name: str) -> MigrationOutcome:
        if not self.introspector.has_table(old_name):
            return self._skip("rename_table", "table %r does not exist", old_name)
        if not new_name:
            return self._skip("rename_table", "new name for %r is blank", old_name)
        if self.introspector.has_table(new_name):
            return self._skip("rename_table", "table %r already exists", new_name)

        self.executor.execute(RenameTableStatement(old_name, new_name))
        self.logger.info("Renamed table %s to %s", old_name, new_name)
        return MigrationOutcome.APPLIED

    def add_column(self, table_name: str, column: ColumnDefinition) -> MigrationOutcome:
        if not self.introspector.has_table(table_name):
            return self._skip("add_column", "table %r does not exist", table_name)

        # Raises ValidationError for a primary-key or malformed column.
        self.executor.execute(AddColumnStatement(table_name, column))
        self.logger.info("Added column %s to table %s", column.name, table_name)
        return MigrationOutcome.APPLIED

    def destroy_column(self, table_name: str, column_name: str) -> MigrationOutcome:
        table = self.introspector.canonical_name(table_name)
        if table is None:
            return self._skip("destroy_column", "table %r does not exist", table_name)
        definition = self.introspector.describe_table(table)
        if definition is None or not definition.has_column(column_name):
            return self._skip(
                "destroy_column", "table %r has no column %r", table, column_name
            )

        plan = DestroyColumnPlan(table, definition, column_name)
        statements = plan.render(self.dialect)
        self.logger.warning(
            "Destructive migration: removing column %s from table %s", column_name, table
        )
        try:
            self.executor.execute_plan(statements)
        except AdapterError as exc:
            raise MigrationAbortedError(
                f"Removing column {column_name!r} from table {table!r} failed and was rolled back: {exc}"
            ) from exc
        self.logger.info("Removed column %s from table %s", column_name, table)
        return MigrationOutcome.APPLIED

    def _skip(self, operation: str, reason: str, *args: object) -> MigrationOutcome:
        self.logger.info("Skipping %s: " + reason, operation, *args)
        return MigrationOutcome.SKIPPED
