"""
The closed set of data-definition statements the migration layer issues.

Every variant validates its inputs before it can be rendered, and renders
to exactly the text a person would type by hand, because SQLite records
CREATE TABLE text in the file itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from ..dialects.base import Dialect
from ..validation import (
    ValidationError,
    validate_column,
    validate_identifier,
    validate_table_definition,
)
from .model import ColumnDefinition, TableDefinition

TEMPORARY_TABLE_SUFFIX = "_"


def render_create_table(dialect: Dialect, name: str, definition: TableDefinition) -> str:
    columns = ", ".join(
        dialect.render_column_definition(
            column.name, column.type, primary_key=column.is_primary_key
        )
        for column in definition
    )
    return f"CREATE TABLE {dialect.format_table(name)} ({columns})"


@dataclass(frozen=True)
class CreateTableStatement:
    name: str
    definition: TableDefinition

    def validate(self) -> None:
        validate_table_definition(self.name, self.definition)

    def render(self, dialect: Dialect) -> str:
        self.validate()
        return render_create_table(dialect, self.name, self.definition)


@dataclass(frozen=True)
class RenameTableStatement:
    old_name: str
    new_name: str

    def validate(self) -> None:
        if not self.old_name:
            raise ValidationError.single("table", "Table name must not be blank.")
        try:
            validate_identifier(self.new_name)
        except ValueError as exc:
            raise ValidationError.single("new_name", str(exc)) from exc

    def render(self, dialect: Dialect) -> str:
        self.validate()
        old = dialect.format_table(self.old_name)
        new = dialect.format_table(self.new_name)
        return f"ALTER TABLE {old} RENAME TO {new}"


@dataclass(frozen=True)
class AddColumnStatement:
    table_name: str
    column: ColumnDefinition

    def validate(self) -> None:
        if not self.table_name:
            raise ValidationError.single("table", "Table name must not be blank.")
        validate_column(self.column)
        if self.column.is_primary_key:
            raise ValidationError.single(
                self.column.name,
                "A primary key column cannot be added to an existing table.",
            )

    def render(self, dialect: Dialect) -> str:
        self.validate()
        table = dialect.format_table(self.table_name)
        column = dialect.render_column_definition(self.column.name, self.column.type)
        return f"ALTER TABLE {table} ADD COLUMN {column}"


@dataclass(frozen=True)
class DestroyColumnPlan:
    """
    Removes one column by rebuilding the table around the survivors.

    ``definition`` is the table as currently recorded in the catalog. The
    rendered steps run inside a single transaction opened by the caller:

    1. create a temporary table holding the surviving columns
    2. copy the surviving columns of every row into it
    3. drop the original table
    4. recreate the original table without the removed column
    5. copy the rows back
    6. drop the temporary table
    """

    table_name: str
    definition: TableDefinition
    column_name: str

    @property
    def temporary_table_name(self) -> str:
        return f"{self.table_name}{TEMPORARY_TABLE_SUFFIX}"

    @property
    def surviving(self) -> TableDefinition:
        return self.definition.without_column(self.column_name)

    def validate(self) -> None:
        if not self.table_name:
            raise ValidationError.single("table", "Table name must not be blank.")
        if not self.definition.has_column(self.column_name):
            raise ValidationError.single(
                self.column_name, f"Column is not part of table {self.table_name!r}."
            )
        if len(self.surviving) == 0:
            raise ValidationError.single(
                self.column_name, "The only column of a table cannot be removed."
            )

    def render(self, dialect: Dialect) -> List[str]:
        self.validate()
        table = dialect.format_table(self.table_name)
        temporary = dialect.format_table(self.temporary_table_name)
        columns = ",".join(dialect.render_identifier(name) for name in self.surviving.column_names())
        return [
            f"CREATE TEMPORARY TABLE {temporary}({columns})",
            f"INSERT INTO {temporary} SELECT {columns} FROM {table}",
            f"DROP TABLE {table}",
            render_create_table(dialect, self.table_name, self.surviving),
            f"INSERT INTO {table} SELECT {columns} FROM {temporary}",
            f"DROP TABLE {temporary}",
        ]


SingleStatement = Union[CreateTableStatement, RenameTableStatement, AddColumnStatement]
