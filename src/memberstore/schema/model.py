"""
Structural model of a member store: columns, tables and the table catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional


@dataclass(frozen=True)
class ColumnDefinition:
    """
    One column of a table as the engine records it.

    ``type`` is the declared type keyword, passed through to the engine
    verbatim. An empty string declares an untyped column.
    """

    name: str
    type: str = ""
    is_primary_key: bool = False


@dataclass(frozen=True)
class TableDefinition:
    """
    Ordered columns of a table, in the order the engine stores them.
    """

    column_definitions: Iterable[ColumnDefinition] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable of columns; equality compares the frozen tuple.
        object.__setattr__(self, "column_definitions", tuple(self.column_definitions))

    def __iter__(self) -> Iterator[ColumnDefinition]:
        return iter(self.column_definitions)

    def __len__(self) -> int:
        return len(self.column_definitions)

    def column_names(self) -> list[str]:
        return [column.name for column in self.column_definitions]

    def has_column(self, name: str) -> bool:
        return any(column.name == name for column in self.column_definitions)

    def primary_key(self) -> Optional[ColumnDefinition]:
        for column in self.column_definitions:
            if column.is_primary_key:
                return column
        return None

    def without_column(self, name: str) -> "TableDefinition":
        return TableDefinition(c for c in self.column_definitions if c.name != name)

    def with_column(self, column: ColumnDefinition) -> "TableDefinition":
        return TableDefinition((*self.column_definitions, column))


# Catalog view keyed by table name; rebuilt on every introspection call.
TableDefinitions = Dict[str, TableDefinition]
