"""
Definition checks run before any statement reaches the engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List

from .errors import ValidationError
from .validators import validate_identifier, validate_type_keyword

if TYPE_CHECKING:
    from ..schema.model import ColumnDefinition, TableDefinition


def validate_table_definition(name: str, definition: TableDefinition) -> None:
    errors: Dict[str, List[str]] = {}
    _check(errors, "table", validate_identifier, name)

    if len(definition) == 0:
        _add_error(errors, "__all__", "A table needs at least one column.")

    seen: set[str] = set()
    primary_keys: List[str] = []
    for column in definition:
        try:
            validate_column(column)
        except ValidationError as exc:
            _merge_errors(errors, exc.errors)
        # Column names are case-insensitive to the engine.
        folded = column.name.lower()
        if folded in seen:
            _add_error(errors, column.name, "Duplicate column name.")
        seen.add(folded)
        if column.is_primary_key:
            primary_keys.append(column.name)

    if len(primary_keys) > 1:
        _add_error(
            errors,
            "__all__",
            f"At most one primary key column is supported (got {', '.join(primary_keys)}).",
        )

    if errors:
        raise ValidationError(errors)


def validate_column(column: ColumnDefinition) -> None:
    errors: Dict[str, List[str]] = {}
    key = column.name or "column"
    _check(errors, key, validate_identifier, column.name)
    _check(errors, key, validate_type_keyword, column.type)
    if errors:
        raise ValidationError(errors)


def _check(errors: Dict[str, List[str]], key: str, validator, value) -> None:
    try:
        validator(value)
    except ValueError as exc:
        _add_error(errors, key, str(exc))


def _add_error(errors: Dict[str, List[str]], key: str, message: str) -> None:
    errors.setdefault(key, []).append(message)


def _merge_errors(target: Dict[str, List[str]], source: Dict[str, List[str]]) -> None:
    for key, messages in source.items():
        target.setdefault(key, []).extend(messages)
