"""
Dialect strategy interfaces describing how DDL text is written.
"""

from __future__ import annotations

from typing import Protocol


class Dialect(Protocol):
    """
    Strategy interface consumed by the statement and adapter layers.
    """

    @property
    def name(self) -> str: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def render_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def render_column_definition(
        self, column: str, column_type: str, *, primary_key: bool = False
    ) -> str: ...
