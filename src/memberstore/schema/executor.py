"""
Statement executor shared by the introspection and migration layers.
"""

from __future__ import annotations

from collections import deque
from contextlib import contextmanager
from typing import Any, Deque, Generator, Iterable, Sequence

from ..adapters.base import AdapterTransactionError, DatabaseAdapter
from ..utils import get_logger
from .statements import SingleStatement

HISTORY_LIMIT = 256


class StatementExecutor:
    """
    Submits statements to the adapter and groups them into transactions.

    Engine failures surface as :class:`AdapterExecutionError` from the
    adapter. Nothing is retried: the engine is local and deterministic.
    ``history`` keeps the most recent statements issued, oldest first.
    """

    def __init__(self, adapter: DatabaseAdapter) -> None:
        self.adapter = adapter
        self.logger = get_logger("schema.executor")
        self.history: Deque[str] = deque(maxlen=HISTORY_LIMIT)

    @property
    def dialect(self):
        return self.adapter.dialect

    def execute(self, statement: SingleStatement) -> Any:
        return self.execute_sql(statement.render(self.dialect))

    def execute_sql(self, sql: str, params: Sequence[Any] | None = None) -> Any:
        cursor = self.adapter.execute(sql, params)
        self.history.append(sql)
        return cursor

    def query(self, sql: str, params: Sequence[Any] | None = None) -> list:
        return self.adapter.execute(sql, params).fetchall()

    def execute_plan(self, statements: Iterable[str]) -> None:
        with self.transaction():
            for sql in statements:
                self.execute_sql(sql)

    @contextmanager
    def transaction(self) -> Generator[None, None, None]:
        self.adapter.begin()
        self.history.append("BEGIN TRANSACTION")
        try:
            yield
            self.adapter.commit()
        except Exception:
            self.logger.warning("Rolling back transaction after failure")
            try:
                self.adapter.rollback()
            except AdapterTransactionError:
                self.logger.exception("Rollback failed")
            raise
        self.history.append("COMMIT")
