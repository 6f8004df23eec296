"""
SQLite connection handle owning the file that backs a member store.
"""

from __future__ import annotations

import os
import sqlite3
from dataclasses import dataclass
from typing import Any, Sequence

from ..dialects.sqlite import SQLiteDialect
from ..utils import get_logger, time_call
from ..utils.files import StoreFile
from ..utils.logging import DEFAULT_SLOW_STATEMENT_MS
from .base import (
    AdapterConnectionError,
    AdapterExecutionError,
    AdapterTransactionError,
    ConnectionConfig,
    DatabaseAdapter,
)

MEMORY_PATH = ":memory:"


@dataclass(slots=True)
class SQLiteConnectionState:
    connection: sqlite3.Connection
    config: ConnectionConfig


class SQLiteAdapter(DatabaseAdapter):
    """
    Adapter wrapping one stdlib sqlite3 connection.

    The connection runs in autocommit mode: the driver never opens an
    implicit transaction, so the only write transactions on the file are
    the ones issued through :meth:`begin`/:meth:`commit` or single
    statements. That keeps the file header counters identical to a store
    built by hand-issuing the same statements.

    The adapter is a context manager and releases its connection on every
    exit path.
    """

    def __init__(self, slow_query_ms: int = DEFAULT_SLOW_STATEMENT_MS) -> None:
        self.dialect = SQLiteDialect()
        self.slow_query_ms = slow_query_ms
        self._state: SQLiteConnectionState | None = None
        self.logger = get_logger("adapters.sqlite")

    def __enter__(self) -> "SQLiteAdapter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Connection management
    # ------------------------------------------------------------------ #
    def connect(self, config: ConnectionConfig) -> sqlite3.Connection:
        if self._state:
            self.close()

        path = config.path
        store_file = None if path == MEMORY_PATH else StoreFile(path)
        existed = store_file is None or store_file.exists()

        self.logger.info("Opening store %s", config.descriptive_label())
        try:
            connection = sqlite3.connect(
                path,
                isolation_level=None,
                timeout=config.effective_timeout,
                check_same_thread=False,
            )
        except sqlite3.Error as exc:
            self._discard_created_file(store_file, existed)
            raise AdapterConnectionError(f"Failed to open store {path!r}: {exc}") from exc

        try:
            # Forces the engine to read the header so a foreign file fails here.
            connection.execute("SELECT count(*) FROM sqlite_master").fetchone()
        except sqlite3.Error as exc:
            connection.close()
            self._discard_created_file(store_file, existed)
            raise AdapterConnectionError(f"Failed to open store {path!r}: {exc}") from exc

        connection.row_factory = sqlite3.Row
        self._state = SQLiteConnectionState(connection, config)
        return connection

    def close(self) -> None:
        if self._state:
            try:
                self._state.connection.close()
            finally:
                self._state = None

    @property
    def is_open(self) -> bool:
        return self._state is not None

    @property
    def config(self) -> ConnectionConfig | None:
        return self._state.config if self._state else None

    def _ensure_connection(self) -> sqlite3.Connection:
        if not self._state:
            raise AdapterConnectionError("SQLiteAdapter is not connected.")
        return self._state.connection

    def _discard_created_file(self, store_file: StoreFile | None, existed: bool) -> None:
        if store_file is None or existed:
            return
        if store_file.destroy():
            self.logger.debug("Removed store file left by failed open: %s", store_file.path)

    # ------------------------------------------------------------------ #
    # Execution helpers
    # ------------------------------------------------------------------ #
    def execute(self, sql: str, params: Sequence[Any] | None = None) -> sqlite3.Cursor:
        connection = self._ensure_connection()
        cursor = connection.cursor()
        params = params or ()
        try:
            with time_call(
                "sqlite.execute",
                self.logger,
                sql=sql,
                params=params,
                threshold_ms=self.slow_query_ms,
            ):
                cursor.execute(sql, params)
        except sqlite3.Error as exc:
            raise AdapterExecutionError(f"{exc} (while executing: {sql})", sql=sql) from exc
        return cursor

    # ------------------------------------------------------------------ #
    # Transactions
    # ------------------------------------------------------------------ #
    @property
    def in_transaction(self) -> bool:
        return self._ensure_connection().in_transaction

    def begin(self) -> None:
        connection = self._ensure_connection()
        try:
            connection.execute("BEGIN TRANSACTION")
        except sqlite3.Error as exc:
            raise AdapterTransactionError(f"Failed to begin transaction: {exc}") from exc

    def commit(self) -> None:
        connection = self._ensure_connection()
        try:
            connection.commit()
        except sqlite3.Error as exc:
            raise AdapterTransactionError(f"Failed to commit transaction: {exc}") from exc

    def rollback(self) -> None:
        connection = self._ensure_connection()
        try:
            connection.rollback()
        except sqlite3.Error as exc:
            raise AdapterTransactionError(f"Failed to roll back transaction: {exc}") from exc

    # ------------------------------------------------------------------ #
    def serialize(self) -> bytes:
        connection = self._ensure_connection()
        try:
            return bytes(connection.serialize(name="main"))
        except sqlite3.Error as exc:
            raise AdapterExecutionError(f"Failed to serialize store: {exc}") from exc


def open_sqlite(path: str | os.PathLike[str], **kwargs: Any) -> SQLiteAdapter:
    """
    Open the store at ``path`` and return the owning adapter.
    """

    adapter = SQLiteAdapter(**kwargs)
    adapter.connect(ConnectionConfig(url=os.fspath(path)))
    return adapter
