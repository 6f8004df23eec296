import sqlite3

import pytest

from memberstore.adapters import (
    AdapterConnectionError,
    AdapterExecutionError,
    ConnectionConfig,
    SQLiteAdapter,
    open_sqlite,
)


@pytest.fixture
def adapter(tmp_path):
    adapter = SQLiteAdapter()
    config = ConnectionConfig(url=f"sqlite:///{tmp_path / 'test.db'}")
    adapter.connect(config)
    yield adapter
    adapter.close()


def test_connect_creates_database(tmp_path):
    adapter = SQLiteAdapter()
    config = ConnectionConfig(url=f"sqlite:///{tmp_path / 'connect.db'}")
    connection = adapter.connect(config)
    assert isinstance(connection, sqlite3.Connection)
    assert adapter.is_open
    adapter.close()
    assert not adapter.is_open


def test_connection_runs_in_autocommit_mode(adapter):
    adapter.execute("CREATE TABLE item (id INTEGER PRIMARY KEY, value INTEGER)")
    adapter.execute("INSERT INTO item (value) VALUES (?)", (10,))
    assert not adapter.in_transaction


def test_transaction_commit_and_rollback(adapter):
    adapter.execute("CREATE TABLE item (id INTEGER PRIMARY KEY, value INTEGER)")

    adapter.begin()
    adapter.execute("INSERT INTO item (value) VALUES (?)", (10,))
    assert adapter.in_transaction
    adapter.commit()
    count = adapter.execute("SELECT COUNT(*) FROM item").fetchone()[0]
    assert count == 1

    adapter.begin()
    adapter.execute("INSERT INTO item (value) VALUES (?)", (20,))
    adapter.rollback()
    count_after = adapter.execute("SELECT COUNT(*) FROM item").fetchone()[0]
    assert count_after == 1


def test_engine_errors_are_wrapped(adapter):
    with pytest.raises(AdapterExecutionError) as excinfo:
        adapter.execute("SELECT * FROM missing_table")
    assert excinfo.value.sql == "SELECT * FROM missing_table"
    assert isinstance(excinfo.value.__cause__, sqlite3.Error)


def test_execute_after_close_raises(tmp_path):
    adapter = open_sqlite(tmp_path / "closed.db")
    adapter.close()
    adapter.close()
    with pytest.raises(AdapterConnectionError):
        adapter.execute("SELECT 1")


def test_context_manager_releases_connection(tmp_path):
    with pytest.raises(ValueError):
        with open_sqlite(tmp_path / "scoped.db") as adapter:
            raise ValueError("boom")
    assert not adapter.is_open


def test_open_missing_directory_fails_without_creating_file(tmp_path):
    target = tmp_path / "missing" / "store.db"
    adapter = SQLiteAdapter()
    with pytest.raises(AdapterConnectionError):
        adapter.connect(ConnectionConfig(url=str(target)))
    assert not target.exists()
    assert not adapter.is_open


def test_open_foreign_file_fails_and_keeps_file(tmp_path):
    target = tmp_path / "notes.txt"
    target.write_bytes(b"this is definitely not an sqlite database, just some text" * 100)
    adapter = SQLiteAdapter()
    with pytest.raises(AdapterConnectionError):
        adapter.connect(ConnectionConfig(url=str(target)))
    assert target.exists()


def test_reconnect_closes_previous_connection(tmp_path):
    adapter = SQLiteAdapter()
    first = adapter.connect(ConnectionConfig(url=str(tmp_path / "first.db")))
    adapter.connect(ConnectionConfig(url=str(tmp_path / "second.db")))
    assert adapter.config.path == str(tmp_path / "second.db")
    with pytest.raises(sqlite3.ProgrammingError):
        first.execute("SELECT 1")
    adapter.close()


def test_serialize_returns_store_bytes(adapter):
    adapter.execute("CREATE TABLE kv (key text PRIMARY KEY, value text)")
    data = adapter.serialize()
    assert data.startswith(b"SQLite format 3\x00")


def test_in_memory_database():
    adapter = SQLiteAdapter()
    adapter.connect(ConnectionConfig(url="sqlite:///:memory:"))
    adapter.execute("CREATE TABLE sample (value TEXT)")
    adapter.execute("INSERT INTO sample (value) VALUES (?)", ("hello",))
    row = adapter.execute("SELECT value FROM sample").fetchone()
    assert row[0] == "hello"
    adapter.close()
