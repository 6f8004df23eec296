import pytest

from memberstore.adapters import ConnectionConfig, SQLiteAdapter, UnsupportedSchemaError
from memberstore.schema import (
    ColumnDefinition,
    SchemaIntrospector,
    StatementExecutor,
    TableDefinition,
)


@pytest.fixture
def adapter(tmp_path):
    adapter = SQLiteAdapter()
    adapter.connect(ConnectionConfig(url=f"sqlite:///{tmp_path / 'introspect.db'}"))
    yield adapter
    adapter.close()


@pytest.fixture
def introspector(adapter):
    return SchemaIntrospector(StatementExecutor(adapter))


def test_empty_store_has_no_tables(introspector):
    assert introspector.describe_tables() == {}


def test_describe_is_deterministic(default_store_path):
    with SQLiteAdapter() as adapter:
        adapter.connect(ConnectionConfig(url=default_store_path))
        introspector = SchemaIntrospector(StatementExecutor(adapter))
        first = introspector.describe_tables()
        second = introspector.describe_tables()
    assert first == second
    assert list(first) == ["kv", "npcs", "quests"]


def test_internal_tables_are_excluded(adapter, introspector):
    adapter.execute("CREATE TABLE seq (id INTEGER PRIMARY KEY AUTOINCREMENT, v text)")
    adapter.execute("INSERT INTO seq (v) VALUES ('a')")
    assert list(introspector.describe_tables()) == ["seq"]


def test_views_and_temporary_tables_are_excluded(adapter, introspector):
    adapter.execute("CREATE TABLE base (a int)")
    adapter.execute("CREATE VIEW base_view AS SELECT a FROM base")
    adapter.execute("CREATE TEMPORARY TABLE scratch (a int)")
    assert list(introspector.describe_tables()) == ["base"]


def test_untyped_and_primary_key_columns(adapter, introspector):
    adapter.execute("CREATE TABLE t (id INTEGER PRIMARY KEY, loose, label text)")
    assert introspector.describe_table("t") == TableDefinition(
        [
            ColumnDefinition("id", "INTEGER", True),
            ColumnDefinition("loose", "", False),
            ColumnDefinition("label", "text", False),
        ]
    )


def test_missing_table_describes_as_none(introspector):
    assert introspector.describe_table("nope") is None
    assert introspector.has_table("") is False


def test_canonical_name_uses_catalog_spelling(adapter, introspector):
    adapter.execute("CREATE TABLE Members (id int)")
    assert introspector.canonical_name("members") == "Members"


def test_composite_primary_key_is_unsupported(adapter, introspector):
    adapter.execute("CREATE TABLE pairs (a int, b int, PRIMARY KEY (a, b))")
    with pytest.raises(UnsupportedSchemaError):
        introspector.describe_tables()


def test_introspection_does_not_execute_statements(default_store_path):
    with SQLiteAdapter() as adapter:
        adapter.connect(ConnectionConfig(url=default_store_path))
        executor = StatementExecutor(adapter)
        SchemaIntrospector(executor).describe_tables()
        assert list(executor.history) == []
