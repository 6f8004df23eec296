import sqlite3
from contextlib import closing

import pytest

from memberstore import SQLiteDatabase
from memberstore.utils import StoreFile

DEFAULT_INIT_STATEMENTS = [
    "CREATE TABLE kv (key text PRIMARY KEY, value text)",
    "CREATE TABLE npcs (entity int PRIMARY KEY, name text, job text)",
    "CREATE TABLE quests (npc int, quest int)",
    "INSERT INTO kv VALUES ('foo', 'bar')",
    "INSERT INTO npcs VALUES (1, 'Alex', 'Armorer')",
    "INSERT INTO npcs VALUES (2, 'Bob', 'Banker')",
    "INSERT INTO quests VALUES (1, 42)",
    "INSERT INTO quests VALUES (1, 43)",
    "INSERT INTO quests VALUES (2, 43)",
]


def reconstruct_store(path, init_statements, extra_statements=()):
    """Build a store from scratch by hand-issuing each statement."""
    StoreFile(path).destroy()
    with closing(sqlite3.connect(path, isolation_level=None)) as connection:
        for statement in [*init_statements, *extra_statements]:
            connection.execute(statement)
    return path


def _serialize_file(path) -> bytes:
    with closing(sqlite3.connect(path, isolation_level=None)) as connection:
        return bytes(connection.serialize())


@pytest.fixture
def default_store_path(tmp_path):
    return reconstruct_store(str(tmp_path / "test.db"), DEFAULT_INIT_STATEMENTS)


@pytest.fixture
def starting_serialization(default_store_path):
    return _serialize_file(default_store_path)


@pytest.fixture
def comparison_store(tmp_path):
    def build(extra_statements):
        path = str(tmp_path / "test2.db")
        reconstruct_store(path, DEFAULT_INIT_STATEMENTS, extra_statements)
        return _serialize_file(path)

    return build


@pytest.fixture
def db(default_store_path, starting_serialization):
    database = SQLiteDatabase()
    database.open(default_store_path)
    yield database
    database.close()


@pytest.fixture
def serialize_file():
    return _serialize_file


@pytest.fixture
def store_builder(tmp_path):
    def build(name, statements):
        return reconstruct_store(str(tmp_path / name), statements)

    return build
