"""
SQLite dialect implementation.
"""

from __future__ import annotations

from typing import Final, FrozenSet

from ..validation.validators import is_bare_identifier

# Keywords the SQLite parser will not take as a bare name in every position
# a migration writes one. Keywords it falls back to treating as names (KEY,
# TEMP, ROWS, ...) stay bare so hand-written DDL such as
# ``CREATE TABLE kv (key text PRIMARY KEY)`` is reproduced exactly. RAISE,
# CAST and the CURRENT_* names are listed because they start an expression.
RESERVED_WORDS: Final[FrozenSet[str]] = frozenset(
    """
    ADD ALL ALTER AND AS AUTOINCREMENT BETWEEN CASE CAST CHECK COLLATE COMMIT
    CONSTRAINT CREATE CROSS CURRENT_DATE CURRENT_TIME CURRENT_TIMESTAMP
    DEFAULT DEFERRABLE DELETE DISTINCT DROP ELSE ESCAPE EXCEPT EXISTS FILTER
    FOREIGN FROM FULL GROUP HAVING IN INDEX INDEXED INNER INSERT INTERSECT
    INTO IS ISNULL JOIN LEFT LIMIT NATURAL NOT NOTHING NOTNULL NULL ON OR
    ORDER OUTER OVER PRIMARY RAISE REFERENCES RETURNING RIGHT ROLLBACK SELECT
    SET TABLE TEMPORARY THEN TO TRANSACTION UNION UNIQUE UPDATE USING VALUES
    WHEN WHERE WINDOW
    """.split()
)


class SQLiteDialect:
    """
    SQLite dialect for migration DDL.

    Identifiers are written bare whenever SQLite accepts them bare. The
    engine stores CREATE TABLE text verbatim in its catalog, so quoting a
    name that a hand-written statement would leave bare changes the file.
    """

    name: Final[str] = "sqlite"

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def render_identifier(self, identifier: str) -> str:
        if is_bare_identifier(identifier) and identifier.upper() not in RESERVED_WORDS:
            return identifier
        return self.quote_identifier(identifier)

    def format_table(self, table_name: str) -> str:
        return self.render_identifier(table_name)

    def render_column_definition(
        self, column: str, column_type: str, *, primary_key: bool = False
    ) -> str:
        pieces = [self.render_identifier(column)]
        if column_type:
            pieces.append(column_type)
        if primary_key:
            pieces.append("PRIMARY KEY")
        return " ".join(pieces)
