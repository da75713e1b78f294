"""
SQLite backend on the standard library ``sqlite3`` driver.

The connection runs in autocommit mode; each batch insert is wrapped in an
explicit BEGIN/COMMIT so the whole sequence lands in one transaction.
"""

import sqlite3
from typing import Any, Iterable, Sequence

import structlog

from sqlbench.errors import StorageSetupError
from sqlbench.models import Article, Comment, User
from sqlbench.storage.flatten import JoinAccumulator

logger = structlog.get_logger(__name__)


class SqliteDb:
    """Storage contract implementation for ``sqlite3``."""

    name = "sqlite3"

    def __init__(self, dbfile: str) -> None:
        self.dbfile = dbfile
        try:
            self._conn: sqlite3.Connection | None = sqlite3.connect(dbfile, isolation_level=None)
        except sqlite3.Error as e:
            raise StorageSetupError(f"cannot open {dbfile}: {e}") from e
        logger.debug("Opened connection", backend=self.name, dbfile=dbfile)

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageSetupError(f"connection to {self.dbfile} is closed")
        return self._conn

    def exec(self, *statements: str) -> None:
        for statement in statements:
            try:
                self.conn.execute(statement).fetchall()
            except sqlite3.Error as e:
                raise StorageSetupError(f"exec failed: {e}", statement=statement) from e

    def _insert(self, sql: str, rows: Iterable[tuple[Any, ...]]) -> None:
        conn = self.conn
        try:
            conn.execute("BEGIN")
            conn.executemany(sql, rows)
            conn.execute("COMMIT")
        except sqlite3.Error as e:
            if conn.in_transaction:
                conn.execute("ROLLBACK")
            raise StorageSetupError(f"insert failed: {e}", statement=sql) from e

    def insert_users(self, sql: str, users: Sequence[User]) -> None:
        self._insert(sql, (user.to_row() for user in users))

    def insert_articles(self, sql: str, articles: Sequence[Article]) -> None:
        self._insert(sql, (article.to_row() for article in articles))

    def insert_comments(self, sql: str, comments: Sequence[Comment]) -> None:
        self._insert(sql, (comment.to_row() for comment in comments))

    def _query(self, sql: str) -> list[tuple[Any, ...]]:
        try:
            return self.conn.execute(sql).fetchall()
        except sqlite3.Error as e:
            raise StorageSetupError(f"query failed: {e}", statement=sql) from e

    def find_users(self, sql: str) -> list[User]:
        return [User.from_row(row) for row in self._query(sql)]

    def find_users_articles_comments(
        self, sql: str
    ) -> tuple[list[User], list[Article], list[Comment]]:
        return JoinAccumulator().add_rows(self._query(sql)).result()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.debug("Closed connection", backend=self.name, dbfile=self.dbfile)


def make_sqlite_db(dbfile: str) -> SqliteDb:
    return SqliteDb(dbfile)
