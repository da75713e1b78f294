"""
SQLite backend through SQLAlchemy.

Holds a single SQLAlchemy ``Connection`` for its lifetime so per-connection
pragmas stay in effect. Statements are sent with ``exec_driver_sql`` to keep
the fixed positional templates unchanged.
"""

from typing import Any, Sequence

import structlog
from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.engine.url import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from sqlbench.errors import StorageSetupError
from sqlbench.models import Article, Comment, User
from sqlbench.storage.flatten import JoinAccumulator

logger = structlog.get_logger(__name__)


class SqlAlchemyDb:
    """Storage contract implementation for SQLAlchemy over pysqlite."""

    name = "sqlalchemy"

    def __init__(self, dbfile: str) -> None:
        self.dbfile = dbfile
        url = URL.create(drivername="sqlite+pysqlite", database=dbfile)
        try:
            self._engine: Engine | None = create_engine(url, poolclass=NullPool)
            self._conn: Connection | None = self._engine.connect()
        except SQLAlchemyError as e:
            raise StorageSetupError(f"cannot open {dbfile}: {e}") from e
        logger.debug("Opened connection", backend=self.name, dbfile=dbfile)

    @property
    def conn(self) -> Connection:
        if self._conn is None:
            raise StorageSetupError(f"connection to {self.dbfile} is closed")
        return self._conn

    def exec(self, *statements: str) -> None:
        conn = self.conn
        for statement in statements:
            try:
                conn.exec_driver_sql(statement)
            except SQLAlchemyError as e:
                conn.rollback()
                raise StorageSetupError(f"exec failed: {e}", statement=statement) from e
        conn.commit()

    def _insert(self, sql: str, rows: list[tuple[Any, ...]]) -> None:
        if not rows:
            return
        conn = self.conn
        try:
            with conn.begin():
                conn.exec_driver_sql(sql, rows)
        except SQLAlchemyError as e:
            raise StorageSetupError(f"insert failed: {e}", statement=sql) from e

    def insert_users(self, sql: str, users: Sequence[User]) -> None:
        self._insert(sql, [user.to_row() for user in users])

    def insert_articles(self, sql: str, articles: Sequence[Article]) -> None:
        self._insert(sql, [article.to_row() for article in articles])

    def insert_comments(self, sql: str, comments: Sequence[Comment]) -> None:
        self._insert(sql, [comment.to_row() for comment in comments])

    def _query(self, sql: str) -> list[tuple[Any, ...]]:
        conn = self.conn
        try:
            rows = [tuple(row) for row in conn.exec_driver_sql(sql)]
        except SQLAlchemyError as e:
            raise StorageSetupError(f"query failed: {e}", statement=sql) from e
        finally:
            # End the implicit read transaction
            conn.rollback()
        return rows

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
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            logger.debug("Closed connection", backend=self.name, dbfile=self.dbfile)


def make_sqlalchemy_db(dbfile: str) -> SqlAlchemyDb:
    return SqlAlchemyDb(dbfile)
