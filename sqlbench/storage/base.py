"""
Storage Contract.

The capability set every backend provides. Backends satisfy ``Db``
structurally and are handed to the harness as a ``DbFactory`` that opens a
connection to a storage file.
"""

from typing import Callable, Protocol, Sequence

from sqlbench.models import Article, Comment, User
from sqlbench.storage.schema import DEFAULT_BUSY_TIMEOUT_MS, schema_statements


class Db(Protocol):
    """One open connection to a relational store."""

    def exec(self, *statements: str) -> None:
        """Execute setup/pragma/DDL statements in order. Failures are fatal."""
        ...

    def insert_users(self, sql: str, users: Sequence[User]) -> None:
        """Insert all users in one transaction."""
        ...

    def insert_articles(self, sql: str, articles: Sequence[Article]) -> None:
        """Insert all articles in one transaction."""
        ...

    def insert_comments(self, sql: str, comments: Sequence[Comment]) -> None:
        """Insert all comments in one transaction."""
        ...

    def find_users(self, sql: str) -> list[User]:
        """Run a users query and return the fully materialized result."""
        ...

    def find_users_articles_comments(
        self, sql: str
    ) -> tuple[list[User], list[Article], list[Comment]]:
        """Run the users/articles/comments join and rebuild the three sequences."""
        ...

    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        ...


DbFactory = Callable[[str], Db]


def init_schema(db: Db, busy_timeout_ms: int = DEFAULT_BUSY_TIMEOUT_MS) -> None:
    """Apply pragmas, tables and indexes to a fresh database."""
    db.exec(*schema_statements(busy_timeout_ms))
