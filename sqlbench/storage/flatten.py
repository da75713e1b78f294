"""
Join Flattening.

Rebuilds the three entity sequences from the single record stream of the
users/articles/comments LEFT JOIN. The join repeats parent columns once per
child row; a parent is appended only when its id differs from the last one
seen, so ordering by parent keeps each parent contiguous.
"""

from typing import Any, Iterable, Sequence

from sqlbench.models import Article, Comment, User


class JoinAccumulator:
    """Streaming accumulator keyed by last-seen parent ids."""

    def __init__(self) -> None:
        self.users: list[User] = []
        self.articles: list[Article] = []
        self.comments: list[Comment] = []
        self._last_user_id: int | None = None
        self._last_article_id: int | None = None

    def add_row(self, row: Sequence[Any]) -> None:
        """Consume one 12-column join record."""
        if row[0] != self._last_user_id:
            self.users.append(User.from_row(row[0:4]))
            self._last_user_id = row[0]
            self._last_article_id = None

        # LEFT JOIN: user without articles
        if row[4] is None:
            return
        if row[4] != self._last_article_id:
            self.articles.append(Article.from_row(row[4:8]))
            self._last_article_id = row[4]

        # LEFT JOIN: article without comments
        if row[8] is None:
            return
        self.comments.append(Comment.from_row(row[8:12]))

    def add_rows(self, rows: Iterable[Sequence[Any]]) -> "JoinAccumulator":
        for row in rows:
            self.add_row(row)
        return self

    def result(self) -> tuple[list[User], list[Article], list[Comment]]:
        return self.users, self.articles, self.comments
