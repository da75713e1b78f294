"""
Result Validation.

Checks query results against the invariants of the generator that produced
the data. Any mismatch raises ``BenchmarkAssertionError``; a run never
continues past a correctness failure.
"""

from typing import Any, Sequence

from sqlbench.errors import BenchmarkAssertionError
from sqlbench.models import Article, Comment, User


def must_be_equal(expected: Any, actual: Any, what: str = "value") -> None:
    """Fail unless ``actual == expected``."""
    if expected != actual:
        raise BenchmarkAssertionError(
            f"{what}: expected {expected!r} but was {actual!r}",
            expected=expected,
            actual=actual,
        )


def must(condition: bool, message: str, *args: Any) -> None:
    """Fail with a formatted message unless ``condition`` holds."""
    if not condition:
        raise BenchmarkAssertionError(message % args if args else message)


def validate_users(
    users: Sequence[User],
    expected_count: int,
    email_prefix: str,
    min_year: int = 2023,
    max_year: int = 2023,
) -> None:
    """
    Validate an id-ordered user result.

    Args:
        users: Query result ordered by id
        expected_count: Number of users the generator produced
        email_prefix: Prefix every email must start with
        min_year: Lowest allowed created year
        max_year: Highest allowed created year
    """
    must_be_equal(expected_count, len(users), "user count")
    for i, user in enumerate(users):
        must_be_equal(i + 1, user.id, "user id")
        year = user.created.year
        must(min_year <= year <= max_year, "wrong created year in %s", user.created)
        must(
            user.email.startswith(email_prefix),
            "user %d email %r does not start with %r",
            user.id,
            user.email[:32],
            email_prefix,
        )
        must_be_equal(True, user.active, "user active")


def validate_complex(
    users: Sequence[User],
    articles: Sequence[Article],
    comments: Sequence[Comment],
    nusers: int,
    narticles_per_user: int,
    ncomments_per_article: int,
    min_year: int = 2023,
    max_year: int = 2023,
) -> None:
    """Validate the flattened users/articles/comments join result."""
    narticles = nusers * narticles_per_user
    ncomments = narticles * ncomments_per_article
    must_be_equal(nusers, len(users), "user count")
    must_be_equal(narticles, len(articles), "article count")
    must_be_equal(ncomments, len(comments), "comment count")

    for i, user in enumerate(users):
        must_be_equal(i + 1, user.id, "user id")
        must(
            min_year <= user.created.year <= max_year,
            "user %d has wrong created year in %s",
            user.id,
            user.created,
        )
        must(user.email.startswith("user0"), "user %d has wrong email %r", user.id, user.email)
        must_be_equal(i % 2 == 0, user.active, "user active")

    for i, article in enumerate(articles):
        must_be_equal(i + 1, article.id, "article id")
        must(
            min_year <= article.created.year <= max_year,
            "article %d has wrong created year in %s",
            article.id,
            article.created,
        )
        must(
            1 <= article.user_id <= nusers,
            "article %d has userId %d out of range",
            article.id,
            article.user_id,
        )
        must_be_equal("article text", article.text, "article text")
        if i > 0:
            last = articles[i - 1]
            must(
                article.user_id >= last.user_id,
                "article %d userId %d precedes %d",
                article.id,
                article.user_id,
                last.user_id,
            )

    for i, comment in enumerate(comments):
        must_be_equal(i + 1, comment.id, "comment id")
        must(
            min_year <= comment.created.year <= max_year,
            "comment %d has wrong created year in %s",
            comment.id,
            comment.created,
        )
        must(
            1 <= comment.article_id <= narticles,
            "comment %d has articleId %d out of range",
            comment.id,
            comment.article_id,
        )
        must_be_equal("comment text", comment.text, "comment text")
        if i > 0:
            last = comments[i - 1]
            must(
                comment.article_id >= last.article_id,
                "comment %d articleId %d precedes %d",
                comment.id,
                comment.article_id,
                last.article_id,
            )
