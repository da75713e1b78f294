"""
Synthetic Data Generator.

Deterministic entity sequences for each benchmark scenario. There is no
randomness: every field is derived from the row position and a fixed base
timestamp, so repeated runs produce identical data.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from sqlbench.models import Article, Comment, User

BASE_TIME = datetime(2023, 10, 1, 10, 0, 0, tzinfo=timezone.utc)

ARTICLE_TEXT = "article text"
COMMENT_TEXT = "comment text"


@dataclass
class ComplexDataset:
    """Users, articles and comments of the three-level hierarchy."""

    users: list[User] = field(default_factory=list)
    articles: list[Article] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)


def generate_simple_users(nusers: int = 1_000_000, base: datetime = BASE_TIME) -> list[User]:
    """Users one minute apart with zero-padded emails, all active."""
    return [
        User(
            id=i + 1,
            created=base + timedelta(minutes=i),
            email=f"user{i + 1:08d}@example.com",
            active=True,
        )
        for i in range(nusers)
    ]


def generate_many_users(nusers: int, base: datetime = BASE_TIME) -> list[User]:
    """Small user sets for the repeated-read scenario."""
    return generate_simple_users(nusers, base)


def generate_complex(
    nusers: int = 200,
    narticles_per_user: int = 100,
    ncomments_per_article: int = 20,
    base: datetime = BASE_TIME,
) -> ComplexDataset:
    """
    Build the user -> article -> comment hierarchy.

    Timestamps nest by offset: user u at ``base + u min``, its article a at
    ``+ a s`` and that article's comment c at ``+ c ms``. Ids of each kind
    are assigned sequentially from 1 in generation order.

    Args:
        nusers: Number of users
        narticles_per_user: Articles written by each user
        ncomments_per_article: Comments attached to each article
        base: Timestamp of the first user

    Returns:
        ComplexDataset with all three sequences
    """
    dataset = ComplexDataset()
    article_id = 0
    comment_id = 0
    for u in range(nusers):
        user_id = u + 1
        user_created = base + timedelta(minutes=u)
        dataset.users.append(
            User(
                id=user_id,
                created=user_created,
                email=f"user{u + 1:08d}@example.com",
                active=u % 2 == 0,
            )
        )
        for a in range(narticles_per_user):
            article_id += 1
            article_created = user_created + timedelta(seconds=a)
            dataset.articles.append(
                Article(
                    id=article_id,
                    created=article_created,
                    user_id=user_id,
                    text=ARTICLE_TEXT,
                )
            )
            for c in range(ncomments_per_article):
                comment_id += 1
                dataset.comments.append(
                    Comment(
                        id=comment_id,
                        created=article_created + timedelta(milliseconds=c),
                        article_id=article_id,
                        text=COMMENT_TEXT,
                    )
                )
    return dataset


def generate_large_users(
    nsize: int,
    nusers: int = 10_000,
    base: datetime = BASE_TIME,
) -> list[User]:
    """Users one second apart whose email is inflated to ``nsize`` filler bytes."""
    email = "a" * nsize
    return [
        User(
            id=i + 1,
            created=base + timedelta(seconds=i),
            email=email,
            active=True,
        )
        for i in range(nusers)
    ]


def generate_concurrent_users(nusers: int = 1_000_000, base: datetime = BASE_TIME) -> list[User]:
    """Users one second apart with unique unpadded emails."""
    return [
        User(
            id=i + 1,
            created=base + timedelta(seconds=i),
            email=f"user{i + 1}@example.com",
            active=True,
        )
        for i in range(nusers)
    ]


def created_years(
    nusers: int,
    step: timedelta,
    tail: timedelta = timedelta(0),
    base: datetime = BASE_TIME,
) -> tuple[int, int]:
    """
    First and last ``created`` year of a generated sequence.

    Args:
        nusers: Number of users generated
        step: Spacing between consecutive users
        tail: Extra offset of the latest child row after the last user
        base: Timestamp of the first user

    Returns:
        Tuple of (first year, last year)
    """
    last = base + step * max(nusers - 1, 0) + tail
    return base.year, last.year


def complex_created_years(
    nusers: int,
    narticles_per_user: int,
    ncomments_per_article: int,
    base: datetime = BASE_TIME,
) -> tuple[int, int]:
    """Year range spanned by every row of ``generate_complex``."""
    tail = timedelta(
        seconds=max(narticles_per_user - 1, 0),
        milliseconds=max(ncomments_per_article - 1, 0),
    )
    return created_years(nusers, timedelta(minutes=1), tail, base)
