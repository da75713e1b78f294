"""
Domain Models.

Value types for the three benchmarked entity kinds and their row encoding.
Timestamps are persisted as integer milliseconds since the Unix epoch and
booleans as 0/1 integers.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Sequence

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_epoch_millis(dt: datetime) -> int:
    """Encode a timezone-aware datetime as epoch milliseconds."""
    delta = dt - EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def from_epoch_millis(millis: int) -> datetime:
    """Decode epoch milliseconds into a UTC datetime."""
    return EPOCH + timedelta(milliseconds=millis)


@dataclass(frozen=True)
class User:
    """A user row."""

    id: int
    created: datetime
    email: str
    active: bool

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "User":
        return cls(
            id=row[0],
            created=from_epoch_millis(row[1]),
            email=row[2],
            active=bool(row[3]),
        )

    def to_row(self) -> tuple[int, int, str, int]:
        return (self.id, to_epoch_millis(self.created), self.email, int(self.active))


@dataclass(frozen=True)
class Article:
    """An article row, owned by a user."""

    id: int
    created: datetime
    user_id: int
    text: str

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Article":
        return cls(
            id=row[0],
            created=from_epoch_millis(row[1]),
            user_id=row[2],
            text=row[3],
        )

    def to_row(self) -> tuple[int, int, int, str]:
        return (self.id, to_epoch_millis(self.created), self.user_id, self.text)


@dataclass(frozen=True)
class Comment:
    """A comment row, attached to an article."""

    id: int
    created: datetime
    article_id: int
    text: str

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Comment":
        return cls(
            id=row[0],
            created=from_epoch_millis(row[1]),
            article_id=row[2],
            text=row[3],
        )

    def to_row(self) -> tuple[int, int, int, str]:
        return (self.id, to_epoch_millis(self.created), self.article_id, self.text)
