"""
Unit Tests for Domain Models.

Tests entity row encoding and the epoch-millisecond timestamp format.
"""

from datetime import datetime, timezone

import pytest

from sqlbench.models import (
    Article,
    Comment,
    User,
    from_epoch_millis,
    to_epoch_millis,
)


class TestTimestampEncoding:
    """Test cases for epoch millisecond conversion."""

    def test_epoch_is_zero(self) -> None:
        """Test the Unix epoch encodes to zero."""
        assert to_epoch_millis(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0

    def test_known_value(self) -> None:
        """Test a known timestamp encodes to its millisecond count."""
        dt = datetime(2023, 10, 1, 10, 0, 0, 123_000, tzinfo=timezone.utc)
        assert to_epoch_millis(dt) == 1_696_154_400_123

    def test_decode_keeps_milliseconds(self) -> None:
        """Test decoding is exact down to the millisecond."""
        dt = from_epoch_millis(1_696_154_400_123)

        assert dt == datetime(2023, 10, 1, 10, 0, 0, 123_000, tzinfo=timezone.utc)
        assert dt.tzinfo is not None


class TestEntities:
    """Test cases for User, Article and Comment."""

    def test_user_to_row(self) -> None:
        """Test user encoding to the insert parameter order."""
        user = User(1, datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc), "a@b", True)
        assert user.to_row() == (1, 1000, "a@b", 1)

    def test_user_from_row_decodes_active(self) -> None:
        """Test integer booleans are decoded."""
        assert User.from_row((2, 0, "x", 0)).active is False
        assert User.from_row((2, 0, "x", 1)).active is True

    def test_article_and_comment_from_row(self) -> None:
        """Test foreign key columns land in the right fields."""
        article = Article.from_row((5, 0, 7, "article text"))
        comment = Comment.from_row((9, 0, 5, "comment text"))

        assert article.user_id == 7
        assert comment.article_id == 5

    def test_entities_compare_by_value(self) -> None:
        """Test reconstructed entities equal the originals."""
        user = User(3, from_epoch_millis(42), "user3@example.com", False)
        assert User.from_row(user.to_row()) == user
        assert User.from_row(user.to_row()) is not user

    def test_entities_are_immutable(self) -> None:
        """Test entities cannot be modified after construction."""
        user = User(1, from_epoch_millis(0), "x", True)
        with pytest.raises(AttributeError):
            user.email = "y"  # type: ignore[misc]
