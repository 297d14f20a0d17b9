"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from natter.domain.model import Comment, Post, User
from natter.domain.value import CommentId, DisplayName, PostId, UserId

BASE_TIME = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Timestamp `minutes` after a fixed base time."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(name: str = "Alice", user_id: UUID | None = None) -> User:
    """Build a user with a unique email."""
    user_id = user_id or uuid4()
    return User(
        id=UserId(user_id),
        name=DisplayName(name),
        email=f"{name.lower()}-{str(user_id)[:8]}@example.com",
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
    )


def make_post(author_id: UUID, content: str = "Hello world", minutes: int = 0) -> Post:
    return Post(
        id=PostId(uuid4()),
        author_id=UserId(author_id),
        content=content,
        created_at=at(minutes),
        updated_at=at(minutes),
    )


def make_comment(
    post_id: UUID,
    content: str = "A comment",
    parent_id: UUID | None = None,
    author_id: UUID | None = None,
    author_name: str = "Alice",
    like_count: int = 0,
    minutes: int = 0,
    comment_id: UUID | None = None,
) -> Comment:
    """Build a comment at a deterministic creation time.

    Args:
        post_id: Post the comment belongs to
        content: Comment text
        parent_id: Parent comment for replies
        author_id: Author (random when omitted)
        author_name: Author display name
        like_count: Read-side like count
        minutes: Offset from the base time, used for ordering
        comment_id: Explicit ID (random when omitted)
    """
    return Comment(
        id=CommentId(comment_id or uuid4()),
        post_id=PostId(post_id),
        author_id=UserId(author_id or uuid4()),
        author_name=DisplayName(author_name),
        content=content,
        parent_id=CommentId(parent_id) if parent_id else None,
        like_count=like_count,
        created_at=at(minutes),
        updated_at=at(minutes),
    )
