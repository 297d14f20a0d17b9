"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from natter.domain.model import Comment, Follow, Like, Post, User
from natter.domain.value import (
    CommentId,
    DisplayName,
    FollowId,
    LikeId,
    LikeSubject,
    PostId,
    PostPrivacy,
    UserId,
)


def _as_uuid(value: Any) -> UUID:
    """Normalize a UUID column value (drivers may return str or UUID)."""
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        name=DisplayName(row["name"]),
        email=row["email"],
        image=row.get("image"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        author_id=UserId(_as_uuid(row["author_id"])),
        content=row.get("content"),
        image=row.get("image"),
        privacy=PostPrivacy(row["privacy"]),
        feeling=row.get("feeling"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    post_dict = post.model_dump()
    post_dict["privacy"] = post.privacy.value
    return post_dict


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The row may carry a computed `like_count` column; it defaults to 0.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        post_id=PostId(_as_uuid(row["post_id"])),
        author_id=UserId(_as_uuid(row["author_id"])),
        author_name=DisplayName(row["author_name"]),
        content=row["content"],
        parent_id=CommentId(_as_uuid(row["parent_id"]))
        if row.get("parent_id")
        else None,
        like_count=row.get("like_count") or 0,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    `like_count` is derived from the likes table and is not stored.
    """
    return comment.model_dump(exclude={"like_count"})


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(_as_uuid(row["id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        subject_type=LikeSubject(row["subject_type"]),
        subject_id=_as_uuid(row["subject_id"]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    like_dict = like.model_dump()
    like_dict["subject_type"] = like.subject_type.value
    return like_dict


def row_to_follow(row: Dict[str, Any]) -> Follow:
    """Convert database row to Follow domain model."""
    return Follow(
        id=FollowId(_as_uuid(row["id"])),
        follower_id=UserId(_as_uuid(row["follower_id"])),
        following_id=UserId(_as_uuid(row["following_id"])),
        created_at=row["created_at"],
    )


def follow_to_dict(follow: Follow) -> Dict[str, Any]:
    """Convert Follow domain model to database dict."""
    return follow.model_dump()
