"""Domain value objects for natter."""

from natter.domain.value.identifiers import (
    CommentId,
    FollowId,
    LikeId,
    PostId,
    UserId,
)
from natter.domain.value.types import (
    CommentSort,
    DisplayName,
    FollowAction,
    LikeAction,
    LikeSubject,
    PostPrivacy,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "LikeId",
    "FollowId",
    # Types
    "CommentSort",
    "DisplayName",
    "FollowAction",
    "LikeAction",
    "LikeSubject",
    "PostPrivacy",
]
