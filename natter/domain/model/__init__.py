"""Domain model entities for natter."""

from natter.domain.model.comment import Comment
from natter.domain.model.comment_tree import (
    AuthorStat,
    CommentFilter,
    CommentNode,
    CommentPage,
    DisplayComment,
    Pagination,
    TreeStats,
    TreeValidation,
)
from natter.domain.model.follow import Follow, FollowToggle
from natter.domain.model.like import Like, LikeToggle
from natter.domain.model.post import Post
from natter.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Like",
    "Follow",
    "FollowToggle",
    "LikeToggle",
    # Comment tree
    "AuthorStat",
    "CommentFilter",
    "CommentNode",
    "CommentPage",
    "DisplayComment",
    "Pagination",
    "TreeStats",
    "TreeValidation",
]
