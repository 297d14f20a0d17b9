"""PostgreSQL repository implementations."""

from natter.persistence.repository.comment import PostgresCommentRepository
from natter.persistence.repository.follow import PostgresFollowRepository
from natter.persistence.repository.like import PostgresLikeRepository
from natter.persistence.repository.post import PostgresPostRepository
from natter.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresFollowRepository",
]
