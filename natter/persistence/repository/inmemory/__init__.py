"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .follow import InMemoryFollowRepository
from .like import InMemoryLikeRepository
from .post import InMemoryPostRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryFollowRepository",
    "InMemoryLikeRepository",
    "InMemoryPostRepository",
    "InMemoryUserRepository",
]
