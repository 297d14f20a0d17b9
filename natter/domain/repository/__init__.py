"""Repository interfaces for natter domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from natter.domain.repository.comment import CommentRepository
from natter.domain.repository.follow import FollowRepository
from natter.domain.repository.like import LikeRepository
from natter.domain.repository.post import PostRepository
from natter.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "LikeRepository",
    "FollowRepository",
]
