"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .follow_service import FollowService
from .jwt_service import JWTService
from .like_service import LikeService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "CommentService",
    "FollowService",
    "JWTService",
    "LikeService",
    "PostService",
    "Service",
    "UserService",
]
