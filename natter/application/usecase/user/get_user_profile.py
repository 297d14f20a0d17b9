"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from natter.application.usecase.base import BaseUseCase
from natter.domain.service import (
    CommentService,
    FollowService,
    LikeService,
    PostService,
    UserService,
)
from natter.domain.value import LikeSubject, UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str
    viewer_id: str | None = None  # Current user ID (if authenticated)


class UserStats(BaseModel):
    """Activity counters for a user profile."""

    total_posts: int
    total_likes: int  # Likes received on the user's posts
    total_comments: int  # Comments received on the user's posts
    followers_count: int
    following_count: int


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user_id: str
    name: str
    image: str | None
    created_at: datetime
    stats: UserStats
    is_following: bool  # Whether the viewer follows this user


class GetUserProfileUseCase(BaseUseCase[GetUserProfileRequest, GetUserProfileResponse]):
    """Use case for getting a user's public profile with activity stats."""

    def __init__(
        self,
        user_service: UserService,
        post_service: PostService,
        like_service: LikeService,
        comment_service: CommentService,
        follow_service: FollowService,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            post_service: Post domain service
            like_service: Like domain service
            comment_service: Comment domain service
            follow_service: Follow domain service
        """
        self.user_service = user_service
        self.post_service = post_service
        self.like_service = like_service
        self.comment_service = comment_service
        self.follow_service = follow_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Steps:
        1. Get user by ID via user service
        2. Gather post, like, comment and follow counters

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        posts = await self.post_service.get_posts_by_author(user.id)
        post_ids = [post.id for post in posts]

        stats = UserStats(
            total_posts=len(posts),
            total_likes=await self.like_service.count_likes_on(
                LikeSubject.POST, post_ids
            ),
            total_comments=await self.comment_service.count_for_posts(post_ids),
            followers_count=await self.follow_service.count_followers(user.id),
            following_count=await self.follow_service.count_following(user.id),
        )

        is_following = False
        if request.viewer_id and request.viewer_id != request.user_id:
            is_following = await self.follow_service.is_following(
                UserId(UUID(request.viewer_id)), user.id
            )

        return GetUserProfileResponse(
            user_id=str(user.id),
            name=user.name.root,
            image=user.image,
            created_at=user.created_at,
            stats=stats,
            is_following=is_following,
        )
