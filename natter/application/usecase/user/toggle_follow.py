"""Toggle follow use case."""

from uuid import UUID

from pydantic import BaseModel

from natter.application.usecase.base import BaseUseCase
from natter.domain.service import FollowService
from natter.domain.value import FollowAction, UserId


class ToggleFollowRequest(BaseModel):
    """Toggle follow request."""

    follower_id: str  # Authenticated user
    following_id: str  # Profile being followed


class ToggleFollowResponse(BaseModel):
    """Toggle follow response."""

    action: FollowAction
    following: bool
    followers_count: int


class ToggleFollowUseCase(BaseUseCase[ToggleFollowRequest, ToggleFollowResponse]):
    """Use case for following or unfollowing a user."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: ToggleFollowRequest) -> ToggleFollowResponse:
        """Execute toggle follow flow.

        Raises:
            ValidationError: If a user tries to follow themselves
            NotFoundError: If the followed user does not exist
        """
        following_id = UserId(UUID(request.following_id))
        result = await self.follow_service.toggle_follow(
            UserId(UUID(request.follower_id)), following_id
        )
        return ToggleFollowResponse(
            action=result.action,
            following=result.following,
            followers_count=await self.follow_service.count_followers(following_id),
        )
