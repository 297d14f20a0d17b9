"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from natter.application.usecase.base import BaseUseCase
from natter.domain.service import LikeService
from natter.domain.value import LikeAction, LikeSubject, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    subject_type: LikeSubject
    subject_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    subject_type: LikeSubject
    subject_id: str
    action: LikeAction
    liked: bool
    like_count: int


class ToggleLikeUseCase(BaseUseCase[ToggleLikeRequest, ToggleLikeResponse]):
    """Use case for liking or unliking a post or comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            Resulting like state

        Raises:
            NotFoundError: If the post or comment does not exist
        """
        result = await self.like_service.toggle_like(
            request.subject_type,
            UUID(request.subject_id),
            UserId(UUID(request.user_id)),
        )
        return ToggleLikeResponse(
            subject_type=request.subject_type,
            subject_id=request.subject_id,
            action=result.action,
            liked=result.liked,
            like_count=result.like_count,
        )
