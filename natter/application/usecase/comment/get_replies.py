"""Get replies use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from natter.application.usecase.base import BaseUseCase
from natter.domain.error import NotFoundError
from natter.domain.service import CommentService
from natter.domain.value import CommentId

from .common import CommentItem


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: str
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)


class GetRepliesResponse(BaseModel):
    """Get replies response."""

    comment_id: str
    replies: list[CommentItem]
    page: int
    has_more: bool


class GetRepliesUseCase(BaseUseCase[GetRepliesRequest, GetRepliesResponse]):
    """Use case for paging through the direct replies of a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get replies use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        """Execute get replies flow.

        Replies come oldest first. `has_more` is set when a full page was
        returned, so the last page may be followed by one empty page.

        Raises:
            NotFoundError: If the parent comment does not exist
        """
        comment_id = CommentId(UUID(request.comment_id))
        if not await self.comment_service.get_comment_by_id(comment_id):
            raise NotFoundError("Comment", request.comment_id)

        replies = await self.comment_service.get_replies(
            comment_id,
            limit=request.limit,
            offset=(request.page - 1) * request.limit,
        )

        return GetRepliesResponse(
            comment_id=request.comment_id,
            replies=[CommentItem.from_comment(reply) for reply in replies],
            page=request.page,
            has_more=len(replies) == request.limit,
        )
