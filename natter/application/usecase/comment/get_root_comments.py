"""Get root comments use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from natter.application.usecase.base import BaseUseCase
from natter.domain.service import CommentService, PostService
from natter.domain.value import PostId

from .common import CommentItem


class GetRootCommentsRequest(BaseModel):
    """Get root comments request."""

    post_id: str
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)


class GetRootCommentsResponse(BaseModel):
    """Get root comments response."""

    post_id: str
    comments: list[CommentItem]
    page: int
    has_more: bool


class GetRootCommentsUseCase(
    BaseUseCase[GetRootCommentsRequest, GetRootCommentsResponse]
):
    """Use case for listing a post's top-level comments, newest first.

    Replies are loaded separately through GetRepliesUseCase.
    """

    def __init__(self, comment_service: CommentService, post_service: PostService) -> None:
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: GetRootCommentsRequest) -> GetRootCommentsResponse:
        post_id = PostId(UUID(request.post_id))
        await self.post_service.require_post(post_id)

        comments = await self.comment_service.get_root_comments(
            post_id,
            limit=request.limit,
            offset=(request.page - 1) * request.limit,
        )

        return GetRootCommentsResponse(
            post_id=request.post_id,
            comments=[CommentItem.from_comment(comment) for comment in comments],
            page=request.page,
            has_more=len(comments) == request.limit,
        )
