"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from natter.application.usecase.base import BaseUseCase
from natter.domain.service import CommentService
from natter.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # Authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    deleted_ids: list[str]
    deleted_count: int


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]):
    """Use case for deleting a comment and its whole reply subtree."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the comment's author
        """
        deleted = await self.comment_service.delete_comment(
            CommentId(UUID(request.comment_id)), UserId(UUID(request.user_id))
        )
        return DeleteCommentResponse(
            deleted_ids=[str(comment_id) for comment_id in deleted],
            deleted_count=len(deleted),
        )
