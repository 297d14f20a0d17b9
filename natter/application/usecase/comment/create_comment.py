"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from natter.application.usecase.base import BaseUseCase
from natter.domain.service import CommentService, UserService
from natter.domain.value import CommentId, PostId, UserId

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    post_id: str
    content: str
    author_id: str  # the authenticated caller
    parent_id: str | None = None  # set for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CreateCommentResponse]):
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Post a comment as `request.author_id`.

        The author is loaded first so the comment carries their current
        display name.

        Raises:
            NotFoundError: If the author, post or parent comment is missing
            ValidationError: If content is empty or the parent is on another post
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

        parent_comment_id = (
            CommentId(UUID(request.parent_id)) if request.parent_id else None
        )
        comment = await self.comment_service.create_comment(
            post_id=PostId(UUID(request.post_id)),
            author_id=author.id,
            author_name=author.name,
            content=request.content,
            parent_id=parent_comment_id,
        )

        return CreateCommentResponse(comment=CommentItem.from_comment(comment))
