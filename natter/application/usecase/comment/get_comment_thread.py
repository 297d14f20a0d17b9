"""Get comment thread use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from natter.application.usecase.base import BaseUseCase
from natter.config import CommentSettings
from natter.domain.error import NotFoundError
from natter.domain.service import CommentService
from natter.domain.service.comment_tree import (
    comment_path,
    find_comment_in_tree,
    format_comments_for_display,
)
from natter.domain.value import CommentId

from .common import CommentItem


class GetCommentThreadRequest(BaseModel):
    """Get comment thread request."""

    comment_id: str
    max_depth: int | None = Field(default=None, ge=0)
    collapse_after_depth: int | None = Field(default=None, ge=0)


class ThreadRow(BaseModel):
    """A comment in a thread, flattened with its indentation metadata."""

    comment: CommentItem
    display_depth: int
    is_collapsed: bool
    has_more_replies: bool
    thread_path: list[str]
    reply_count: int


class GetCommentThreadResponse(BaseModel):
    """Get comment thread response."""

    comment_id: str
    post_id: str
    path: list[str]  # Root of the thread down to the requested comment
    rows: list[ThreadRow]


class GetCommentThreadUseCase(
    BaseUseCase[GetCommentThreadRequest, GetCommentThreadResponse]
):
    """Use case for rendering one comment and its subtree for display."""

    def __init__(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> None:
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetCommentThreadRequest) -> GetCommentThreadResponse:
        """Execute get comment thread flow.

        Steps:
        1. Load the comment and rebuild its post's tree
        2. Locate the comment's node and its ancestor path
        3. Flatten the node's subtree into display rows

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment_id = CommentId(UUID(request.comment_id))
        comment = await self.comment_service.get_comment_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", request.comment_id)

        roots = await self.comment_service.get_comment_tree(comment.post_id)
        node = find_comment_in_tree(roots, comment_id)
        if node is None:
            # Deleted between the two reads
            raise NotFoundError("Comment", request.comment_id)

        path = comment_path(roots, comment_id) or [comment_id]

        max_depth = (
            request.max_depth
            if request.max_depth is not None
            else self.comment_settings.display_max_depth
        )
        collapse_after_depth = (
            request.collapse_after_depth
            if request.collapse_after_depth is not None
            else self.comment_settings.collapse_after_depth
        )
        rows = format_comments_for_display(
            [node], max_depth=max_depth, collapse_after_depth=collapse_after_depth
        )

        return GetCommentThreadResponse(
            comment_id=request.comment_id,
            post_id=str(comment.post_id),
            path=[str(ancestor_id) for ancestor_id in path],
            rows=[
                ThreadRow(
                    comment=CommentItem.from_comment(row.comment),
                    display_depth=row.display_depth,
                    is_collapsed=row.is_collapsed,
                    has_more_replies=row.has_more_replies,
                    thread_path=[str(row_id) for row_id in row.thread_path],
                    reply_count=row.reply_count,
                )
                for row in rows
            ],
        )
