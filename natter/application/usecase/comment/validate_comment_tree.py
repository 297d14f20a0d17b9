"""Validate comment tree use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from natter.application.usecase.base import BaseUseCase
from natter.config import CommentSettings
from natter.domain.service import CommentService, PostService
from natter.domain.service.comment_tree import (
    build_comment_tree,
    comment_tree_depth,
    validate_comment_tree,
)
from natter.domain.value import PostId


class ValidateCommentTreeRequest(BaseModel):
    """Validate comment tree request."""

    post_id: str


class ValidateCommentTreeResponse(BaseModel):
    """Integrity report for a post's comment tree."""

    post_id: str
    is_valid: bool
    errors: list[str]
    total_comments: int
    max_depth: int


class ValidateCommentTreeUseCase(
    BaseUseCase[ValidateCommentTreeRequest, ValidateCommentTreeResponse]
):
    """Use case for checking the integrity of a post's comment tree."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        comment_settings: CommentSettings,
    ) -> None:
        self.comment_service = comment_service
        self.post_service = post_service
        self.comment_settings = comment_settings

    async def execute(
        self, request: ValidateCommentTreeRequest
    ) -> ValidateCommentTreeResponse:
        """Execute validation flow.

        Problems are reported in the response; this never raises for an
        invalid tree. The tree is checked against the stored comments, so
        comments caught in a parent loop (and left out of the tree) are
        reported too. `total_comments` counts stored comments.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(UUID(request.post_id))
        await self.post_service.require_post(post_id)

        comments = await self.comment_service.get_comments_for_post(post_id)
        roots = build_comment_tree(comments)
        report = validate_comment_tree(
            roots,
            max_depth=self.comment_settings.validation_max_depth,
            comments=comments,
        )
        if not report.is_valid:
            logfire.warn(
                "Comment tree integrity problems",
                post_id=request.post_id,
                error_count=len(report.errors),
            )

        return ValidateCommentTreeResponse(
            post_id=request.post_id,
            is_valid=report.is_valid,
            errors=report.errors,
            total_comments=len(comments),
            max_depth=comment_tree_depth(roots),
        )
