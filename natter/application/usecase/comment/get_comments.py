"""Get comments use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from natter.application.usecase.base import BaseUseCase
from natter.config import CommentSettings
from natter.domain.model.comment_tree import CommentFilter, Pagination, TreeStats
from natter.domain.service import CommentService, LikeService, PostService
from natter.domain.service.comment_tree import (
    comment_tree_stats,
    count_comments_in_tree,
    filter_comments,
    flatten_comment_tree,
    paginate_comments,
    sort_comments,
)
from natter.domain.value import CommentSort, LikeSubject, PostId, UserId

from .common import CommentNodeItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    sort: CommentSort = CommentSort.NEWEST
    page: int = 1
    limit: int | None = None  # Falls back to the configured page size
    content: str | None = None  # Case-insensitive substring filter
    author: str | None = None  # Case-insensitive author name filter
    min_likes: int | None = Field(default=None, ge=0)
    include_stats: bool = False
    viewer_id: str | None = None  # Authenticated user, for has_liked


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentNodeItem]
    pagination: Pagination
    total_comments: int  # All comments on the post, replies included
    stats: TreeStats | None = None


class GetCommentsUseCase(BaseUseCase[GetCommentsRequest, GetCommentsResponse]):
    """Use case for reading a post's comments as a sorted, paginated tree."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        like_service: LikeService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            like_service: Like service for the viewer's likes
            comment_settings: Page size limits
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.like_service = like_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Steps:
        1. Verify the post exists
        2. Build the reply tree from the post's comments
        3. Compute stats over the whole tree (if requested)
        4. Sort every level, apply filters, paginate the root comments
        5. Mark the comments the viewer has liked

        Args:
            request: Get comments request

        Returns:
            One page of root comments with nested replies

        Raises:
            NotFoundError: If the post does not exist
            ValidationError: If page or limit is below 1
        """
        post_id = PostId(UUID(request.post_id))
        await self.post_service.require_post(post_id)

        roots = await self.comment_service.get_comment_tree(post_id)
        stats = comment_tree_stats(roots) if request.include_stats else None
        total_comments = count_comments_in_tree(roots)

        tree = sort_comments(roots, request.sort)

        criteria = CommentFilter(
            content=request.content or None,
            author_name=request.author or None,
            min_likes=request.min_likes,
        )
        if not criteria.is_empty:
            tree = filter_comments(tree, criteria)

        limit = (
            request.limit
            if request.limit is not None
            else self.comment_settings.default_page_size
        )
        limit = min(limit, self.comment_settings.max_page_size)
        page = paginate_comments(tree, page=request.page, limit=limit)

        liked_ids: set[str] = set()
        if request.viewer_id and page.comments:
            visible_ids = [node.id for node in flatten_comment_tree(page.comments)]
            liked = await self.like_service.liked_subject_ids(
                UserId(UUID(request.viewer_id)), LikeSubject.COMMENT, visible_ids
            )
            liked_ids = {str(subject_id) for subject_id in liked}

        logfire.info(
            "Comments served",
            post_id=request.post_id,
            sort=request.sort.value,
            page=page.pagination.page,
            roots=len(page.comments),
        )

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=[CommentNodeItem.from_node(node, liked_ids) for node in page.comments],
            pagination=page.pagination,
            total_comments=total_comments,
            stats=stats,
        )
