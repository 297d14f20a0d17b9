"""List posts use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from natter.application.usecase.base import BaseUseCase
from natter.domain.service import CommentService, LikeService, PostService
from natter.domain.value import LikeSubject, UserId

from .common import PostItem


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    viewer_id: str | None = None


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total: int
    page: int
    has_more: bool


class ListPostsUseCase(BaseUseCase[ListPostsRequest, ListPostsResponse]):
    """Use case for the newest-first post feed."""

    def __init__(
        self,
        post_service: PostService,
        like_service: LikeService,
        comment_service: CommentService,
    ) -> None:
        self.post_service = post_service
        self.like_service = like_service
        self.comment_service = comment_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Like counts and the viewer's likes are fetched in one batch per page.
        """
        offset = (request.page - 1) * request.limit
        posts = await self.post_service.list_posts(limit=request.limit, offset=offset)
        total = await self.post_service.count_posts()

        post_ids = [post.id for post in posts]
        like_counts = await self.like_service.like_counts(LikeSubject.POST, post_ids)

        liked: set[UUID] = set()
        if request.viewer_id:
            liked = await self.like_service.liked_subject_ids(
                UserId(UUID(request.viewer_id)), LikeSubject.POST, post_ids
            )

        items = [
            PostItem.from_post(
                post,
                like_count=like_counts.get(post.id, 0),
                comment_count=await self.comment_service.count_for_post(post.id),
                has_liked=post.id in liked,
            )
            for post in posts
        ]

        return ListPostsResponse(
            posts=items,
            total=total,
            page=request.page,
            has_more=offset + len(posts) < total,
        )
