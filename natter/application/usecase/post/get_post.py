"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from natter.application.usecase.base import BaseUseCase
from natter.domain.service import CommentService, LikeService, PostService
from natter.domain.value import LikeSubject, PostId, UserId

from .common import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    viewer_id: str | None = None  # Current user ID (if authenticated)


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostItem


class GetPostUseCase(BaseUseCase[GetPostRequest, GetPostResponse]):
    """Use case for retrieving a post with its like and comment counts."""

    def __init__(
        self,
        post_service: PostService,
        like_service: LikeService,
        comment_service: CommentService,
    ) -> None:
        self.post_service = post_service
        self.like_service = like_service
        self.comment_service = comment_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.require_post(PostId(UUID(request.post_id)))

        like_count = await self.like_service.count_likes(LikeSubject.POST, post.id)
        comment_count = await self.comment_service.count_for_post(post.id)

        has_liked = False
        if request.viewer_id:
            liked = await self.like_service.liked_subject_ids(
                UserId(UUID(request.viewer_id)), LikeSubject.POST, [post.id]
            )
            has_liked = post.id in liked

        return GetPostResponse(
            post=PostItem.from_post(post, like_count, comment_count, has_liked)
        )
