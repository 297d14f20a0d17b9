"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from natter.application.usecase.base import BaseUseCase
from natter.domain.service import PostService
from natter.domain.value import PostPrivacy, UserId

from .common import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    content: str | None = Field(default=None, max_length=10000)
    image: str | None = None
    privacy: PostPrivacy = PostPrivacy.PUBLIC
    feeling: str | None = Field(default=None, max_length=50)


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostItem


class CreatePostUseCase(BaseUseCase[CreatePostRequest, CreatePostResponse]):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute post creation flow.

        Raises:
            NotFoundError: If the author does not exist
            ValidationError: If the post has neither content nor image
        """
        post = await self.post_service.create_post(
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
            image=request.image,
            privacy=request.privacy,
            feeling=request.feeling,
        )
        return CreatePostResponse(post=PostItem.from_post(post))
