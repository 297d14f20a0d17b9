"""Post domain service."""

from typing import Optional

import logfire

from natter.domain.error import NotFoundError, ValidationError
from natter.domain.model.post import Post
from natter.domain.repository import PostRepository, UserRepository
from natter.domain.value import PostId, PostPrivacy, UserId
from natter.util.clock import Clock, IdGenerator

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        clock: Clock,
        id_generator: IdGenerator,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            user_repository: User repository (to check the author exists)
            clock: Source of creation timestamps
            id_generator: Source of new post IDs
        """
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.clock = clock
        self.id_generator = id_generator

    async def create_post(
        self,
        author_id: UserId,
        content: Optional[str] = None,
        image: Optional[str] = None,
        privacy: PostPrivacy = PostPrivacy.PUBLIC,
        feeling: Optional[str] = None,
    ) -> Post:
        """Create a post.

        Args:
            author_id: Author user ID
            content: Post text (trimmed; blank counts as missing)
            image: Image URL
            privacy: Audience of the post
            feeling: Optional mood tag

        Returns:
            Created post

        Raises:
            NotFoundError: If the author does not exist
            ValidationError: If neither content nor image is given
        """
        with logfire.span("post_service.create_post", author_id=str(author_id)):
            author = await self.user_repository.find_by_id(author_id)
            if not author:
                logfire.warn("Post by unknown author", author_id=str(author_id))
                raise NotFoundError("User", str(author_id))

            content = content.strip() if content else None
            if not content and not image:
                raise ValidationError("Post requires content or an image")

            now = self.clock.now()
            post = Post(
                id=PostId(self.id_generator.new_id()),
                author_id=author_id,
                content=content or None,
                image=image,
                privacy=privacy,
                feeling=feeling,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id))
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def require_post(self, post_id: PostId) -> Post:
        """Get a post by ID, raising NotFoundError when it is missing."""
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_posts(self, limit: int = 10, offset: int = 0) -> list[Post]:
        """List posts, newest first."""
        with logfire.span("post_service.list_posts", limit=limit, offset=offset):
            posts = await self.post_repository.find_recent(limit=limit, offset=offset)
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def count_posts(self) -> int:
        return await self.post_repository.count()

    async def get_posts_by_author(self, author_id: UserId) -> list[Post]:
        with logfire.span("post_service.get_posts_by_author", author_id=str(author_id)):
            return await self.post_repository.find_by_author(author_id)
