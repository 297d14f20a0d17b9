"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from natter.domain.model.post import Post
from natter.domain.value import PostId, UserId


class PostRepository(ABC):
    """Storage for posts.

    Deleting a post is left to the database: comments, and likes on the
    post, go with it through ON DELETE CASCADE.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 10, offset: int = 0) -> List[Post]:
        """One page of the feed, newest first."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Every post by `author_id`, newest first (profile statistics)."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert the post, or overwrite the stored row with the same ID."""
        pass
