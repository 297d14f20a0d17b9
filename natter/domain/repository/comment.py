"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from natter.domain.model.comment import Comment
from natter.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer. Every read fills in
    `Comment.like_count` from the likes table.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post.

        Comments are returned flat, ordered by creation time ascending,
        ready to be assembled into a reply tree.

        Args:
            post_id: The post ID

        Returns:
            List of comments, oldest first
        """
        pass

    @abstractmethod
    async def find_roots(
        self,
        post_id: PostId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find root comments (no parent) of a post, newest first.

        Args:
            post_id: The post ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of root comments
        """
        pass

    @abstractmethod
    async def find_children(
        self,
        parent_id: CommentId,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Comment]:
        """Find direct replies of a comment, oldest first.

        Args:
            parent_id: The parent comment ID
            limit: Maximum number of replies to return (None for all)
            offset: Number of replies to skip

        Returns:
            List of direct replies
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Comments are never edited, so saving an existing ID is an error.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment, with a like count of 0

        Raises:
            IntegrityError: If a comment with this ID already exists
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Hard delete comments.

        Callers are responsible for removing replies and likes first.

        Args:
            comment_ids: IDs of comments to delete

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count all comments (roots and replies) on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def count_by_posts(self, post_ids: Sequence[PostId]) -> int:
        """Count all comments across several posts.

        Args:
            post_ids: Post IDs

        Returns:
            Total number of comments on those posts
        """
        pass
