"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from natter.domain.model.comment import Comment
from natter.domain.repository.comment import CommentRepository
from natter.domain.value import CommentId, LikeSubject, PostId

from .like import InMemoryLikeRepository


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    When given the in-memory like repository, reads attach like counts the
    way the PostgreSQL repository does.
    """

    def __init__(self, like_repository: InMemoryLikeRepository | None = None) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._like_repository = like_repository

    def _with_like_count(self, comment: Comment) -> Comment:
        if self._like_repository is None:
            return comment
        like_count = self._like_repository.count_for(LikeSubject.COMMENT, comment.id)
        return comment.evolve(like_count=like_count)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        comment = self._comments.get(comment_id)
        return self._with_like_count(comment) if comment else None

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return [self._with_like_count(c) for c in comments]

    async def find_roots(
        self,
        post_id: PostId,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find root comments of a post, newest first."""
        roots = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_id is None
        ]
        roots.sort(key=lambda c: (c.created_at, c.id), reverse=True)
        return [self._with_like_count(c) for c in roots[offset : offset + limit]]

    async def find_children(
        self,
        parent_id: CommentId,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Comment]:
        """Find direct replies of a comment, oldest first."""
        children = [c for c in self._comments.values() if c.parent_id == parent_id]
        children.sort(key=lambda c: (c.created_at, c.id))
        end = None if limit is None else offset + limit
        return [self._with_like_count(c) for c in children[offset:end]]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Raises:
            IntegrityError: If a comment with this ID already exists
        """
        if comment.id in self._comments:
            raise IntegrityError("Duplicate comment", None, Exception())
        self._comments[comment.id] = comment.evolve(like_count=0)
        return self._with_like_count(comment)

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete comments by ID."""
        deleted = 0
        for comment_id in comment_ids:
            if self._comments.pop(comment_id, None) is not None:
                deleted += 1
        return deleted

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> int:
        """Count comments across several posts."""
        targets = set(post_ids)
        return sum(1 for c in self._comments.values() if c.post_id in targets)
