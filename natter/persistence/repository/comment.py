"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from natter.domain.model import Comment
from natter.domain.repository import CommentRepository
from natter.domain.value import CommentId, LikeSubject, PostId
from natter.persistence.mappers import comment_to_dict, row_to_comment
from natter.persistence.tables import comments_table, likes_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Every read attaches the comment's like count through a correlated
    subquery on the likes table.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_with_like_count(self):
        like_count = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.subject_type == LikeSubject.COMMENT.value)
            .where(likes_table.c.subject_id == comments_table.c.id)
            .correlate(comments_table)
            .scalar_subquery()
            .label("like_count")
        )
        return select(comments_table, like_count)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = self._select_with_like_count().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        stmt = (
            self._select_with_like_count()
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_roots(
        self,
        post_id: PostId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find root comments of a post, newest first."""
        stmt = (
            self._select_with_like_count()
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_children(
        self,
        parent_id: CommentId,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Comment]:
        """Find direct replies of a comment, oldest first."""
        stmt = (
            self._select_with_like_count()
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment. Comments are never edited in place.

        Raises:
            IntegrityError: If a comment with this ID already exists
        """
        await self.session.execute(
            comments_table.insert().values(**comment_to_dict(comment))
        )
        return comment.evolve(like_count=0)

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Hard delete comments."""
        if not comment_ids:
            return 0
        stmt = comments_table.delete().where(comments_table.c.id.in_(comment_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> int:
        """Count comments across several posts."""
        if not post_ids:
            return 0
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id.in_(post_ids))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
