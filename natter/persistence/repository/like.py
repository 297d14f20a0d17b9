"""PostgreSQL implementation of Like repository."""

from typing import Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from natter.domain.model import Like
from natter.domain.repository import LikeRepository
from natter.domain.value import LikeSubject, UserId
from natter.persistence.mappers import like_to_dict, row_to_like
from natter.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _subject_clause(self, subject_type: LikeSubject, subject_id: UUID):
        return and_(
            likes_table.c.subject_type == subject_type.value,
            likes_table.c.subject_id == subject_id,
        )

    async def find_by_user_and_subject(
        self,
        user_id: UserId,
        subject_type: LikeSubject,
        subject_id: UUID,
    ) -> Optional[Like]:
        """Find a user's like on a specific post or comment."""
        stmt = select(likes_table).where(
            likes_table.c.user_id == user_id,
            self._subject_clause(subject_type, subject_id),
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def save(self, like: Like) -> Like:
        """Insert a like.

        The insert runs in a savepoint so that a unique constraint violation
        leaves the request transaction usable.

        Raises:
            IntegrityError: If the user already likes the subject
        """
        async with self.session.begin_nested():
            await self.session.execute(likes_table.insert().values(**like_to_dict(like)))
        return like

    async def delete_by_user_and_subject(
        self,
        user_id: UserId,
        subject_type: LikeSubject,
        subject_id: UUID,
    ) -> bool:
        """Delete a user's like on a subject."""
        stmt = likes_table.delete().where(
            likes_table.c.user_id == user_id,
            self._subject_clause(subject_type, subject_id),
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return (result.rowcount or 0) > 0

    async def delete_by_subjects(
        self,
        subject_type: LikeSubject,
        subject_ids: Sequence[UUID],
    ) -> int:
        """Delete every like on the given subjects."""
        if not subject_ids:
            return 0
        stmt = likes_table.delete().where(
            likes_table.c.subject_type == subject_type.value,
            likes_table.c.subject_id.in_(subject_ids),
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def count_by_subject(self, subject_type: LikeSubject, subject_id: UUID) -> int:
        """Count likes on a subject."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(self._subject_clause(subject_type, subject_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_subjects(
        self,
        subject_type: LikeSubject,
        subject_ids: Sequence[UUID],
    ) -> Dict[UUID, int]:
        """Count likes on several subjects in one query."""
        if not subject_ids:
            return {}
        stmt = (
            select(likes_table.c.subject_id, func.count().label("like_count"))
            .where(likes_table.c.subject_type == subject_type.value)
            .where(likes_table.c.subject_id.in_(subject_ids))
            .group_by(likes_table.c.subject_id)
        )
        result = await self.session.execute(stmt)
        counts = {row.subject_id: row.like_count for row in result.fetchall()}
        return {subject_id: counts.get(subject_id, 0) for subject_id in subject_ids}

    async def find_by_user_and_subjects(
        self,
        user_id: UserId,
        subject_type: LikeSubject,
        subject_ids: Sequence[UUID],
    ) -> List[Like]:
        """Find a user's likes on multiple items in one query."""
        if not subject_ids:
            return []
        stmt = select(likes_table).where(
            likes_table.c.user_id == user_id,
            likes_table.c.subject_type == subject_type.value,
            likes_table.c.subject_id.in_(subject_ids),
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]
