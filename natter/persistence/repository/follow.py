"""PostgreSQL implementation of Follow repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from natter.domain.model import Follow
from natter.domain.repository import FollowRepository
from natter.domain.value import UserId
from natter.persistence.mappers import follow_to_dict, row_to_follow
from natter.persistence.tables import follows_table


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(self, follower_id: UserId, following_id: UserId) -> Optional[Follow]:
        """Find the follow relationship between two users."""
        stmt = select(follows_table).where(
            follows_table.c.follower_id == follower_id,
            follows_table.c.following_id == following_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_follow(dict(row)) if row else None

    async def save(self, follow: Follow) -> Follow:
        """Insert a follow inside a savepoint.

        Raises:
            IntegrityError: If the relationship already exists
        """
        async with self.session.begin_nested():
            await self.session.execute(
                follows_table.insert().values(**follow_to_dict(follow))
            )
        return follow

    async def delete(self, follower_id: UserId, following_id: UserId) -> bool:
        """Delete a follow relationship."""
        stmt = follows_table.delete().where(
            follows_table.c.follower_id == follower_id,
            follows_table.c.following_id == following_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return (result.rowcount or 0) > 0

    async def count_followers(self, user_id: UserId) -> int:
        stmt = (
            select(func.count())
            .select_from(follows_table)
            .where(follows_table.c.following_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_following(self, user_id: UserId) -> int:
        stmt = (
            select(func.count())
            .select_from(follows_table)
            .where(follows_table.c.follower_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
