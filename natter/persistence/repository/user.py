"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from natter.domain.model import User
from natter.domain.repository import UserRepository
from natter.domain.value import UserId
from natter.persistence.mappers import row_to_user, user_to_dict
from natter.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        row = (
            await self.session.execute(
                select(users_table).where(users_table.c.id == user_id)
            )
        ).mappings().one_or_none()
        return row_to_user(dict(row)) if row is not None else None

    async def save(self, user: User) -> User:
        values = user_to_dict(user)
        # created_at belongs to the first write
        changes = {k: v for k, v in values.items() if k not in ("id", "created_at")}
        stmt = (
            insert(users_table)
            .values(**values)
            .on_conflict_do_update(index_elements=[users_table.c.id], set_=changes)
        )
        await self.session.execute(stmt)
        return user
