"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from natter.domain.model import Post
from natter.domain.repository import PostRepository
from natter.domain.value import PostId, UserId
from natter.persistence.mappers import post_to_dict, row_to_post
from natter.persistence.tables import posts_table

NEWEST_FIRST = (posts_table.c.created_at.desc(), posts_table.c.id)


class PostgresPostRepository(PostRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _fetch(self, stmt: Select) -> List[Post]:
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings()]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        posts = await self._fetch(select(posts_table).where(posts_table.c.id == post_id))
        return posts[0] if posts else None

    async def find_recent(self, limit: int = 10, offset: int = 0) -> List[Post]:
        return await self._fetch(
            select(posts_table).order_by(*NEWEST_FIRST).limit(limit).offset(offset)
        )

    async def count(self) -> int:
        total = await self.session.scalar(select(func.count()).select_from(posts_table))
        return total or 0

    async def find_by_author(self, author_id: UserId) -> List[Post]:
        return await self._fetch(
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .order_by(*NEWEST_FIRST)
        )

    async def save(self, post: Post) -> Post:
        values = post_to_dict(post)
        changes = {k: v for k, v in values.items() if k not in ("id", "created_at")}
        await self.session.execute(
            insert(posts_table)
            .values(**values)
            .on_conflict_do_update(index_elements=[posts_table.c.id], set_=changes)
        )
        return post
