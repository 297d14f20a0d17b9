"""Dict-backed PostRepository for tests."""

from typing import Optional

from natter.domain.model.post import Post
from natter.domain.repository.post import PostRepository
from natter.domain.value import PostId, UserId


def _newest_first(posts) -> list[Post]:
    return sorted(posts, key=lambda p: p.created_at, reverse=True)


class InMemoryPostRepository(PostRepository):
    def __init__(self) -> None:
        self._by_id: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        return self._by_id.get(post_id)

    async def find_recent(self, limit: int = 10, offset: int = 0) -> list[Post]:
        return _newest_first(self._by_id.values())[offset : offset + limit]

    async def count(self) -> int:
        return len(self._by_id)

    async def find_by_author(self, author_id: UserId) -> list[Post]:
        return _newest_first(p for p in self._by_id.values() if p.author_id == author_id)

    async def save(self, post: Post) -> Post:
        self._by_id[post.id] = post
        return post
