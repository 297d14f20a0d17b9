"""In-memory follow repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from natter.domain.model.follow import Follow
from natter.domain.repository.follow import FollowRepository
from natter.domain.value import UserId


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self) -> None:
        self._follows: dict[tuple[UserId, UserId], Follow] = {}

    async def find(self, follower_id: UserId, following_id: UserId) -> Optional[Follow]:
        """Find a follow relationship."""
        return self._follows.get((follower_id, following_id))

    async def save(self, follow: Follow) -> Follow:
        """Save a follow.

        Raises:
            IntegrityError: If the relationship already exists
        """
        key = (follow.follower_id, follow.following_id)
        if key in self._follows:
            raise IntegrityError("Duplicate follow", None, Exception())
        self._follows[key] = follow
        return follow

    async def delete(self, follower_id: UserId, following_id: UserId) -> bool:
        """Delete a follow relationship."""
        return self._follows.pop((follower_id, following_id), None) is not None

    async def count_followers(self, user_id: UserId) -> int:
        return sum(1 for _, following in self._follows if following == user_id)

    async def count_following(self, user_id: UserId) -> int:
        return sum(1 for follower, _ in self._follows if follower == user_id)
