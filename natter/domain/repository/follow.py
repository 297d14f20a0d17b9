"""Follow repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from natter.domain.model.follow import Follow
from natter.domain.value import UserId


class FollowRepository(ABC):
    """Repository for Follow entity."""

    @abstractmethod
    async def find(self, follower_id: UserId, following_id: UserId) -> Optional[Follow]:
        """Find a follow relationship.

        Args:
            follower_id: The user who follows
            following_id: The user being followed

        Returns:
            The follow if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, follow: Follow) -> Follow:
        """Save a follow (create).

        Raises:
            IntegrityError: If the relationship already exists
        """
        pass

    @abstractmethod
    async def delete(self, follower_id: UserId, following_id: UserId) -> bool:
        """Delete a follow relationship.

        Returns:
            True if a follow was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_followers(self, user_id: UserId) -> int:
        """Count users following the given user."""
        pass

    @abstractmethod
    async def count_following(self, user_id: UserId) -> int:
        """Count users the given user follows."""
        pass
