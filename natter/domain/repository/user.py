"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from natter.domain.model.user import User
from natter.domain.value import UserId


class UserRepository(ABC):
    """Read access to accounts, plus seeding.

    Accounts are created by the sign-in collaborator. natter looks users up
    to attribute posts and comments and to build profiles; `save` exists
    for that collaborator, fixtures and tests.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """The user with `user_id`, or None."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert the user, or overwrite the stored row with the same ID."""
