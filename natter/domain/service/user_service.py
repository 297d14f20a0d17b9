"""User lookups for use cases."""

import logfire

from natter.domain.error import NotFoundError
from natter.domain.model import User
from natter.domain.repository import UserRepository
from natter.domain.value import UserId

from .base import Service


class UserService(Service):
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Load a user that must exist.

        Raises:
            NotFoundError: No user has this ID
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("Unknown user {user_id}", user_id=str(user_id))
                raise NotFoundError("User", user_id)
            return user

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        return await self.user_repository.find_by_id(user_id)
