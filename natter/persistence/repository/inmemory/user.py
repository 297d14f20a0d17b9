"""Dict-backed UserRepository for tests."""

from typing import Optional

from natter.domain.model.user import User
from natter.domain.repository.user import UserRepository
from natter.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._by_id: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._by_id.get(user_id)

    async def save(self, user: User) -> User:
        previous = self._by_id.get(user.id)
        if previous is not None:
            user = user.evolve(created_at=previous.created_at)
        self._by_id[user.id] = user
        return user
