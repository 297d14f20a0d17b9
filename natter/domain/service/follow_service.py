"""Follow domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from natter.domain.error import NotFoundError, ValidationError
from natter.domain.model.follow import Follow, FollowToggle
from natter.domain.repository import FollowRepository, UserRepository
from natter.domain.value import FollowAction, FollowId, UserId
from natter.util.clock import Clock, IdGenerator

from .base import Service


class FollowService(Service):
    """Domain service for the follower graph."""

    def __init__(
        self,
        follow_repository: FollowRepository,
        user_repository: UserRepository,
        clock: Clock,
        id_generator: IdGenerator,
    ) -> None:
        self.follow_repository = follow_repository
        self.user_repository = user_repository
        self.clock = clock
        self.id_generator = id_generator

    async def toggle_follow(
        self, follower_id: UserId, following_id: UserId
    ) -> FollowToggle:
        """Follow a user, or unfollow if already following.

        Args:
            follower_id: User doing the following
            following_id: User being followed

        Returns:
            Action taken and resulting state

        Raises:
            ValidationError: If a user tries to follow themselves
            NotFoundError: If the target user does not exist
        """
        with logfire.span(
            "follow_service.toggle_follow",
            follower_id=str(follower_id),
            following_id=str(following_id),
        ):
            if follower_id == following_id:
                logfire.warn("Self-follow rejected", user_id=str(follower_id))
                raise ValidationError("Users cannot follow themselves")

            target = await self.user_repository.find_by_id(following_id)
            if not target:
                raise NotFoundError("User", str(following_id))

            existing = await self.follow_repository.find(follower_id, following_id)
            if existing:
                await self.follow_repository.delete(follower_id, following_id)
                logfire.info(
                    "User unfollowed",
                    follower_id=str(follower_id),
                    following_id=str(following_id),
                )
                return FollowToggle(action=FollowAction.UNFOLLOWED, following=False)

            follow = Follow(
                id=FollowId(self.id_generator.new_id()),
                follower_id=follower_id,
                following_id=following_id,
                created_at=self.clock.now(),
            )
            try:
                await self.follow_repository.save(follow)
            except IntegrityError:
                logfire.warn(
                    "Concurrent follow detected",
                    follower_id=str(follower_id),
                    following_id=str(following_id),
                )
            logfire.info(
                "User followed",
                follower_id=str(follower_id),
                following_id=str(following_id),
            )
            return FollowToggle(action=FollowAction.FOLLOWED, following=True)

    async def count_followers(self, user_id: UserId) -> int:
        return await self.follow_repository.count_followers(user_id)

    async def count_following(self, user_id: UserId) -> int:
        return await self.follow_repository.count_following(user_id)

    async def is_following(self, follower_id: UserId, following_id: UserId) -> bool:
        return await self.follow_repository.find(follower_id, following_id) is not None
