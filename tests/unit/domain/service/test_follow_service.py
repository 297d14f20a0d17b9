"""Unit tests for FollowService."""

from uuid import uuid4

import pytest

from natter.domain.error import NotFoundError, ValidationError
from natter.domain.repository import UserRepository
from natter.domain.service import FollowService
from natter.domain.value import FollowAction, UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleFollow:
    """Tests for FollowService.toggle_follow()."""

    @pytest.mark.asyncio
    async def test_follow_then_unfollow(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("Alice"))
        bob = await user_repo.save(make_user("Bob"))

        followed = await follow_service.toggle_follow(alice.id, bob.id)

        assert followed.action == FollowAction.FOLLOWED
        assert followed.following is True
        assert await follow_service.is_following(alice.id, bob.id)
        assert await follow_service.count_followers(bob.id) == 1
        assert await follow_service.count_following(alice.id) == 1
        assert await follow_service.count_followers(alice.id) == 0

        unfollowed = await follow_service.toggle_follow(alice.id, bob.id)

        assert unfollowed.action == FollowAction.UNFOLLOWED
        assert unfollowed.following is False
        assert await follow_service.count_followers(bob.id) == 0

    @pytest.mark.asyncio
    async def test_self_follow_rejected(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("Alice"))

        with pytest.raises(ValidationError, match="cannot follow themselves"):
            await follow_service.toggle_follow(alice.id, alice.id)

    @pytest.mark.asyncio
    async def test_follow_missing_user(self, unit_env):
        follow_service = await unit_env.get(FollowService)

        with pytest.raises(NotFoundError):
            await follow_service.toggle_follow(UserId(uuid4()), UserId(uuid4()))
