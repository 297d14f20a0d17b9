"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from natter.domain.error import NotFoundError, ValidationError
from natter.domain.repository import PostRepository, UserRepository
from natter.domain.service import PostService
from natter.domain.value import PostId, PostPrivacy, UserId
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_text_post(self, unit_env):
        """Content is trimmed and the post is saved."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        # Act
        post = await post_service.create_post(
            author.id, content="  Morning run  ", feeling="happy"
        )

        # Assert
        assert post.content == "Morning run"
        assert post.privacy == PostPrivacy.PUBLIC
        assert post.feeling == "happy"
        assert await post_repo.find_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_create_image_only_post(self, unit_env):
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        post = await post_service.create_post(
            author.id, content="   ", image="https://img.example.com/a.png"
        )

        assert post.content is None
        assert post.image == "https://img.example.com/a.png"

    @pytest.mark.asyncio
    async def test_post_without_body_rejected(self, unit_env):
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        with pytest.raises(ValidationError, match="content or an image"):
            await post_service.create_post(author.id, content=" ")

    @pytest.mark.asyncio
    async def test_unknown_author_rejected(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.create_post(UserId(uuid4()), content="Hi")


class TestReadPosts:
    """Tests for post lookups and listing."""

    @pytest.mark.asyncio
    async def test_list_posts_newest_first(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author_id = uuid4()
        old = await post_repo.save(make_post(author_id, "old", minutes=0))
        new = await post_repo.save(make_post(author_id, "new", minutes=5))

        posts = await post_service.list_posts(limit=10, offset=0)

        assert [p.id for p in posts] == [new.id, old.id]
        assert await post_service.count_posts() == 2
        assert len(await post_service.get_posts_by_author(UserId(author_id))) == 2

    @pytest.mark.asyncio
    async def test_require_post_missing(self, unit_env):
        post_service = await unit_env.get(PostService)

        assert await post_service.get_post_by_id(PostId(uuid4())) is None
        with pytest.raises(NotFoundError):
            await post_service.require_post(PostId(uuid4()))
