"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from natter.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from natter.domain.error import NotFoundError
from natter.domain.repository import PostRepository, UserRepository
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_carries_author_name(self, unit_env):
        """The author's display name is copied onto the comment."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.save(make_user("Priya"))
        post = await post_repo.save(make_post(author.id))

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                content="Nice one",
                author_id=str(author.id),
            )
        )

        # Assert
        assert response.comment.author_name == "Priya"
        assert response.comment.author_id == str(author.id)
        assert response.comment.post_id == str(post.id)
        assert response.comment.parent_id is None
        assert response.comment.like_count == 0

    @pytest.mark.asyncio
    async def test_reply(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.save(make_user())
        post = await post_repo.save(make_post(author.id))
        parent = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id), content="Parent", author_id=str(author.id)
            )
        )

        reply = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                content="Child",
                author_id=str(author.id),
                parent_id=parent.comment.comment_id,
            )
        )

        assert reply.comment.parent_id == parent.comment.comment_id

    @pytest.mark.asyncio
    async def test_unknown_author(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(uuid4()))

        with pytest.raises(NotFoundError, match="User not found"):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(post.id), content="Hi", author_id=str(uuid4())
                )
            )
