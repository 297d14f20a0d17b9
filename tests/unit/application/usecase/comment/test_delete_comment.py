"""Unit tests for DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from natter.application.usecase.comment import DeleteCommentRequest, DeleteCommentUseCase
from natter.domain.error import NotAuthorizedError
from natter.domain.repository import CommentRepository, PostRepository
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_returns_all_removed_ids(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        author_id = uuid4()
        post = await post_repo.save(make_post(author_id))
        root = await comment_repo.save(make_comment(post.id, author_id=author_id))
        reply = await comment_repo.save(
            make_comment(post.id, parent_id=root.id, minutes=1)
        )

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(root.id), user_id=str(author_id))
        )

        # Assert
        assert response.deleted_count == 2
        assert response.deleted_ids == [str(root.id), str(reply.id)]
        assert await comment_repo.count_by_post(post.id) == 0

    @pytest.mark.asyncio
    async def test_only_author_may_delete(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post(uuid4()))
        comment = await comment_repo.save(make_comment(post.id))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(comment.id), user_id=str(uuid4()))
            )
