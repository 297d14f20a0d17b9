"""Unit tests for the comment read use cases."""

from uuid import uuid4

import pytest

from natter.application.usecase.comment import (
    GetCommentThreadRequest,
    GetCommentThreadUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    GetRootCommentsRequest,
    GetRootCommentsUseCase,
    ValidateCommentTreeRequest,
    ValidateCommentTreeUseCase,
)
from natter.domain.error import NotFoundError, ValidationError
from natter.domain.model import Like
from natter.domain.repository import CommentRepository, LikeRepository, PostRepository
from natter.domain.value import CommentSort, LikeId, LikeSubject, UserId
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_thread(unit_env):
    """Post with A(t=0), B(t=1) and C replying to A (t=2)."""
    post_repo = await unit_env.get(PostRepository)
    comment_repo = await unit_env.get(CommentRepository)
    post = await post_repo.save(make_post(uuid4()))
    a = await comment_repo.save(make_comment(post.id, "Alpha", author_name="Ann", minutes=0))
    b = await comment_repo.save(make_comment(post.id, "Beta", author_name="Ben", minutes=1))
    c = await comment_repo.save(
        make_comment(post.id, "Gamma", parent_id=a.id, author_name="Cat", minutes=2)
    )
    return post, a, b, c


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_newest_first_with_nested_replies(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        post, a, b, c = await _seed_thread(unit_env)

        # Act
        response = await use_case.execute(GetCommentsRequest(post_id=str(post.id)))

        # Assert
        assert [item.comment_id for item in response.comments] == [str(b.id), str(a.id)]
        assert response.comments[1].replies[0].comment_id == str(c.id)
        assert response.comments[1].reply_count == 1
        assert response.total_comments == 3
        assert response.pagination.total == 2
        assert response.stats is None

    @pytest.mark.asyncio
    async def test_oldest_paginated(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        post, a, b, _ = await _seed_thread(unit_env)

        response = await use_case.execute(
            GetCommentsRequest(post_id=str(post.id), sort=CommentSort.OLDEST, limit=1)
        )

        assert [item.comment_id for item in response.comments] == [str(a.id)]
        assert response.pagination.total_pages == 2
        assert response.pagination.has_next is True
        assert response.pagination.has_prev is False

    @pytest.mark.asyncio
    async def test_filter_and_stats(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        post, _, b, _ = await _seed_thread(unit_env)

        response = await use_case.execute(
            GetCommentsRequest(post_id=str(post.id), author="BEN", include_stats=True)
        )

        assert [item.comment_id for item in response.comments] == [str(b.id)]
        # Stats describe the whole tree, not the filtered page
        assert response.stats.total_comments == 3
        assert response.stats.max_depth == 2

    @pytest.mark.asyncio
    async def test_viewer_likes_marked(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        like_repo = await unit_env.get(LikeRepository)
        post, _, _, c = await _seed_thread(unit_env)
        viewer_id = UserId(uuid4())
        await like_repo.save(
            Like(
                id=LikeId(uuid4()),
                user_id=viewer_id,
                subject_type=LikeSubject.COMMENT,
                subject_id=c.id,
            )
        )

        response = await use_case.execute(
            GetCommentsRequest(post_id=str(post.id), viewer_id=str(viewer_id))
        )

        reply = response.comments[1].replies[0]
        assert reply.has_liked is True
        assert reply.like_count == 1
        assert response.comments[0].has_liked is False

    @pytest.mark.asyncio
    async def test_limit_capped_by_settings(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        post, *_ = await _seed_thread(unit_env)

        response = await use_case.execute(
            GetCommentsRequest(post_id=str(post.id), limit=10_000)
        )

        assert response.pagination.limit == 100

    @pytest.mark.asyncio
    async def test_zero_limit_rejected(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        post, *_ = await _seed_thread(unit_env)

        with pytest.raises(ValidationError):
            await use_case.execute(GetCommentsRequest(post_id=str(post.id), limit=0))

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentsRequest(post_id=str(uuid4())))


class TestRootsAndReplies:
    """Tests for the lazy-loading use cases."""

    @pytest.mark.asyncio
    async def test_root_comments_newest_first(self, unit_env):
        use_case = await unit_env.get(GetRootCommentsUseCase)
        post, a, b, _ = await _seed_thread(unit_env)

        response = await use_case.execute(
            GetRootCommentsRequest(post_id=str(post.id), limit=1)
        )

        assert [item.comment_id for item in response.comments] == [str(b.id)]
        assert response.has_more is True

    @pytest.mark.asyncio
    async def test_replies(self, unit_env):
        use_case = await unit_env.get(GetRepliesUseCase)
        _, a, _, c = await _seed_thread(unit_env)

        response = await use_case.execute(GetRepliesRequest(comment_id=str(a.id)))

        assert [item.comment_id for item in response.replies] == [str(c.id)]
        assert response.has_more is False

    @pytest.mark.asyncio
    async def test_replies_of_missing_comment(self, unit_env):
        use_case = await unit_env.get(GetRepliesUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetRepliesRequest(comment_id=str(uuid4())))


class TestGetCommentThreadUseCase:
    """Tests for GetCommentThreadUseCase."""

    @pytest.mark.asyncio
    async def test_thread_rows_and_path(self, unit_env):
        use_case = await unit_env.get(GetCommentThreadUseCase)
        _, a, _, c = await _seed_thread(unit_env)

        from_root = await use_case.execute(GetCommentThreadRequest(comment_id=str(a.id)))
        from_reply = await use_case.execute(GetCommentThreadRequest(comment_id=str(c.id)))

        assert [row.comment.comment_id for row in from_root.rows] == [str(a.id), str(c.id)]
        assert [row.display_depth for row in from_root.rows] == [0, 1]
        assert from_reply.path == [str(a.id), str(c.id)]

    @pytest.mark.asyncio
    async def test_thread_depth_limit(self, unit_env):
        use_case = await unit_env.get(GetCommentThreadUseCase)
        _, a, _, _ = await _seed_thread(unit_env)

        response = await use_case.execute(
            GetCommentThreadRequest(comment_id=str(a.id), max_depth=0)
        )

        assert len(response.rows) == 1
        assert response.rows[0].has_more_replies is True


class TestValidateCommentTreeUseCase:
    """Tests for ValidateCommentTreeUseCase."""

    @pytest.mark.asyncio
    async def test_healthy_tree(self, unit_env):
        use_case = await unit_env.get(ValidateCommentTreeUseCase)
        post, *_ = await _seed_thread(unit_env)

        response = await use_case.execute(ValidateCommentTreeRequest(post_id=str(post.id)))

        assert response.is_valid is True
        assert response.errors == []
        assert response.total_comments == 3
        assert response.max_depth == 2

    @pytest.mark.asyncio
    async def test_parent_loop_reported(self, unit_env):
        """Comments whose parents loop are invalid even though the tree omits them."""
        # Arrange
        use_case = await unit_env.get(ValidateCommentTreeUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post, *_ = await _seed_thread(unit_env)
        x_id, y_id = uuid4(), uuid4()
        x = await comment_repo.save(
            make_comment(post.id, "X", parent_id=y_id, comment_id=x_id, minutes=3)
        )
        y = await comment_repo.save(
            make_comment(post.id, "Y", parent_id=x_id, comment_id=y_id, minutes=4)
        )

        # Act
        response = await use_case.execute(ValidateCommentTreeRequest(post_id=str(post.id)))

        # Assert
        assert response.is_valid is False
        assert response.errors == [
            f"Circular reference detected at comment {x.id}",
            f"Circular reference detected at comment {y.id}",
        ]
        assert response.total_comments == 5
