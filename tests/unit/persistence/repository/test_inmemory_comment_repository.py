"""Unit tests for InMemoryCommentRepository."""

from uuid import UUID, uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from natter.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment

LOW_ID = UUID("00000000-0000-0000-0000-000000000001")
HIGH_ID = UUID("ffffffff-0000-0000-0000-000000000001")


class TestOrdering:
    """Equal timestamps fall back to comment ID, as in PostgreSQL."""

    @pytest.mark.asyncio
    async def test_find_by_post_breaks_ties_by_id(self):
        repo = InMemoryCommentRepository()
        post_id = uuid4()
        # Saved high ID first so insertion order disagrees with ID order
        await repo.save(make_comment(post_id, "high", comment_id=HIGH_ID))
        await repo.save(make_comment(post_id, "low", comment_id=LOW_ID))

        comments = await repo.find_by_post(post_id)

        assert [c.id for c in comments] == [LOW_ID, HIGH_ID]

    @pytest.mark.asyncio
    async def test_find_children_breaks_ties_by_id(self):
        repo = InMemoryCommentRepository()
        post_id = uuid4()
        parent = await repo.save(make_comment(post_id, "parent", minutes=0))
        await repo.save(
            make_comment(post_id, parent_id=parent.id, comment_id=HIGH_ID, minutes=1)
        )
        await repo.save(
            make_comment(post_id, parent_id=parent.id, comment_id=LOW_ID, minutes=1)
        )

        children = await repo.find_children(parent.id)

        assert [c.id for c in children] == [LOW_ID, HIGH_ID]

    @pytest.mark.asyncio
    async def test_find_roots_newest_first_then_highest_id(self):
        repo = InMemoryCommentRepository()
        post_id = uuid4()
        await repo.save(make_comment(post_id, comment_id=LOW_ID, minutes=5))
        await repo.save(make_comment(post_id, comment_id=HIGH_ID, minutes=5))
        older = await repo.save(make_comment(post_id, minutes=0))

        roots = await repo.find_roots(post_id)

        assert [c.id for c in roots] == [HIGH_ID, LOW_ID, older.id]


class TestSave:
    @pytest.mark.asyncio
    async def test_save_is_insert_only(self):
        """Comments are never edited; re-saving an ID is rejected."""
        repo = InMemoryCommentRepository()
        comment = await repo.save(make_comment(uuid4(), "original"))

        with pytest.raises(IntegrityError):
            await repo.save(comment.evolve(content="edited"))

        stored = await repo.find_by_id(comment.id)
        assert stored.content == "original"
