"""In-memory like repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from natter.domain.model.like import Like
from natter.domain.repository.like import LikeRepository
from natter.domain.value import LikeSubject, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[Like] = []

    def count_for(self, subject_type: LikeSubject, subject_id: UUID) -> int:
        """Synchronous like count, shared with the in-memory comment repository."""
        return sum(
            1
            for like in self._likes
            if like.subject_type == subject_type and like.subject_id == subject_id
        )

    async def find_by_user_and_subject(
        self,
        user_id: UserId,
        subject_type: LikeSubject,
        subject_id: UUID,
    ) -> Optional[Like]:
        """Find a like by user and subject."""
        for like in self._likes:
            if (
                like.user_id == user_id
                and like.subject_type == subject_type
                and like.subject_id == subject_id
            ):
                return like
        return None

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes the subject
        """
        existing = await self.find_by_user_and_subject(
            like.user_id, like.subject_type, like.subject_id
        )
        if existing:
            raise IntegrityError("Duplicate like", None, Exception())

        self._likes.append(like)
        return like

    async def delete_by_user_and_subject(
        self,
        user_id: UserId,
        subject_type: LikeSubject,
        subject_id: UUID,
    ) -> bool:
        """Delete a like by user and subject."""
        for i, like in enumerate(self._likes):
            if (
                like.user_id == user_id
                and like.subject_type == subject_type
                and like.subject_id == subject_id
            ):
                self._likes.pop(i)
                return True
        return False

    async def delete_by_subjects(
        self,
        subject_type: LikeSubject,
        subject_ids: Sequence[UUID],
    ) -> int:
        """Delete every like on the given subjects."""
        targets = set(subject_ids)
        kept = [
            like
            for like in self._likes
            if not (like.subject_type == subject_type and like.subject_id in targets)
        ]
        deleted = len(self._likes) - len(kept)
        self._likes = kept
        return deleted

    async def count_by_subject(self, subject_type: LikeSubject, subject_id: UUID) -> int:
        """Count likes on a subject."""
        return self.count_for(subject_type, subject_id)

    async def count_by_subjects(
        self,
        subject_type: LikeSubject,
        subject_ids: Sequence[UUID],
    ) -> dict[UUID, int]:
        """Count likes on several subjects."""
        return {
            subject_id: self.count_for(subject_type, subject_id)
            for subject_id in subject_ids
        }

    async def find_by_user_and_subjects(
        self,
        user_id: UserId,
        subject_type: LikeSubject,
        subject_ids: Sequence[UUID],
    ) -> list[Like]:
        """Find a user's likes on multiple items."""
        if not subject_ids:
            return []

        targets = set(subject_ids)
        return [
            like
            for like in self._likes
            if like.user_id == user_id
            and like.subject_type == subject_type
            and like.subject_id in targets
        ]
