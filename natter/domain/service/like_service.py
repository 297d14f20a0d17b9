"""Like domain service."""

from typing import Sequence
from uuid import UUID

import logfire
from sqlalchemy.exc import IntegrityError

from natter.domain.error import NotFoundError
from natter.domain.model.like import Like, LikeToggle
from natter.domain.repository import CommentRepository, LikeRepository, PostRepository
from natter.domain.value import CommentId, LikeAction, LikeId, LikeSubject, PostId, UserId
from natter.util.clock import Clock, IdGenerator

from .base import Service


class LikeService(Service):
    """Domain service for liking posts and comments."""

    def __init__(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        clock: Clock,
        id_generator: IdGenerator,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            post_repository: Post repository (subject lookup)
            comment_repository: Comment repository (subject lookup)
            clock: Source of like timestamps
            id_generator: Source of new like IDs
        """
        self.like_repository = like_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.clock = clock
        self.id_generator = id_generator

    async def _require_subject(self, subject_type: LikeSubject, subject_id: UUID) -> None:
        if subject_type == LikeSubject.POST:
            found = await self.post_repository.find_by_id(PostId(subject_id))
            resource = "Post"
        else:
            found = await self.comment_repository.find_by_id(CommentId(subject_id))
            resource = "Comment"

        if not found:
            logfire.warn(
                "Like on non-existent subject",
                subject_type=subject_type.value,
                subject_id=str(subject_id),
            )
            raise NotFoundError(resource, str(subject_id))

    async def toggle_like(
        self, subject_type: LikeSubject, subject_id: UUID, user_id: UserId
    ) -> LikeToggle:
        """Like a post or comment, or remove the like if it already exists.

        A unique constraint violation on insert means a concurrent request
        already liked the subject, so the result is reported as liked.

        Args:
            subject_type: Post or comment
            subject_id: ID of the post or comment
            user_id: User toggling the like

        Returns:
            Action taken, resulting state and the new like count

        Raises:
            NotFoundError: If the subject does not exist
        """
        with logfire.span(
            "like_service.toggle_like",
            subject_type=subject_type.value,
            subject_id=str(subject_id),
            user_id=str(user_id),
        ):
            await self._require_subject(subject_type, subject_id)

            existing = await self.like_repository.find_by_user_and_subject(
                user_id, subject_type, subject_id
            )

            if existing:
                await self.like_repository.delete_by_user_and_subject(
                    user_id, subject_type, subject_id
                )
                action = LikeAction.UNLIKED
            else:
                like = Like(
                    id=LikeId(self.id_generator.new_id()),
                    user_id=user_id,
                    subject_type=subject_type,
                    subject_id=subject_id,
                    created_at=self.clock.now(),
                )
                try:
                    await self.like_repository.save(like)
                except IntegrityError:
                    logfire.warn(
                        "Concurrent like detected",
                        subject_id=str(subject_id),
                        user_id=str(user_id),
                    )
                action = LikeAction.LIKED

            like_count = await self.like_repository.count_by_subject(
                subject_type, subject_id
            )
            logfire.info(
                "Like toggled",
                action=action.value,
                subject_id=str(subject_id),
                like_count=like_count,
            )
            return LikeToggle(
                action=action,
                liked=action == LikeAction.LIKED,
                like_count=like_count,
            )

    async def count_likes(self, subject_type: LikeSubject, subject_id: UUID) -> int:
        return await self.like_repository.count_by_subject(subject_type, subject_id)

    async def liked_subject_ids(
        self,
        user_id: UserId,
        subject_type: LikeSubject,
        subject_ids: Sequence[UUID],
    ) -> set[UUID]:
        """Return which of the given subjects the user has liked.

        Args:
            user_id: Viewing user
            subject_type: Post or comment
            subject_ids: Candidate subject IDs

        Returns:
            Subset of subject_ids liked by the user
        """
        if not subject_ids:
            return set()
        likes = await self.like_repository.find_by_user_and_subjects(
            user_id, subject_type, subject_ids
        )
        return {like.subject_id for like in likes}

    async def like_counts(
        self, subject_type: LikeSubject, subject_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Like count per subject, in one batch."""
        if not subject_ids:
            return {}
        return await self.like_repository.count_by_subjects(subject_type, subject_ids)

    async def count_likes_on(
        self, subject_type: LikeSubject, subject_ids: Sequence[UUID]
    ) -> int:
        """Total number of likes across several subjects."""
        counts = await self.like_counts(subject_type, subject_ids)
        return sum(counts.values())
