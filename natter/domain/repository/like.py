"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from natter.domain.model.like import Like
from natter.domain.value import LikeSubject, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    Defines the contract for like persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_subject(
        self,
        user_id: UserId,
        subject_type: LikeSubject,
        subject_id: UUID,
    ) -> Optional[Like]:
        """Find a user's like on a specific post or comment.

        Args:
            user_id: The user's ID
            subject_type: Type of item (post or comment)
            subject_id: ID of the item

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Args:
            like: The like to save

        Returns:
            The saved like

        Raises:
            IntegrityError: If the user already likes this subject
        """
        pass

    @abstractmethod
    async def delete_by_user_and_subject(
        self,
        user_id: UserId,
        subject_type: LikeSubject,
        subject_id: UUID,
    ) -> bool:
        """Delete a user's like on a subject.

        Args:
            user_id: The user's ID
            subject_type: Type of item (post or comment)
            subject_id: ID of the item

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_subjects(
        self,
        subject_type: LikeSubject,
        subject_ids: Sequence[UUID],
    ) -> int:
        """Delete every like on the given subjects.

        Args:
            subject_type: Type of items (post or comment)
            subject_ids: IDs of the items

        Returns:
            Number of likes deleted
        """
        pass

    @abstractmethod
    async def count_by_subject(self, subject_type: LikeSubject, subject_id: UUID) -> int:
        """Count likes on a subject.

        Args:
            subject_type: Type of item (post or comment)
            subject_id: ID of the item

        Returns:
            Number of likes
        """
        pass

    @abstractmethod
    async def count_by_subjects(
        self,
        subject_type: LikeSubject,
        subject_ids: Sequence[UUID],
    ) -> Dict[UUID, int]:
        """Count likes on several subjects (batch query).

        Args:
            subject_type: Type of items (post or comment)
            subject_ids: IDs of the items

        Returns:
            Mapping of subject ID to like count (subjects without likes map to 0)
        """
        pass

    @abstractmethod
    async def find_by_user_and_subjects(
        self,
        user_id: UserId,
        subject_type: LikeSubject,
        subject_ids: Sequence[UUID],
    ) -> List[Like]:
        """Find a user's likes on multiple items (batch query).

        Args:
            user_id: The user's ID
            subject_type: Type of items (post or comment)
            subject_ids: IDs of the items to check

        Returns:
            List of the user's likes on the specified items
        """
        pass
