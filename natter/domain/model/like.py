"""Like entity.

A like is a user's endorsement of a post or a comment.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from natter.domain.model.common import DomainModel
from natter.domain.value import LikeAction, LikeId, LikeSubject, UserId
from natter.domain.value.common import ValueObject


class Like(DomainModel):
    """Like entity.

    Business rules:
    - One like per user per subject (enforced by database unique constraint)
    - Polymorphic reference to the subject (post or comment)
    """

    id: LikeId
    user_id: UserId
    subject_type: LikeSubject
    subject_id: UUID  # PostId or CommentId (both are UUIDs)
    created_at: datetime = Field(default_factory=datetime.now)


class LikeToggle(ValueObject):
    """Result of toggling a like on a post or comment."""

    action: LikeAction
    liked: bool
    like_count: int
