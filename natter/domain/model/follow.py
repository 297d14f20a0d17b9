"""Follow entity."""

from datetime import datetime

from pydantic import Field, model_validator

from natter.domain.model.common import DomainModel
from natter.domain.value import FollowAction, FollowId, UserId
from natter.domain.value.common import ValueObject


class Follow(DomainModel):
    """A directed follower -> following relationship between two users."""

    id: FollowId
    follower_id: UserId
    following_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_not_self(self) -> "Follow":
        """Users cannot follow themselves."""
        if self.follower_id == self.following_id:
            raise ValueError("Users cannot follow themselves")
        return self


class FollowToggle(ValueObject):
    """Result of toggling a follow relationship."""

    action: FollowAction
    following: bool
