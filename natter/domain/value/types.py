"""Domain value objects for natter.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from natter.domain.value.common import RootValueObject


class LikeSubject(str, Enum):
    """Type of entity that can be liked."""

    POST = "post"
    COMMENT = "comment"


class LikeAction(str, Enum):
    """Outcome of a like toggle."""

    LIKED = "liked"
    UNLIKED = "unliked"


class FollowAction(str, Enum):
    """Outcome of a follow toggle."""

    FOLLOWED = "followed"
    UNFOLLOWED = "unfollowed"


class CommentSort(str, Enum):
    """Ordering criteria for comment trees.

    Values match the `sort` query parameter accepted by the API.
    """

    NEWEST = "newest"
    OLDEST = "oldest"
    MOST_LIKED = "mostLiked"
    MOST_REPLIES = "mostReplies"


class PostPrivacy(str, Enum):
    """Who can see a post."""

    PUBLIC = "public"
    FOLLOWERS = "followers"
    PRIVATE = "private"


class DisplayName(RootValueObject[str]):
    """Human-readable user name shown next to posts and comments."""

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Name must be 1-255 characters")
        return v
