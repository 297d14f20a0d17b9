"""Comment entity.

Comments are threaded discussions on posts. Threading is a plain
self-reference (parent_id); the nested reply tree is rebuilt in memory
on every read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from natter.domain.model.common import DomainModel
from natter.domain.value import CommentId, DisplayName, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    - parent_id: Direct parent comment (None for root comments)
    - author_name: Denormalized from users for display and filtering
    - like_count: Read-side count of likes, filled in by the repository
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    author_name: DisplayName
    content: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    like_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_root(self) -> bool:
        """Whether this comment starts a thread."""
        return self.parent_id is None
