"""Post aggregate root.

Posts are the primary content type: a short text, an image, or both.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from natter.domain.model.common import DomainModel
from natter.domain.value import PostId, PostPrivacy, UserId


class Post(DomainModel):
    """Post aggregate root.

    A post must carry text content, an image, or both.
    """

    id: PostId
    author_id: UserId
    content: Optional[str] = Field(default=None, max_length=10000)
    image: Optional[str] = None
    privacy: PostPrivacy = PostPrivacy.PUBLIC
    feeling: Optional[str] = Field(default=None, max_length=50)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_has_body(self) -> "Post":
        """Validate that content or image is provided."""
        if not self.content and not self.image:
            raise ValueError("Post requires content or an image")
        return self
