"""User aggregate root.

Users are created by the external authentication collaborator; natter only
reads them to attribute posts and comments.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from natter.domain.model.common import DomainModel
from natter.domain.value import DisplayName, UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    name: DisplayName
    email: str = Field(min_length=3, max_length=255)
    image: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
