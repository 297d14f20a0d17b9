"""Entity identifiers.

All IDs are UUIDs minted by the injected IdGenerator; the NewTypes keep a
CommentId from being passed where a PostId is expected.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)
FollowId = NewType("FollowId", UUID)
