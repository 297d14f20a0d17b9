"""Response models shared by the post use cases."""

from datetime import datetime

from pydantic import BaseModel

from natter.domain.model import Post
from natter.domain.value import PostPrivacy


class PostItem(BaseModel):
    """A post with its engagement counters."""

    post_id: str
    author_id: str
    content: str | None
    image: str | None
    privacy: PostPrivacy
    feeling: str | None
    created_at: datetime
    updated_at: datetime
    like_count: int = 0
    comment_count: int = 0
    has_liked: bool = False

    @classmethod
    def from_post(
        cls,
        post: Post,
        like_count: int = 0,
        comment_count: int = 0,
        has_liked: bool = False,
    ) -> "PostItem":
        return cls(
            post_id=str(post.id),
            author_id=str(post.author_id),
            content=post.content,
            image=post.image,
            privacy=post.privacy,
            feeling=post.feeling,
            created_at=post.created_at,
            updated_at=post.updated_at,
            like_count=like_count,
            comment_count=comment_count,
            has_liked=has_liked,
        )
