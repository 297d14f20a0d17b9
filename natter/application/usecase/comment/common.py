"""Response models shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from natter.domain.model import Comment
from natter.domain.model.comment_tree import CommentNode


class CommentItem(BaseModel):
    """A single comment without its replies."""

    comment_id: str
    post_id: str
    author_id: str
    author_name: str
    content: str
    parent_id: str | None
    like_count: int
    created_at: datetime
    updated_at: datetime
    has_liked: bool = False

    @classmethod
    def from_comment(cls, comment: Comment, has_liked: bool = False) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            author_name=comment.author_name.root,
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            like_count=comment.like_count,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            has_liked=has_liked,
        )


class CommentNodeItem(CommentItem):
    """A comment with its nested replies."""

    reply_count: int
    replies: list["CommentNodeItem"]

    @classmethod
    def from_node(
        cls, node: CommentNode, liked_ids: set[str] | None = None
    ) -> "CommentNodeItem":
        """Convert a tree node (and its replies, recursively) to a response item.

        Args:
            node: Tree node
            liked_ids: String IDs of comments the viewer has liked
        """
        liked_ids = liked_ids or set()
        item = CommentItem.from_comment(node.comment, str(node.id) in liked_ids)
        return cls(
            **item.model_dump(),
            reply_count=node.reply_count,
            replies=[cls.from_node(reply, liked_ids) for reply in node.replies],
        )
