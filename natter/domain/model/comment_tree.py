"""In-memory comment tree structures.

The tree is derived from a flat list of comments on every read and is never
persisted. Nodes are plain dataclasses so transforms can rebuild them cheaply.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import Field

from natter.domain.model.comment import Comment
from natter.domain.value import CommentId, DisplayName, PostId, UserId
from natter.domain.value.common import ValueObject


@dataclass
class CommentNode:
    """Node in a comment tree.

    Wraps a comment together with its direct replies. `reply_count` is the
    number of direct replies present when the tree was built and is kept
    unchanged by filtering.
    """

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)
    reply_count: int = 0

    @property
    def id(self) -> CommentId:
        return self.comment.id

    @property
    def parent_id(self) -> CommentId | None:
        return self.comment.parent_id

    @property
    def post_id(self) -> PostId:
        return self.comment.post_id

    @property
    def author_id(self) -> UserId:
        return self.comment.author_id

    @property
    def author_name(self) -> DisplayName:
        return self.comment.author_name

    @property
    def content(self) -> str:
        return self.comment.content

    @property
    def like_count(self) -> int:
        return self.comment.like_count

    @property
    def created_at(self) -> datetime:
        return self.comment.created_at


@dataclass(frozen=True)
class DisplayComment:
    """A comment flattened for rendering, with its indentation metadata."""

    comment: Comment
    display_depth: int
    is_collapsed: bool
    has_more_replies: bool
    thread_path: list[CommentId]
    reply_count: int


class CommentFilter(ValueObject):
    """Predicates for filtering a comment tree.

    Every supplied predicate must match for a comment to be kept.
    """

    content: Optional[str] = None  # Case-insensitive substring
    author_id: Optional[UserId] = None  # Exact match
    author_name: Optional[str] = None  # Case-insensitive substring
    min_likes: Optional[int] = Field(default=None, ge=0)
    max_depth: Optional[int] = Field(default=None, ge=1)  # Root comments are depth 1

    @property
    def is_empty(self) -> bool:
        """Whether no predicate is set."""
        return all(
            value is None
            for value in (
                self.content,
                self.author_id,
                self.author_name,
                self.min_likes,
                self.max_depth,
            )
        )


class Pagination(ValueObject):
    """Page metadata for a paginated list of root comments."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


@dataclass(frozen=True)
class CommentPage:
    """One page of root comments (replies stay attached, unpaginated)."""

    comments: list[CommentNode]
    pagination: Pagination


class AuthorStat(ValueObject):
    """Comment count for a single author."""

    author_id: UserId
    name: str
    count: int


class TreeStats(ValueObject):
    """Aggregate statistics over a comment tree."""

    total_comments: int
    total_likes: int
    max_depth: int
    top_level_comments: int
    average_likes_per_comment: float
    top_authors: list[AuthorStat]


class TreeValidation(ValueObject):
    """Integrity report for a comment tree.

    Problems are reported as messages; validation never raises.
    """

    is_valid: bool
    errors: list[str]
