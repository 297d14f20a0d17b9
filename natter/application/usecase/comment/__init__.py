"""Comment use cases."""

from .common import CommentItem, CommentNodeItem
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment_thread import (
    GetCommentThreadRequest,
    GetCommentThreadResponse,
    GetCommentThreadUseCase,
)
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .get_replies import GetRepliesRequest, GetRepliesResponse, GetRepliesUseCase
from .get_root_comments import (
    GetRootCommentsRequest,
    GetRootCommentsResponse,
    GetRootCommentsUseCase,
)
from .validate_comment_tree import (
    ValidateCommentTreeRequest,
    ValidateCommentTreeResponse,
    ValidateCommentTreeUseCase,
)

__all__ = [
    "CommentItem",
    "CommentNodeItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentThreadRequest",
    "GetCommentThreadResponse",
    "GetCommentThreadUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetRepliesRequest",
    "GetRepliesResponse",
    "GetRepliesUseCase",
    "GetRootCommentsRequest",
    "GetRootCommentsResponse",
    "GetRootCommentsUseCase",
    "ValidateCommentTreeRequest",
    "ValidateCommentTreeResponse",
    "ValidateCommentTreeUseCase",
]
