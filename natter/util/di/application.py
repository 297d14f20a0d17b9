"""Use case providers.

Every use case is built straight from its constructor annotations; each
HTTP request gets its own instances, wired to that request's services.
"""

from dishka import Scope, provide_all

from natter.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetCommentThreadUseCase,
    GetRepliesUseCase,
    GetRootCommentsUseCase,
    ValidateCommentTreeUseCase,
)
from natter.application.usecase.like import ToggleLikeUseCase
from natter.application.usecase.post import (
    CreatePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from natter.application.usecase.user import GetUserProfileUseCase, ToggleFollowUseCase
from natter.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    scope = Scope.REQUEST

    posts = provide_all(CreatePostUseCase, GetPostUseCase, ListPostsUseCase)

    comments = provide_all(
        CreateCommentUseCase,
        GetCommentsUseCase,
        GetRootCommentsUseCase,
        GetRepliesUseCase,
        GetCommentThreadUseCase,
        ValidateCommentTreeUseCase,
        DeleteCommentUseCase,
    )

    likes = provide_all(ToggleLikeUseCase)

    users = provide_all(GetUserProfileUseCase, ToggleFollowUseCase)
