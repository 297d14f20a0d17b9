"""Domain service providers."""

from dishka import Scope, provide_all

from natter.domain.service import (
    CommentService,
    FollowService,
    JWTService,
    LikeService,
    PostService,
    UserService,
)
from natter.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, one set per request.

    They share the request's repositories and therefore its database
    session, so a use case touching several services runs in one
    transaction.
    """

    scope = Scope.REQUEST

    services = provide_all(
        JWTService,
        UserService,
        PostService,
        CommentService,
        LikeService,
        FollowService,
    )
