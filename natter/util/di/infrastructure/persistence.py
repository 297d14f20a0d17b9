"""Persistence component: PostgreSQL engine, sessions and repositories."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from natter.config import Settings
from natter.domain.repository import (
    CommentRepository,
    FollowRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from natter.persistence.database import (
    create_engine,
    create_session_factory,
    transactional_session,
)
from natter.persistence.repository import (
    PostgresCommentRepository,
    PostgresFollowRepository,
    PostgresLikeRepository,
    PostgresPostRepository,
    PostgresUserRepository,
)
from natter.util.di.base import ProviderBase
from natter.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Mockable persistence component.

    Tests replace it with in-memory repositories (see tests/di/persistence.py).
    """

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories sharing one session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        engine = create_engine(settings.database)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        async with transactional_session(session_factory) as session:
            yield session

    users = provide(PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST)
    posts = provide(PostgresPostRepository, provides=PostRepository, scope=Scope.REQUEST)
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    likes = provide(PostgresLikeRepository, provides=LikeRepository, scope=Scope.REQUEST)
    follows = provide(
        PostgresFollowRepository, provides=FollowRepository, scope=Scope.REQUEST
    )
