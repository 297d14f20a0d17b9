"""Mock persistence providers for testing."""

from dishka import Scope, provide

from natter.domain.repository import (
    CommentRepository,
    FollowRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from natter.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryFollowRepository,
    InMemoryLikeRepository,
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from natter.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across the requests of a
    single test client. Every test builds its own container, which keeps
    tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_in_memory_like_repository(self) -> InMemoryLikeRepository:
        """Provide the concrete in-memory like store (shared with comments)."""
        return InMemoryLikeRepository()

    @provide(scope=Scope.APP)
    def get_like_repository(self, likes: InMemoryLikeRepository) -> LikeRepository:
        """Provide in-memory like repository."""
        return likes

    @provide(scope=Scope.APP)
    def get_comment_repository(
        self, likes: InMemoryLikeRepository
    ) -> CommentRepository:
        """Provide in-memory comment repository with like counts."""
        return InMemoryCommentRepository(like_repository=likes)

    @provide(scope=Scope.APP)
    def get_follow_repository(self) -> FollowRepository:
        """Provide in-memory follow repository."""
        return InMemoryFollowRepository()
