"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from natter.config import AuthSettings, CommentSettings, Settings
from natter.util.clock import Clock, IdGenerator
from natter.util.di.base import ProviderBase
from natter.util.error import ConfigurationError


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment.

        Raises:
            ConfigurationError: If production runs with the default JWT secret
        """
        settings = Settings()
        if settings.environment == "production" and settings.uses_default_jwt_secret:
            raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment thread settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_clock(self) -> Clock:
        return Clock()

    @provide(scope=Scope.APP)
    def provide_id_generator(self) -> IdGenerator:
        return IdGenerator()
