"""Caller identity from session tokens."""

import logfire

from natter.config import AuthSettings
from natter.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Reads (and, for tooling, issues) the `auth_token` session cookie.

    Routes only ever ask one question: who is calling, if anyone?
    `get_user_id_from_token` answers it without raising.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, name: str) -> str:
        """Issue a token for `user_id`."""
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, name, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Parse a token, raising JWTError when it cannot be trusted."""
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Rejected session token", reason=e.reason)
                raise

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Return the caller's user ID, or None for anonymous callers.

        A missing cookie and an untrustworthy token both mean anonymous.
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError:
            return None
        return str(payload.user_id)
