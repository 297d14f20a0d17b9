"""Session token encoding.

natter does not run a login flow of its own. Whatever signs the user in
sets an `auth_token` cookie holding an HS256 JWT whose `user_id` claim
names the caller; this module reads those tokens and, for tests and
tooling, writes them.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, ValidationError as PydanticValidationError

from natter.config import AuthSettings
from natter.util.error import UtilError


class TokenPayload(BaseModel):
    """Claims carried by a session token."""

    user_id: UUID
    name: str
    iat: datetime
    exp: datetime


class JWTError(UtilError):
    """Token could not be trusted.

    `reason` is a short machine-friendly label ("expired", "invalid",
    "malformed") suitable for log fields.
    """

    def __init__(self, reason: str, message: str) -> None:
        self.reason = reason
        super().__init__(message)


def create_token(
    user_id: str | UUID,
    name: str,
    settings: AuthSettings,
    issued_at: datetime | None = None,
) -> str:
    """Sign a session token for a user.

    Args:
        user_id: User the token identifies
        name: Display name, carried for clients
        settings: Secret, algorithm and lifetime
        issued_at: Issue time (now when omitted)
    """
    issued_at = issued_at or datetime.now(timezone.utc)
    claims = {
        "user_id": str(user_id),
        "name": name,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a token's signature and expiry and parse its claims.

    Raises:
        JWTError: Expired, badly signed, or missing a usable `user_id`
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("expired", "Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("invalid", "Invalid token") from e

    claims.setdefault("name", "")
    claims.setdefault("iat", claims["exp"])
    try:
        return TokenPayload.model_validate(claims)
    except PydanticValidationError as e:
        raise JWTError("malformed", "Token claims are malformed") from e
