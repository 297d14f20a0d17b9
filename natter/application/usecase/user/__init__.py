"""User use cases."""

from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    UserStats,
)
from .toggle_follow import (
    ToggleFollowRequest,
    ToggleFollowResponse,
    ToggleFollowUseCase,
)

__all__ = [
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "ToggleFollowRequest",
    "ToggleFollowResponse",
    "ToggleFollowUseCase",
    "UserStats",
]
