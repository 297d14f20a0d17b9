"""User profile and follow routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from natter.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    ToggleFollowRequest,
    ToggleFollowResponse,
    ToggleFollowUseCase,
)
from natter.domain.error import NotFoundError, ValidationError
from natter.domain.service import JWTService

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: UUID,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetUserProfileResponse:
    """Get a user's profile with post, like, comment and follow counters.

    Args:
        user_id: User UUID
        get_user_profile_use_case: Get user profile use case from DI
        jwt_service: JWT service (injected)
        auth_token: JWT token from cookie (optional, enables is_following)

    Returns:
        User profile information

    Raises:
        HTTPException: If user not found

    Example:
        GET /users/123e4567-e89b-12d3-a456-426614174000

        Response:
        {
            "user_id": "123e4567-e89b-12d3-a456-426614174000",
            "name": "Alice",
            "image": null,
            "created_at": "2025-01-15T12:34:56Z",
            "stats": {
                "total_posts": 3,
                "total_likes": 12,
                "total_comments": 7,
                "followers_count": 4,
                "following_count": 2
            },
            "is_following": false
        }
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=str(user_id), viewer_id=viewer_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{user_id}/follow", response_model=ToggleFollowResponse)
async def toggle_follow(
    user_id: UUID,
    toggle_follow_use_case: FromDishka[ToggleFollowUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleFollowResponse:
    """Follow a user, or unfollow if already following.

    Raises:
        HTTPException: If not authenticated, target missing, or self-follow
    """
    follower_id = jwt_service.get_user_id_from_token(auth_token)
    if not follower_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to follow users",
        )

    try:
        return await toggle_follow_use_case.execute(
            ToggleFollowRequest(follower_id=follower_id, following_id=str(user_id))
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error toggling follow", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to toggle follow",
        )
