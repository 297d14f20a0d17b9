"""Like routes for posts and comments."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from natter.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from natter.domain.error import NotFoundError
from natter.domain.service import JWTService
from natter.domain.value import LikeSubject

router = APIRouter(tags=["likes"], route_class=DishkaRoute)


async def _toggle(
    subject_type: LikeSubject,
    subject_id: UUID,
    toggle_like_use_case: ToggleLikeUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> ToggleLikeResponse:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to like",
        )

    try:
        return await toggle_like_use_case.execute(
            ToggleLikeRequest(
                subject_type=subject_type,
                subject_id=str(subject_id),
                user_id=user_id,
            )
        )
    except NotFoundError as e:
        logfire.warn("Like on missing subject", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logfire.error(
            "Unexpected error toggling like",
            subject_type=subject_type.value,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to toggle like",
        )


@router.post("/posts/{post_id}/like", response_model=ToggleLikeResponse)
async def toggle_post_like(
    post_id: UUID,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like a post, or remove the like if the user already likes it."""
    return await _toggle(
        LikeSubject.POST, post_id, toggle_like_use_case, jwt_service, auth_token
    )


@router.post("/comments/{comment_id}/like", response_model=ToggleLikeResponse)
async def toggle_comment_like(
    comment_id: UUID,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like a comment, or remove the like if the user already likes it."""
    return await _toggle(
        LikeSubject.COMMENT, comment_id, toggle_like_use_case, jwt_service, auth_token
    )
