"""Post routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from natter.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
)
from natter.domain.error import NotFoundError, ValidationError
from natter.domain.service import JWTService
from natter.domain.value import PostPrivacy

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    content: str | None = Field(default=None, max_length=10000)
    image: str | None = None
    privacy: PostPrivacy = PostPrivacy.PUBLIC
    feeling: str | None = Field(default=None, max_length=50)


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        jwt_service: JWT service (injected)
        page: 1-indexed page number
        limit: Posts per page
        auth_token: JWT token from cookie (optional, enables has_liked)

    Returns:
        One page of posts with like and comment counts
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    return await list_posts_use_case.execute(
        ListPostsRequest(page=page, limit=limit, viewer_id=viewer_id)
    )


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreatePostResponse:
    """Create a new post.

    Requires authentication. A post needs content, an image, or both.

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to create posts",
        )

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=user_id,
                content=request.content,
                image=request.image,
                privacy=request.privacy,
                feeling=request.feeling,
            )
        )
    except NotFoundError as e:
        logfire.warn("Post creation failed - author not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetPostResponse:
    """Get a single post with its like and comment counts.

    Raises:
        HTTPException: If the post does not exist
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        return await get_post_use_case.execute(
            GetPostRequest(post_id=str(post_id), viewer_id=viewer_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
