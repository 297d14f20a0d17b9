"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from natter.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentThreadRequest,
    GetCommentThreadResponse,
    GetCommentThreadUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    GetRootCommentsRequest,
    GetRootCommentsResponse,
    GetRootCommentsUseCase,
    ValidateCommentTreeRequest,
    ValidateCommentTreeResponse,
    ValidateCommentTreeUseCase,
)
from natter.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from natter.domain.service import JWTService
from natter.domain.value import CommentSort

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: UUID | None = None  # Parent comment ID for replies


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    sort: CommentSort = CommentSort.NEWEST,
    page: int = 1,
    limit: int | None = None,
    content: str | None = None,
    author: str | None = None,
    min_likes: int | None = Query(default=None, ge=0),
    stats: bool = False,
    auth_token: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """Get the threaded comments of a post.

    Comments are filtered, sorted at every level and paginated by root
    comment. Replies are nested under their parents.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI
        jwt_service: JWT service (injected)
        sort: newest, oldest, mostLiked or mostReplies
        page: 1-indexed page of root comments
        limit: Root comments per page (configured default when omitted)
        content: Case-insensitive substring filter on comment text
        author: Case-insensitive substring filter on author name
        min_likes: Minimum like count
        stats: Include tree statistics
        auth_token: JWT token from cookie (optional, enables has_liked)

    Returns:
        Comment tree page with pagination metadata

    Raises:
        HTTPException: If the post is missing or pagination is malformed
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(
                post_id=str(post_id),
                sort=sort,
                page=page,
                limit=limit,
                content=content,
                author=author,
                min_likes=min_likes,
                include_stats=stats,
                viewer_id=viewer_id,
            )
        )
    except NotFoundError as e:
        logfire.warn("Comments requested for missing post", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        logfire.warn("Invalid comment pagination", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error loading comments", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load comments",
        )


@router.get("/posts/{post_id}/comments/roots", response_model=GetRootCommentsResponse)
async def get_root_comments(
    post_id: UUID,
    get_root_comments_use_case: FromDishka[GetRootCommentsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
) -> GetRootCommentsResponse:
    """Get a page of a post's root comments, newest first, without replies."""
    try:
        return await get_root_comments_use_case.execute(
            GetRootCommentsRequest(post_id=str(post_id), page=page, limit=limit)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get(
    "/posts/{post_id}/comments/integrity", response_model=ValidateCommentTreeResponse
)
async def validate_comment_tree(
    post_id: UUID,
    validate_comment_tree_use_case: FromDishka[ValidateCommentTreeUseCase],
) -> ValidateCommentTreeResponse:
    """Check a post's comment tree for structural problems.

    Problems are reported in the body; the request itself succeeds.
    """
    try:
        return await validate_comment_tree_use_case.execute(
            ValidateCommentTreeRequest(post_id=str(post_id))
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to create comments",
        )

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(post_id),
                content=request.content,
                author_id=user_id,
                parent_id=str(request.parent_id) if request.parent_id else None,
            )
        )
    except NotFoundError as e:
        logfire.warn("Comment creation failed - not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        logfire.warn("Comment creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


@router.get("/comments/{comment_id}/replies", response_model=GetRepliesResponse)
async def get_replies(
    comment_id: UUID,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
) -> GetRepliesResponse:
    """Get a page of a comment's direct replies, oldest first."""
    try:
        return await get_replies_use_case.execute(
            GetRepliesRequest(comment_id=str(comment_id), page=page, limit=limit)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/comments/{comment_id}/thread", response_model=GetCommentThreadResponse)
async def get_comment_thread(
    comment_id: UUID,
    get_comment_thread_use_case: FromDishka[GetCommentThreadUseCase],
    max_depth: int | None = Query(default=None, ge=0),
    collapse_after_depth: int | None = Query(default=None, ge=0),
) -> GetCommentThreadResponse:
    """Get a comment's subtree as display rows plus its ancestor path.

    Args:
        comment_id: Comment UUID
        get_comment_thread_use_case: Thread use case from DI
        max_depth: Deepest level to render (configured default when omitted)
        collapse_after_depth: Depth beyond which rows are collapsed

    Returns:
        Ancestor path and flattened display rows
    """
    try:
        return await get_comment_thread_use_case.execute(
            GetCommentThreadRequest(
                comment_id=str(comment_id),
                max_depth=max_depth,
                collapse_after_depth=collapse_after_depth,
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and every reply below it.

    Only the author may delete a comment. Likes on all deleted comments are
    removed as well.

    Raises:
        HTTPException: If not authenticated, not the author, or not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete comments",
        )

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=str(comment_id), user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Comment delete rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error deleting comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment",
        )
