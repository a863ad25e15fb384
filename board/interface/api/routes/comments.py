"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Response, status
from pydantic import BaseModel

from board.application.usecase.comment import (
    CommentNodeResponse,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
)
from board.domain.error import AuthenticationError
from board.domain.service import JWTService
from board.domain.value import UserId

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)

BEARER_PREFIX = "Bearer "


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    article_id: int
    parent_id: int | None = None  # Parent comment ID for replies


def require_user_id(jwt_service: JWTService, authorization: str | None) -> UserId:
    """Resolve the acting user from a bearer token.

    Args:
        jwt_service: JWT service for token verification
        authorization: Raw Authorization header

    Returns:
        Verified user ID

    Raises:
        AuthenticationError: If the header is missing or the token is invalid
    """
    token = None
    if authorization and authorization.startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()

    user_id = jwt_service.get_user_id_from_token(token)
    if user_id is None:
        raise AuthenticationError("Authentication required")
    return user_id


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Comment on an article or reply to another comment.

    Requires authentication.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header

    Returns:
        Created comment with its path and depth
    """
    user_id = require_user_id(jwt_service, authorization)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            content=request.content,
            author_id=user_id,
            article_id=request.article_id,
            parent_id=request.parent_id,
        )
    )


@router.get("/article/{article_id}", response_model=list[CommentNodeResponse])
async def get_comments(
    article_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> list[CommentNodeResponse]:
    """Get the comment thread of an article.

    Soft-deleted comments that still have replies appear with masked
    content and author.

    Args:
        article_id: Article ID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Root comments with replies nested in ``children``
    """
    return await get_comments_use_case.execute(
        GetCommentsRequest(article_id=article_id)
    )


@router.get("/{comment_id}/replies", response_model=list[CommentNodeResponse])
async def get_replies(
    comment_id: int,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
) -> list[CommentNodeResponse]:
    """Get the thread below a comment."""
    return await get_replies_use_case.execute(GetRepliesRequest(comment_id=comment_id))


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> Response:
    """Delete a comment.

    Only the author can delete. A comment with live replies is masked;
    otherwise it is removed along with any deleted ancestors it was the
    last reply of.

    Args:
        comment_id: Comment ID
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header
    """
    user_id = require_user_id(jwt_service, authorization)
    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
