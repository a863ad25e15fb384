"""Create comment use case."""

from datetime import datetime

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.model import Comment
from board.domain.service import CommentService
from board.domain.value import ArticleId, CommentId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    content: str
    author_id: int  # User ID from authenticated user
    article_id: int
    parent_id: int | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    id: int
    content: str
    author_id: int
    author_nickname: str
    article_id: int
    parent_id: int | None
    path: str
    depth: int
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CreateCommentResponse":
        return cls(
            id=comment.id,
            content=comment.content,
            author_id=comment.author_id,
            author_nickname=comment.author_nickname,
            article_id=comment.article_id,
            parent_id=comment.parent_id,
            path=comment.path,
            depth=comment.depth,
            is_deleted=comment.is_deleted,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an article or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The stored comment, with its path and depth

        Raises:
            ValidationError: If content is invalid or the parent is in
                another article
            NotFoundError: If the article or parent comment doesn't exist
        """
        comment = await self.comment_service.create_comment(
            content=request.content,
            author_id=UserId(request.author_id),
            article_id=ArticleId(request.article_id),
            parent_id=(
                CommentId(request.parent_id) if request.parent_id is not None else None
            ),
        )
        return CreateCommentResponse.from_domain(comment)
