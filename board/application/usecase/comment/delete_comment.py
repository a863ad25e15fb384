"""Delete comment use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService
from board.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    user_id: int  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response.

    ``purged_ids`` lists hard-deleted comments, the target first and then
    each collapsed ancestor.
    """

    comment_id: int
    soft_deleted: bool
    purged_ids: list[int]


class DeleteCommentUseCase(BaseUseCase):
    """Use case for an author deleting their own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Steps:
        1. Comment service checks existence and authorship
        2. Deletion policy soft-deletes or hard-deletes the comment
        3. Purged ancestors, if any, are reported back

        Args:
            request: Delete comment request

        Returns:
            What was deleted

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the comment's author
        """
        outcome = await self.comment_service.delete_comment(
            comment_id=CommentId(request.comment_id),
            user_id=UserId(request.user_id),
        )
        return DeleteCommentResponse(
            comment_id=request.comment_id,
            soft_deleted=outcome.soft_deleted is not None,
            purged_ids=list(outcome.purged),
        )
