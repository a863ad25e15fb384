"""Get comment tree use cases."""

from datetime import datetime

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentNode, CommentService
from board.domain.value import ArticleId, CommentId


class CommentNodeResponse(BaseModel):
    """Comment tree node for API response.

    Recursive structure mirroring the domain node. Content and nickname of
    soft-deleted comments are already masked.
    """

    id: int
    content: str
    author_id: int
    author_nickname: str
    parent_id: int | None
    depth: int
    is_deleted: bool
    created_at: datetime
    children: list["CommentNodeResponse"]

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentNodeResponse":
        """Convert domain CommentNode to response model.

        Nodes are converted children first with an explicit stack, so deep
        threads do not run into the interpreter's recursion limit.

        Args:
            node: Domain comment node

        Returns:
            API response model with all descendants converted
        """
        converted: dict[int, CommentNodeResponse] = {}
        stack = [(node, False)]
        while stack:
            current, children_done = stack.pop()
            if not children_done:
                stack.append((current, True))
                stack.extend((child, False) for child in current.children)
                continue
            converted[current.id] = cls(
                id=current.id,
                content=current.content,
                author_id=current.author_id,
                author_nickname=current.author_nickname,
                parent_id=current.parent_id,
                depth=current.depth,
                is_deleted=current.is_deleted,
                created_at=current.created_at,
                children=[converted.pop(child.id) for child in current.children],
            )
        return converted[node.id]


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    article_id: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading an article's whole comment thread."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> list[CommentNodeResponse]:
        """Execute get comments flow.

        An article without comments (or one that doesn't exist) yields an
        empty list.

        Args:
            request: Get comments request

        Returns:
            Root comment nodes, replies nested below them
        """
        tree = await self.comment_service.get_comment_tree(
            ArticleId(request.article_id)
        )
        return [CommentNodeResponse.from_domain(node) for node in tree]


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: int


class GetRepliesUseCase(BaseUseCase):
    """Use case for reading the thread below a single comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetRepliesRequest) -> list[CommentNodeResponse]:
        """Execute get replies flow.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        tree = await self.comment_service.get_reply_tree(
            CommentId(request.comment_id)
        )
        return [CommentNodeResponse.from_domain(node) for node in tree]
