"""Domain value objects for the community board."""

from board.domain.value.identifiers import ArticleId, CommentId, UserId

__all__ = [
    "UserId",
    "ArticleId",
    "CommentId",
]
