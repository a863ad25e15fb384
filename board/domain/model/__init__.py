"""Domain model entities for the community board."""

from board.domain.model.article import Article
from board.domain.model.comment import Comment
from board.domain.model.user import User

__all__ = [
    "User",
    "Article",
    "Comment",
]
