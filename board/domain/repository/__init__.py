"""Repository interfaces for the board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from board.domain.repository.article import ArticleRepository
from board.domain.repository.comment import CommentRepository
from board.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ArticleRepository",
    "CommentRepository",
]
