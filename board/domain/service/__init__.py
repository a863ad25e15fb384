"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentNode, build_comment_tree
from .deletion_policy import CommentDeletionPolicy, DeletionOutcome
from .jwt_service import JWTService

__all__ = [
    "CommentDeletionPolicy",
    "CommentNode",
    "CommentService",
    "DeletionOutcome",
    "JWTService",
    "Service",
    "build_comment_tree",
]
