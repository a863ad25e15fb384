"""Comment entity.

Comments are threaded discussions on articles with unlimited depth.
They use a materialized path for descendant queries without recursion:
``path`` holds the slash-joined ids of a comment's strict ancestors, so a
root has ``""``, a reply to comment 1 has ``"1"`` and a reply to that
reply (id 2) has ``"1/2"``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from board.domain.model.common import DomainModel
from board.domain.value import ArticleId, CommentId, UserId

PATH_SEPARATOR = "/"

# Shown in place of masked fields once a comment is soft-deleted
DELETED_COMMENT_CONTENT = "This comment has been deleted."
UNKNOWN_AUTHOR_NICKNAME = "Unknown"


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on an article or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for root comments)
    - path: Ancestor chain, fixed at creation time
    - depth: Number of segments in path (0 for roots)

    A soft-deleted comment (``is_deleted=True``) keeps its row so that its
    descendants stay reachable; its content is replaced by a placeholder.
    """

    id: CommentId
    content: str = Field(min_length=1)
    author_id: UserId
    author_nickname: str
    article_id: ArticleId
    parent_id: Optional[CommentId] = None
    path: str = ""
    depth: int = Field(default=0, ge=0)
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_depth_matches_path(self) -> "Comment":
        """Validate that depth equals the number of path segments."""
        if self.depth != path_depth(self.path):
            raise ValueError(
                f"Depth {self.depth} does not match path '{self.path}'"
            )
        return self

    @property
    def subtree_prefix(self) -> str:
        """Path carried by every direct child of this comment.

        Every descendant's path either equals this prefix or extends it
        with further segments.
        """
        if not self.path:
            return str(self.id)
        return f"{self.path}{PATH_SEPARATOR}{self.id}"


def is_descendant_path(path: str, prefix: str) -> bool:
    """Check whether a path lies under a subtree prefix.

    Matching is done per segment so that prefix ``"1"`` does not claim
    ``"12/40"``.

    Args:
        path: Path of the candidate descendant
        prefix: Subtree prefix of the candidate ancestor

    Returns:
        True if the path belongs to the subtree
    """
    return path == prefix or path.startswith(prefix + PATH_SEPARATOR)


def path_depth(path: str) -> int:
    """Depth implied by a path (number of ancestor segments)."""
    if not path:
        return 0
    return path.count(PATH_SEPARATOR) + 1
