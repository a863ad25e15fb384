"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.comment import Comment
from board.domain.value import ArticleId, CommentId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity (the comment store).

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.

    Reads return comments with the author's nickname resolved.
    Deletes never cascade: callers must not orphan live replies.
    """

    @abstractmethod
    async def create(
        self,
        content: str,
        author_id: UserId,
        article_id: ArticleId,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment.

        Path and depth are derived from the parent before insertion.

        Args:
            content: Comment text
            author_id: Author user ID
            article_id: Article the comment belongs to
            parent_id: Parent comment ID for replies (None for roots)

        Returns:
            The stored comment, read back from the store

        Raises:
            NotFoundError: If the parent comment does not exist
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find all comments for an article in tree order.

        Ordered by ``(path, id)`` so that a parent always precedes its
        replies and siblings keep their creation order.

        Args:
            article_id: The article ID

        Returns:
            List of comments, soft-deleted ones included
        """
        pass

    @abstractmethod
    async def find_descendants(self, comment_id: CommentId) -> List[Comment]:
        """Find every comment in the subtree below a comment.

        Args:
            comment_id: The subtree root

        Returns:
            Descendants in tree order; empty if the comment does not exist
        """
        pass

    @abstractmethod
    async def count_non_deleted_descendants(self, comment_id: CommentId) -> int:
        """Count descendants that are not soft-deleted.

        Args:
            comment_id: The subtree root

        Returns:
            Number of non-deleted descendants; 0 if the comment does not exist
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId) -> None:
        """Mark a comment deleted and replace its content with a placeholder.

        Args:
            comment_id: The comment ID
        """
        pass

    @abstractmethod
    async def hard_delete(self, comment_id: CommentId) -> None:
        """Physically remove a comment row.

        Args:
            comment_id: The comment ID
        """
        pass

    @abstractmethod
    async def lock_thread(self, article_id: ArticleId) -> None:
        """Lock every comment of an article until the transaction ends.

        Serializes delete decisions made on the same thread.

        Args:
            article_id: The article whose comments are locked
        """
        pass
