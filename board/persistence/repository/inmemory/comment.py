"""In-memory comment repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional

from board.domain.error import NotFoundError
from board.domain.model.comment import (
    DELETED_COMMENT_CONTENT,
    Comment,
    is_descendant_path,
    path_depth,
)
from board.domain.repository.comment import CommentRepository
from board.domain.repository.user import UserRepository
from board.domain.value import ArticleId, CommentId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Author nicknames are resolved from the user repository on every read,
    and comments whose author is unknown are skipped like an inner join.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)
        self._user_repository = user_repository

    async def _resolve(self, comment: Comment) -> Optional[Comment]:
        author = await self._user_repository.find_by_id(comment.author_id)
        if author is None:
            return None
        return comment.model_copy(update={"author_nickname": author.nickname})

    async def _resolve_all(self, comments: list[Comment]) -> list[Comment]:
        comments.sort(key=lambda c: (c.path, c.id))
        resolved = [await self._resolve(c) for c in comments]
        return [c for c in resolved if c is not None]

    def _subtree(self, comment: Comment) -> list[Comment]:
        prefix = comment.subtree_prefix
        return [
            c
            for c in self._comments.values()
            if c.article_id == comment.article_id
            and is_descendant_path(c.path, prefix)
        ]

    async def create(
        self,
        content: str,
        author_id: UserId,
        article_id: ArticleId,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment with path and depth derived from its parent."""
        path = ""
        if parent_id is not None:
            parent = self._comments.get(parent_id)
            if parent is None:
                raise NotFoundError("Comment", str(parent_id))
            path = parent.subtree_prefix

        author = await self._user_repository.find_by_id(author_id)
        if author is None:
            raise NotFoundError("User", str(author_id))

        now = datetime.now()
        comment = Comment(
            id=CommentId(next(self._ids)),
            content=content,
            author_id=author_id,
            author_nickname=author.nickname,
            article_id=article_id,
            parent_id=parent_id,
            path=path,
            depth=path_depth(path),
            created_at=now,
            updated_at=now,
        )
        self._comments[comment.id] = comment
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        return await self._resolve(comment)

    async def find_by_article(self, article_id: ArticleId) -> list[Comment]:
        """Find all comments for an article in tree order."""
        comments = [c for c in self._comments.values() if c.article_id == article_id]
        return await self._resolve_all(comments)

    async def find_descendants(self, comment_id: CommentId) -> list[Comment]:
        """Find every comment below a comment, in tree order."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return []
        return await self._resolve_all(self._subtree(comment))

    async def count_non_deleted_descendants(self, comment_id: CommentId) -> int:
        """Count descendants that are not soft-deleted."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return 0
        return sum(1 for c in self._subtree(comment) if not c.is_deleted)

    async def soft_delete(self, comment_id: CommentId) -> None:
        """Mask a comment in place."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return
        self._comments[comment_id] = comment.model_copy(
            update={
                "is_deleted": True,
                "content": DELETED_COMMENT_CONTENT,
                "updated_at": datetime.now(),
            }
        )

    async def hard_delete(self, comment_id: CommentId) -> None:
        """Remove a comment (no cascade to replies)."""
        self._comments.pop(comment_id, None)

    async def lock_thread(self, article_id: ArticleId) -> None:
        """No-op: there are no transactions to hold locks in."""
