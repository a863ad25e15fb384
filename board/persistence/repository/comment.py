"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.error import ConflictError, NotFoundError
from board.domain.model import Comment
from board.domain.model.comment import (
    DELETED_COMMENT_CONTENT,
    PATH_SEPARATOR,
    path_depth,
)
from board.domain.repository import CommentRepository
from board.domain.value import ArticleId, CommentId, UserId
from board.persistence.mappers import row_to_comment
from board.persistence.tables import comments_table, users_table

# serialization_failure, deadlock_detected
CONFLICT_SQLSTATES = frozenset({"40001", "40P01"})


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Reads join ``users`` to resolve the author's nickname. The join is an
    inner join, so comments whose author row is gone are not returned.

    A statement that loses a race with a concurrent transaction on the same
    rows rolls the session back and raises ``ConflictError``.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt):
        try:
            return await self.session.execute(stmt)
        except DBAPIError as e:
            if getattr(e.orig, "sqlstate", None) not in CONFLICT_SQLSTATES:
                raise
            # The transaction is aborted; nothing is left to commit
            await self.session.rollback()
            raise ConflictError(
                "Comment thread was changed by a concurrent request"
            ) from e

    @staticmethod
    def _select_comments():
        return select(
            comments_table, users_table.c.nickname.label("author_nickname")
        ).select_from(
            comments_table.join(
                users_table, comments_table.c.author_id == users_table.c.id
            )
        )

    def _in_subtree(self, comment: Comment):
        # Segment-aware: prefix "1" must not match "12/40"
        prefix = comment.subtree_prefix
        return (comments_table.c.article_id == comment.article_id) & or_(
            comments_table.c.path == prefix,
            comments_table.c.path.like(f"{prefix}{PATH_SEPARATOR}%"),
        )

    async def create(
        self,
        content: str,
        author_id: UserId,
        article_id: ArticleId,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment with path and depth derived from its parent.

        A reply rewrites its parent row (to the same values) before
        inserting. A delete of the parent that started earlier then fails
        with a serialization error when it locks the thread, instead of
        counting descendants on a snapshot that misses the reply. A delete
        that already holds the lock makes this update wait and then fail
        the same way.
        """
        path = ""
        depth = 0
        if parent_id is not None:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == parent_id)
                .values(updated_at=comments_table.c.updated_at)
                .returning(comments_table.c.id, comments_table.c.path)
            )
            result = await self._execute(stmt)
            parent = result.fetchone()
            if parent is None:
                raise NotFoundError("Comment", str(parent_id))
            path = (
                f"{parent.path}{PATH_SEPARATOR}{parent.id}"
                if parent.path
                else str(parent.id)
            )
            depth = path_depth(path)

        stmt = (
            comments_table.insert()
            .values(
                content=content,
                author_id=author_id,
                article_id=article_id,
                parent_id=parent_id,
                path=path,
                depth=depth,
                is_deleted=False,
            )
            .returning(comments_table.c.id)
        )
        result = await self._execute(stmt)
        comment_id = CommentId(result.scalar_one())
        await self.session.flush()

        comment = await self.find_by_id(comment_id)
        if comment is None:
            raise RuntimeError(f"Comment {comment_id} not readable after insert")
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = self._select_comments().where(comments_table.c.id == comment_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find all comments for an article in tree order."""
        stmt = (
            self._select_comments()
            .where(comments_table.c.article_id == article_id)
            .order_by(comments_table.c.path, comments_table.c.id)
        )
        result = await self._execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_descendants(self, comment_id: CommentId) -> List[Comment]:
        """Find every comment below a comment, in tree order."""
        comment = await self.find_by_id(comment_id)
        if comment is None:
            return []

        stmt = (
            self._select_comments()
            .where(self._in_subtree(comment))
            .order_by(comments_table.c.path, comments_table.c.id)
        )
        result = await self._execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_non_deleted_descendants(self, comment_id: CommentId) -> int:
        """Count descendants that are not soft-deleted."""
        comment = await self.find_by_id(comment_id)
        if comment is None:
            return 0

        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(self._in_subtree(comment))
            .where(comments_table.c.is_deleted.is_(False))
        )
        result = await self._execute(stmt)
        return result.scalar_one()

    async def soft_delete(self, comment_id: CommentId) -> None:
        """Mask a comment, keeping its row and position in the tree."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(
                is_deleted=True,
                content=DELETED_COMMENT_CONTENT,
                updated_at=func.now(),
            )
        )
        await self._execute(stmt)
        await self.session.flush()

    async def hard_delete(self, comment_id: CommentId) -> None:
        """Delete a comment row (no cascade to replies)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self._execute(stmt)
        await self.session.flush()

    async def lock_thread(self, article_id: ArticleId) -> None:
        """Lock every comment row of an article FOR UPDATE.

        Rows are locked in id order so two deletes on one thread queue up
        instead of deadlocking.
        """
        stmt = (
            select(comments_table.c.id)
            .where(comments_table.c.article_id == article_id)
            .order_by(comments_table.c.id)
            .with_for_update()
        )
        result = await self._execute(stmt)
        result.fetchall()
