"""Comment domain service."""

import logfire

from board.config import CommentSettings
from board.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from board.domain.model.comment import Comment
from board.domain.repository import ArticleRepository, CommentRepository
from board.domain.value import ArticleId, CommentId, UserId

from .base import Service
from .comment_tree import CommentNode, build_comment_tree, count_nodes
from .deletion_policy import CommentDeletionPolicy, DeletionOutcome


class CommentService(Service):
    """Domain service for threaded comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
        deletion_policy: CommentDeletionPolicy,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            article_repository: Article repository, used for existence checks
            deletion_policy: Soft/hard delete policy
            comment_settings: Comment limits
        """
        self.comment_repository = comment_repository
        self.article_repository = article_repository
        self.deletion_policy = deletion_policy
        self.comment_settings = comment_settings

    async def create_comment(
        self,
        content: str,
        author_id: UserId,
        article_id: ArticleId,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on an article or reply to another comment.

        Args:
            content: Comment text
            author_id: Author user ID
            article_id: Article ID
            parent_id: Parent comment ID for replies (None for root comments)

        Returns:
            Created comment with path and depth set

        Raises:
            ValidationError: If content is blank or too long, the parent
                belongs to another article, or the reply would be nested
                deeper than allowed
            NotFoundError: If the article or parent comment doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment",
            article_id=article_id,
            author_id=author_id,
            parent_id=parent_id,
        ):
            if not content or not content.strip():
                raise ValidationError("Comment content must not be blank")

            max_length = self.comment_settings.max_content_length
            if len(content) > max_length:
                raise ValidationError(
                    f"Comment content must be at most {max_length} characters"
                )

            if not await self.article_repository.exists(article_id):
                logfire.warn("Article not found", article_id=article_id)
                raise NotFoundError("Article", str(article_id))

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=parent_id,
                        article_id=article_id,
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.article_id != article_id:
                    logfire.error(
                        "Parent comment does not belong to article",
                        parent_id=parent_id,
                        parent_article_id=parent.article_id,
                        target_article_id=article_id,
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this article"
                    )

                max_depth = self.comment_settings.max_depth
                if parent.depth + 1 > max_depth:
                    logfire.warn(
                        "Reply nesting limit reached",
                        parent_id=parent_id,
                        parent_depth=parent.depth,
                    )
                    raise ValidationError(
                        f"Replies can be nested at most {max_depth} levels deep"
                    )

            comment = await self.comment_repository.create(
                content=content,
                author_id=author_id,
                article_id=article_id,
                parent_id=parent_id,
            )
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                article_id=article_id,
                depth=comment.depth,
                path=comment.path,
            )
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.get_comment", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def get_comment_tree(self, article_id: ArticleId) -> list[CommentNode]:
        """Get all comments of an article as a nested tree.

        Every call reads the store afresh; trees are never cached.

        Args:
            article_id: Article ID

        Returns:
            Root comment nodes with replies nested below them
        """
        with logfire.span("comment_service.get_comment_tree", article_id=article_id):
            comments = await self.comment_repository.find_by_article(article_id)
            tree = build_comment_tree(comments)
            self._log_tree("Comment tree built", comments, tree, article_id=article_id)
            return tree

    async def get_reply_tree(self, comment_id: CommentId) -> list[CommentNode]:
        """Get the replies below a comment as a nested tree.

        Args:
            comment_id: Comment whose replies are returned

        Returns:
            Direct reply nodes with their own replies nested below them

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.get_reply_tree", comment_id=comment_id):
            await self.get_comment(comment_id)
            descendants = await self.comment_repository.find_descendants(comment_id)
            tree = build_comment_tree(descendants, root_parent_id=comment_id)
            self._log_tree("Reply tree built", descendants, tree, comment_id=comment_id)
            return tree

    async def delete_comment(
        self, comment_id: CommentId, user_id: UserId
    ) -> DeletionOutcome:
        """Delete a comment on behalf of its author.

        The thread is locked before the policy runs, and the target is
        re-read under the lock in case a concurrent delete removed it.

        Args:
            comment_id: Comment ID
            user_id: Acting user ID (must be the author)

        Returns:
            What the deletion policy did

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the comment's author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=comment_id,
            user_id=user_id,
        ):
            comment = await self.get_comment(comment_id)

            if comment.author_id != user_id:
                logfire.warn(
                    "Comment delete attempted by non-author",
                    comment_id=comment_id,
                    author_id=comment.author_id,
                    user_id=user_id,
                )
                raise NotAuthorizedError(
                    "delete", "comment", str(comment_id), str(user_id)
                )

            await self.comment_repository.lock_thread(comment.article_id)
            locked = await self.comment_repository.find_by_id(comment_id)
            if locked is None:
                logfire.warn("Comment removed concurrently", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            return await self.deletion_policy.apply(locked)

    @staticmethod
    def _log_tree(
        message: str,
        comments: list[Comment],
        tree: list[CommentNode],
        **attributes: object,
    ) -> None:
        visible = count_nodes(tree)
        if visible < len(comments):
            logfire.warn(
                "Orphaned comments left out of tree",
                dropped=len(comments) - visible,
                **attributes,
            )
        logfire.info(message, count=visible, **attributes)
