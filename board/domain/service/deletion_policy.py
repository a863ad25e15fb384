"""Comment deletion policy.

A comment row exists only while it is visible content or while it still
has at least one live descendant to keep reachable. Deleting a comment
therefore either masks it (soft delete) or removes it (hard delete), and a
hard delete may in turn purge a chain of already soft-deleted ancestors
that no longer hold up anything.
"""

from dataclasses import dataclass, field

import logfire

from board.domain.model.comment import Comment
from board.domain.repository import CommentRepository
from board.domain.value import CommentId

from .base import Service


@dataclass
class DeletionOutcome:
    """What a delete did to the store.

    Attributes:
        soft_deleted: ID of the comment that was masked, if any
        purged: IDs of hard-deleted comments, the target first and then
            each collapsed ancestor from nearest to farthest
    """

    soft_deleted: CommentId | None = None
    purged: list[CommentId] = field(default_factory=list)


class CommentDeletionPolicy(Service):
    """Decides between soft and hard delete and collapses orphaned ancestors.

    Callers must hold the thread lock (``CommentRepository.lock_thread``)
    inside the same transaction so that every count and the delete it
    justifies are not interleaved with another delete on the thread.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize deletion policy.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def apply(self, comment: Comment) -> DeletionOutcome:
        """Delete a comment according to the policy.

        Steps:
        1. Count non-deleted descendants of the target
        2. If any: soft-delete the target and stop
        3. Otherwise: hard-delete the target, then walk up through parents
           that are already soft-deleted, purging each one whose subtree no
           longer holds a live comment. Stop at the first live parent, at a
           parent that still has live descendants, or at the root.

        Args:
            comment: The comment to delete, as read under the thread lock

        Returns:
            Outcome listing the masked and purged comment IDs
        """
        with logfire.span(
            "comment_deletion_policy.apply",
            comment_id=comment.id,
            article_id=comment.article_id,
        ):
            repository = self.comment_repository
            outcome = DeletionOutcome()

            live = await repository.count_non_deleted_descendants(comment.id)
            if live > 0:
                await repository.soft_delete(comment.id)
                outcome.soft_deleted = comment.id
                logfire.info(
                    "Comment soft-deleted",
                    comment_id=comment.id,
                    live_descendants=live,
                )
                return outcome

            await repository.hard_delete(comment.id)
            outcome.purged.append(comment.id)

            parent_id = comment.parent_id
            while parent_id is not None:
                parent = await repository.find_by_id(parent_id)
                if parent is None or not parent.is_deleted:
                    break

                remaining = await repository.count_non_deleted_descendants(parent.id)
                if remaining > 0:
                    break

                await repository.hard_delete(parent.id)
                outcome.purged.append(parent.id)
                parent_id = parent.parent_id

            logfire.info(
                "Comment hard-deleted",
                comment_id=comment.id,
                purged=outcome.purged,
                collapsed_ancestors=len(outcome.purged) - 1,
            )
            return outcome
