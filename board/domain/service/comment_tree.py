"""Comment tree builder.

Turns the flat, path-ordered comment list of one article into nested
nodes. Pure and stateless: the same input always yields the same output
and the input comments are never modified.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence

from board.domain.model.comment import (
    DELETED_COMMENT_CONTENT,
    UNKNOWN_AUTHOR_NICKNAME,
    Comment,
)
from board.domain.value import CommentId, UserId


@dataclass
class CommentNode:
    """Node in a comment thread as shown to readers.

    Content and nickname are already masked for soft-deleted comments.
    """

    id: CommentId
    content: str
    author_id: UserId
    author_nickname: str
    parent_id: Optional[CommentId]
    depth: int
    is_deleted: bool
    created_at: datetime
    children: list["CommentNode"] = field(default_factory=list)


def to_node(comment: Comment) -> CommentNode:
    """Convert a comment into a childless node, masking deleted content."""
    return CommentNode(
        id=comment.id,
        content=DELETED_COMMENT_CONTENT if comment.is_deleted else comment.content,
        author_id=comment.author_id,
        author_nickname=(
            UNKNOWN_AUTHOR_NICKNAME if comment.is_deleted else comment.author_nickname
        ),
        parent_id=comment.parent_id,
        depth=comment.depth,
        is_deleted=comment.is_deleted,
        created_at=comment.created_at,
    )


def build_comment_tree(
    comments: Sequence[Comment],
    root_parent_id: Optional[CommentId] = None,
) -> list[CommentNode]:
    """Build a forest of comment nodes nested by parent.

    Steps:
    1. Partition comments into top-level ones and a parent -> replies map,
       keeping input order inside every bucket
    2. Walk down from each top-level comment with an explicit stack,
       attaching replies in input order

    Comments whose parent is not part of the input are never reached and
    so are left out of the result.

    Args:
        comments: Comments of one article, ordered by (path, id)
        root_parent_id: Parent ID of the top-level nodes. None builds the
            whole article thread; a comment ID builds the thread below it.

    Returns:
        Top-level nodes with replies attached
    """
    top_level: list[Comment] = []
    replies: dict[CommentId, list[Comment]] = defaultdict(list)

    for comment in comments:
        if comment.parent_id == root_parent_id:
            top_level.append(comment)
        elif comment.parent_id is not None:
            replies[comment.parent_id].append(comment)

    forest = [to_node(comment) for comment in top_level]
    stack = list(zip(top_level, forest))
    while stack:
        comment, node = stack.pop()
        for reply in replies.get(comment.id, ()):
            child = to_node(reply)
            node.children.append(child)
            stack.append((reply, child))

    return forest


def count_nodes(nodes: Sequence[CommentNode]) -> int:
    """Count every node in a forest."""
    total = 0
    stack = list(nodes)
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(node.children)
    return total
