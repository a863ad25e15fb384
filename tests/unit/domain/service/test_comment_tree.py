"""Unit tests for the comment tree builder."""

from board.domain.model.comment import (
    DELETED_COMMENT_CONTENT,
    UNKNOWN_AUTHOR_NICKNAME,
)
from board.domain.service.comment_tree import (
    CommentNode,
    build_comment_tree,
    count_nodes,
)
from tests.conftest import make_comment


def flatten(nodes: list[CommentNode]) -> list[CommentNode]:
    result = []
    for node in nodes:
        result.append(node)
        result.extend(flatten(node.children))
    return result


class TestBuildCommentTree:
    """Tests for build_comment_tree."""

    def test_empty_input_gives_empty_forest(self):
        """No comments should give no nodes."""
        assert build_comment_tree([]) == []

    def test_single_chain_nests_replies(self):
        """A -> B -> C should nest as A{B{C}}."""
        # Arrange
        comments = [
            make_comment(1),
            make_comment(2, parent_id=1, path="1"),
            make_comment(3, parent_id=2, path="1/2"),
        ]

        # Act
        tree = build_comment_tree(comments)

        # Assert
        assert [node.id for node in tree] == [1]
        assert [node.id for node in tree[0].children] == [2]
        assert [node.id for node in tree[0].children[0].children] == [3]
        assert tree[0].children[0].children[0].children == []

    def test_siblings_keep_input_order(self):
        """Replies should appear in the order the store returned them."""
        # Arrange
        comments = [
            make_comment(1),
            make_comment(4),
            make_comment(2, parent_id=1, path="1"),
            make_comment(3, parent_id=1, path="1"),
            make_comment(5, parent_id=4, path="4"),
        ]

        # Act
        tree = build_comment_tree(comments)

        # Assert
        assert [node.id for node in tree] == [1, 4]
        assert [node.id for node in tree[0].children] == [2, 3]
        assert [node.id for node in tree[1].children] == [5]

    def test_round_trip_preserves_every_comment(self):
        """Flattening the forest should give back every input comment."""
        # Arrange
        comments = [
            make_comment(1),
            make_comment(2, parent_id=1, path="1"),
            make_comment(3, parent_id=1, path="1"),
            make_comment(4, parent_id=2, path="1/2"),
            make_comment(5),
            make_comment(6, parent_id=5, path="5"),
        ]

        # Act
        tree = build_comment_tree(comments)

        # Assert
        flat = flatten(tree)
        assert len(flat) == len(comments) == count_nodes(tree)
        for node in flat:
            expected = [c.id for c in comments if c.parent_id == node.id]
            assert [child.id for child in node.children] == expected

    def test_soft_deleted_comment_is_masked(self):
        """Deleted comments should show placeholder content and author."""
        # Arrange
        comments = [
            make_comment(1, is_deleted=True, content="secret"),
            make_comment(2, parent_id=1, path="1"),
        ]

        # Act
        tree = build_comment_tree(comments)

        # Assert
        root = tree[0]
        assert root.is_deleted is True
        assert root.content == DELETED_COMMENT_CONTENT
        assert root.author_nickname == UNKNOWN_AUTHOR_NICKNAME
        assert root.author_id == 1
        assert root.children[0].content == "comment 2"
        assert root.children[0].author_nickname == "user1"

    def test_masking_is_idempotent(self):
        """Building twice from the same input should give identical output."""
        # Arrange
        comments = [
            make_comment(1, is_deleted=True, content="secret"),
            make_comment(2, parent_id=1, path="1"),
        ]

        # Act
        first = build_comment_tree(comments)
        second = build_comment_tree(comments)

        # Assert
        assert first == second
        assert comments[0].content == "secret"

    def test_orphaned_reply_is_left_out(self):
        """A reply whose parent is missing from the input is not reachable."""
        # Arrange
        comments = [
            make_comment(1),
            make_comment(3, parent_id=2, path="1/2"),
        ]

        # Act
        tree = build_comment_tree(comments)

        # Assert
        assert [node.id for node in flatten(tree)] == [1]

    def test_subtree_uses_given_root_parent(self):
        """Building below a comment should make its replies top-level."""
        # Arrange
        descendants = [
            make_comment(2, parent_id=1, path="1"),
            make_comment(3, parent_id=2, path="1/2"),
            make_comment(4, parent_id=1, path="1"),
        ]

        # Act
        tree = build_comment_tree(descendants, root_parent_id=1)

        # Assert
        assert [node.id for node in tree] == [2, 4]
        assert [node.id for node in tree[0].children] == [3]

    def test_deep_thread_does_not_recurse(self):
        """Very deep chains should build without hitting the recursion limit."""
        # Arrange
        comments = [make_comment(1)]
        path = ""
        for comment_id in range(2, 3002):
            parent_id = comment_id - 1
            path = f"{path}/{parent_id}" if path else str(parent_id)
            comments.append(make_comment(comment_id, parent_id=parent_id, path=path))

        # Act
        tree = build_comment_tree(comments)

        # Assert
        assert count_nodes(tree) == 3001
