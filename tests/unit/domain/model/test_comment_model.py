"""Unit tests for the Comment entity and path helpers."""

import pytest
from pydantic import ValidationError

from board.domain.model.comment import Comment, is_descendant_path, path_depth
from tests.conftest import make_comment


class TestCommentPath:
    """Tests for materialized path rules."""

    def test_root_subtree_prefix_is_own_id(self):
        assert make_comment(7).subtree_prefix == "7"

    def test_reply_subtree_prefix_appends_own_id(self):
        assert make_comment(9, parent_id=4, path="1/4").subtree_prefix == "1/4/9"

    def test_depth_must_match_path(self):
        """Depth disagreeing with the path should be rejected."""
        comment = make_comment(2, parent_id=1, path="1")

        with pytest.raises(ValidationError):
            Comment.model_validate({**comment.model_dump(), "depth": 3})

    def test_empty_content_is_rejected(self):
        with pytest.raises(ValidationError):
            Comment.model_validate({**make_comment(1).model_dump(), "content": ""})

    @pytest.mark.parametrize(
        "path,expected",
        [("", 0), ("1", 1), ("1/2", 2), ("10/20/30", 3)],
    )
    def test_path_depth(self, path, expected):
        assert path_depth(path) == expected

    @pytest.mark.parametrize(
        "path,prefix,expected",
        [
            ("1", "1", True),
            ("1/2", "1", True),
            ("1/2/3", "1/2", True),
            ("12", "1", False),
            ("12/40", "1", False),
            ("", "1", False),
            ("1/23", "1/2", False),
        ],
    )
    def test_descendant_matching_is_per_segment(self, path, prefix, expected):
        assert is_descendant_path(path, prefix) is expected

    def test_comment_is_immutable(self):
        comment = make_comment(1)

        with pytest.raises(ValidationError):
            comment.is_deleted = True
