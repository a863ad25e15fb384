"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's imperative mapping.
"""

from typing import Any, Dict

from board.domain.model import Article, Comment, User
from board.domain.value import ArticleId, CommentId, UserId


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        email=row["email"],
        nickname=row["nickname"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert a comment row joined with its author's nickname.

    Args:
        row: Database row as dict, carrying an ``author_nickname`` column

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(row["id"]),
        content=row["content"],
        author_id=UserId(row["author_id"]),
        author_nickname=row["author_nickname"],
        article_id=ArticleId(row["article_id"]),
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        path=row["path"] or "",
        depth=row["depth"],
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "email": user.email,
        "nickname": user.nickname,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict."""
    return {
        "id": article.id,
        "title": article.title,
        "content": article.content,
        "author_id": article.author_id,
        "view_count": article.view_count,
        "created_at": article.created_at,
        "updated_at": article.updated_at,
    }
