"""Test configuration and fixtures."""

import logfire

from board.domain.model import Article, Comment, User
from board.domain.repository import ArticleRepository, UserRepository
from board.domain.value import ArticleId, CommentId, UserId

# Keep telemetry local: no console noise and nothing sent to the cloud
logfire.configure(send_to_logfire=False, console=False)


def make_user(user_id: int = 1, nickname: str | None = None) -> User:
    """Helper to build a user with a predictable email and nickname."""
    return User(
        id=UserId(user_id),
        email=f"user{user_id}@example.com",
        nickname=nickname or f"user{user_id}",
    )


def make_article(article_id: int = 1, author_id: int = 1) -> Article:
    """Helper to build an article owned by ``author_id``."""
    return Article(
        id=ArticleId(article_id),
        title=f"Article {article_id}",
        content="Body",
        author_id=UserId(author_id),
    )


def make_comment(
    comment_id: int,
    parent_id: int | None = None,
    path: str = "",
    article_id: int = 1,
    author_id: int = 1,
    is_deleted: bool = False,
    content: str | None = None,
) -> Comment:
    """Helper to build a stored-looking comment without a repository."""
    return Comment(
        id=CommentId(comment_id),
        content=content or f"comment {comment_id}",
        author_id=UserId(author_id),
        author_nickname=f"user{author_id}",
        article_id=ArticleId(article_id),
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        path=path,
        depth=len(path.split("/")) if path else 0,
        is_deleted=is_deleted,
    )


async def seed_board(
    user_repository: UserRepository,
    article_repository: ArticleRepository,
    user_ids: tuple[int, ...] = (1, 2),
    article_ids: tuple[int, ...] = (1,),
) -> None:
    """Save users and articles that comments can reference."""
    for user_id in user_ids:
        await user_repository.save(make_user(user_id))
    for article_id in article_ids:
        await article_repository.save(make_article(article_id, author_id=user_ids[0]))
