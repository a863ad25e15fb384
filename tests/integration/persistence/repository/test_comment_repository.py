"""Integration tests for PostgresCommentRepository.

Needs a migrated PostgreSQL database at ``DATABASE__URL``. Every test runs
in its own transaction that is rolled back afterwards.
"""

import pytest
import pytest_asyncio

from board.config import Settings
from board.domain.model.comment import DELETED_COMMENT_CONTENT
from board.domain.service import CommentDeletionPolicy
from board.domain.value import ArticleId, UserId
from board.persistence.database import create_engine, create_session_factory
from board.persistence.repository import (
    PostgresArticleRepository,
    PostgresCommentRepository,
    PostgresUserRepository,
)
from tests.conftest import make_article, make_user

pytestmark = pytest.mark.integration

# High IDs keep seeded rows clear of anything created through sequences
AUTHOR = UserId(900001)
ARTICLE = ArticleId(900001)


@pytest_asyncio.fixture
async def session():
    engine = create_engine(Settings())
    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()
    await engine.dispose()


@pytest_asyncio.fixture
async def repository(session):
    await PostgresUserRepository(session).save(make_user(AUTHOR, nickname="alice"))
    await PostgresArticleRepository(session).save(
        make_article(ARTICLE, author_id=AUTHOR)
    )
    return PostgresCommentRepository(session)


class TestPostgresCommentRepository:
    """Store behaviour against a real database."""

    @pytest.mark.asyncio
    async def test_create_derives_path_and_joins_nickname(self, repository):
        # Act
        root = await repository.create("a", AUTHOR, ARTICLE)
        child = await repository.create("b", AUTHOR, ARTICLE, root.id)
        grandchild = await repository.create("c", AUTHOR, ARTICLE, child.id)

        # Assert
        assert (root.path, root.depth) == ("", 0)
        assert (child.path, child.depth) == (str(root.id), 1)
        assert grandchild.path == f"{root.id}/{child.id}"
        assert grandchild.depth == 2
        assert grandchild.author_nickname == "alice"

    @pytest.mark.asyncio
    async def test_find_by_article_in_tree_order(self, repository):
        # Arrange
        first = await repository.create("a", AUTHOR, ARTICLE)
        second = await repository.create("b", AUTHOR, ARTICLE)
        reply = await repository.create("c", AUTHOR, ARTICLE, first.id)

        # Act
        comments = await repository.find_by_article(ARTICLE)

        # Assert
        ids = [c.id for c in comments]
        assert ids.index(first.id) < ids.index(reply.id)
        assert ids.index(first.id) < ids.index(second.id)

    @pytest.mark.asyncio
    async def test_descendants_and_counts(self, repository):
        # Arrange
        root = await repository.create("a", AUTHOR, ARTICLE)
        child = await repository.create("b", AUTHOR, ARTICLE, root.id)
        grandchild = await repository.create("c", AUTHOR, ARTICLE, child.id)
        await repository.create("unrelated", AUTHOR, ARTICLE)

        # Act
        await repository.soft_delete(child.id)

        # Assert
        descendants = await repository.find_descendants(root.id)
        assert [c.id for c in descendants] == [child.id, grandchild.id]
        assert await repository.count_non_deleted_descendants(root.id) == 1
        masked = await repository.find_by_id(child.id)
        assert masked.is_deleted is True
        assert masked.content == DELETED_COMMENT_CONTENT

    @pytest.mark.asyncio
    async def test_policy_collapses_chain_under_thread_lock(self, repository):
        # Arrange
        policy = CommentDeletionPolicy(repository)
        root = await repository.create("a", AUTHOR, ARTICLE)
        child = await repository.create("b", AUTHOR, ARTICLE, root.id)
        await repository.soft_delete(root.id)

        # Act
        await repository.lock_thread(ARTICLE)
        outcome = await policy.apply(await repository.find_by_id(child.id))

        # Assert
        assert outcome.purged == [child.id, root.id]
        assert await repository.find_by_article(ARTICLE) == []
