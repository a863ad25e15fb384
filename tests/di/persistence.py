"""Mock persistence providers for testing."""

from dishka import Scope, provide

from board.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from board.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryCommentRepository,
    InMemoryUserRepository,
)
from board.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that state survives across requests
    served by one container. Each test builds its own container, which
    keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_article_repository(self) -> ArticleRepository:
        """Provide in-memory article repository."""
        return InMemoryArticleRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(
        self, user_repository: UserRepository
    ) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(user_repository=user_repository)
