"""In-memory article repository for testing."""

from board.domain.model.article import Article
from board.domain.repository.article import ArticleRepository
from board.domain.value import ArticleId


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    async def exists(self, article_id: ArticleId) -> bool:
        """Check whether an article exists."""
        return article_id in self._articles

    async def save(self, article: Article) -> Article:
        """Save an article."""
        self._articles[article.id] = article
        return article
