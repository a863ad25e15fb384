"""Article repository interface."""

from abc import ABC, abstractmethod

from board.domain.model.article import Article
from board.domain.value import ArticleId


class ArticleRepository(ABC):
    """Repository for Article entity.

    The comment core only asks whether an article exists; saving serves
    the article collaborator and test seeding.
    """

    @abstractmethod
    async def exists(self, article_id: ArticleId) -> bool:
        """Check whether an article exists.

        Args:
            article_id: The article's unique identifier

        Returns:
            True if the article exists
        """
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update).

        Args:
            article: The article to save

        Returns:
            The saved article
        """
        pass
