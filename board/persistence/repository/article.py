"""PostgreSQL implementation of Article repository."""

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Article
from board.domain.repository import ArticleRepository
from board.domain.value import ArticleId
from board.persistence.mappers import article_to_dict
from board.persistence.tables import articles_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, article_id: ArticleId) -> bool:
        """Check whether an article exists without loading it."""
        stmt = select(exists().where(articles_table.c.id == article_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        article_dict = article_to_dict(article)

        if await self.exists(article.id):
            stmt = (
                articles_table.update()
                .where(articles_table.c.id == article.id)
                .values(**article_dict)
            )
        else:
            stmt = articles_table.insert().values(**article_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return article
