"""Article entity.

Articles are managed by the article collaborator. Comments only need to
know that the article they attach to exists.
"""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import ArticleId, UserId


class Article(DomainModel):
    """Article posted on the board."""

    id: ArticleId
    title: str = Field(min_length=1, max_length=255)
    content: str
    author_id: UserId
    view_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
