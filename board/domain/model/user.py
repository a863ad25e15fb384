"""User entity.

Users are owned by the account collaborator; the comment core only reads
them to resolve author nicknames.
"""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import UserId


class User(DomainModel):
    """Registered board member."""

    id: UserId
    email: str = Field(min_length=3, max_length=255)
    nickname: str = Field(min_length=1, max_length=100)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
