"""Unit tests for PostgresCommentRepository error translation.

The session is replaced by a stub, so no database is needed.
"""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import DBAPIError

from board.domain.error import ConflictError
from board.domain.value import ArticleId, UserId
from board.persistence.repository import PostgresCommentRepository


class DriverError(Exception):
    """Driver exception carrying a PostgreSQL SQLSTATE."""

    def __init__(self, sqlstate: str) -> None:
        super().__init__(f"sqlstate {sqlstate}")
        self.sqlstate = sqlstate


class FailingSession:
    """Session whose every statement fails with the given SQLSTATE."""

    def __init__(self, sqlstate: str) -> None:
        self.sqlstate = sqlstate
        self.rolled_back = False

    async def execute(self, stmt):
        raise DBAPIError(str(stmt), {}, DriverError(self.sqlstate))

    async def rollback(self):
        self.rolled_back = True


class ScriptedResult:
    def __init__(self, value=None):
        self.value = value

    def scalar_one(self):
        return self.value

    def fetchone(self):
        return None


class InsertOnlySession:
    """Session whose insert succeeds but whose reads find nothing."""

    def __init__(self) -> None:
        self.results = [ScriptedResult(7), ScriptedResult()]

    async def execute(self, stmt):
        return self.results.pop(0)

    async def flush(self):
        pass


class TestConflictTranslation:
    """Lost races surface as ConflictError after a rollback."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("sqlstate", ["40001", "40P01"])
    async def test_lost_race_becomes_conflict(self, sqlstate):
        # Arrange
        session = FailingSession(sqlstate)
        repository = PostgresCommentRepository(session)

        # Act & Assert
        with pytest.raises(ConflictError):
            await repository.lock_thread(ArticleId(1))
        assert session.rolled_back is True

    @pytest.mark.asyncio
    async def test_other_database_errors_propagate(self):
        # Arrange
        session = FailingSession("23505")
        repository = PostgresCommentRepository(session)

        # Act & Assert
        with pytest.raises(DBAPIError):
            await repository._execute(select(1))
        assert session.rolled_back is False


class TestCreateReadBack:
    """A comment that vanishes right after insert is an internal failure."""

    @pytest.mark.asyncio
    async def test_unreadable_insert_is_not_a_domain_error(self):
        # Arrange
        repository = PostgresCommentRepository(InsertOnlySession())

        # Act & Assert
        with pytest.raises(RuntimeError):
            await repository.create("hi", UserId(1), ArticleId(1))
