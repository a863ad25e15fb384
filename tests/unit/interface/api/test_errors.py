"""Unit tests for the HTTP error mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from board.domain.error import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from board.interface.api.errors import register_error_handlers


def client_raising(error: DomainError) -> TestClient:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    async def boom():
        raise error

    return TestClient(app)


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (NotFoundError("Comment", "1"), 404),
        (ValidationError("bad"), 400),
        (NotAuthorizedError("delete", "comment", "1", "2"), 403),
        (AuthenticationError("no token"), 401),
        (ConflictError("raced"), 409),
    ],
)
def test_domain_errors_map_to_status(error, status_code):
    # Act
    response = client_raising(error).get("/boom")

    # Assert
    assert response.status_code == status_code
    body = response.json()
    assert body["status"] == status_code
    assert body["message"] == str(error)
