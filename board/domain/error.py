"""Domain layer errors.

Every error carries a ``kind`` tag from ``ErrorKind``. The interface layer
maps the tag to an HTTP status, so new error classes only need to pick a
kind.
"""

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Categories of recoverable failures surfaced to clients."""

    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    FORBIDDEN = "forbidden"
    UNAUTHORIZED = "unauthorized"
    CONFLICT = "conflict"


class DomainError(Exception):
    """Base domain error."""

    kind: ClassVar[ErrorKind] = ErrorKind.BAD_REQUEST


class ValidationError(DomainError):
    """Domain validation error."""

    kind = ErrorKind.BAD_REQUEST


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they don't own."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class AuthenticationError(DomainError):
    """Raised when a request carries no valid identity."""

    kind = ErrorKind.UNAUTHORIZED


class ConflictError(DomainError):
    """Raised when a concurrent change to the same thread wins the race.

    The transaction has already been rolled back, so the request can be
    retried as a whole.
    """

    kind = ErrorKind.CONFLICT
