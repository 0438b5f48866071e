"""Error taxonomy shared by services, dependencies and the HTTP boundary.

Every error carries the HTTP status it maps to and a human readable message;
`app.main` turns them into `{"message": ...}` JSON bodies.
"""

from __future__ import annotations

from fastapi import status


class CatalogError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Unexpected error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CatalogError):
    """Missing required field, bad value, or a uniqueness violation."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"


class NotFoundError(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class AuthenticationError(CatalogError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authorized"


class AuthorizationError(CatalogError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Admin only access"


class UnexpectedError(CatalogError):
    pass
