"""Application error taxonomy.

Every failure a route can report is an ``AppError`` carrying the HTTP status
it maps to. Handlers registered in ``propconnect.main`` turn these into
``{"detail": ...}`` JSON bodies; nothing propagates past the route boundary.
"""

from typing import Any

from fastapi import status


class AppError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, errors: dict[str, Any] | None = None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    @property
    def headers(self) -> dict[str, str] | None:
        return None


class ValidationError(AppError):
    """Missing or malformed input fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation Error"


class DuplicateEmail(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists with this email."


class InvalidCredentials(AppError):
    """Wrong password or unknown email; the two are never distinguished."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials."


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access denied. No token provided."

    @property
    def headers(self) -> dict[str, str] | None:
        return {"WWW-Authenticate": "Bearer"}


class InvalidToken(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid token."


class Forbidden(AppError):
    """Authenticated, but not the owner of the resource."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not authorized to modify this resource"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"
