"""Boundary exceptions and error codes.

These exceptions carry an HTTP status and are rendered by the handlers in
``api.exception_handlers``. Domain services return typed failure values
instead (see ``domain.entities.enhancement``); the API layer converts those
into the exceptions below.
"""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"
    USER_INACTIVE = "USER_INACTIVE"

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    EMPTY_PROFILE = "EMPTY_PROFILE"
    PROMPT_TOO_LONG = "PROMPT_TOO_LONG"

    # Conflict errors (409)
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_USERNAME = "DUPLICATE_USERNAME"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Upstream errors (503)
    AI_SERVICE_UNAVAILABLE = "AI_SERVICE_UNAVAILABLE"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class AuthorizationError(AppException):
    """Authorization failed."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(
            error_code=ErrorCode.FORBIDDEN,
            message=message,
            status_code=403,
        )


class UserInactiveError(AppException):
    """The account has been deactivated."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_INACTIVE,
            message="This account has been deactivated",
            status_code=403,
            details={"user_id": user_id},
        )


class UserNotFoundError(AppException):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class DuplicateEmailError(AppException):
    """Another user already owns this email."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.DUPLICATE_EMAIL,
            message="Email is already registered",
            status_code=409,
            details={"email": email},
        )


class DuplicateUsernameError(AppException):
    """Another user already owns this username."""

    def __init__(self, username: str) -> None:
        super().__init__(
            error_code=ErrorCode.DUPLICATE_USERNAME,
            message=f"Username already taken: {username}",
            status_code=409,
            details={"username": username},
        )
