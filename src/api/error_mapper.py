"""Map enhancement failures onto boundary errors.

This is the only place enhancement failures acquire an HTTP status.
"""

from dataclasses import dataclass
from typing import Any, NoReturn

import structlog

from core.exceptions import AppException, ErrorCode
from domain.entities.enhancement import (
    AIServiceFailure,
    EnhancementFailure,
    EnhancementValidationError,
    ValidationReason,
)

logger = structlog.get_logger()

AI_UNAVAILABLE_MESSAGE = "enhancement service temporarily unavailable"

_VALIDATION_CODES = {
    ValidationReason.EMPTY_PROFILE: ErrorCode.EMPTY_PROFILE,
    ValidationReason.PROMPT_TOO_LONG: ErrorCode.PROMPT_TOO_LONG,
}


@dataclass(frozen=True, slots=True)
class BoundaryError:
    """What the caller is allowed to see about a failure."""

    status_code: int
    error_code: ErrorCode
    message: str
    details: dict[str, Any] | None = None


def to_boundary_error(failure: EnhancementFailure) -> BoundaryError:
    """Translate a typed failure into status, code and a caller-safe message."""
    if isinstance(failure, EnhancementValidationError):
        details: dict[str, Any] = {"field": failure.field}
        if failure.word_count is not None:
            details["word_count"] = failure.word_count
            details["max_words"] = failure.max_words
        return BoundaryError(
            status_code=400,
            error_code=_VALIDATION_CODES[failure.reason],
            message=failure.message,
            details=details,
        )

    if isinstance(failure, AIServiceFailure):
        # The cause may carry provider internals; it goes to the log only.
        logger.error(
            "ai_service_failure",
            kind=failure.kind.value,
            attempts=failure.attempts,
            cause=repr(failure.cause) if failure.cause else None,
        )
        return BoundaryError(
            status_code=503,
            error_code=ErrorCode.AI_SERVICE_UNAVAILABLE,
            message=AI_UNAVAILABLE_MESSAGE,
        )

    raise TypeError(f"Unsupported failure type: {type(failure).__name__}")


def raise_for_failure(failure: EnhancementFailure) -> NoReturn:
    """Raise the boundary exception for a failure."""
    error = to_boundary_error(failure)
    raise AppException(
        error_code=error.error_code,
        message=error.message,
        status_code=error.status_code,
        details=error.details,
    )
