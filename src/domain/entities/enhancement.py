"""Profile enhancement value objects and typed failures."""

from dataclasses import dataclass
from enum import StrEnum


class EnhancementSource(StrEnum):
    """Where the returned profile text came from."""

    PROVIDER_GENERATED = "provider-generated"
    UNCHANGED_FALLBACK = "unchanged-fallback"


class EnhancementState(StrEnum):
    """Lifecycle of a single enhancement call (used in logs)."""

    RECEIVED = "received"
    VALIDATING = "validating"
    REJECTED = "rejected"
    CALLING = "calling"
    SUCCEEDED = "succeeded"
    FALLBACK_USED = "fallback_used"
    FAILED = "failed"


class ValidationReason(StrEnum):
    EMPTY_PROFILE = "EMPTY_PROFILE"
    PROMPT_TOO_LONG = "PROMPT_TOO_LONG"


class FailureKind(StrEnum):
    """Why the provider call ultimately failed."""

    RATE_LIMITED = "rate_limited"
    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    BAD_RESPONSE = "bad_response"
    MISCONFIGURED = "misconfigured"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True, slots=True)
class EnhancementRequest:
    """Incoming payload, as received from the boundary."""

    profile: str | None
    prompt: str | None = None


@dataclass(frozen=True, slots=True)
class ValidRequest:
    """A request that passed validation. ``prompt`` is None when absent or blank."""

    profile: str
    prompt: str | None = None


@dataclass(frozen=True, slots=True)
class EnhancementResult:
    enhanced_profile: str
    source: EnhancementSource
    attempts: int = 1

    @property
    def changed(self) -> bool:
        return self.source is EnhancementSource.PROVIDER_GENERATED


@dataclass(frozen=True, slots=True)
class EnhancementValidationError:
    """The request was rejected before reaching the provider."""

    reason: ValidationReason
    field: str
    message: str
    word_count: int | None = None
    max_words: int | None = None


@dataclass(frozen=True, slots=True)
class AIServiceFailure:
    """The provider could not produce a result.

    ``cause`` is kept for diagnostics only and must never be shown to callers.
    """

    kind: FailureKind
    attempts: int
    cause: BaseException | None = None


EnhancementFailure = EnhancementValidationError | AIServiceFailure
EnhancementOutcome = EnhancementResult | AIServiceFailure
