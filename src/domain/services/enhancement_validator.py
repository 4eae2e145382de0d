"""Validation of profile enhancement requests.

Runs before any provider call and has no side effects.
"""

from domain.entities.enhancement import (
    EnhancementRequest,
    EnhancementValidationError,
    ValidationReason,
    ValidRequest,
)

DEFAULT_PROMPT_MAX_WORDS = 50


def count_words(text: str) -> int:
    """Count maximal runs of non-whitespace characters."""
    return len(text.split())


def validate(
    request: EnhancementRequest,
    max_prompt_words: int = DEFAULT_PROMPT_MAX_WORDS,
) -> ValidRequest | EnhancementValidationError:
    """Check an enhancement request.

    The profile check runs first, so a request that is wrong on both counts
    reports ``EMPTY_PROFILE``. A blank prompt is treated as no prompt.
    """
    if request.profile is None or not request.profile.strip():
        return EnhancementValidationError(
            reason=ValidationReason.EMPTY_PROFILE,
            field="profile",
            message="profile must not be empty",
        )

    prompt = request.prompt.strip() if request.prompt else None
    if not prompt:
        return ValidRequest(profile=request.profile, prompt=None)

    word_count = count_words(prompt)
    if word_count > max_prompt_words:
        return EnhancementValidationError(
            reason=ValidationReason.PROMPT_TOO_LONG,
            field="prompt",
            message=f"prompt exceeds {max_prompt_words} words",
            word_count=word_count,
            max_words=max_prompt_words,
        )

    return ValidRequest(profile=request.profile, prompt=prompt)
