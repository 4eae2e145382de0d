"""Profile enhancement service.

Turns a free-form profile plus optional guidance into an improved profile
via a text provider. Enhancement is best-effort: degenerate provider output
falls back to the original text, and provider failures are returned as an
``AIServiceFailure`` value rather than raised. The service never writes to
the profile store; persisting the result is up to the caller.
"""

import asyncio
import re
from dataclasses import fields
from typing import Callable
from uuid import UUID

import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_fixed,
)

from domain.entities.enhancement import (
    AIServiceFailure,
    EnhancementFailure,
    EnhancementOutcome,
    EnhancementRequest,
    EnhancementResult,
    EnhancementSource,
    EnhancementState,
    EnhancementValidationError,
    FailureKind,
    ValidRequest,
)
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.enhancement_validator import DEFAULT_PROMPT_MAX_WORDS, validate
from infrastructure.ai.provider import (
    GenerationOptions,
    ITextProvider,
    ProviderError,
    ProviderErrorKind,
)

logger = structlog.get_logger()

DEFAULT_INSTRUCTION = "Improve clarity and impact without changing facts."

SYSTEM_PROMPT = (
    "You are an expert career profile editor. Rewrite the profile you are given "
    "so it reads clearly and persuasively. Keep every fact accurate, never invent "
    "experience or credentials, and keep roughly the same length. "
    "Reply with the rewritten profile text only."
)

# Stored attributes that are never sent to the provider.
_PRIVATE_ATTRIBUTES = frozenset({"student_id", "resume_url", "portfolio_url"})

_FENCE_RE = re.compile(r"^```[\w-]*\s*\n?(.*?)\n?```$", re.DOTALL)
_QUOTE_PAIRS = (('"', '"'), ("'", "'"), ("“", "”"))


def describe_user(user: User) -> str:
    """Render the active attribute group of a stored user as prompt context."""
    lines: list[str] = []
    if user.user_type is not None:
        lines.append(f"Profile type: {user.user_type.value.lower()}")
    if user.attributes is not None:
        for attr in fields(user.attributes):
            value = getattr(user.attributes, attr.name)
            if value and attr.name not in _PRIVATE_ATTRIBUTES:
                label = attr.name.replace("_", " ").capitalize()
                lines.append(f"{label}: {value}")
    return "\n".join(lines)


def build_provider_prompt(profile: str, prompt: str | None, user: User | None = None) -> str:
    """Combine profile text, stored context and guidance into one prompt."""
    sections = []
    if user is not None:
        context = describe_user(user)
        if context:
            sections.append(f"Known details about the person (for context only):\n{context}")
    sections.append(f"Instruction: {prompt or DEFAULT_INSTRUCTION}")
    sections.append(f"Profile:\n{profile.strip()}")
    return "\n\n".join(sections)


def normalize_output(text: object) -> str:
    """Strip whitespace, a surrounding code fence and wrapping quotes."""
    if not isinstance(text, str):
        return ""
    cleaned = text.strip()
    match = _FENCE_RE.match(cleaned)
    if match:
        cleaned = match.group(1).strip()
    for opening, closing in _QUOTE_PAIRS:
        inner = cleaned[1:-1]
        if (
            len(cleaned) > 1
            and cleaned.startswith(opening)
            and cleaned.endswith(closing)
            and closing not in inner
        ):
            cleaned = inner.strip()
            break
    return cleaned


def _is_transient(exc: BaseException) -> bool:
    return isinstance(exc, ProviderError) and exc.transient


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "enhancement_retrying",
        attempt=retry_state.attempt_number,
        kind=exc.kind.value if isinstance(exc, ProviderError) else None,
    )


class EnhancementService:
    """Service layer for AI-assisted profile enhancement."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        provider: ITextProvider,
        timeout_seconds: float = 20.0,
        max_retries: int = 1,
        retry_backoff_seconds: float = 0.5,
        max_prompt_words: int = DEFAULT_PROMPT_MAX_WORDS,
        max_output_tokens: int | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._provider = provider
        self._timeout = timeout_seconds
        self._max_retries = max_retries
        self._retry_backoff = retry_backoff_seconds
        self._max_prompt_words = max_prompt_words
        self._max_output_tokens = max_output_tokens

    async def handle(
        self, user_id: UUID, request: EnhancementRequest
    ) -> EnhancementResult | EnhancementFailure:
        """Validate a raw request and, if it passes, enhance it."""
        log = logger.bind(user_id=str(user_id))
        log.info("enhancement_received", state=EnhancementState.RECEIVED.value)

        log.debug("enhancement_validating", state=EnhancementState.VALIDATING.value)
        checked = validate(request, self._max_prompt_words)
        if isinstance(checked, EnhancementValidationError):
            log.info(
                "enhancement_rejected",
                state=EnhancementState.REJECTED.value,
                reason=checked.reason.value,
            )
            return checked

        return await self.enhance(user_id, checked)

    async def enhance(self, user_id: UUID, request: ValidRequest) -> EnhancementOutcome:
        """Run the provider call for an already validated request."""
        log = logger.bind(user_id=str(user_id))

        user = await self._load_user(user_id)
        prompt = build_provider_prompt(request.profile, request.prompt, user)
        options = GenerationOptions(
            system_prompt=SYSTEM_PROMPT,
            max_output_tokens=self._max_output_tokens,
            timeout_seconds=self._timeout,
        )

        log.info(
            "enhancement_calling_provider",
            state=EnhancementState.CALLING.value,
            guided=request.prompt is not None,
            has_context=user is not None,
        )

        attempts = 0
        text = ""
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._max_retries + 1),
                retry=retry_if_exception(_is_transient),
                wait=wait_fixed(self._retry_backoff),
                before_sleep=_log_retry,
                reraise=True,
            ):
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    text = await self._call_provider(prompt, options)
        except ProviderError as exc:
            log.error(
                "enhancement_failed",
                state=EnhancementState.FAILED.value,
                kind=exc.kind.value,
                status_code=exc.status_code,
                attempts=attempts,
                exc_info=exc,
            )
            return AIServiceFailure(
                kind=FailureKind(exc.kind.value),
                attempts=attempts,
                cause=exc,
            )
        except Exception as exc:
            log.error(
                "enhancement_failed",
                state=EnhancementState.FAILED.value,
                kind=FailureKind.UNEXPECTED.value,
                attempts=attempts,
                exc_info=exc,
            )
            return AIServiceFailure(kind=FailureKind.UNEXPECTED, attempts=attempts, cause=exc)

        enhanced = normalize_output(text)
        if not enhanced or enhanced == request.profile.strip():
            log.info(
                "enhancement_fallback_used",
                state=EnhancementState.FALLBACK_USED.value,
                attempts=attempts,
                empty=not enhanced,
            )
            return EnhancementResult(
                enhanced_profile=request.profile,
                source=EnhancementSource.UNCHANGED_FALLBACK,
                attempts=attempts,
            )

        log.info(
            "enhancement_succeeded",
            state=EnhancementState.SUCCEEDED.value,
            attempts=attempts,
            output_length=len(enhanced),
        )
        return EnhancementResult(
            enhanced_profile=enhanced,
            source=EnhancementSource.PROVIDER_GENERATED,
            attempts=attempts,
        )

    async def _call_provider(self, prompt: str, options: GenerationOptions) -> str:
        """One provider attempt, bounded by the per-attempt timeout."""
        try:
            return await asyncio.wait_for(
                self._provider.generate(prompt, options),
                timeout=self._timeout,
            )
        except TimeoutError as exc:
            raise ProviderError(
                ProviderErrorKind.TIMEOUT,
                f"Provider did not answer within {self._timeout}s",
            ) from exc

    async def _load_user(self, user_id: UUID) -> User | None:
        """Read the stored user for prompt context (read-only).

        Context is optional, so a store failure is logged and the prompt is
        built without it.
        """
        try:
            async with self._uow_factory() as uow:
                return await uow.users.get(user_id)
        except Exception as exc:
            logger.warning(
                "enhancement_context_unavailable",
                user_id=str(user_id),
                error_type=type(exc).__name__,
                exc_info=exc,
            )
            return None
