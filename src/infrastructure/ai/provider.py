"""Text generation provider protocol."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class ProviderErrorKind(StrEnum):
    """Failure categories a text provider can report."""

    RATE_LIMITED = "rate_limited"
    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    BAD_RESPONSE = "bad_response"
    MISCONFIGURED = "misconfigured"


TRANSIENT_KINDS = frozenset({ProviderErrorKind.TIMEOUT, ProviderErrorKind.TRANSPORT})


class ProviderError(Exception):
    """A text provider call failed."""

    def __init__(
        self,
        kind: ProviderErrorKind,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    @property
    def transient(self) -> bool:
        """Network-level failures that may succeed on a second attempt."""
        return self.kind in TRANSIENT_KINDS

    def __repr__(self) -> str:
        return f"ProviderError(kind={self.kind.value!r}, status_code={self.status_code!r})"


@dataclass(frozen=True)
class GenerationOptions:
    """Per-call knobs passed through to the provider."""

    system_prompt: str | None = None
    max_output_tokens: int | None = None
    temperature: float = 0.4
    timeout_seconds: float | None = None


class ITextProvider(Protocol):
    """Protocol for generative text providers."""

    async def generate(self, prompt: str, options: GenerationOptions) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: The fully rendered user prompt
            options: Generation settings for this call

        Returns:
            The generated text (may be empty)

        Raises:
            ProviderError: If the provider could not produce a completion
        """
        ...
