"""OpenAI implementation of the text provider protocol.

The SDK's built-in retries are disabled: retry and timeout policy belongs
to the caller, so every SDK failure is translated into a single
``ProviderError`` with a kind the caller can act on.
"""

import openai
import structlog
from openai import AsyncOpenAI

from core.config import settings
from infrastructure.ai.provider import GenerationOptions, ProviderError, ProviderErrorKind

logger = structlog.get_logger()


class OpenAITextProvider:
    """Chat Completions backed text provider."""

    def __init__(
        self,
        api_key: str = settings.openai_api_key,
        model: str = settings.openai_model,
        base_url: str | None = settings.openai_base_url,
        timeout_seconds: float = settings.enhancement_timeout_seconds,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._model = model
        self._client = client
        if self._client is None and api_key:
            self._client = AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout_seconds,
                max_retries=0,
            )

    @property
    def configured(self) -> bool:
        return self._client is not None

    async def generate(self, prompt: str, options: GenerationOptions) -> str:
        """Send one chat completion request and return the reply text."""
        if self._client is None:
            raise ProviderError(
                ProviderErrorKind.MISCONFIGURED,
                "Text provider API key is not configured",
            )

        messages = []
        if options.system_prompt:
            messages.append({"role": "system", "content": options.system_prompt})
        messages.append({"role": "user", "content": prompt})

        request_kwargs: dict = {
            "model": self._model,
            "messages": messages,
            "temperature": options.temperature,
        }
        if options.max_output_tokens:
            request_kwargs["max_tokens"] = options.max_output_tokens
        if options.timeout_seconds:
            request_kwargs["timeout"] = options.timeout_seconds

        try:
            response = await self._client.chat.completions.create(**request_kwargs)
        except openai.APIError as exc:
            raise self._translate(exc) from exc

        if not response.choices:
            raise ProviderError(
                ProviderErrorKind.BAD_RESPONSE,
                "Provider returned no choices",
            )

        choice = response.choices[0]
        logger.debug(
            "text_provider_completed",
            model=self._model,
            finish_reason=choice.finish_reason,
        )
        return choice.message.content or ""

    @staticmethod
    def _translate(exc: openai.APIError) -> ProviderError:
        """Map an SDK exception onto a provider error kind."""
        # APITimeoutError subclasses APIConnectionError, so it must come first.
        if isinstance(exc, openai.APITimeoutError):
            return ProviderError(ProviderErrorKind.TIMEOUT, "Provider request timed out")
        if isinstance(exc, openai.APIConnectionError):
            return ProviderError(ProviderErrorKind.TRANSPORT, "Could not reach provider")
        if isinstance(exc, openai.RateLimitError):
            return ProviderError(
                ProviderErrorKind.RATE_LIMITED,
                "Provider rate limit reached",
                status_code=exc.status_code,
            )
        if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
            return ProviderError(
                ProviderErrorKind.MISCONFIGURED,
                "Provider rejected the configured credentials",
                status_code=exc.status_code,
            )
        if isinstance(exc, openai.APIStatusError):
            if exc.status_code >= 500:
                return ProviderError(
                    ProviderErrorKind.TRANSPORT,
                    "Provider server error",
                    status_code=exc.status_code,
                )
            return ProviderError(
                ProviderErrorKind.BAD_RESPONSE,
                "Provider rejected the request",
                status_code=exc.status_code,
            )
        return ProviderError(ProviderErrorKind.BAD_RESPONSE, "Provider returned an invalid response")
