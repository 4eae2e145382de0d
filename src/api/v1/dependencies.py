"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from core.config import settings
from domain.services.enhancement_service import EnhancementService
from domain.services.user_service import UserService
from infrastructure.ai.openai_provider import OpenAITextProvider
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_text_provider() -> OpenAITextProvider:
    """Get the shared text provider (one HTTP connection pool per process)."""
    return OpenAITextProvider()


@lru_cache
def get_user_service() -> UserService:
    """Get User service instance."""
    return UserService(get_uow_factory())


@lru_cache
def get_enhancement_service() -> EnhancementService:
    """Get Enhancement service instance."""
    return EnhancementService(
        get_uow_factory(),
        get_text_provider(),
        timeout_seconds=settings.enhancement_timeout_seconds,
        max_retries=settings.enhancement_max_retries,
        retry_backoff_seconds=settings.enhancement_retry_backoff_seconds,
        max_prompt_words=settings.enhancement_prompt_max_words,
        max_output_tokens=settings.enhancement_max_output_tokens,
    )
