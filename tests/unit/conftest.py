"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from infrastructure.ai.provider import GenerationOptions


class FakeUnitOfWork:
    """Fake Unit of Work with a mocked user repository."""

    def __init__(self) -> None:
        self.users = AsyncMock()
        self.users.get.return_value = None
        self.users.get_by_email.return_value = None
        self.users.get_by_username.return_value = None
        self.users.save.side_effect = lambda user: user
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


class FakeTextProvider:
    """Scripted text provider.

    Each call consumes the next scripted response; the last one repeats.
    A response may be a string, an exception to raise, or a zero-argument
    coroutine function whose result is returned.
    """

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.calls: list[tuple[str, GenerationOptions]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def generate(self, prompt: str, options: GenerationOptions) -> str:
        self.calls.append((prompt, options))
        if not self.responses:
            raise AssertionError("provider called without a scripted response")
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, BaseException):
            raise response
        if callable(response):
            return await response()
        return response


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()
