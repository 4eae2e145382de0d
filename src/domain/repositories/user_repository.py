"""User repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.user import User


class IUserRepository(Protocol):
    """Repository interface for User entities."""

    async def get(self, id: UUID) -> User | None:
        """Get a user by ID."""
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by (normalized) email."""
        ...

    async def get_by_username(self, username: str) -> User | None:
        """Get a user by admin username."""
        ...

    async def save(self, user: User) -> User:
        """Insert or update a user."""
        ...
