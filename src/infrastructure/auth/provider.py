"""Authentication provider protocol."""

from dataclasses import dataclass
from typing import Optional, Protocol
from uuid import UUID


@dataclass
class TokenUser:
    """Identity claims carried by a validated access token."""

    id: UUID
    email: str
    display_name: Optional[str] = None
    role: Optional[str] = None
    picture: Optional[str] = None
    provider: Optional[str] = None
    google_id: Optional[str] = None


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate an access token.

        Args:
            token: The bearer token to validate

        Returns:
            TokenUser if valid, None if invalid
        """
        ...

    def create_token(self, user: TokenUser) -> str:
        """Issue a token for a user (tests and local tooling)."""
        ...
