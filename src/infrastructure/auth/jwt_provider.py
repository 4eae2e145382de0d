"""JWT authentication provider implementation.

Tokens are issued by the sign-in subsystem and signed with a shared secret.
Expected payload:
    {
        "sub": "user-uuid",
        "email": "user@example.com",
        "name": "Jane Doe",
        "picture": "https://...",
        "role": "USER" | "ADMIN",
        "provider": "google" | "local",
        "google_id": "1234567890",
        "exp": 1234567890
    }
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Optional
from uuid import UUID

from jose import JWTError, jwt

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)


class JWTAuthProvider:
    """JWT-based authentication provider (HS256 by default)."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT and extract the user's identity claims.

        Args:
            token: The JWT to validate

        Returns:
            TokenUser if valid, None if invalid, expired or missing claims
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_aud": False},
            )
        except JWTError:
            return None

        subject = payload.get("sub")
        email = payload.get("email")
        if not subject or not email:
            return None

        try:
            user_id = UUID(subject)
        except ValueError:
            logger.warning("Rejected token with non-UUID subject")
            return None

        return TokenUser(
            id=user_id,
            email=email,
            display_name=payload.get("name"),
            role=payload.get("role"),
            picture=payload.get("picture"),
            provider=payload.get("provider"),
            google_id=payload.get("google_id"),
        )

    def create_token(self, user: TokenUser) -> str:
        """
        Create a signed JWT for a user.

        Args:
            user: The user to create a token for

        Returns:
            The generated JWT string
        """
        expire = datetime.utcnow() + timedelta(minutes=self._expire_minutes)

        payload: dict[str, Any] = {
            "sub": str(user.id),
            "email": user.email,
            "exp": expire,
        }
        optional_claims = {
            "name": user.display_name,
            "role": user.role,
            "picture": user.picture,
            "provider": user.provider,
            "google_id": user.google_id,
        }
        payload.update({k: v for k, v in optional_claims.items() if v is not None})

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
