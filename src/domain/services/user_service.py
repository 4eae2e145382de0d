"""User service layer with profile business logic."""

from dataclasses import fields
from typing import Any, Callable
from uuid import UUID

import structlog

from core.exceptions import (
    DuplicateUsernameError,
    UserInactiveError,
    UserNotFoundError,
)
from domain.entities.user import User, UserType
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.auth.provider import TokenUser

logger = structlog.get_logger()

# Common fields a user may edit on their own profile.
EDITABLE_FIELDS = frozenset(
    {
        "name",
        "first_name",
        "last_name",
        "picture",
        "phone",
        "location",
        "bio",
        "linkedin_url",
        "github_url",
        "username",
    }
)


class UserService:
    """Service layer for User business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_by_id(self, user_id: UUID) -> User:
        """Get a user, raising if missing."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))
            return user

    async def get_active(self, user_id: UUID) -> User:
        """Get a user that has not been deactivated."""
        user = await self.get_by_id(user_id)
        if not user.active:
            raise UserInactiveError(str(user_id))
        return user

    async def ensure_not_deactivated(self, user_id: UUID) -> None:
        """Reject deactivated accounts; users not stored yet are allowed."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
        if user is not None and not user.active:
            raise UserInactiveError(str(user_id))

    async def sync_login(self, token_user: TokenUser) -> User:
        """Create the user on first sign-in, otherwise stamp the login time.

        Matching is by id first, then by email, so a user created through a
        different sign-in provider is linked rather than duplicated.
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get(token_user.id)
            if user is None:
                user = await uow.users.get_by_email(token_user.email)

            if user is None:
                user = User(
                    id=token_user.id,
                    email=token_user.email,
                    name=token_user.display_name,
                    picture=token_user.picture,
                    google_id=token_user.google_id,
                    provider=token_user.provider or "local",
                    role=token_user.role,
                )
                logger.info("user_created", user_id=str(user.id), provider=user.provider)
            else:
                if not user.active:
                    raise UserInactiveError(str(user.id))
                if token_user.google_id and not user.google_id:
                    user.google_id = token_user.google_id

            user.record_login()
            saved = await uow.users.save(user)
            await uow.commit()
            return saved

    async def update_profile(
        self,
        user_id: UUID,
        changes: dict[str, Any],
        user_type: UserType | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> User:
        """Apply a partial profile edit.

        ``attributes`` are applied to the attribute group of the (possibly
        new) ``user_type``; keys belonging to other groups are ignored.
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))
            if not user.active:
                raise UserInactiveError(str(user_id))

            username = changes.get("username")
            if username and username != user.username:
                existing = await uow.users.get_by_username(username)
                if existing and existing.id != user.id:
                    raise DuplicateUsernameError(username)

            for key, value in changes.items():
                if key in EDITABLE_FIELDS:
                    setattr(user, key, value)

            if user_type is not None:
                user.change_type(user_type)

            if attributes and user.attributes is not None:
                allowed = {f.name for f in fields(user.attributes)}
                for key, value in attributes.items():
                    if key in allowed:
                        setattr(user.attributes, key, value)

            saved = await uow.users.save(user)
            await uow.commit()
            return saved

    async def apply_enhanced_profile(self, user_id: UUID, text: str) -> User:
        """Persist an accepted enhancement as the user's bio."""
        return await self.update_profile(user_id, {"bio": text})

    async def deactivate(self, user_id: UUID) -> User:
        """Soft-disable an account; the record is kept."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))

            user.deactivate()
            saved = await uow.users.save(user)
            await uow.commit()
            logger.info("user_deactivated", user_id=str(user_id))
            return saved
