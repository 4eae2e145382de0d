"""Serialization adapter between the User entity and its flat document.

The stored shape keeps every attribute group as top-level nullable fields
(``course``, ``institute_name``, ``company_name``, ...). Only the group
selected by ``user_type`` is read back; the others are written as null.
"""

from dataclasses import asdict, fields
from typing import Any, Mapping

import structlog

from domain.entities.user import (
    ATTRIBUTES_BY_TYPE,
    User,
    UserType,
    attribute_names,
)

logger = structlog.get_logger()

COMMON_FIELDS: tuple[str, ...] = (
    "id",
    "google_id",
    "email",
    "name",
    "picture",
    "first_name",
    "last_name",
    "username",
    "password_hash",
    "provider",
    "role",
    "created_at",
    "last_login_at",
    "active",
    "phone",
    "location",
    "bio",
    "linkedin_url",
    "github_url",
)

ATTRIBUTE_FIELDS: tuple[str, ...] = tuple(
    f.name for cls in ATTRIBUTES_BY_TYPE.values() for f in fields(cls)
)

DOCUMENT_FIELDS: tuple[str, ...] = COMMON_FIELDS + ("roles", "user_type") + ATTRIBUTE_FIELDS


def _parse_user_type(value: Any) -> UserType | None:
    if not value:
        return None
    try:
        return UserType(str(value).upper())
    except ValueError:
        logger.warning("unknown_user_type", user_type=value)
        return None


def to_document(user: User) -> dict[str, Any]:
    """Flatten a user into its storage document."""
    document: dict[str, Any] = {name: getattr(user, name) for name in COMMON_FIELDS}
    document["roles"] = sorted(user.roles)
    document["user_type"] = user.user_type.value if user.user_type else None
    document.update(dict.fromkeys(ATTRIBUTE_FIELDS))
    if user.attributes is not None:
        document.update(asdict(user.attributes))
    return document


def from_document(document: Mapping[str, Any]) -> User:
    """Build a user from a storage document, keeping only the active group."""
    user_type = _parse_user_type(document.get("user_type"))
    attributes = None
    if user_type is not None:
        attributes = ATTRIBUTES_BY_TYPE[user_type](
            **{name: document.get(name) for name in attribute_names(user_type)}
        )

    common = {name: document[name] for name in COMMON_FIELDS if document.get(name) is not None}
    return User(
        **common,
        roles=set(document.get("roles") or ()),
        user_type=user_type,
        attributes=attributes,
    )
