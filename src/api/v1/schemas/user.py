"""Pydantic schemas for User API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.user import User, UserType
from infrastructure.database.user_document import to_document


class UserResponse(BaseModel):
    """Flat user document as exposed to clients (no credentials)."""

    model_config = ConfigDict(extra="ignore")

    id: UUID
    email: str
    google_id: str | None = None
    name: str | None = None
    picture: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    provider: str
    roles: list[str] = []
    role: str | None = None
    is_admin: bool = False
    user_type: UserType | None = None
    created_at: datetime
    last_login_at: datetime | None = None
    active: bool

    phone: str | None = None
    location: str | None = None
    bio: str | None = None
    linkedin_url: str | None = None
    github_url: str | None = None

    institute_name: str | None = None
    institute_type: str | None = None
    institute_location: str | None = None

    company_name: str | None = None
    company_type: str | None = None
    industry: str | None = None
    position: str | None = None

    course: str | None = None
    stream: str | None = None
    specialization: str | None = None
    year: str | None = None
    semester: str | None = None
    student_id: str | None = None
    batch: str | None = None
    cgpa: str | None = None
    expected_graduation_year: str | None = None
    expected_graduation_month: str | None = None
    skills: str | None = None
    interests: str | None = None
    achievements: str | None = None
    projects: str | None = None
    certifications: str | None = None
    languages: str | None = None
    resume_url: str | None = None
    portfolio_url: str | None = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        document = to_document(user)
        document.pop("password_hash", None)
        document["is_admin"] = user.is_admin()
        return cls.model_validate(document)


class UserDetailResponse(BaseModel):
    """Schema for single User."""

    data: UserResponse


class UserUpdate(BaseModel):
    """Partial profile edit.

    ``attributes`` applies to the group of ``user_type`` (the new one when
    ``user_type`` is also given); unknown keys are ignored.
    """

    name: str | None = Field(None, max_length=255)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    picture: str | None = Field(None, max_length=500)
    phone: str | None = Field(None, max_length=50)
    location: str | None = Field(None, max_length=255)
    bio: str | None = Field(None, max_length=20000)
    linkedin_url: str | None = Field(None, max_length=500)
    github_url: str | None = Field(None, max_length=500)
    username: str | None = Field(None, min_length=3, max_length=100)
    user_type: UserType | None = None
    attributes: dict[str, Any] | None = None
