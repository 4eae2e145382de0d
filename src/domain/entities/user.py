"""User domain entity.

A user is a common identity record plus exactly one role-specific attribute
group, selected by ``user_type``.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4

ADMIN_ROLE = "ADMIN"


class UserType(StrEnum):
    """Which profile shape a user carries."""

    STUDENT = "STUDENT"
    INSTITUTE = "INSTITUTE"
    INDUSTRY = "INDUSTRY"


@dataclass
class StudentAttributes:
    """Academic profile fields for STUDENT users."""

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


@dataclass
class InstituteAttributes:
    """Organisation fields for INSTITUTE users."""

    institute_name: str | None = None
    institute_type: str | None = None
    institute_location: str | None = None


@dataclass
class IndustryAttributes:
    """Employer fields for INDUSTRY users."""

    company_name: str | None = None
    company_type: str | None = None
    industry: str | None = None
    position: str | None = None


ProfileAttributes = StudentAttributes | InstituteAttributes | IndustryAttributes

ATTRIBUTES_BY_TYPE: dict[UserType, type[ProfileAttributes]] = {
    UserType.STUDENT: StudentAttributes,
    UserType.INSTITUTE: InstituteAttributes,
    UserType.INDUSTRY: IndustryAttributes,
}


def attribute_names(user_type: UserType) -> list[str]:
    """Field names belonging to the attribute group of ``user_type``."""
    return [f.name for f in fields(ATTRIBUTES_BY_TYPE[user_type])]


@dataclass
class User:
    """Domain entity for a user and their profile."""

    email: str
    id: UUID = field(default_factory=uuid4)
    google_id: str | None = None
    name: str | None = None
    picture: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    # Admin login
    username: str | None = None
    password_hash: str | None = None

    provider: str = "local"
    roles: set[str] = field(default_factory=set)
    role: str | None = None
    user_type: UserType | None = None
    attributes: ProfileAttributes | None = None

    phone: str | None = None
    location: str | None = None
    bio: str | None = None
    linkedin_url: str | None = None
    github_url: str | None = None

    created_at: datetime = field(default_factory=datetime.utcnow)
    last_login_at: datetime | None = None
    active: bool = True

    def __post_init__(self) -> None:
        """Normalize email and make sure the attribute group matches the type."""
        self.email = self.email.strip().lower()
        if self.user_type is None:
            self.attributes = None
            return
        expected = ATTRIBUTES_BY_TYPE[self.user_type]
        if not isinstance(self.attributes, expected):
            self.attributes = expected()

    def is_admin(self) -> bool:
        return self.role is not None and self.role.upper() == ADMIN_ROLE

    def change_type(self, user_type: UserType) -> None:
        """Switch profile shape; the previous attribute group is dropped."""
        if user_type == self.user_type:
            return
        self.user_type = user_type
        self.attributes = ATTRIBUTES_BY_TYPE[user_type]()

    def record_login(self, at: datetime | None = None) -> None:
        self.last_login_at = at or datetime.utcnow()

    def deactivate(self) -> None:
        self.active = False

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        full = " ".join(part for part in (self.first_name, self.last_name) if part)
        return full or self.email
