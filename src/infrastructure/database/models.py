"""SQLAlchemy ORM models."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import JSON, Boolean, CheckConstraint, DateTime, String, Text, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class UserModel(Base):
    """User record in its flat storage shape.

    Every role-specific attribute group lives side by side as nullable
    columns; ``user_type`` decides which group is meaningful. Conversion to
    the domain entity goes through ``infrastructure.database.user_document``.
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "user_type IS NULL OR user_type IN ('STUDENT', 'INSTITUTE', 'INDUSTRY')",
            name="ck_users_user_type",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    google_id: Mapped[str | None] = mapped_column(String(255), index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str | None] = mapped_column(String(255))
    picture: Mapped[str | None] = mapped_column(String(500))
    first_name: Mapped[str | None] = mapped_column(String(100))
    last_name: Mapped[str | None] = mapped_column(String(100))

    # Admin login
    username: Mapped[str | None] = mapped_column(String(100), unique=True)
    password_hash: Mapped[str | None] = mapped_column(String(255))

    provider: Mapped[str] = mapped_column(String(50), nullable=False, default="local")
    roles: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    role: Mapped[str | None] = mapped_column(String(50))
    user_type: Mapped[str | None] = mapped_column(String(20))

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Contact
    phone: Mapped[str | None] = mapped_column(String(50))
    location: Mapped[str | None] = mapped_column(String(255))
    bio: Mapped[str | None] = mapped_column(Text)
    linkedin_url: Mapped[str | None] = mapped_column(String(500))
    github_url: Mapped[str | None] = mapped_column(String(500))

    # Institute
    institute_name: Mapped[str | None] = mapped_column(String(255))
    institute_type: Mapped[str | None] = mapped_column(String(100))
    institute_location: Mapped[str | None] = mapped_column(String(255))

    # Industry
    company_name: Mapped[str | None] = mapped_column(String(255))
    company_type: Mapped[str | None] = mapped_column(String(100))
    industry: Mapped[str | None] = mapped_column(String(100))
    position: Mapped[str | None] = mapped_column(String(100))

    # Student
    course: Mapped[str | None] = mapped_column(String(255))
    stream: Mapped[str | None] = mapped_column(String(255))
    specialization: Mapped[str | None] = mapped_column(String(255))
    year: Mapped[str | None] = mapped_column(String(20))
    semester: Mapped[str | None] = mapped_column(String(20))
    student_id: Mapped[str | None] = mapped_column(String(100))
    batch: Mapped[str | None] = mapped_column(String(50))
    cgpa: Mapped[str | None] = mapped_column(String(20))
    expected_graduation_year: Mapped[str | None] = mapped_column(String(10))
    expected_graduation_month: Mapped[str | None] = mapped_column(String(20))
    skills: Mapped[str | None] = mapped_column(Text)
    interests: Mapped[str | None] = mapped_column(Text)
    achievements: Mapped[str | None] = mapped_column(Text)
    projects: Mapped[str | None] = mapped_column(Text)
    certifications: Mapped[str | None] = mapped_column(Text)
    languages: Mapped[str | None] = mapped_column(Text)
    resume_url: Mapped[str | None] = mapped_column(String(500))
    portfolio_url: Mapped[str | None] = mapped_column(String(500))
