"""create_users_table

Revision ID: 4c1d7e2a9f03
Revises:
Create Date: 2026-10-19 10:12:44.218305

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1d7e2a9f03'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users table with every attribute group as nullable columns."""
    op.create_table('users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('google_id', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('picture', sa.String(length=500), nullable=True),
        sa.Column('first_name', sa.String(length=100), nullable=True),
        sa.Column('last_name', sa.String(length=100), nullable=True),
        sa.Column('username', sa.String(length=100), nullable=True),
        sa.Column('password_hash', sa.String(length=255), nullable=True),
        sa.Column('provider', sa.String(length=50), nullable=False, server_default='local'),
        sa.Column('roles', sa.JSON(), nullable=False),
        sa.Column('role', sa.String(length=50), nullable=True),
        sa.Column('user_type', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('last_login_at', sa.DateTime(), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('linkedin_url', sa.String(length=500), nullable=True),
        sa.Column('github_url', sa.String(length=500), nullable=True),
        sa.Column('institute_name', sa.String(length=255), nullable=True),
        sa.Column('institute_type', sa.String(length=100), nullable=True),
        sa.Column('institute_location', sa.String(length=255), nullable=True),
        sa.Column('company_name', sa.String(length=255), nullable=True),
        sa.Column('company_type', sa.String(length=100), nullable=True),
        sa.Column('industry', sa.String(length=100), nullable=True),
        sa.Column('position', sa.String(length=100), nullable=True),
        sa.Column('course', sa.String(length=255), nullable=True),
        sa.Column('stream', sa.String(length=255), nullable=True),
        sa.Column('specialization', sa.String(length=255), nullable=True),
        sa.Column('year', sa.String(length=20), nullable=True),
        sa.Column('semester', sa.String(length=20), nullable=True),
        sa.Column('student_id', sa.String(length=100), nullable=True),
        sa.Column('batch', sa.String(length=50), nullable=True),
        sa.Column('cgpa', sa.String(length=20), nullable=True),
        sa.Column('expected_graduation_year', sa.String(length=10), nullable=True),
        sa.Column('expected_graduation_month', sa.String(length=20), nullable=True),
        sa.Column('skills', sa.Text(), nullable=True),
        sa.Column('interests', sa.Text(), nullable=True),
        sa.Column('achievements', sa.Text(), nullable=True),
        sa.Column('projects', sa.Text(), nullable=True),
        sa.Column('certifications', sa.Text(), nullable=True),
        sa.Column('languages', sa.Text(), nullable=True),
        sa.Column('resume_url', sa.String(length=500), nullable=True),
        sa.Column('portfolio_url', sa.String(length=500), nullable=True),
        sa.CheckConstraint(
            "user_type IS NULL OR user_type IN ('STUDENT', 'INSTITUTE', 'INDUSTRY')",
            name='ck_users_user_type',
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
        sa.UniqueConstraint('username'),
    )
    op.create_index('ix_users_google_id', 'users', ['google_id'], unique=False)


def downgrade() -> None:
    """Drop users table."""
    op.drop_index('ix_users_google_id', table_name='users')
    op.drop_table('users')
