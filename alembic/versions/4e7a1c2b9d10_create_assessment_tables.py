"""create_assessment_tables

Creates the users, jobs, tests and candidates tables.

- tests.questions holds the generated pool (correct_answer as option index)
- candidates has one row per (email, test_id) attempt
- jobs -> tests -> candidates cascade on delete

Revision ID: 4e7a1c2b9d10
Revises:
Create Date: 2026-10-19 09:12:40.381204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4e7a1c2b9d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create assessment schema."""

    # 1. Admin accounts
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('full_name', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('last_login_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # 2. Jobs
    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('experience', sa.String(length=100), nullable=False),
        sa.Column('skills', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_jobs_id', 'jobs', ['id'])
    op.create_index('ix_jobs_title', 'jobs', ['title'])

    # 3. Tests (question pools)
    op.create_table(
        'tests',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('job_id', sa.Integer(), nullable=False),
        sa.Column('complexity', sa.Enum('LOW', 'MEDIUM', 'HIGH', name='testcomplexity'), nullable=False),
        sa.Column('questions', sa.JSON(), nullable=False),
        sa.Column('short_code', sa.String(length=10), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_tests_id', 'tests', ['id'])
    op.create_index('ix_tests_job_id', 'tests', ['job_id'])
    op.create_index('ix_tests_short_code', 'tests', ['short_code'], unique=True)

    # 4. Candidate attempts
    op.create_table(
        'candidates',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('test_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('questions', sa.JSON(), nullable=True),
        sa.Column('answers', sa.JSON(), nullable=True),
        sa.Column('score', sa.Integer(), nullable=True),
        sa.Column('total_questions', sa.Integer(), nullable=True),
        sa.Column(
            'status',
            sa.Enum('IN_PROGRESS', 'COMPLETED', 'LOCKED_OUT', 'REAPPEARANCE_REQUESTED', name='candidatestatus'),
            nullable=False,
        ),
        sa.Column('lockout_reason', sa.Text(), nullable=True),
        sa.Column('reappearance_requested_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('reappearance_approved_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('reappearance_approved_by', sa.Uuid(), nullable=True),
        sa.Column('started_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['test_id'], ['tests.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['reappearance_approved_by'], ['users.id'], ondelete='SET NULL'),
        sa.UniqueConstraint('email', 'test_id', name='uq_candidate_email_test'),
    )
    op.create_index('ix_candidates_id', 'candidates', ['id'])
    op.create_index('ix_candidates_test_id', 'candidates', ['test_id'])
    op.create_index('ix_candidates_email', 'candidates', ['email'])
    op.create_index('ix_candidates_status', 'candidates', ['status'])


def downgrade() -> None:
    """Drop assessment schema."""
    op.drop_table('candidates')
    op.drop_table('tests')
    op.drop_table('jobs')
    op.drop_table('users')

    op.execute('DROP TYPE IF EXISTS candidatestatus')
    op.execute('DROP TYPE IF EXISTS testcomplexity')
