"""matching engine schema

Revision ID: 3c1f9a7d2b10
Revises:
Create Date: 2026-10-17 09:12:44.118302

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f9a7d2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(255)),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('external_id', sa.String(64)),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('company', sa.String(255)),
        sa.Column('location', sa.String(255)),
        sa.Column('salary', sa.String(128)),
        sa.Column('job_type', sa.String(64)),
        sa.Column('experience_level', sa.String(64)),
        sa.Column('required_skills', sa.JSON()),
        sa.Column('description', sa.Text()),
        sa.Column('source_url', sa.String(512)),
        sa.Column('skills_embedding', sa.Text()),
        sa.Column('experience_embedding', sa.Text()),
        sa.Column('interests_embedding', sa.Text()),
        sa.Column('embedding_updated_at', sa.DateTime()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('ix_jobs_id', 'jobs', ['id'])
    op.create_index('ix_jobs_external_id', 'jobs', ['external_id'], unique=True)
    op.create_index('ix_jobs_title', 'jobs', ['title'])
    op.create_index('ix_jobs_company', 'jobs', ['company'])

    op.create_table(
        'user_profiles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(255)),
        sa.Column('email', sa.String(255)),
        sa.Column('linkedin_url', sa.String(512)),
        sa.Column('resume_text', sa.Text()),
        sa.Column('parsed_skills', sa.JSON()),
        sa.Column('parsed_experience', sa.Text()),
        sa.Column('interests', sa.JSON()),
        sa.Column('career_goals', sa.JSON()),
        sa.Column('work_environment', sa.String(255)),
        sa.Column('salary_range', sa.String(255)),
        sa.Column('skills_embedding', sa.Text()),
        sa.Column('experience_embedding', sa.Text()),
        sa.Column('interests_embedding', sa.Text()),
        sa.Column('embedding_updated_at', sa.DateTime()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('ix_user_profiles_id', 'user_profiles', ['id'])
    op.create_index('ix_user_profiles_user_id', 'user_profiles', ['user_id'], unique=True)

    op.create_table(
        'job_matches',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('job_id', sa.Integer(), sa.ForeignKey('jobs.id', ondelete='CASCADE'), nullable=False),
        sa.Column('skills_score', sa.Float(), nullable=False),
        sa.Column('experience_score', sa.Float(), nullable=False),
        sa.Column('interests_score', sa.Float(), nullable=False),
        sa.Column('weighted_score', sa.Float(), nullable=False),
        sa.Column('match_explanation', sa.JSON()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'job_id', name='uq_job_matches_user_job'),
    )
    op.create_index('ix_job_matches_id', 'job_matches', ['id'])
    op.create_index('ix_job_matches_user_id', 'job_matches', ['user_id'])
    op.create_index('ix_job_matches_job_id', 'job_matches', ['job_id'])
    op.create_index('ix_job_matches_weighted_score', 'job_matches', ['weighted_score'])

    op.create_table(
        'saved_paths',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('career_id', sa.String(128), nullable=False),
        sa.Column('career_name', sa.String(255), nullable=False),
        sa.Column('status', sa.String(16), nullable=False),
        sa.Column('roadmap', sa.JSON()),
        sa.Column('progress_percentage', sa.Integer(), nullable=False),
        sa.Column('started_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'career_id', name='uq_saved_paths_user_career'),
    )
    op.create_index('ix_saved_paths_id', 'saved_paths', ['id'])
    op.create_index('ix_saved_paths_user_id', 'saved_paths', ['user_id'])

    op.create_table(
        'applied_jobs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('job_id', sa.Integer(), sa.ForeignKey('jobs.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', sa.String(16), nullable=False),
        sa.Column('notes', sa.Text()),
        sa.Column('applied_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'job_id', name='uq_applied_jobs_user_job'),
    )
    op.create_index('ix_applied_jobs_id', 'applied_jobs', ['id'])
    op.create_index('ix_applied_jobs_user_id', 'applied_jobs', ['user_id'])
    op.create_index('ix_applied_jobs_job_id', 'applied_jobs', ['job_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('applied_jobs')
    op.drop_table('saved_paths')
    op.drop_table('job_matches')
    op.drop_table('user_profiles')
    op.drop_table('jobs')
    op.drop_table('users')
