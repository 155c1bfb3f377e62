"""Create session, preference, generation and bug report tables

Revision ID: 4e1a9c2b7d30
Revises:
Create Date: 2025-01-14 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4e1a9c2b7d30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the per-session tables."""
    op.create_table(
        'sessions',
        sa.Column('session_id', sa.String(length=128), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('last_active', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('session_id'),
    )
    op.create_index(op.f('ix_sessions_session_id'), 'sessions', ['session_id'], unique=False)

    op.create_table(
        'user_preferences',
        sa.Column('session_id', sa.String(length=128), nullable=False),
        sa.Column('default_test_framework', sa.String(), nullable=False),
        sa.Column('default_component_framework', sa.String(), nullable=False),
        sa.Column('default_backend_language', sa.String(), nullable=False),
        sa.Column('default_testing_mode', sa.String(), nullable=False),
        sa.Column('theme', sa.String(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['session_id'], ['sessions.session_id']),
        sa.PrimaryKeyConstraint('session_id'),
    )

    op.create_table(
        'generations',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('session_id', sa.String(length=128), nullable=False),
        sa.Column('feature_type', sa.String(), nullable=False),
        sa.Column('input_code', sa.Text(), nullable=False),
        sa.Column('output_result', sa.Text(), nullable=False),
        sa.Column('testing_mode', sa.String(), nullable=True),
        sa.Column('test_framework', sa.String(), nullable=True),
        sa.Column('component_framework', sa.String(), nullable=True),
        sa.Column('backend_language', sa.String(), nullable=True),
        sa.Column('input_length', sa.Integer(), nullable=False),
        sa.Column('output_length', sa.Integer(), nullable=False),
        sa.Column('generation_time_ms', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['session_id'], ['sessions.session_id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_generations_id'), 'generations', ['id'], unique=False)
    op.create_index(op.f('ix_generations_session_id'), 'generations', ['session_id'], unique=False)
    op.create_index(op.f('ix_generations_feature_type'), 'generations', ['feature_type'], unique=False)
    op.create_index(op.f('ix_generations_created_at'), 'generations', ['created_at'], unique=False)

    op.create_table(
        'bug_reports',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('session_id', sa.String(length=128), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('steps_to_reproduce', sa.JSON(), nullable=False),
        sa.Column('page_url', sa.String(), nullable=True),
        sa.Column('severity', sa.String(), nullable=False),
        sa.Column('screenshot_url', sa.String(), nullable=True),
        sa.Column('browser', sa.String(), nullable=True),
        sa.Column('os', sa.String(), nullable=True),
        sa.Column('formatted_report', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['session_id'], ['sessions.session_id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_bug_reports_id'), 'bug_reports', ['id'], unique=False)
    op.create_index(op.f('ix_bug_reports_session_id'), 'bug_reports', ['session_id'], unique=False)


def downgrade() -> None:
    """Drop the per-session tables."""
    op.drop_index(op.f('ix_bug_reports_session_id'), table_name='bug_reports')
    op.drop_index(op.f('ix_bug_reports_id'), table_name='bug_reports')
    op.drop_table('bug_reports')
    op.drop_index(op.f('ix_generations_created_at'), table_name='generations')
    op.drop_index(op.f('ix_generations_feature_type'), table_name='generations')
    op.drop_index(op.f('ix_generations_session_id'), table_name='generations')
    op.drop_index(op.f('ix_generations_id'), table_name='generations')
    op.drop_table('generations')
    op.drop_table('user_preferences')
    op.drop_index(op.f('ix_sessions_session_id'), table_name='sessions')
    op.drop_table('sessions')
