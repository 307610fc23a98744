"""create_assessment_tables

Revision ID: 3c1f0a9b7d24
Revises:
Create Date: 2026-10-16 10:12:40.512233

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0a9b7d24'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    """카테고리/문제/사용자/과제/응답/완료 테이블 생성"""
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'questions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('question', sa.Text(), nullable=False),
        sa.Column('question_media_path', sa.String(length=512), nullable=True),
        sa.Column('options', sa.Text(), nullable=False),
        sa.Column('correct_answer', sa.Text(), nullable=False),
        sa.Column('short_content', sa.Text(), nullable=True),
        sa.Column('long_content_text', sa.Text(), nullable=True),
        sa.Column('long_content_file_path', sa.String(length=512), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_questions_category_id'), 'questions', ['category_id'], unique=False)

    op.create_table(
        'test_assignments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('admin_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['admin_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'assignment_categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('assignment_id', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('question_count', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['assignment_id'], ['test_assignments.id'], ),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('assignment_id', 'category_id', name='uq_assignment_categories_assignment_category'),
    )
    op.create_index(
        op.f('ix_assignment_categories_assignment_id'), 'assignment_categories', ['assignment_id'], unique=False
    )

    op.create_table(
        'user_responses',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('question_id', sa.Integer(), nullable=False),
        sa.Column('assignment_id', sa.Integer(), nullable=False),
        sa.Column('answer', sa.Text(), nullable=False),
        sa.Column('is_sure', sa.Boolean(), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['question_id'], ['questions.id'], ),
        sa.ForeignKeyConstraint(['assignment_id'], ['test_assignments.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_responses_user_id'), 'user_responses', ['user_id'], unique=False)
    op.create_index(op.f('ix_user_responses_question_id'), 'user_responses', ['question_id'], unique=False)
    op.create_index(op.f('ix_user_responses_assignment_id'), 'user_responses', ['assignment_id'], unique=False)
    op.create_index(op.f('ix_user_responses_status'), 'user_responses', ['status'], unique=False)

    op.create_table(
        'user_assignment_completions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('assignment_id', sa.Integer(), nullable=False),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['assignment_id'], ['test_assignments.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'assignment_id', name='uq_user_assignment_completions_user_assignment'),
    )


def downgrade() -> None:
    """테이블 제거"""
    op.drop_table('user_assignment_completions')
    op.drop_index(op.f('ix_user_responses_status'), table_name='user_responses')
    op.drop_index(op.f('ix_user_responses_assignment_id'), table_name='user_responses')
    op.drop_index(op.f('ix_user_responses_question_id'), table_name='user_responses')
    op.drop_index(op.f('ix_user_responses_user_id'), table_name='user_responses')
    op.drop_table('user_responses')
    op.drop_index(op.f('ix_assignment_categories_assignment_id'), table_name='assignment_categories')
    op.drop_table('assignment_categories')
    op.drop_table('test_assignments')
    op.drop_index(op.f('ix_questions_category_id'), table_name='questions')
    op.drop_table('questions')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
    op.drop_table('categories')
