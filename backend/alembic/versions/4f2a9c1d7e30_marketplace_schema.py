"""marketplace schema: users, catalogs, purchases, revoked tokens

Revision ID: 4f2a9c1d7e30
Revises:
Create Date: 2026-10-19 10:12:41.208315

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f2a9c1d7e30'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum('client', 'trainer', 'nutritionist', name='user_role')
content_type = sa.Enum('workout', 'nutrition', name='content_type')


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('role', user_role, nullable=False, server_default='client'),
        sa.Column('avatar_url', sa.String(length=1024), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # catalogs
    op.create_table(
        'workout_content',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('video_url', sa.String(length=1024), nullable=False),
        sa.Column('author_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_table(
        'nutrition_plans',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('document_url', sa.String(length=1024), nullable=False),
        sa.Column('author_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_table(
        'advice',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        sa.Column('video_url', sa.String(length=1024), nullable=True),
        sa.Column('category', sa.String(length=40), nullable=True),
        sa.Column('author_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # ledger; content_id deliberately has no FK (it points at one of two tables)
    op.create_table(
        'purchases',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('buyer_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('content_type', content_type, nullable=False),
        sa.Column('content_id', sa.String(length=36), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    op.create_table(
        'revoked_tokens',
        sa.Column('jti', sa.String(length=64), primary_key=True),
        sa.Column('revoked_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('revoked_tokens')
    op.drop_table('purchases')
    op.drop_table('advice')
    op.drop_table('nutrition_plans')
    op.drop_table('workout_content')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')

    # finally drop enum types (no-op on backends without named enums)
    content_type.drop(op.get_bind(), checkfirst=True)
    user_role.drop(op.get_bind(), checkfirst=True)
