"""create users and weather_requests tables

Revision ID: 3f2a9c1d7e10
Revises: 
Create Date: 2026-10-17 09:12:41.204113+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7e10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)

    op.create_table(
        'weather_requests',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('zip_code', sa.String(length=10), nullable=False),
        sa.Column('weather_details', sa.Text(), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_weather_requests_email'), 'weather_requests', ['email'], unique=False)
    op.create_index(op.f('ix_weather_requests_id'), 'weather_requests', ['id'], unique=False)
    op.create_index(op.f('ix_weather_requests_zip_code'), 'weather_requests', ['zip_code'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_weather_requests_zip_code'), table_name='weather_requests')
    op.drop_index(op.f('ix_weather_requests_id'), table_name='weather_requests')
    op.drop_index(op.f('ix_weather_requests_email'), table_name='weather_requests')
    op.drop_table('weather_requests')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
