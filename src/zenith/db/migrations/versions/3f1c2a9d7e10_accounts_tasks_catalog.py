"""accounts, tasks and travel catalog

Learn: Initial schema. uq_users_email is what makes email uniqueness
hold under concurrent registrations; the service-level check alone
can't. tasks.user_id cascades on user delete so a task never points
at a missing account.

Revision ID: 3f1c2a9d7e10
Revises:
Create Date: 2026-10-19 10:12:44.120931
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7e10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ─── Accounts ────────────────────────────────────────
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='uq_users_email'),
    )

    # ─── Tasks ───────────────────────────────────────────
    op.create_table(
        'tasks',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_tasks_user', 'tasks', ['user_id'])

    # ─── Catalog ─────────────────────────────────────────
    op.create_table(
        'buses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('bus_name', sa.String(length=200), nullable=True),
        sa.Column('route', sa.String(length=500), nullable=True),
        sa.Column('bus_type', sa.String(length=100), nullable=True),
        sa.Column('capacity', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'hotels',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=200), nullable=True),
        sa.Column('location', sa.String(length=200), nullable=True),
        sa.Column('price', sa.Float(), nullable=True),
        sa.Column('rating', sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_hotels_location', 'hotels', ['location'])
    op.create_table(
        'trains',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('train_name', sa.String(length=200), nullable=True),
        sa.Column('train_number', sa.String(length=50), nullable=True),
        sa.Column('source_station', sa.String(length=200), nullable=True),
        sa.Column('destination_station', sa.String(length=200), nullable=True),
        sa.Column('departure_time', sa.Time(), nullable=True),
        sa.Column('arrival_time', sa.Time(), nullable=True),
        sa.Column('travel_date', sa.Date(), nullable=True),
        sa.Column('price', sa.Float(), nullable=True),
        sa.Column('seats_available', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    op.drop_table('trains')
    op.drop_index('idx_hotels_location', table_name='hotels')
    op.drop_table('hotels')
    op.drop_table('buses')
    op.drop_index('idx_tasks_user', table_name='tasks')
    op.drop_table('tasks')
    op.drop_table('users')
