"""add venues, venue_time_slots and venue_slot_days

Revision ID: 8d21f6b4c0e9
Revises: 3a9e51c07b42
Create Date: 2026-10-06

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = '8d21f6b4c0e9'
down_revision: Union[str, Sequence[str], None] = '3a9e51c07b42'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'venues',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('center_head', sa.String(length=200), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=False),
        sa.Column('google_url', sa.String(length=1000), nullable=True),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='Active'),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_venues_tenant_id'), 'venues', ['tenant_id'], unique=False)

    op.create_table(
        'venue_time_slots',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=True),
        sa.Column('venue_id', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.Time(), nullable=False),
        sa.Column('end_time', sa.Time(), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['venue_id'], ['venues.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_venue_time_slots_venue_id'), 'venue_time_slots', ['venue_id'], unique=False)

    op.create_table(
        'venue_slot_days',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=True),
        sa.Column('time_slot_id', sa.Integer(), nullable=False),
        sa.Column('day', sa.String(length=3), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['time_slot_id'], ['venue_time_slots.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('time_slot_id', 'day', name='uq_venue_slot_days_slot_day'),
    )
    op.create_index(op.f('ix_venue_slot_days_time_slot_id'), 'venue_slot_days', ['time_slot_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_venue_slot_days_time_slot_id'), table_name='venue_slot_days')
    op.drop_table('venue_slot_days')

    op.drop_index(op.f('ix_venue_time_slots_venue_id'), table_name='venue_time_slots')
    op.drop_table('venue_time_slots')

    op.drop_index(op.f('ix_venues_tenant_id'), table_name='venues')
    op.drop_table('venues')
