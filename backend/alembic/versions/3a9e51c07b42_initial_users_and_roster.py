"""initial users, coaches, players, attendance, registrations, training sessions

Revision ID: 3a9e51c07b42
Revises:
Create Date: 2026-09-28

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = '3a9e51c07b42'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=True),
        sa.Column('full_name', sa.String(length=128), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=128), nullable=False),
        sa.Column('role', sa.String(length=32), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_tenant_id'), 'users', ['tenant_id'], unique=False)

    op.create_table(
        'coaches',
        sa.Column('coach_id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=True),
        sa.Column('coach_name', sa.String(length=100), nullable=False),
        sa.Column('phone_numbers', sa.String(length=64), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=True),
        sa.Column('players', sa.Integer(), nullable=True),
        sa.Column('salary', sa.Numeric(10, 2), nullable=True),
        sa.Column('week_salary', sa.Numeric(10, 2), nullable=True),
        sa.Column('category', sa.String(length=64), nullable=True),
        sa.Column('attendance', sa.String(length=32), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='Active'),
        sa.PrimaryKeyConstraint('coach_id'),
    )
    op.create_index(op.f('ix_coaches_tenant_id'), 'coaches', ['tenant_id'], unique=False)
    op.create_index(op.f('ix_coaches_email'), 'coaches', ['email'], unique=False)

    op.create_table(
        'players',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('player_id', sa.String(length=32), nullable=True),
        sa.Column('tenant_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('father_name', sa.String(length=128), nullable=True),
        sa.Column('mother_name', sa.String(length=128), nullable=True),
        sa.Column('gender', sa.String(length=16), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('blood_group', sa.String(length=8), nullable=True),
        sa.Column('email_id', sa.String(length=255), nullable=True),
        sa.Column('phone_no', sa.String(length=32), nullable=True),
        sa.Column('emergency_contact_number', sa.String(length=32), nullable=True),
        sa.Column('guardian_contact_number', sa.String(length=32), nullable=True),
        sa.Column('guardian_email_id', sa.String(length=255), nullable=True),
        sa.Column('address', sa.String(length=500), nullable=True),
        sa.Column('medical_condition', sa.Text(), nullable=True),
        sa.Column('aadhar_upload_path', sa.String(length=500), nullable=True),
        sa.Column('birth_certificate_path', sa.String(length=500), nullable=True),
        sa.Column('profile_photo_path', sa.String(length=500), nullable=True),
        sa.Column('center_name', sa.String(length=200), nullable=True),
        sa.Column('coach_id', sa.Integer(), nullable=True),
        sa.Column('coach_name', sa.String(length=100), nullable=True),
        sa.Column('category', sa.String(length=64), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='Active'),
        sa.ForeignKeyConstraint(['coach_id'], ['coaches.coach_id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('player_id'),
    )
    op.create_index(op.f('ix_players_tenant_id'), 'players', ['tenant_id'], unique=False)
    op.create_index(op.f('ix_players_coach_id'), 'players', ['coach_id'], unique=False)
    op.create_index(op.f('ix_players_guardian_email_id'), 'players', ['guardian_email_id'], unique=False)

    op.create_table(
        'attendance',
        sa.Column('attendance_id', sa.Integer(), nullable=False),
        sa.Column('player_id', sa.String(length=32), nullable=False),
        sa.Column('attendance_date', sa.Date(), nullable=False),
        sa.Column('is_present', sa.Boolean(), nullable=False),
        sa.Column('recorded_by_coach_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['player_id'], ['players.player_id']),
        sa.ForeignKeyConstraint(['recorded_by_coach_id'], ['coaches.coach_id']),
        sa.PrimaryKeyConstraint('attendance_id'),
    )
    op.create_index(op.f('ix_attendance_player_id'), 'attendance', ['player_id'], unique=False)
    op.create_index(op.f('ix_attendance_attendance_date'), 'attendance', ['attendance_date'], unique=False)
    op.create_index(op.f('ix_attendance_recorded_by_coach_id'), 'attendance', ['recorded_by_coach_id'], unique=False)

    op.create_table(
        'registrations',
        sa.Column('regist_id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=128), nullable=True),
        sa.Column('phone_number', sa.String(length=32), nullable=True),
        sa.Column('email_id', sa.String(length=255), nullable=True),
        sa.Column('address', sa.String(length=500), nullable=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('application_date', sa.Date(), nullable=True),
        sa.Column('parent_name', sa.String(length=128), nullable=True),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='Pending'),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.PrimaryKeyConstraint('regist_id'),
        sa.UniqueConstraint('tenant_id', 'email_id', name='uq_registrations_tenant_email'),
    )
    op.create_index(op.f('ix_registrations_tenant_id'), 'registrations', ['tenant_id'], unique=False)

    op.create_table(
        'training_sessions',
        sa.Column('session_id', sa.Integer(), nullable=False),
        sa.Column('coach_id', sa.Integer(), nullable=False),
        sa.Column('coach_name', sa.String(length=100), nullable=False),
        sa.Column('day_of_week', sa.String(length=16), nullable=False),
        sa.Column('start_time', sa.Time(), nullable=False),
        sa.Column('end_time', sa.Time(), nullable=False),
        sa.Column('group_category', sa.String(length=64), nullable=True),
        sa.Column('location', sa.String(length=200), nullable=True),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='Upcoming'),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.ForeignKeyConstraint(['coach_id'], ['coaches.coach_id']),
        sa.PrimaryKeyConstraint('session_id'),
    )
    op.create_index(op.f('ix_training_sessions_coach_id'), 'training_sessions', ['coach_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_training_sessions_coach_id'), table_name='training_sessions')
    op.drop_table('training_sessions')

    op.drop_index(op.f('ix_registrations_tenant_id'), table_name='registrations')
    op.drop_table('registrations')

    op.drop_index(op.f('ix_attendance_recorded_by_coach_id'), table_name='attendance')
    op.drop_index(op.f('ix_attendance_attendance_date'), table_name='attendance')
    op.drop_index(op.f('ix_attendance_player_id'), table_name='attendance')
    op.drop_table('attendance')

    op.drop_index(op.f('ix_players_guardian_email_id'), table_name='players')
    op.drop_index(op.f('ix_players_coach_id'), table_name='players')
    op.drop_index(op.f('ix_players_tenant_id'), table_name='players')
    op.drop_table('players')

    op.drop_index(op.f('ix_coaches_email'), table_name='coaches')
    op.drop_index(op.f('ix_coaches_tenant_id'), table_name='coaches')
    op.drop_table('coaches')

    op.drop_index(op.f('ix_users_tenant_id'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
