"""Create dormitory tables

Revision ID: 20261018_000001
Revises: None
Create Date: 2026-10-18

This migration creates buildings, rooms, the people living in them, room
assets, monthly bills and staff accounts.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261018_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all dormitory tables."""
    op.create_table(
        'buildings',
        sa.Column('id', sa.String(32), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'rooms',
        sa.Column('id', sa.String(32), nullable=False),
        sa.Column('building_id', sa.String(32), nullable=False),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column(
            'status',
            sa.Enum('AVAILABLE', 'FULL', 'MAINTENANCE', name='room_status', create_constraint=True),
            nullable=False,
            server_default='AVAILABLE'
        ),
        sa.Column('max_capacity', sa.Integer(), nullable=False),
        sa.Column('current_capacity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('price_per_month', sa.BigInteger(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['building_id'],
            ['buildings.id'],
            name='fk_rooms_building_id',
            ondelete='NO ACTION'
        ),
        sa.CheckConstraint('max_capacity > 0', name='ck_rooms_max_capacity_positive'),
        sa.CheckConstraint('current_capacity >= 0', name='ck_rooms_current_capacity_non_negative'),
    )
    op.create_index('ix_rooms_building_id', 'rooms', ['building_id'])
    op.create_index('ix_rooms_status', 'rooms', ['status'])

    op.create_table(
        'students',
        sa.Column('id', sa.String(32), nullable=False),
        sa.Column('student_code', sa.String(20), nullable=False),
        sa.Column('room_id', sa.String(32), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('dob', sa.Date(), nullable=True),
        sa.Column('gender', sa.String(10), nullable=True),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('university', sa.String(150), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['room_id'], ['rooms.id'], name='fk_students_room_id', ondelete='NO ACTION'),
    )
    op.create_index('ix_students_student_code', 'students', ['student_code'], unique=True)
    op.create_index('ix_students_room_id', 'students', ['room_id'])

    op.create_table(
        'guests',
        sa.Column('id', sa.String(32), nullable=False),
        sa.Column('room_id', sa.String(32), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('cccd', sa.String(20), nullable=True),
        sa.Column('relation', sa.String(50), nullable=True),
        sa.Column('check_in_date', sa.Date(), nullable=True),
        sa.Column('check_out_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['room_id'], ['rooms.id'], name='fk_guests_room_id', ondelete='NO ACTION'),
    )
    op.create_index('ix_guests_room_id', 'guests', ['room_id'])

    op.create_table(
        'assets',
        sa.Column('id', sa.String(32), nullable=False),
        sa.Column('room_id', sa.String(32), nullable=True),
        sa.Column('name', sa.String(150), nullable=False),
        sa.Column(
            'status',
            sa.Enum('GOOD', 'BROKEN', 'REPAIRING', name='asset_status', create_constraint=True),
            nullable=False,
            server_default='GOOD'
        ),
        sa.Column('value', sa.BigInteger(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['room_id'], ['rooms.id'], name='fk_assets_room_id', ondelete='CASCADE'),
    )
    op.create_index('ix_assets_room_id', 'assets', ['room_id'])

    op.create_table(
        'bills',
        sa.Column('id', sa.String(32), nullable=False),
        sa.Column('room_id', sa.String(32), nullable=False),
        sa.Column('month', sa.String(7), nullable=False),
        sa.Column('electric_index_old', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('electric_index_new', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('water_index_old', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('water_index_new', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('room_fee', sa.BigInteger(), nullable=False, server_default='0'),
        sa.Column('total_amount', sa.BigInteger(), nullable=False, server_default='0'),
        sa.Column(
            'status',
            sa.Enum('UNPAID', 'PAID', name='bill_status', create_constraint=True),
            nullable=False,
            server_default='UNPAID'
        ),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('payment_date', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['room_id'], ['rooms.id'], name='fk_bills_room_id', ondelete='CASCADE'),
    )

    # Create indexes for common queries
    op.create_index('ix_bills_room_id', 'bills', ['room_id'])
    op.create_index('ix_bills_month', 'bills', ['month'])
    op.create_index('ix_bills_status', 'bills', ['status'])
    op.create_index('ix_bills_due_date', 'bills', ['due_date'])

    op.create_table(
        'users',
        sa.Column('id', sa.String(32), nullable=False),
        sa.Column('username', sa.String(50), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(100), nullable=False),
        sa.Column(
            'role',
            sa.Enum('ADMIN', 'STAFF', name='user_role', create_constraint=True),
            nullable=False,
            server_default='STAFF'
        ),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)


def downgrade() -> None:
    """Drop all dormitory tables."""
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')

    op.drop_index('ix_bills_due_date', table_name='bills')
    op.drop_index('ix_bills_status', table_name='bills')
    op.drop_index('ix_bills_month', table_name='bills')
    op.drop_index('ix_bills_room_id', table_name='bills')
    op.drop_table('bills')

    op.drop_index('ix_assets_room_id', table_name='assets')
    op.drop_table('assets')

    op.drop_index('ix_guests_room_id', table_name='guests')
    op.drop_table('guests')

    op.drop_index('ix_students_room_id', table_name='students')
    op.drop_index('ix_students_student_code', table_name='students')
    op.drop_table('students')

    op.drop_index('ix_rooms_status', table_name='rooms')
    op.drop_index('ix_rooms_building_id', table_name='rooms')
    op.drop_table('rooms')

    op.drop_table('buildings')
