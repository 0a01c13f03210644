"""Add consultations, availability and booking status history

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 14:30:00.000000

Creates doctor/advocate appointments, provider availability schedules and the
append-only booking status log.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Allowed values of the enum-backed string columns at this revision
BOOKING_STATUSES = (
    'pending', 'confirmed', 'assigned', 'in-progress', 'completed', 'cancelled', 'no-show',
)
BOOKING_ACTORS = ('customer', 'provider', 'admin', 'system')
PAYMENT_STATUSES = ('pending', 'paid', 'failed', 'refunded')
PROFESSIONAL_TYPES = ('doctor', 'advocate')
CONSULTATION_MODES = ('clinic', 'online', 'home', 'chamber', 'phone')
APPOINTMENT_STATUSES = ('scheduled', 'confirmed', 'checked-in', 'completed', 'cancelled', 'no-show')
APPOINTMENT_SOURCES = ('app', 'web', 'admin')
AVAILABILITY_TYPES = ('weekly', 'date-specific')

JSON = sa.JSON().with_variant(postgresql.JSONB(), 'postgresql')
UTC_DATETIME = sa.DateTime(timezone=True)


def _base(table: str, soft_delete: bool = True) -> list:
    """Primary key, timestamps and (optionally) the soft delete flag."""
    items = [
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', UTC_DATETIME, nullable=False),
        sa.Column('updated_at', UTC_DATETIME, nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f(f'pk_{table}')),
    ]
    if soft_delete:
        items.append(sa.Column('is_deleted', sa.Boolean(), nullable=False))
    return items


def _enum(column: str, values: Sequence[str], nullable: bool = False) -> sa.Column:
    return sa.Column(column, sa.String(max(max(len(v) for v in values), 16)), nullable=nullable)


def _check(table: str, column: str, values: Sequence[str]) -> sa.CheckConstraint:
    allowed = ", ".join(f"'{v}'" for v in values)
    return sa.CheckConstraint(f"{column} IN ({allowed})", name=op.f(f'ck_{table}_{column}_valid'))


def _fk(table: str, column: str, referred: str, ondelete: str = 'CASCADE') -> sa.ForeignKeyConstraint:
    return sa.ForeignKeyConstraint(
        [column], [f'{referred}.id'],
        name=op.f(f'fk_{table}_{column}_{referred}'),
        ondelete=ondelete,
    )


def _index(table: str, *columns: str, name: str = None) -> None:
    op.create_index(name or op.f(f'ix_{table}_{columns[0]}'), table, list(columns), unique=False)


def upgrade() -> None:
    """Create appointment, availability and booking status log tables"""
    op.create_table('booking_status_logs',
        *_base('booking_status_logs', soft_delete=False),
        sa.Column('booking_id', sa.Uuid(), nullable=False),
        _enum('previous_status', BOOKING_STATUSES, nullable=True),
        _enum('new_status', BOOKING_STATUSES),
        _enum('changed_by', BOOKING_ACTORS),
        sa.Column('user_id', sa.Uuid(), nullable=True),
        sa.Column('reason', sa.String(500), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('meta', JSON, nullable=False, comment='{ip_address, user_agent, source}'),
        _fk('booking_status_logs', 'booking_id', 'bookings'),
        _fk('booking_status_logs', 'user_id', 'users', 'SET NULL'),
        _check('booking_status_logs', 'previous_status', BOOKING_STATUSES),
        _check('booking_status_logs', 'new_status', BOOKING_STATUSES),
        _check('booking_status_logs', 'changed_by', BOOKING_ACTORS),
    )
    _index('booking_status_logs', 'changed_by')
    _index('booking_status_logs', 'user_id')
    _index(
        'booking_status_logs', 'booking_id', 'created_at',
        name='ix_booking_status_logs_booking_id_created_at',
    )
    _index(
        'booking_status_logs', 'new_status', 'created_at',
        name='ix_booking_status_logs_new_status_created_at',
    )

    op.create_table('appointments',
        *_base('appointments'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('provider_id', sa.Uuid(), nullable=False),
        _enum('professional_type', PROFESSIONAL_TYPES),
        sa.Column('doctor_profile_id', sa.Uuid(), nullable=True),
        sa.Column('advocate_profile_id', sa.Uuid(), nullable=True),
        sa.Column('appointment_date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.String(5), nullable=False, comment='HH:MM'),
        sa.Column('end_time', sa.String(5), nullable=False, comment='HH:MM'),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        _enum('mode', CONSULTATION_MODES),
        sa.Column('location', JSON, nullable=True, comment='{name, address_id}'),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('fee', JSON, nullable=False, comment='{amount, currency}'),
        sa.Column('payment_id', sa.Uuid(), nullable=True),
        _enum('payment_status', PAYMENT_STATUSES),
        _enum('status', APPOINTMENT_STATUSES),
        sa.Column('cancellation', JSON, nullable=True, comment='{reason, cancelled_at, cancelled_by}'),
        sa.Column('confirmed_at', UTC_DATETIME, nullable=True),
        sa.Column('checked_in_at', UTC_DATETIME, nullable=True),
        sa.Column('completed_at', UTC_DATETIME, nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        _enum('source', APPOINTMENT_SOURCES),
        _fk('appointments', 'user_id', 'users', 'RESTRICT'),
        _fk('appointments', 'provider_id', 'users', 'RESTRICT'),
        _fk('appointments', 'doctor_profile_id', 'doctor_profiles', 'SET NULL'),
        _fk('appointments', 'advocate_profile_id', 'advocate_profiles', 'SET NULL'),
        _fk('appointments', 'payment_id', 'payments', 'SET NULL'),
        _check('appointments', 'professional_type', PROFESSIONAL_TYPES),
        _check('appointments', 'mode', CONSULTATION_MODES),
        _check('appointments', 'payment_status', PAYMENT_STATUSES),
        _check('appointments', 'status', APPOINTMENT_STATUSES),
        _check('appointments', 'source', APPOINTMENT_SOURCES),
        sa.CheckConstraint('end_time > start_time', name=op.f('ck_appointments_end_after_start')),
    )
    _index('appointments', 'is_deleted')
    _index('appointments', 'user_id')
    _index('appointments', 'provider_id')
    _index('appointments', 'professional_type')
    _index('appointments', 'appointment_date')
    _index('appointments', 'mode')
    _index('appointments', 'payment_status')
    _index('appointments', 'status')
    _index(
        'appointments', 'provider_id', 'appointment_date', 'start_time',
        name='ix_appointments_provider_id_appointment_date_start_time',
    )
    _index('appointments', 'user_id', 'appointment_date', name='ix_appointments_user_id_appointment_date')
    _index('appointments', 'status', 'payment_status', name='ix_appointments_status_payment_status')

    op.create_table('availabilities',
        *_base('availabilities'),
        sa.Column('provider_id', sa.Uuid(), nullable=False),
        sa.Column('service_id', sa.Uuid(), nullable=True),
        _enum('type', AVAILABILITY_TYPES),
        sa.Column('weekly', JSON, nullable=False, comment='{monday: [{start_time, end_time}], ...}'),
        sa.Column('date_specific', JSON, nullable=False,
                  comment='[{day, slots: [{start_time, end_time, is_booked, booking_id}]}]'),
        sa.Column('slot_duration', sa.Integer(), nullable=False),
        sa.Column('buffer_time', sa.Integer(), nullable=False),
        sa.Column('timezone', sa.String(64), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        _fk('availabilities', 'provider_id', 'users'),
        _fk('availabilities', 'service_id', 'services'),
        _check('availabilities', 'type', AVAILABILITY_TYPES),
    )
    _index('availabilities', 'is_deleted')
    _index('availabilities', 'service_id')
    _index('availabilities', 'type')
    _index('availabilities', 'is_active')
    _index('availabilities', 'provider_id', 'service_id', name='ix_availabilities_provider_id_service_id')


def downgrade() -> None:
    """Drop appointment, availability and booking status log tables"""
    for table in ('availabilities', 'appointments', 'booking_status_logs'):
        op.drop_table(table)
