"""Create the marketplace schema

Revision ID: 001
Revises:
Create Date: 2026-10-19 10:00:00.000000

Creates the identity, providers, catalog, commerce, services, hospitality,
mobility, cinema, finance, support and reviews tables with their indexes,
unique and check constraints. Cyclic foreign keys (orders <-> shipments,
orders/order_items/bookings -> invoices) are added after the tables exist.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Allowed values of the enum-backed string columns at this revision
USER_ROLES = (
    'admin', 'customer', 'service-provider', 'seller-b2c', 'seller-b2b', 'restaurant', 'doctor',
    'advocate', 'hotel', 'driver', 'bike-owner', 'cinema-owner', 'property-owner',
    'home-service-provider',
)
USER_STATUSES = ('pending', 'active', 'suspended')
GENDERS = ('male', 'female', 'other')
ADDRESS_TYPES = ('home', 'work', 'office', 'warehouse', 'pickup', 'other')
OTP_PURPOSES = ('register', 'login', 'forgot-password', 'verify-email', 'verify-phone', '2fa')
DEVICE_TYPES = ('web', 'android', 'ios', 'other')

ONBOARDING_STATUSES = ('pending', 'active', 'rejected')
DRIVER_SHIFTS = ('day', 'night', 'flexible')
BUSINESS_TYPES = ('manufacturer', 'wholesaler', 'trader', 'exporter', 'importer', 'service-provider')

CATEGORY_TYPES = ('b2c', 'b2b', 'home-service', 'service', 'restaurant-menu')
PRODUCT_TYPES = ('b2c', 'b2b')
PRODUCT_STATUSES = ('draft', 'active', 'inactive')
INVENTORY_REASONS = (
    'initial', 'order_placed', 'order_cancelled', 'order_shipped', 'order_returned',
    'manual_adjustment', 'restock',
)
LISTING_SERVICE_TYPES = (
    'home-service', 'professional', 'health', 'legal', 'repair', 'cleaning', 'beauty', 'other',
)
SERVICE_LOCATIONS = ('at-home', 'at-center', 'online')
BULK_PRICING_TYPES = ('fixed', 'range', 'negotiable')

PAYMENT_STATUSES = ('pending', 'paid', 'failed', 'refunded')
COUPON_SCOPES = ('order', 'booking', 'subscription', 'wallet')
DISCOUNT_TYPES = ('flat', 'percentage')
ORDER_STATUSES = ('pending', 'confirmed', 'packed', 'shipped', 'delivered', 'cancelled', 'returned')
ORDER_ITEM_STATUSES = ORDER_STATUSES + ('refunded',)
SHIPMENT_TYPES = ('forward', 'reverse')
SHIPMENT_STATUSES = (
    'created', 'label_generated', 'picked_up', 'in_transit', 'out_for_delivery', 'delivered',
    'failed', 'rto', 'returned',
)
BOOKING_STATUSES = (
    'pending', 'confirmed', 'assigned', 'in-progress', 'completed', 'cancelled', 'no-show',
)

HOTEL_TYPES = ('hotel', 'resort', 'homestay', 'hostel', 'guest-house')
RESTAURANT_TYPES = ('dine-in', 'delivery', 'takeaway', 'cloud-kitchen')
STAY_STATUSES = ('pending', 'confirmed', 'checked-in', 'completed', 'cancelled', 'no-show')
BOOKING_SOURCES = ('app', 'web', 'admin')
TABLE_STATUSES = ('available', 'occupied', 'reserved', 'out-of-service')
FOOD_TYPES = ('veg', 'non-veg', 'egg')
TABLE_BOOKING_SOURCES = ('app', 'web', 'walk-in')

VEHICLE_TYPES = ('bike', 'auto', 'car', 'van')
VEHICLE_CATEGORIES = ('bike', 'mini', 'sedan', 'suv', 'luxury', 'electric')
FUEL_TYPES = ('petrol', 'diesel', 'cng', 'electric')
RIDE_STATUSES = ('requested', 'accepted', 'arrived', 'in-progress', 'completed', 'cancelled', 'no-show')
RIDE_SOURCES = ('app', 'web', 'admin')

CINEMA_TYPES = ('single-screen', 'multiplex')
CERTIFICATIONS = ('U', 'UA', 'A', 'S')
SCREEN_FORMATS = ('2D', '3D', 'IMAX', '4DX')
SOUND_SYSTEMS = ('Dolby', 'Dolby Atmos', 'DTS', 'IMAX Sound')
SHOW_STATUSES = ('scheduled', 'open', 'sold-out', 'cancelled', 'completed')
TICKET_STATUSES = ('reserved', 'confirmed', 'cancelled', 'refunded', 'used', 'expired')
TICKET_SOURCES = ('app', 'web', 'admin')

REFERENCE_TYPES = (
    'order', 'order-item', 'booking', 'room-booking', 'table-booking', 'ride', 'ticket',
    'subscription', 'wallet',
)
PAYMENT_GATEWAYS = ('razorpay', 'stripe', 'paypal', 'wallet')
PAYMENT_PURPOSES = (
    'order_payment', 'booking_payment', 'subscription_payment', 'wallet_topup', 'penalty', 'other',
)
GATEWAY_STATUSES = ('created', 'pending', 'authorized', 'captured', 'success', 'failed', 'refunded')
TRANSACTION_TYPES = ('credit', 'debit')
TRANSACTION_PURPOSES = (
    'order_payment', 'order_refund', 'booking_payment', 'booking_refund', 'commission', 'earning',
    'payout', 'wallet_topup', 'adjustment',
)
TRANSACTION_STATUSES = ('pending', 'completed', 'failed', 'reversed')
COMMISSION_SERVICE_TYPES = (
    'b2c', 'b2b', 'service', 'restaurant', 'hotel', 'doctor', 'advocate', 'driver', 'cinema',
    'subscription',
)
COMMISSION_STATUSES = ('pending', 'applied', 'reversed')
COMMISSION_SOURCES = ('default', 'subscription', 'rule', 'manual')
COMMISSION_MODULES = ('b2c', 'b2b', 'home-service')
PLAN_CODES = ('FREE', 'PRO', 'ENTERPRISE')
REFUND_METHODS = ('original', 'wallet')
REFUND_STATUSES = ('initiated', 'processing', 'completed', 'failed')
CANCELLED_BY = ('customer', 'provider', 'admin', 'system')
CANCELLATION_STATUSES = ('pending', 'processed', 'rejected')
BILLING_CYCLES = ('monthly', 'quarterly', 'yearly')
SUBSCRIPTION_STATUSES = ('active', 'expired', 'cancelled', 'pending')

ACTOR_ROLES = ('user', 'admin', 'system')
AUDIT_ACTION_TYPES = ('create', 'update', 'delete', 'login', 'logout', 'payment', 'system', 'other')
AUDIT_SEVERITIES = ('info', 'warning', 'error', 'critical')
ADMIN_ACTION_TYPES = (
    'create', 'update', 'delete', 'approve', 'reject', 'block', 'unblock', 'refund', 'other',
)
ADMIN_SEVERITIES = ('low', 'medium', 'high', 'critical')
NOTIFICATION_TYPES = (
    'system', 'order', 'booking', 'payment', 'wallet', 'commission', 'review', 'support', 'promotion',
)
NOTIFICATION_PRIORITIES = ('low', 'normal', 'high')
TICKET_CATEGORIES = (
    'general', 'order', 'booking', 'payment', 'wallet', 'subscription', 'technical', 'other',
)
SUPPORT_TICKET_STATUSES = ('open', 'in-progress', 'waiting', 'resolved', 'closed')
SUPPORT_TICKET_PRIORITIES = ('low', 'medium', 'high', 'urgent')
DOCUMENT_TYPES = (
    'profile-image', 'identity-proof', 'address-proof', 'license', 'certificate', 'invoice',
    'product-image', 'menu-image', 'property-image', 'ticket-attachment', 'other',
)
SETTING_VALUE_TYPES = ('string', 'number', 'boolean', 'json', 'array')
SETTING_SCOPES = ('global', 'module', 'tenant')
SETTING_ENVIRONMENTS = ('dev', 'staging', 'prod')

REVIEW_TARGET_TYPES = (
    'product', 'bulk-product', 'service', 'hotel', 'restaurant', 'menu-item', 'cinema', 'movie',
    'profile', 'provider',
)
REVIEW_SERVICE_TYPES = (
    'b2c', 'b2b', 'service', 'restaurant', 'hotel', 'doctor', 'advocate', 'driver', 'bike',
    'cinema', 'property',
)
REVIEW_STATUSES = ('pending', 'approved', 'rejected')

# Foreign keys created after every table exists: (table, column, referred table)
DEFERRED_FOREIGN_KEYS = (
    ('orders', 'shipment_id', 'shipments'),
    ('orders', 'invoice_id', 'invoices'),
    ('order_items', 'invoice_id', 'invoices'),
    ('bookings', 'invoice_id', 'invoices'),
)

JSON = sa.JSON().with_variant(postgresql.JSONB(), 'postgresql')
MONEY = sa.Numeric(12, 2)
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


def _rating() -> list:
    return [
        sa.Column('rating', sa.Float(), nullable=False),
        sa.Column('rating_count', sa.Integer(), nullable=False),
    ]


def _listing(table: str) -> list:
    """Moderation columns shared by public listings."""
    return _rating() + [
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_approved', sa.Boolean(), nullable=False),
        sa.Column('approved_at', UTC_DATETIME, nullable=True),
        sa.Column('is_featured', sa.Boolean(), nullable=False),
        sa.Column('approved_by', sa.Uuid(), nullable=True),
        _fk(table, 'approved_by', 'users', 'SET NULL'),
    ]


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


def _index(table: str, *columns: str, name: str = None, unique: bool = False, **kw) -> None:
    op.create_index(name or op.f(f'ix_{table}_{columns[0]}'), table, list(columns), unique=unique, **kw)


def _soft_delete_index(table: str) -> None:
    _index(table, 'is_deleted')


def _listing_indexes(table: str) -> None:
    _index(table, 'is_active')
    _index(table, 'is_approved')


def upgrade() -> None:
    """Create all marketplace tables"""

    # 1. Identity
    op.create_table('users',
        *_base('users'),
        sa.Column('name', sa.String(120), nullable=False, comment='Display name'),
        sa.Column('email', sa.String(254), nullable=False, comment='Lowercased email address'),
        sa.Column('phone', sa.String(15), nullable=True, comment='10-digit mobile number'),
        sa.Column('password_hash', sa.String(255), nullable=False, comment='bcrypt hash'),
        _enum('role', USER_ROLES),
        _enum('status', USER_STATUSES),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_blocked', sa.Boolean(), nullable=False),
        sa.Column('is_email_verified', sa.Boolean(), nullable=False),
        sa.Column('is_phone_verified', sa.Boolean(), nullable=False),
        sa.Column('last_login_at', UTC_DATETIME, nullable=True),
        sa.Column('password_changed_at', UTC_DATETIME, nullable=True),
        _check('users', 'role', USER_ROLES),
        _check('users', 'status', USER_STATUSES),
    )
    _soft_delete_index('users')
    _index('users', 'email', unique=True)
    _index('users', 'phone', unique=True)
    _index('users', 'role')
    _index('users', 'role', 'is_active', name='ix_users_role_is_active')

    op.create_table('roles',
        *_base('roles'),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('display_name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('permissions', JSON, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_system_role', sa.Boolean(), nullable=False),
    )
    _soft_delete_index('roles')
    _index('roles', 'name', unique=True)

    op.create_table('addresses',
        *_base('addresses'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        _enum('type', ADDRESS_TYPES),
        sa.Column('name', sa.String(60), nullable=True),
        sa.Column('address_line1', sa.String(200), nullable=False),
        sa.Column('address_line2', sa.String(200), nullable=True),
        sa.Column('landmark', sa.String(120), nullable=True),
        sa.Column('city', sa.String(80), nullable=False),
        sa.Column('state', sa.String(80), nullable=False),
        sa.Column('country', sa.String(60), nullable=False),
        sa.Column('pincode', sa.String(6), nullable=False),
        sa.Column('contact_name', sa.String(120), nullable=True),
        sa.Column('contact_phone', sa.String(15), nullable=True),
        sa.Column('location', JSON, nullable=True),
        sa.Column('is_default', sa.Boolean(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        _fk('addresses', 'user_id', 'users'),
        _check('addresses', 'type', ADDRESS_TYPES),
    )
    _soft_delete_index('addresses')
    _index('addresses', 'type')
    _index('addresses', 'city')
    _index('addresses', 'pincode')
    _index('addresses', 'user_id', 'is_deleted', name='ix_addresses_user_id_is_deleted')
    _index(
        'addresses', 'user_id', name='uq_addresses_user_default', unique=True,
        postgresql_where=sa.text('is_default = true AND is_deleted = false'),
        sqlite_where=sa.text('is_default = 1 AND is_deleted = 0'),
    )

    op.create_table('profiles',
        *_base('profiles'),
        *_rating(),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('first_name', sa.String(60), nullable=True),
        sa.Column('last_name', sa.String(60), nullable=True),
        _enum('gender', GENDERS, nullable=True),
        sa.Column('dob', sa.Date(), nullable=True),
        sa.Column('avatar', sa.String(500), nullable=True, comment='Object storage URL'),
        sa.Column('alternate_phone', sa.String(15), nullable=True),
        sa.Column('address_id', sa.Uuid(), nullable=True),
        sa.Column('location', JSON, nullable=True, comment='{latitude, longitude}'),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        _fk('profiles', 'user_id', 'users'),
        _fk('profiles', 'address_id', 'addresses', 'SET NULL'),
        _check('profiles', 'gender', GENDERS),
    )
    _soft_delete_index('profiles')
    _index('profiles', 'user_id', unique=True)

    op.create_table('otps',
        *_base('otps', soft_delete=False),
        sa.Column('user_id', sa.Uuid(), nullable=True),
        sa.Column('target', sa.String(254), nullable=False, comment='Email or phone the code was sent to'),
        sa.Column('code_hash', sa.String(64), nullable=False, comment='SHA-256 of the code'),
        _enum('purpose', OTP_PURPOSES),
        sa.Column('expires_at', UTC_DATETIME, nullable=False),
        sa.Column('attempts', sa.Integer(), nullable=False),
        sa.Column('max_attempts', sa.Integer(), nullable=False),
        sa.Column('is_used', sa.Boolean(), nullable=False),
        sa.Column('used_at', UTC_DATETIME, nullable=True),
        sa.Column('ip_address', sa.String(45), nullable=True),
        sa.Column('user_agent', sa.String(500), nullable=True),
        _fk('otps', 'user_id', 'users'),
        _check('otps', 'purpose', OTP_PURPOSES),
    )
    _index('otps', 'user_id')
    _index('otps', 'target')
    _index('otps', 'expires_at')
    _index('otps', 'is_used')
    _index('otps', 'target', 'purpose', name='ix_otps_target_purpose')

    op.create_table('sessions',
        *_base('sessions', soft_delete=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('access_token_hash', sa.String(64), nullable=False),
        sa.Column('refresh_token_hash', sa.String(64), nullable=False),
        _enum('device_type', DEVICE_TYPES),
        sa.Column('device_id', sa.String(255), nullable=True),
        sa.Column('ip_address', sa.String(45), nullable=True),
        sa.Column('user_agent', sa.String(500), nullable=True),
        sa.Column('access_token_expires_at', UTC_DATETIME, nullable=False),
        sa.Column('refresh_token_expires_at', UTC_DATETIME, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_revoked', sa.Boolean(), nullable=False),
        sa.Column('revoked_at', UTC_DATETIME, nullable=True),
        sa.Column('revoke_reason', sa.String(100), nullable=True),
        _fk('sessions', 'user_id', 'users'),
        _check('sessions', 'device_type', DEVICE_TYPES),
    )
    _index('sessions', 'user_id')
    _index('sessions', 'refresh_token_hash')
    _index('sessions', 'device_id')
    _index('sessions', 'refresh_token_expires_at')
    _index('sessions', 'user_id', 'is_active', name='ix_sessions_user_id_is_active')

    # 2. Plans, wallets and payments (referenced by most later tables)
    op.create_table('subscription_plans',
        *_base('subscription_plans'),
        _enum('code', PLAN_CODES),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', MONEY, nullable=False),
        sa.Column('currency', sa.String(3), nullable=False),
        sa.Column('duration_days', sa.Integer(), nullable=False),
        _enum('billing_cycle', BILLING_CYCLES),
        sa.Column('applicable_roles', JSON, nullable=False),
        sa.Column('features', JSON, nullable=False),
        sa.Column('limits', JSON, nullable=False, comment='{listings, bookings_per_month, team_members}'),
        sa.Column('commission_percentage', sa.Float(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        _check('subscription_plans', 'code', PLAN_CODES),
        _check('subscription_plans', 'billing_cycle', BILLING_CYCLES),
        sa.CheckConstraint('duration_days >= 1', name=op.f('ck_subscription_plans_duration_days_positive')),
    )
    _soft_delete_index('subscription_plans')
    _index('subscription_plans', 'code', unique=True)

    op.create_table('wallets',
        *_base('wallets'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('balance', MONEY, nullable=False),
        sa.Column('currency', sa.String(3), nullable=False),
        sa.Column('total_credit', MONEY, nullable=False),
        sa.Column('total_debit', MONEY, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_blocked', sa.Boolean(), nullable=False),
        sa.Column('blocked_reason', sa.Text(), nullable=True),
        sa.Column('settlement_account', JSON, nullable=True,
                  comment='{account_holder_name, account_number, ifsc_code, bank_name, upi_id}'),
        _fk('wallets', 'user_id', 'users', 'RESTRICT'),
        sa.UniqueConstraint('user_id', name=op.f('uq_wallets_user_id')),
        sa.CheckConstraint('balance >= 0', name=op.f('ck_wallets_balance_non_negative')),
    )
    _soft_delete_index('wallets')

    op.create_table('payments',
        *_base('payments'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('wallet_id', sa.Uuid(), nullable=True),
        _enum('reference_type', REFERENCE_TYPES, nullable=True),
        sa.Column('reference_id', sa.Uuid(), nullable=True),
        sa.Column('amount', MONEY, nullable=False),
        sa.Column('currency', sa.String(3), nullable=False),
        _enum('gateway', PAYMENT_GATEWAYS),
        sa.Column('gateway_order_id', sa.String(100), nullable=True),
        sa.Column('gateway_payment_id', sa.String(100), nullable=True),
        sa.Column('gateway_signature', sa.String(255), nullable=True),
        _enum('purpose', PAYMENT_PURPOSES),
        _enum('status', GATEWAY_STATUSES),
        sa.Column('refund', JSON, nullable=False,
                  comment='{is_refunded, refund_amount, refund_at, refund_gateway_id}'),
        sa.Column('webhook_payload', JSON, nullable=True),
        sa.Column('failure_reason', sa.Text(), nullable=True),
        sa.Column('is_settled', sa.Boolean(), nullable=False),
        sa.Column('settled_at', UTC_DATETIME, nullable=True),
        _fk('payments', 'user_id', 'users', 'RESTRICT'),
        _fk('payments', 'wallet_id', 'wallets', 'SET NULL'),
        _check('payments', 'gateway', PAYMENT_GATEWAYS),
        _check('payments', 'purpose', PAYMENT_PURPOSES),
        _check('payments', 'status', GATEWAY_STATUSES),
        _check('payments', 'reference_type', REFERENCE_TYPES),
    )
    _soft_delete_index('payments')
    _index('payments', 'gateway_order_id', unique=True)
    _index('payments', 'gateway_payment_id')
    _index('payments', 'reference_type', 'reference_id', name='ix_payments_reference_type_reference_id')
    _index('payments', 'user_id', 'created_at', name='ix_payments_user_id_created_at')
    _index('payments', 'status', 'is_settled', name='ix_payments_status_is_settled')

    op.create_table('subscriptions',
        *_base('subscriptions'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('plan_id', sa.Uuid(), nullable=False),
        sa.Column('plan_name', sa.String(100), nullable=False),
        _enum('plan_code', PLAN_CODES),
        sa.Column('price', MONEY, nullable=False),
        sa.Column('currency', sa.String(3), nullable=False),
        _enum('billing_cycle', BILLING_CYCLES),
        sa.Column('start_date', UTC_DATETIME, nullable=False),
        sa.Column('end_date', UTC_DATETIME, nullable=False),
        sa.Column('auto_renew', sa.Boolean(), nullable=False),
        sa.Column('renewed_from', sa.Uuid(), nullable=True),
        sa.Column('features', JSON, nullable=False),
        sa.Column('limits', JSON, nullable=False),
        sa.Column('commission_percentage', sa.Float(), nullable=True),
        sa.Column('payment_id', sa.Uuid(), nullable=True),
        _enum('status', SUBSCRIPTION_STATUSES),
        sa.Column('cancelled_at', UTC_DATETIME, nullable=True),
        _fk('subscriptions', 'user_id', 'users'),
        _fk('subscriptions', 'plan_id', 'subscription_plans', 'RESTRICT'),
        _fk('subscriptions', 'renewed_from', 'subscriptions', 'SET NULL'),
        _fk('subscriptions', 'payment_id', 'payments', 'SET NULL'),
        _check('subscriptions', 'plan_code', PLAN_CODES),
        _check('subscriptions', 'billing_cycle', BILLING_CYCLES),
        _check('subscriptions', 'status', SUBSCRIPTION_STATUSES),
        sa.CheckConstraint('end_date > start_date', name=op.f('ck_subscriptions_end_after_start')),
    )
    _soft_delete_index('subscriptions')
    _index('subscriptions', 'plan_id')
    _index('subscriptions', 'user_id', 'status', name='ix_subscriptions_user_id_status')
    _index('subscriptions', 'status', 'end_date', name='ix_subscriptions_status_end_date')

    # 3. Provider profiles
    for table, extra in (
        ('doctor_profiles', [
            sa.Column('full_name', sa.String(120), nullable=False),
            sa.Column('slug', sa.String(140), nullable=False),
            _enum('gender', GENDERS, nullable=True),
            sa.Column('experience_years', sa.Integer(), nullable=False),
            sa.Column('about', sa.Text(), nullable=True),
            sa.Column('specializations', JSON, nullable=False),
            sa.Column('qualifications', JSON, nullable=False),
            sa.Column('registrations', JSON, nullable=False),
            sa.Column('consultation_modes', JSON, nullable=False),
            sa.Column('fees', JSON, nullable=False, comment='Fee per consultation mode'),
            sa.Column('currency', sa.String(3), nullable=False),
            sa.Column('is_featured', sa.Boolean(), nullable=False),
            sa.Column('total_appointments', sa.Integer(), nullable=False),
        ]),
        ('advocate_profiles', [
            sa.Column('full_name', sa.String(120), nullable=False),
            sa.Column('slug', sa.String(140), nullable=False),
            _enum('gender', GENDERS, nullable=True),
            sa.Column('experience_years', sa.Integer(), nullable=False),
            sa.Column('about', sa.Text(), nullable=True),
            sa.Column('practice_areas', JSON, nullable=False),
            sa.Column('courts', JSON, nullable=False),
            sa.Column('qualifications', JSON, nullable=False),
            sa.Column('registration', JSON, nullable=True, comment='{council, registration_number, year}'),
            sa.Column('consultation_modes', JSON, nullable=False),
            sa.Column('fees', JSON, nullable=False),
            sa.Column('currency', sa.String(3), nullable=False),
            sa.Column('is_featured', sa.Boolean(), nullable=False),
            sa.Column('total_cases', sa.Integer(), nullable=False),
        ]),
    ):
        op.create_table(table,
            *_base(table),
            *_rating(),
            sa.Column('user_id', sa.Uuid(), nullable=False),
            sa.Column('verification', JSON, nullable=False,
                      comment='{is_verified, verified_by, verified_at, rejected_reason}'),
            sa.Column('is_active', sa.Boolean(), nullable=False),
            *extra,
            _fk(table, 'user_id', 'users'),
            _check(table, 'gender', GENDERS),
        )
        _soft_delete_index(table)
        _index(table, 'user_id', unique=True)
        _index(table, 'is_active')
        _index(table, 'full_name')
        _index(table, 'slug')

    op.create_table('driver_profiles',
        *_base('driver_profiles'),
        *_rating(),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('verification', JSON, nullable=False,
                  comment='{is_verified, verified_by, verified_at, rejected_reason}'),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('full_name', sa.String(120), nullable=False),
        sa.Column('phone', sa.String(15), nullable=True),
        _enum('gender', GENDERS, nullable=True),
        sa.Column('experience_years', sa.Integer(), nullable=False),
        sa.Column('about', sa.Text(), nullable=True),
        sa.Column('license', JSON, nullable=False, comment='{number, issuing_authority, expiry_date}'),
        sa.Column('is_online', sa.Boolean(), nullable=False),
        _enum('shift', DRIVER_SHIFTS),
        sa.Column('current_location', JSON, nullable=True),
        sa.Column('is_blocked', sa.Boolean(), nullable=False),
        sa.Column('stats', JSON, nullable=False),
        _fk('driver_profiles', 'user_id', 'users'),
        _check('driver_profiles', 'gender', GENDERS),
        _check('driver_profiles', 'shift', DRIVER_SHIFTS),
    )
    _soft_delete_index('driver_profiles')
    _index('driver_profiles', 'user_id', unique=True)
    _index('driver_profiles', 'is_active')
    _index('driver_profiles', 'full_name')
    _index('driver_profiles', 'phone')
    _index('driver_profiles', 'is_online')
    _index('driver_profiles', 'is_blocked')

    op.create_table('business_profiles',
        *_base('business_profiles'),
        *_rating(),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('verification', JSON, nullable=False,
                  comment='{is_verified, verified_by, verified_at, rejected_reason}'),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('business_name', sa.String(160), nullable=False),
        sa.Column('slug', sa.String(180), nullable=False),
        _enum('business_type', BUSINESS_TYPES),
        sa.Column('year_established', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category_ids', JSON, nullable=False),
        sa.Column('address_id', sa.Uuid(), nullable=False),
        sa.Column('contact', JSON, nullable=False),
        sa.Column('reach', JSON, nullable=False),
        sa.Column('registration', JSON, nullable=False, comment='{gstin, pan, iec}'),
        sa.Column('employees', sa.Integer(), nullable=True),
        sa.Column('annual_turnover', sa.String(60), nullable=True),
        sa.Column('is_featured', sa.Boolean(), nullable=False),
        _fk('business_profiles', 'user_id', 'users'),
        _fk('business_profiles', 'address_id', 'addresses', 'RESTRICT'),
        _check('business_profiles', 'business_type', BUSINESS_TYPES),
    )
    _soft_delete_index('business_profiles')
    _index('business_profiles', 'user_id', unique=True)
    _index('business_profiles', 'is_active')
    _index('business_profiles', 'business_name')
    _index('business_profiles', 'slug')
    _index('business_profiles', 'business_type')
    _index('business_profiles', 'address_id')

    for table, address_column, extra in (
        ('b2c_seller_profiles', 'pickup_address_id', [
            sa.Column('store_name', sa.String(160), nullable=False),
            sa.Column('gst_number', sa.String(15), nullable=True),
            sa.Column('bank_details', JSON, nullable=False),
            sa.Column('logo', sa.String(500), nullable=True),
        ]),
        ('b2b_seller_profiles', 'company_address_id', [
            sa.Column('company_name', sa.String(160), nullable=False),
            sa.Column('business_type', sa.String(60), nullable=True),
            sa.Column('gst_number', sa.String(15), nullable=True),
            sa.Column('certifications', JSON, nullable=False),
            sa.Column('trust_score', sa.Float(), nullable=False),
        ]),
        ('home_service_profiles', None, [
            sa.Column('provider_name', sa.String(160), nullable=False),
            sa.Column('service_category_ids', JSON, nullable=False),
            sa.Column('service_area', JSON, nullable=False, comment='{city, state, pincodes}'),
            sa.Column('experience_years', sa.Integer(), nullable=False),
            sa.Column('documents', JSON, nullable=False),
        ]),
    ):
        address = []
        if address_column:
            address = [
                sa.Column(address_column, sa.Uuid(), nullable=False),
                _fk(table, address_column, 'addresses', 'RESTRICT'),
            ]
        op.create_table(table,
            *_base(table),
            *_rating(),
            sa.Column('user_id', sa.Uuid(), nullable=False),
            sa.Column('verification', JSON, nullable=False,
                      comment='{is_verified, verified_by, verified_at, rejected_reason}'),
            sa.Column('is_active', sa.Boolean(), nullable=False),
            _enum('status', ONBOARDING_STATUSES),
            sa.Column('subscription_id', sa.Uuid(), nullable=True),
            *extra,
            *address,
            _fk(table, 'user_id', 'users'),
            _fk(table, 'subscription_id', 'subscriptions', 'SET NULL'),
            _check(table, 'status', ONBOARDING_STATUSES),
        )
        _soft_delete_index(table)
        _index(table, 'user_id', unique=True)
        _index(table, 'is_active')
        _index(table, 'status')
        _index(table, 'subscription_id')
        if table != 'home_service_profiles':
            _index(table, 'gst_number')

    # 4. Catalog
    op.create_table('categories',
        *_base('categories'),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('slug', sa.String(140), nullable=False),
        _enum('type', CATEGORY_TYPES),
        sa.Column('parent_id', sa.Uuid(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('icon', sa.String(500), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        _fk('categories', 'parent_id', 'categories', 'SET NULL'),
        _check('categories', 'type', CATEGORY_TYPES),
        sa.UniqueConstraint('type', 'slug', name='uq_categories_type_slug'),
    )
    _soft_delete_index('categories')
    _index('categories', 'slug')
    _index('categories', 'type')
    _index('categories', 'parent_id')

    op.create_table('products',
        *_base('products'),
        *_listing('products'),
        sa.Column('seller_id', sa.Uuid(), nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('slug', sa.String(220), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('brand', sa.String(100), nullable=True),
        sa.Column('images', JSON, nullable=False),
        _enum('product_type', PRODUCT_TYPES),
        _enum('status', PRODUCT_STATUSES),
        sa.Column('pricing', JSON, nullable=False, comment='{mrp, selling_price, currency, tax_included}'),
        sa.Column('attributes', JSON, nullable=False),
        sa.Column('stock', sa.Integer(), nullable=False),
        sa.Column('moq', sa.Integer(), nullable=False),
        sa.Column('shipping', JSON, nullable=False),
        sa.Column('tax', JSON, nullable=False, comment='{hsn_code, gst_percentage}'),
        sa.Column('return_policy_days', sa.Integer(), nullable=False),
        _fk('products', 'seller_id', 'users'),
        _fk('products', 'category_id', 'categories', 'RESTRICT'),
        _check('products', 'product_type', PRODUCT_TYPES),
        _check('products', 'status', PRODUCT_STATUSES),
    )
    _soft_delete_index('products')
    _listing_indexes('products')
    _index('products', 'seller_id')
    _index('products', 'category_id')
    _index('products', 'name')
    _index('products', 'slug', unique=True)
    _index('products', 'brand')
    _index('products', 'product_type')
    _index('products', 'category_id', 'is_active', name='ix_products_category_id_is_active')
    _index('products', 'seller_id', 'status', name='ix_products_seller_id_status')

    op.create_table('product_variants',
        *_base('product_variants'),
        sa.Column('product_id', sa.Uuid(), nullable=False),
        sa.Column('seller_id', sa.Uuid(), nullable=False),
        sa.Column('sku', sa.String(64), nullable=False),
        sa.Column('attributes', JSON, nullable=False),
        sa.Column('pricing', JSON, nullable=False),
        sa.Column('stock', sa.Integer(), nullable=False),
        sa.Column('low_stock_threshold', sa.Integer(), nullable=False),
        sa.Column('images', JSON, nullable=False),
        sa.Column('shipping', JSON, nullable=False),
        sa.Column('tax', JSON, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_default', sa.Boolean(), nullable=False),
        _fk('product_variants', 'product_id', 'products'),
        _fk('product_variants', 'seller_id', 'users'),
    )
    _soft_delete_index('product_variants')
    _index('product_variants', 'product_id')
    _index('product_variants', 'seller_id')
    _index('product_variants', 'sku', unique=True)
    _index(
        'product_variants', 'product_id', name='uq_product_variants_product_default', unique=True,
        postgresql_where=sa.text('is_default = true AND is_deleted = false'),
        sqlite_where=sa.text('is_default = 1 AND is_deleted = 0'),
    )

    op.create_table('inventories',
        *_base('inventories'),
        sa.Column('product_id', sa.Uuid(), nullable=False),
        sa.Column('variant_id', sa.Uuid(), nullable=True),
        sa.Column('seller_id', sa.Uuid(), nullable=False),
        sa.Column('warehouse', JSON, nullable=False, comment='{name, code, address_id}'),
        sa.Column('stock', JSON, nullable=False, comment='{available, reserved, damaged}'),
        sa.Column('low_stock_threshold', sa.Integer(), nullable=False),
        _enum('last_updated_reason', INVENTORY_REASONS),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        _fk('inventories', 'product_id', 'products'),
        _fk('inventories', 'variant_id', 'product_variants'),
        _fk('inventories', 'seller_id', 'users'),
        _check('inventories', 'last_updated_reason', INVENTORY_REASONS),
    )
    _soft_delete_index('inventories')
    _index('inventories', 'seller_id')
    _index('inventories', 'product_id', 'variant_id', name='ix_inventories_product_id_variant_id')

    op.create_table('services',
        *_base('services'),
        *_listing('services'),
        sa.Column('provider_id', sa.Uuid(), nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('slug', sa.String(220), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        _enum('service_type', LISTING_SERVICE_TYPES),
        sa.Column('pricing', JSON, nullable=False,
                  comment='{price_type, base_price, max_price, currency, tax_included}'),
        sa.Column('duration', JSON, nullable=False, comment='{value, unit}'),
        _enum('service_location', SERVICE_LOCATIONS),
        sa.Column('service_area', JSON, nullable=False),
        sa.Column('images', JSON, nullable=False),
        sa.Column('options', JSON, nullable=False),
        sa.Column('booking_settings', JSON, nullable=False),
        _fk('services', 'provider_id', 'users'),
        _fk('services', 'category_id', 'categories', 'RESTRICT'),
        _check('services', 'service_type', LISTING_SERVICE_TYPES),
        _check('services', 'service_location', SERVICE_LOCATIONS),
    )
    _soft_delete_index('services')
    _listing_indexes('services')
    _index('services', 'name')
    _index('services', 'slug')
    _index('services', 'service_type')
    _index('services', 'service_location')
    _index('services', 'category_id', 'is_active', name='ix_services_category_id_is_active')
    _index('services', 'provider_id', 'is_approved', name='ix_services_provider_id_is_approved')

    op.create_table('bulk_products',
        *_base('bulk_products'),
        *_listing('bulk_products'),
        sa.Column('business_profile_id', sa.Uuid(), nullable=False),
        sa.Column('seller_id', sa.Uuid(), nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('slug', sa.String(220), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('specifications', JSON, nullable=False),
        sa.Column('moq', sa.Integer(), nullable=False),
        _enum('pricing_type', BULK_PRICING_TYPES),
        sa.Column('price', MONEY, nullable=True),
        sa.Column('price_range', JSON, nullable=True, comment='{min, max}'),
        sa.Column('currency', sa.String(3), nullable=False),
        sa.Column('tax', JSON, nullable=False),
        sa.Column('images', JSON, nullable=False),
        sa.Column('supply_ability', JSON, nullable=False),
        sa.Column('delivery_time', JSON, nullable=False),
        sa.Column('export_details', JSON, nullable=False),
        sa.Column('stats', JSON, nullable=False, comment='{views, inquiries}'),
        _fk('bulk_products', 'business_profile_id', 'business_profiles'),
        _fk('bulk_products', 'seller_id', 'users'),
        _fk('bulk_products', 'category_id', 'categories', 'RESTRICT'),
        _check('bulk_products', 'pricing_type', BULK_PRICING_TYPES),
    )
    _soft_delete_index('bulk_products')
    _listing_indexes('bulk_products')
    _index('bulk_products', 'business_profile_id')
    _index('bulk_products', 'seller_id')
    _index('bulk_products', 'name')
    _index('bulk_products', 'slug')
    _index('bulk_products', 'category_id', 'is_approved', name='ix_bulk_products_category_id_is_approved')
    _index('bulk_products', 'moq', 'pricing_type', name='ix_bulk_products_moq_pricing_type')

    # 5. Commerce
    op.create_table('coupons',
        *_base('coupons'),
        sa.Column('code', sa.String(32), nullable=False, comment='Uppercase coupon code'),
        sa.Column('title', sa.String(120), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        _enum('applicable_on', COUPON_SCOPES),
        _enum('discount_type', DISCOUNT_TYPES),
        sa.Column('discount_value', MONEY, nullable=False),
        sa.Column('max_discount_amount', MONEY, nullable=True),
        sa.Column('min_order_amount', MONEY, nullable=False),
        sa.Column('usage_limit', JSON, nullable=False, comment='{total, per_user}'),
        sa.Column('used_count', sa.Integer(), nullable=False),
        sa.Column('allowed_roles', JSON, nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=True),
        sa.Column('service_id', sa.Uuid(), nullable=True),
        sa.Column('start_date', UTC_DATETIME, nullable=False),
        sa.Column('end_date', UTC_DATETIME, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_public', sa.Boolean(), nullable=False),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        sa.Column('terms', sa.Text(), nullable=True),
        _fk('coupons', 'category_id', 'categories', 'SET NULL'),
        _fk('coupons', 'service_id', 'services', 'SET NULL'),
        _fk('coupons', 'created_by', 'users', 'SET NULL'),
        _check('coupons', 'applicable_on', COUPON_SCOPES),
        _check('coupons', 'discount_type', DISCOUNT_TYPES),
    )
    _soft_delete_index('coupons')
    _index('coupons', 'code', unique=True)
    _index('coupons', 'is_active')
    _index('coupons', 'applicable_on', 'start_date', 'end_date', name='ix_coupons_applicable_on_window')

    op.create_table('carts',
        *_base('carts'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('items', JSON, nullable=False),
        sa.Column('coupon_id', sa.Uuid(), nullable=True),
        sa.Column('discount_amount', MONEY, nullable=False),
        sa.Column('totals', JSON, nullable=False, comment='{sub_total, tax, grand_total, currency}'),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('last_updated_at', UTC_DATETIME, nullable=False),
        _fk('carts', 'user_id', 'users'),
        _fk('carts', 'coupon_id', 'coupons', 'SET NULL'),
        sa.UniqueConstraint('user_id', name=op.f('uq_carts_user_id')),
    )
    _soft_delete_index('carts')
    _index('carts', 'user_id', 'is_active', name='ix_carts_user_id_is_active')

    op.create_table('orders',
        *_base('orders'),
        sa.Column('order_number', sa.String(32), nullable=False, comment='ORD-YYYY-NNNNNN'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('shipping_address_id', sa.Uuid(), nullable=False),
        sa.Column('items', JSON, nullable=False, comment='Line snapshots'),
        sa.Column('totals', JSON, nullable=False,
                  comment='{sub_total, discount, tax, shipping, grand_total, currency}'),
        sa.Column('payment_id', sa.Uuid(), nullable=True),
        _enum('payment_status', PAYMENT_STATUSES),
        sa.Column('shipment_id', sa.Uuid(), nullable=True),
        _enum('status', ORDER_STATUSES),
        sa.Column('cancellation', JSON, nullable=True),
        sa.Column('return_request', JSON, nullable=True),
        sa.Column('invoice_id', sa.Uuid(), nullable=True),
        _fk('orders', 'user_id', 'users', 'RESTRICT'),
        _fk('orders', 'shipping_address_id', 'addresses', 'RESTRICT'),
        _fk('orders', 'payment_id', 'payments', 'SET NULL'),
        _check('orders', 'status', ORDER_STATUSES),
        _check('orders', 'payment_status', PAYMENT_STATUSES),
    )
    _soft_delete_index('orders')
    _index('orders', 'order_number', unique=True)
    _index('orders', 'payment_id')
    _index('orders', 'user_id', 'created_at', name='ix_orders_user_id_created_at')
    _index('orders', 'status', 'payment_status', name='ix_orders_status_payment_status')

    op.create_table('shipments',
        *_base('shipments'),
        sa.Column('order_id', sa.Uuid(), nullable=False),
        sa.Column('order_item_ids', JSON, nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('seller_id', sa.Uuid(), nullable=False),
        sa.Column('shipping_address', JSON, nullable=False),
        sa.Column('courier', JSON, nullable=False, comment='{name, service_type, awb, tracking_url}'),
        _enum('shipment_type', SHIPMENT_TYPES),
        sa.Column('cod', JSON, nullable=False),
        sa.Column('package', JSON, nullable=False),
        _enum('status', SHIPMENT_STATUSES),
        sa.Column('shipped_at', UTC_DATETIME, nullable=True),
        sa.Column('delivered_at', UTC_DATETIME, nullable=True),
        sa.Column('returned_at', UTC_DATETIME, nullable=True),
        sa.Column('tracking_history', JSON, nullable=False),
        sa.Column('charges', JSON, nullable=False),
        _fk('shipments', 'order_id', 'orders'),
        _fk('shipments', 'user_id', 'users', 'RESTRICT'),
        _fk('shipments', 'seller_id', 'users', 'RESTRICT'),
        _check('shipments', 'shipment_type', SHIPMENT_TYPES),
        _check('shipments', 'status', SHIPMENT_STATUSES),
    )
    _soft_delete_index('shipments')
    _index('shipments', 'order_id')
    _index('shipments', 'user_id')
    _index('shipments', 'seller_id', 'status', name='ix_shipments_seller_id_status')
    _index('shipments', 'shipment_type', 'status', name='ix_shipments_shipment_type_status')

    op.create_table('order_items',
        *_base('order_items'),
        sa.Column('order_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('seller_id', sa.Uuid(), nullable=False),
        sa.Column('product_id', sa.Uuid(), nullable=False),
        sa.Column('variant_id', sa.Uuid(), nullable=True),
        sa.Column('product_name', sa.String(200), nullable=False),
        sa.Column('sku', sa.String(64), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('pricing', JSON, nullable=False, comment='{mrp, selling_price, tax_amount, currency}'),
        sa.Column('total_price', MONEY, nullable=False),
        sa.Column('tax', JSON, nullable=False),
        _enum('status', ORDER_ITEM_STATUSES),
        sa.Column('shipment_id', sa.Uuid(), nullable=True),
        sa.Column('cancellation', JSON, nullable=True),
        sa.Column('return_request', JSON, nullable=True),
        sa.Column('refund', JSON, nullable=True, comment='{amount, payment_id, refunded_at, reason}'),
        sa.Column('invoice_id', sa.Uuid(), nullable=True),
        sa.Column('is_commission_applied', sa.Boolean(), nullable=False),
        _fk('order_items', 'order_id', 'orders'),
        _fk('order_items', 'user_id', 'users', 'RESTRICT'),
        _fk('order_items', 'seller_id', 'users', 'RESTRICT'),
        _fk('order_items', 'product_id', 'products', 'RESTRICT'),
        _fk('order_items', 'variant_id', 'product_variants', 'SET NULL'),
        _fk('order_items', 'shipment_id', 'shipments', 'SET NULL'),
        _check('order_items', 'status', ORDER_ITEM_STATUSES),
    )
    _soft_delete_index('order_items')
    _index('order_items', 'order_id')
    _index('order_items', 'sku')
    _index('order_items', 'is_commission_applied')
    _index('order_items', 'seller_id', 'status', name='ix_order_items_seller_id_status')
    _index('order_items', 'user_id', 'created_at', name='ix_order_items_user_id_created_at')

    # 6. Service bookings
    op.create_table('bookings',
        *_base('bookings'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('provider_id', sa.Uuid(), nullable=False),
        sa.Column('service_id', sa.Uuid(), nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=True),
        sa.Column('address_id', sa.Uuid(), nullable=False),
        sa.Column('scheduled_date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.String(5), nullable=False, comment='HH:MM'),
        sa.Column('end_time', sa.String(5), nullable=False, comment='HH:MM'),
        sa.Column('timezone', sa.String(64), nullable=False),
        sa.Column('pricing', JSON, nullable=False),
        sa.Column('payment_id', sa.Uuid(), nullable=True),
        _enum('payment_status', PAYMENT_STATUSES),
        _enum('status', BOOKING_STATUSES),
        sa.Column('cancellation', JSON, nullable=True,
                  comment='{cancelled_by, reason, cancelled_at, refund_amount}'),
        sa.Column('invoice_id', sa.Uuid(), nullable=True),
        sa.Column('customer_notes', sa.Text(), nullable=True),
        sa.Column('provider_notes', sa.Text(), nullable=True),
        sa.Column('is_rescheduled', sa.Boolean(), nullable=False),
        sa.Column('rescheduled_from', sa.Uuid(), nullable=True),
        _fk('bookings', 'user_id', 'users', 'RESTRICT'),
        _fk('bookings', 'provider_id', 'users', 'RESTRICT'),
        _fk('bookings', 'service_id', 'services', 'RESTRICT'),
        _fk('bookings', 'category_id', 'categories', 'SET NULL'),
        _fk('bookings', 'address_id', 'addresses', 'RESTRICT'),
        _fk('bookings', 'payment_id', 'payments', 'SET NULL'),
        _fk('bookings', 'rescheduled_from', 'bookings', 'SET NULL'),
        _check('bookings', 'status', BOOKING_STATUSES),
        _check('bookings', 'payment_status', PAYMENT_STATUSES),
    )
    _soft_delete_index('bookings')
    _index('bookings', 'service_id')
    _index('bookings', 'payment_id')
    _index('bookings', 'provider_id', 'scheduled_date', name='ix_bookings_provider_id_scheduled_date')
    _index('bookings', 'user_id', 'created_at', name='ix_bookings_user_id_created_at')
    _index('bookings', 'status', 'payment_status', name='ix_bookings_status_payment_status')

    # 7. Finance ledgers and documents
    op.create_table('wallet_transactions',
        *_base('wallet_transactions', soft_delete=False),
        sa.Column('wallet_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        _enum('type', TRANSACTION_TYPES),
        _enum('purpose', TRANSACTION_PURPOSES),
        sa.Column('amount', MONEY, nullable=False),
        sa.Column('currency', sa.String(3), nullable=False),
        sa.Column('opening_balance', MONEY, nullable=False),
        sa.Column('closing_balance', MONEY, nullable=False),
        _enum('reference_type', REFERENCE_TYPES, nullable=True),
        sa.Column('reference_id', sa.Uuid(), nullable=True),
        sa.Column('payment_id', sa.Uuid(), nullable=True),
        sa.Column('description', sa.String(500), nullable=True),
        _enum('status', TRANSACTION_STATUSES),
        _fk('wallet_transactions', 'wallet_id', 'wallets', 'RESTRICT'),
        _fk('wallet_transactions', 'user_id', 'users', 'RESTRICT'),
        _fk('wallet_transactions', 'payment_id', 'payments', 'SET NULL'),
        _check('wallet_transactions', 'type', TRANSACTION_TYPES),
        _check('wallet_transactions', 'purpose', TRANSACTION_PURPOSES),
        _check('wallet_transactions', 'status', TRANSACTION_STATUSES),
        _check('wallet_transactions', 'reference_type', REFERENCE_TYPES),
        sa.CheckConstraint('amount >= 0', name=op.f('ck_wallet_transactions_amount_non_negative')),
    )
    _index('wallet_transactions', 'user_id')
    _index('wallet_transactions', 'wallet_id', 'created_at', name='ix_wallet_transactions_wallet_id_created_at')
    _index(
        'wallet_transactions', 'reference_type', 'reference_id',
        name='ix_wallet_transactions_reference_type_reference_id',
    )

    op.create_table('commissions',
        *_base('commissions'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        _enum('service_type', COMMISSION_SERVICE_TYPES),
        _enum('reference_type', REFERENCE_TYPES, nullable=True),
        sa.Column('reference_id', sa.Uuid(), nullable=True),
        sa.Column('gross_amount', MONEY, nullable=False),
        sa.Column('commission_percentage', sa.Float(), nullable=False),
        sa.Column('commission_amount', MONEY, nullable=False),
        sa.Column('net_amount', MONEY, nullable=False),
        sa.Column('currency', sa.String(3), nullable=False),
        _enum('status', COMMISSION_STATUSES),
        _enum('source', COMMISSION_SOURCES),
        sa.Column('applied_at', UTC_DATETIME, nullable=True),
        sa.Column('reversed_at', UTC_DATETIME, nullable=True),
        sa.Column('reversed_reason', sa.Text(), nullable=True),
        sa.Column('payment_id', sa.Uuid(), nullable=True),
        sa.Column('wallet_transaction_id', sa.Uuid(), nullable=True),
        _fk('commissions', 'user_id', 'users', 'RESTRICT'),
        _fk('commissions', 'payment_id', 'payments', 'SET NULL'),
        _fk('commissions', 'wallet_transaction_id', 'wallet_transactions', 'SET NULL'),
        _check('commissions', 'service_type', COMMISSION_SERVICE_TYPES),
        _check('commissions', 'status', COMMISSION_STATUSES),
        _check('commissions', 'source', COMMISSION_SOURCES),
        _check('commissions', 'reference_type', REFERENCE_TYPES),
        sa.CheckConstraint(
            'commission_percentage >= 0 AND commission_percentage <= 100',
            name=op.f('ck_commissions_commission_percentage_range'),
        ),
    )
    _soft_delete_index('commissions')
    _index('commissions', 'user_id', 'status', name='ix_commissions_user_id_status')
    _index('commissions', 'reference_type', 'reference_id', name='ix_commissions_reference_type_reference_id')

    op.create_table('commission_rules',
        *_base('commission_rules'),
        _enum('module', COMMISSION_MODULES),
        _enum('plan', PLAN_CODES),
        sa.Column('percentage', sa.Float(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        _check('commission_rules', 'module', COMMISSION_MODULES),
        _check('commission_rules', 'plan', PLAN_CODES),
        sa.CheckConstraint('percentage >= 0 AND percentage <= 100', name=op.f('ck_commission_rules_percentage_range')),
        sa.UniqueConstraint('module', 'plan', name='uq_commission_rules_module_plan'),
    )
    _soft_delete_index('commission_rules')

    op.create_table('cancellations',
        *_base('cancellations'),
        sa.Column('booking_id', sa.Uuid(), nullable=False),
        _enum('cancelled_by', CANCELLED_BY),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('reason', sa.String(500), nullable=True),
        sa.Column('cancelled_at', UTC_DATETIME, nullable=False),
        sa.Column('hours_before_service', sa.Float(), nullable=True),
        sa.Column('refund_policy', JSON, nullable=False,
                  comment='{is_refundable, refund_percentage, penalty_amount}'),
        sa.Column('amounts', JSON, nullable=False,
                  comment='{booking_amount, refundable_amount, refunded_amount, currency}'),
        sa.Column('payment_id', sa.Uuid(), nullable=True),
        sa.Column('wallet_transaction_id', sa.Uuid(), nullable=True),
        _enum('status', CANCELLATION_STATUSES),
        sa.Column('processed_at', UTC_DATETIME, nullable=True),
        sa.Column('processed_by', sa.Uuid(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        _fk('cancellations', 'booking_id', 'bookings', 'RESTRICT'),
        _fk('cancellations', 'user_id', 'users', 'RESTRICT'),
        _fk('cancellations', 'payment_id', 'payments', 'SET NULL'),
        _fk('cancellations', 'wallet_transaction_id', 'wallet_transactions', 'SET NULL'),
        _fk('cancellations', 'processed_by', 'users', 'SET NULL'),
        _check('cancellations', 'cancelled_by', CANCELLED_BY),
        _check('cancellations', 'status', CANCELLATION_STATUSES),
        sa.UniqueConstraint('booking_id', name=op.f('uq_cancellations_booking_id')),
    )
    _soft_delete_index('cancellations')
    _index('cancellations', 'user_id', 'status', name='ix_cancellations_user_id_status')

    op.create_table('refunds',
        *_base('refunds'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        _enum('reference_type', REFERENCE_TYPES, nullable=True),
        sa.Column('reference_id', sa.Uuid(), nullable=True),
        sa.Column('cancellation_id', sa.Uuid(), nullable=True),
        sa.Column('payment_id', sa.Uuid(), nullable=True),
        sa.Column('amount', MONEY, nullable=False),
        sa.Column('currency', sa.String(3), nullable=False),
        _enum('method', REFUND_METHODS),
        _enum('gateway', PAYMENT_GATEWAYS, nullable=True),
        sa.Column('gateway_refund_id', sa.String(100), nullable=True),
        _enum('status', REFUND_STATUSES),
        sa.Column('initiated_at', UTC_DATETIME, nullable=False),
        sa.Column('processed_at', UTC_DATETIME, nullable=True),
        sa.Column('wallet_transaction_id', sa.Uuid(), nullable=True),
        sa.Column('failure_reason', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('processed_by', sa.Uuid(), nullable=True),
        _fk('refunds', 'user_id', 'users', 'RESTRICT'),
        _fk('refunds', 'cancellation_id', 'cancellations', 'SET NULL'),
        _fk('refunds', 'payment_id', 'payments', 'RESTRICT'),
        _fk('refunds', 'wallet_transaction_id', 'wallet_transactions', 'SET NULL'),
        _fk('refunds', 'processed_by', 'users', 'SET NULL'),
        _check('refunds', 'method', REFUND_METHODS),
        _check('refunds', 'status', REFUND_STATUSES),
        _check('refunds', 'reference_type', REFERENCE_TYPES),
    )
    _soft_delete_index('refunds')
    _index('refunds', 'cancellation_id')
    _index('refunds', 'payment_id')
    _index('refunds', 'user_id', 'status', name='ix_refunds_user_id_status')
    _index('refunds', 'status', 'initiated_at', name='ix_refunds_status_initiated_at')

    op.create_table('invoices',
        *_base('invoices'),
        sa.Column('invoice_number', sa.String(32), nullable=False),
        sa.Column('invoice_date', UTC_DATETIME, nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('provider_id', sa.Uuid(), nullable=True),
        sa.Column('order_id', sa.Uuid(), nullable=True),
        sa.Column('booking_id', sa.Uuid(), nullable=True),
        sa.Column('items', JSON, nullable=False,
                  comment='[{name, description, quantity, unit_price, total_price}]'),
        sa.Column('amounts', JSON, nullable=False,
                  comment='{sub_total, discount, tax: {cgst, sgst, igst}, total_tax, grand_total, currency}'),
        sa.Column('seller_details', JSON, nullable=True),
        sa.Column('billing_address', JSON, nullable=True),
        sa.Column('payment_id', sa.Uuid(), nullable=True),
        _enum('payment_status', PAYMENT_STATUSES),
        sa.Column('notes', sa.Text(), nullable=True),
        _fk('invoices', 'user_id', 'users', 'RESTRICT'),
        _fk('invoices', 'provider_id', 'users', 'SET NULL'),
        _fk('invoices', 'order_id', 'orders', 'RESTRICT'),
        _fk('invoices', 'booking_id', 'bookings', 'RESTRICT'),
        _fk('invoices', 'payment_id', 'payments', 'SET NULL'),
        _check('invoices', 'payment_status', PAYMENT_STATUSES),
    )
    _soft_delete_index('invoices')
    _index('invoices', 'invoice_number', unique=True)
    _index('invoices', 'provider_id')
    _index('invoices', 'order_id')
    _index('invoices', 'booking_id')
    _index('invoices', 'user_id', 'invoice_date', name='ix_invoices_user_id_invoice_date')

    # 8. Hospitality
    for table, extra, checks in (
        ('hotels', [
            _enum('hotel_type', HOTEL_TYPES),
            sa.Column('star_rating', sa.Integer(), nullable=True),
            sa.Column('amenities', JSON, nullable=False),
            sa.Column('timing', JSON, nullable=False, comment='{check_in, check_out, is_24x7}'),
            sa.Column('policies', JSON, nullable=False),
            sa.Column('stats', JSON, nullable=False, comment='{total_bookings}'),
        ], [_check('hotels', 'hotel_type', HOTEL_TYPES)]),
        ('restaurants', [
            _enum('restaurant_type', RESTAURANT_TYPES),
            sa.Column('cuisines', JSON, nullable=False),
            sa.Column('timing', JSON, nullable=False,
                      comment='{opening_time, closing_time, is_24x7, weekly_off}'),
            sa.Column('delivery', JSON, nullable=False),
            sa.Column('dine_in', JSON, nullable=False),
        ], [_check('restaurants', 'restaurant_type', RESTAURANT_TYPES)]),
    ):
        op.create_table(table,
            *_base(table),
            *_listing(table),
            sa.Column('owner_id', sa.Uuid(), nullable=False),
            sa.Column('name', sa.String(160), nullable=False),
            sa.Column('slug', sa.String(180), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('address_id', sa.Uuid(), nullable=False),
            sa.Column('location', JSON, nullable=True,
                      comment='{latitude, longitude}' if table == 'hotels' else None),
            sa.Column('logo', sa.String(500), nullable=True),
            sa.Column('images', JSON, nullable=False),
            sa.Column('commission_percentage', MONEY, nullable=True),
            *extra,
            _fk(table, 'owner_id', 'users'),
            _fk(table, 'address_id', 'addresses', 'RESTRICT'),
            *checks,
        )
        _soft_delete_index(table)
        _listing_indexes(table)
        _index(table, 'owner_id')
        _index(table, 'name')
        _index(table, 'slug', unique=True)
        _index(table, 'is_active', 'is_approved', name=f'ix_{table}_is_active_is_approved')

    op.create_table('rooms',
        *_base('rooms'),
        sa.Column('hotel_id', sa.Uuid(), nullable=False),
        sa.Column('room_number', sa.String(20), nullable=True),
        sa.Column('room_type', sa.String(80), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('capacity', JSON, nullable=False, comment='{adults, children, max_guests}'),
        sa.Column('bed_type', sa.String(40), nullable=True),
        sa.Column('bed_count', sa.Integer(), nullable=False),
        sa.Column('amenities', JSON, nullable=False),
        sa.Column('size', JSON, nullable=False, comment='{value, unit}'),
        sa.Column('images', JSON, nullable=False),
        sa.Column('total_rooms', sa.Integer(), nullable=False),
        sa.Column('available_rooms', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_bookable', sa.Boolean(), nullable=False),
        sa.Column('extra_bed_allowed', sa.Boolean(), nullable=False),
        sa.Column('extra_bed_charge', MONEY, nullable=True),
        sa.Column('stats', JSON, nullable=False),
        _fk('rooms', 'hotel_id', 'hotels'),
        sa.CheckConstraint('available_rooms >= 0', name=op.f('ck_rooms_available_rooms_non_negative')),
    )
    _soft_delete_index('rooms')
    _index('rooms', 'hotel_id', 'is_bookable', name='ix_rooms_hotel_id_is_bookable')

    op.create_table('room_bookings',
        *_base('room_bookings'),
        sa.Column('hotel_id', sa.Uuid(), nullable=False),
        sa.Column('room_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('booking_number', sa.String(32), nullable=False),
        sa.Column('check_in_date', sa.Date(), nullable=False),
        sa.Column('check_out_date', sa.Date(), nullable=False),
        sa.Column('nights', sa.Integer(), nullable=False),
        sa.Column('guests', JSON, nullable=False, comment='{adults, children}'),
        sa.Column('guest_details', JSON, nullable=False),
        sa.Column('rooms_booked', sa.Integer(), nullable=False),
        sa.Column('pricing', JSON, nullable=False),
        sa.Column('coupon_id', sa.Uuid(), nullable=True),
        sa.Column('payment_id', sa.Uuid(), nullable=True),
        _enum('payment_status', PAYMENT_STATUSES),
        _enum('status', STAY_STATUSES),
        sa.Column('checked_in_at', UTC_DATETIME, nullable=True),
        sa.Column('checked_out_at', UTC_DATETIME, nullable=True),
        sa.Column('cancellation', JSON, nullable=True),
        sa.Column('special_request', sa.Text(), nullable=True),
        _enum('source', BOOKING_SOURCES),
        _fk('room_bookings', 'hotel_id', 'hotels', 'RESTRICT'),
        _fk('room_bookings', 'room_id', 'rooms', 'RESTRICT'),
        _fk('room_bookings', 'user_id', 'users', 'RESTRICT'),
        _fk('room_bookings', 'coupon_id', 'coupons', 'SET NULL'),
        _fk('room_bookings', 'payment_id', 'payments', 'SET NULL'),
        _check('room_bookings', 'status', STAY_STATUSES),
        _check('room_bookings', 'payment_status', PAYMENT_STATUSES),
        _check('room_bookings', 'source', BOOKING_SOURCES),
    )
    _soft_delete_index('room_bookings')
    _index('room_bookings', 'user_id')
    _index('room_bookings', 'booking_number', unique=True)
    _index('room_bookings', 'status')
    _index('room_bookings', 'hotel_id', 'check_in_date', name='ix_room_bookings_hotel_id_check_in_date')
    _index(
        'room_bookings', 'room_id', 'check_in_date', 'check_out_date',
        name='ix_room_bookings_room_id_check_in_date_check_out_date',
    )

    op.create_table('restaurant_tables',
        *_base('restaurant_tables'),
        sa.Column('restaurant_id', sa.Uuid(), nullable=False),
        sa.Column('table_number', sa.String(20), nullable=False),
        sa.Column('name', sa.String(80), nullable=True),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('min_capacity', sa.Integer(), nullable=True),
        sa.Column('section', sa.String(60), nullable=True),
        sa.Column('qr_code', sa.String(500), nullable=True),
        _enum('status', TABLE_STATUSES),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('features', JSON, nullable=False),
        sa.Column('stats', JSON, nullable=False),
        _fk('restaurant_tables', 'restaurant_id', 'restaurants'),
        _check('restaurant_tables', 'status', TABLE_STATUSES),
        sa.UniqueConstraint(
            'restaurant_id', 'table_number', name='uq_restaurant_tables_restaurant_id_table_number',
        ),
    )
    _soft_delete_index('restaurant_tables')

    op.create_table('menu_items',
        *_base('menu_items'),
        *_rating(),
        sa.Column('restaurant_id', sa.Uuid(), nullable=False),
        sa.Column('category_name', sa.String(80), nullable=False),
        sa.Column('name', sa.String(160), nullable=False),
        sa.Column('slug', sa.String(180), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        _enum('food_type', FOOD_TYPES),
        sa.Column('tags', JSON, nullable=False),
        sa.Column('base_price', MONEY, nullable=False),
        sa.Column('currency', sa.String(3), nullable=False),
        sa.Column('variants', JSON, nullable=False),
        sa.Column('addons', JSON, nullable=False),
        sa.Column('availability', JSON, nullable=False, comment='{is_available, start_time, end_time}'),
        sa.Column('image', sa.String(500), nullable=True),
        sa.Column('gallery', JSON, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_recommended', sa.Boolean(), nullable=False),
        sa.Column('stats', JSON, nullable=False, comment='{ordered_count}'),
        _fk('menu_items', 'restaurant_id', 'restaurants'),
        _check('menu_items', 'food_type', FOOD_TYPES),
    )
    _soft_delete_index('menu_items')
    _index('menu_items', 'restaurant_id', 'category_name', name='ix_menu_items_restaurant_id_category_name')

    op.create_table('table_bookings',
        *_base('table_bookings'),
        sa.Column('restaurant_id', sa.Uuid(), nullable=False),
        sa.Column('table_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('guests', JSON, nullable=False, comment='{count, adults, children}'),
        sa.Column('booking_date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.String(5), nullable=False),
        sa.Column('end_time', sa.String(5), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('contact', JSON, nullable=False),
        sa.Column('special_request', sa.Text(), nullable=True),
        _enum('status', STAY_STATUSES),
        sa.Column('cancellation', JSON, nullable=True),
        sa.Column('checked_in_at', UTC_DATETIME, nullable=True),
        sa.Column('completed_at', UTC_DATETIME, nullable=True),
        sa.Column('advance_payment', JSON, nullable=True, comment='{amount, payment_id, is_refundable}'),
        _enum('source', TABLE_BOOKING_SOURCES),
        _fk('table_bookings', 'restaurant_id', 'restaurants'),
        _fk('table_bookings', 'table_id', 'restaurant_tables'),
        _fk('table_bookings', 'user_id', 'users', 'RESTRICT'),
        _check('table_bookings', 'status', STAY_STATUSES),
        _check('table_bookings', 'source', TABLE_BOOKING_SOURCES),
    )
    _soft_delete_index('table_bookings')
    _index('table_bookings', 'user_id')
    _index('table_bookings', 'status')
    _index('table_bookings', 'table_id', 'booking_date', name='ix_table_bookings_table_id_booking_date')
    _index(
        'table_bookings', 'restaurant_id', 'booking_date',
        name='ix_table_bookings_restaurant_id_booking_date',
    )

    # 9. Mobility
    op.create_table('vehicles',
        *_base('vehicles'),
        sa.Column('owner_id', sa.Uuid(), nullable=False),
        sa.Column('driver_profile_id', sa.Uuid(), nullable=True),
        _enum('vehicle_type', VEHICLE_TYPES),
        _enum('category', VEHICLE_CATEGORIES, nullable=True),
        sa.Column('brand', sa.String(60), nullable=True),
        sa.Column('model', sa.String(60), nullable=True),
        sa.Column('year', sa.Integer(), nullable=True),
        sa.Column('color', sa.String(30), nullable=True),
        sa.Column('registration_number', sa.String(20), nullable=False),
        sa.Column('rc', JSON, nullable=True),
        sa.Column('insurance', JSON, nullable=True),
        sa.Column('fitness_certificate', JSON, nullable=True),
        sa.Column('permit', JSON, nullable=True),
        sa.Column('seating_capacity', sa.Integer(), nullable=True),
        _enum('fuel_type', FUEL_TYPES, nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_available', sa.Boolean(), nullable=False),
        sa.Column('verification', JSON, nullable=False),
        sa.Column('stats', JSON, nullable=False, comment='{total_trips, total_distance_km}'),
        _fk('vehicles', 'owner_id', 'users'),
        _fk('vehicles', 'driver_profile_id', 'driver_profiles', 'SET NULL'),
        _check('vehicles', 'vehicle_type', VEHICLE_TYPES),
        _check('vehicles', 'category', VEHICLE_CATEGORIES),
        _check('vehicles', 'fuel_type', FUEL_TYPES),
    )
    _soft_delete_index('vehicles')
    _index('vehicles', 'driver_profile_id')
    _index('vehicles', 'registration_number', unique=True)
    _index('vehicles', 'is_available')
    _index('vehicles', 'vehicle_type', 'category', name='ix_vehicles_vehicle_type_category')
    _index('vehicles', 'owner_id', 'is_active', name='ix_vehicles_owner_id_is_active')

    op.create_table('rides',
        *_base('rides'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('driver_id', sa.Uuid(), nullable=True),
        sa.Column('driver_profile_id', sa.Uuid(), nullable=True),
        sa.Column('vehicle_id', sa.Uuid(), nullable=True),
        _enum('ride_type', VEHICLE_TYPES),
        _enum('category', VEHICLE_CATEGORIES, nullable=True),
        sa.Column('pickup', JSON, nullable=False, comment='{address, point}'),
        sa.Column('drop', JSON, nullable=False, comment='{address, point}'),
        sa.Column('requested_at', UTC_DATETIME, nullable=False),
        sa.Column('accepted_at', UTC_DATETIME, nullable=True),
        sa.Column('arrived_at', UTC_DATETIME, nullable=True),
        sa.Column('started_at', UTC_DATETIME, nullable=True),
        sa.Column('completed_at', UTC_DATETIME, nullable=True),
        sa.Column('distance_km', sa.Float(), nullable=True),
        sa.Column('duration_minutes', sa.Float(), nullable=True),
        sa.Column('fare', JSON, nullable=False),
        sa.Column('coupon_id', sa.Uuid(), nullable=True),
        sa.Column('payment_id', sa.Uuid(), nullable=True),
        _enum('payment_status', PAYMENT_STATUSES),
        _enum('status', RIDE_STATUSES),
        sa.Column('cancellation', JSON, nullable=True,
                  comment='{cancelled_by, reason, cancelled_at, penalty_amount}'),
        sa.Column('ratings', JSON, nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        _enum('source', RIDE_SOURCES),
        _fk('rides', 'user_id', 'users', 'RESTRICT'),
        _fk('rides', 'driver_id', 'users', 'SET NULL'),
        _fk('rides', 'driver_profile_id', 'driver_profiles', 'SET NULL'),
        _fk('rides', 'vehicle_id', 'vehicles', 'SET NULL'),
        _fk('rides', 'coupon_id', 'coupons', 'SET NULL'),
        _fk('rides', 'payment_id', 'payments', 'SET NULL'),
        _check('rides', 'ride_type', VEHICLE_TYPES),
        _check('rides', 'category', VEHICLE_CATEGORIES),
        _check('rides', 'status', RIDE_STATUSES),
        _check('rides', 'payment_status', PAYMENT_STATUSES),
        _check('rides', 'source', RIDE_SOURCES),
    )
    _soft_delete_index('rides')
    _index('rides', 'driver_profile_id')
    _index('rides', 'vehicle_id')
    _index('rides', 'ride_type')
    _index('rides', 'requested_at')
    _index('rides', 'driver_id', 'status', name='ix_rides_driver_id_status')
    _index('rides', 'user_id', 'created_at', name='ix_rides_user_id_created_at')

    # 10. Cinema
    op.create_table('cinemas',
        *_base('cinemas'),
        *_listing('cinemas'),
        sa.Column('owner_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(160), nullable=False),
        sa.Column('slug', sa.String(180), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('address_id', sa.Uuid(), nullable=False),
        sa.Column('location', JSON, nullable=True),
        _enum('cinema_type', CINEMA_TYPES),
        sa.Column('amenities', JSON, nullable=False),
        sa.Column('opening_time', sa.String(5), nullable=True),
        sa.Column('closing_time', sa.String(5), nullable=True),
        sa.Column('logo', sa.String(500), nullable=True),
        sa.Column('images', JSON, nullable=False),
        sa.Column('commission_percentage', MONEY, nullable=True),
        sa.Column('stats', JSON, nullable=False, comment='{total_shows, total_bookings}'),
        _fk('cinemas', 'owner_id', 'users'),
        _fk('cinemas', 'address_id', 'addresses', 'RESTRICT'),
        _check('cinemas', 'cinema_type', CINEMA_TYPES),
    )
    _soft_delete_index('cinemas')
    _listing_indexes('cinemas')
    _index('cinemas', 'owner_id')
    _index('cinemas', 'name')
    _index('cinemas', 'slug', unique=True)
    _index('cinemas', 'cinema_type', 'is_active', name='ix_cinemas_cinema_type_is_active')

    op.create_table('movies',
        *_base('movies'),
        *_rating(),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('slug', sa.String(220), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('languages', JSON, nullable=False),
        sa.Column('genres', JSON, nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        _enum('certification', CERTIFICATIONS, nullable=True),
        sa.Column('release_date', sa.Date(), nullable=True),
        sa.Column('is_upcoming', sa.Boolean(), nullable=False),
        sa.Column('formats', JSON, nullable=False),
        sa.Column('poster', sa.String(500), nullable=True),
        sa.Column('banner', sa.String(500), nullable=True),
        sa.Column('trailer_url', sa.String(500), nullable=True),
        sa.Column('cast', JSON, nullable=False),
        sa.Column('crew', JSON, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_featured', sa.Boolean(), nullable=False),
        sa.Column('tags', JSON, nullable=False),
        _check('movies', 'certification', CERTIFICATIONS),
    )
    _soft_delete_index('movies')
    _index('movies', 'slug', unique=True)
    _index('movies', 'title', 'release_date', name='ix_movies_title_release_date')
    _index('movies', 'is_upcoming', 'is_active', name='ix_movies_is_upcoming_is_active')

    op.create_table('screens',
        *_base('screens'),
        sa.Column('cinema_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(60), nullable=False),
        sa.Column('screen_number', sa.Integer(), nullable=True),
        _enum('format', SCREEN_FORMATS),
        _enum('sound_system', SOUND_SYSTEMS, nullable=True),
        sa.Column('seating', JSON, nullable=False, comment='{total_seats, rows, columns}'),
        sa.Column('seat_categories', JSON, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_maintenance', sa.Boolean(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        _fk('screens', 'cinema_id', 'cinemas'),
        _check('screens', 'format', SCREEN_FORMATS),
        _check('screens', 'sound_system', SOUND_SYSTEMS),
        sa.UniqueConstraint('cinema_id', 'name', name='uq_screens_cinema_id_name'),
    )
    _soft_delete_index('screens')

    op.create_table('seats',
        *_base('seats'),
        sa.Column('cinema_id', sa.Uuid(), nullable=False),
        sa.Column('screen_id', sa.Uuid(), nullable=False),
        sa.Column('seat_number', sa.String(10), nullable=False),
        sa.Column('row', sa.String(5), nullable=False),
        sa.Column('column', sa.Integer(), nullable=False),
        sa.Column('category', sa.String(40), nullable=False),
        sa.Column('features', JSON, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_under_maintenance', sa.Boolean(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        _fk('seats', 'cinema_id', 'cinemas'),
        _fk('seats', 'screen_id', 'screens'),
        sa.UniqueConstraint('screen_id', 'row', 'column', name='uq_seats_screen_id_row_column'),
    )
    _soft_delete_index('seats')
    _index('seats', 'cinema_id')
    _index('seats', 'screen_id', 'category', name='ix_seats_screen_id_category')

    op.create_table('shows',
        *_base('shows'),
        sa.Column('cinema_id', sa.Uuid(), nullable=False),
        sa.Column('screen_id', sa.Uuid(), nullable=False),
        sa.Column('movie_id', sa.Uuid(), nullable=False),
        _enum('format', SCREEN_FORMATS),
        sa.Column('language', sa.String(40), nullable=False),
        sa.Column('show_date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.String(5), nullable=False),
        sa.Column('end_time', sa.String(5), nullable=False),
        sa.Column('pricing', JSON, nullable=False,
                  comment='[{category, base_price, convenience_fee, tax_percentage}]'),
        sa.Column('seats', JSON, nullable=False, comment='{total, available, blocked, sold}'),
        sa.Column('lock_ttl_seconds', sa.Integer(), nullable=False),
        _enum('status', SHOW_STATUSES),
        sa.Column('cancellation', JSON, nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        _fk('shows', 'cinema_id', 'cinemas'),
        _fk('shows', 'screen_id', 'screens'),
        _fk('shows', 'movie_id', 'movies'),
        _check('shows', 'format', SCREEN_FORMATS),
        _check('shows', 'status', SHOW_STATUSES),
    )
    _soft_delete_index('shows')
    _index('shows', 'cinema_id', 'show_date', 'start_time', name='ix_shows_cinema_id_show_date_start_time')
    _index('shows', 'movie_id', 'show_date', name='ix_shows_movie_id_show_date')
    _index('shows', 'screen_id', 'show_date', name='ix_shows_screen_id_show_date')
    _index('shows', 'status', 'show_date', name='ix_shows_status_show_date')

    op.create_table('tickets',
        *_base('tickets'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('cinema_id', sa.Uuid(), nullable=False),
        sa.Column('screen_id', sa.Uuid(), nullable=False),
        sa.Column('show_id', sa.Uuid(), nullable=False),
        sa.Column('movie_id', sa.Uuid(), nullable=False),
        sa.Column('ticket_number', sa.String(32), nullable=False),
        sa.Column('seats', JSON, nullable=False,
                  comment='[{seat_id, seat_number, row, column, category, price}]'),
        sa.Column('seat_count', sa.Integer(), nullable=False),
        sa.Column('pricing', JSON, nullable=False),
        sa.Column('coupon_id', sa.Uuid(), nullable=True),
        sa.Column('payment_id', sa.Uuid(), nullable=True),
        _enum('payment_status', PAYMENT_STATUSES),
        _enum('status', TICKET_STATUSES),
        sa.Column('qr_code', sa.String(500), nullable=True),
        sa.Column('checked_in_at', UTC_DATETIME, nullable=True),
        sa.Column('cancellation', JSON, nullable=True),
        sa.Column('refund', JSON, nullable=True, comment='{amount, payment_id, refunded_at, reason}'),
        _enum('source', TICKET_SOURCES),
        sa.Column('notes', sa.Text(), nullable=True),
        _fk('tickets', 'user_id', 'users', 'RESTRICT'),
        _fk('tickets', 'cinema_id', 'cinemas', 'RESTRICT'),
        _fk('tickets', 'screen_id', 'screens', 'RESTRICT'),
        _fk('tickets', 'show_id', 'shows', 'RESTRICT'),
        _fk('tickets', 'movie_id', 'movies', 'RESTRICT'),
        _fk('tickets', 'coupon_id', 'coupons', 'SET NULL'),
        _fk('tickets', 'payment_id', 'payments', 'SET NULL'),
        _check('tickets', 'status', TICKET_STATUSES),
        _check('tickets', 'payment_status', PAYMENT_STATUSES),
        _check('tickets', 'source', TICKET_SOURCES),
    )
    _soft_delete_index('tickets')
    _index('tickets', 'ticket_number', unique=True)
    _index('tickets', 'payment_status')
    _index('tickets', 'show_id', 'status', name='ix_tickets_show_id_status')
    _index('tickets', 'user_id', 'created_at', name='ix_tickets_user_id_created_at')

    # 11. Support
    op.create_table('audit_logs',
        *_base('audit_logs', soft_delete=False),
        sa.Column('actor_id', sa.Uuid(), nullable=True),
        _enum('actor_role', ACTOR_ROLES),
        sa.Column('action', sa.String(100), nullable=False),
        _enum('action_type', AUDIT_ACTION_TYPES),
        sa.Column('entity_type', sa.String(60), nullable=True),
        sa.Column('entity_id', sa.Uuid(), nullable=True),
        sa.Column('details', JSON, nullable=True),
        sa.Column('ip_address', sa.String(45), nullable=True),
        sa.Column('user_agent', sa.String(500), nullable=True),
        sa.Column('request_id', sa.String(64), nullable=True),
        _enum('severity', AUDIT_SEVERITIES),
        sa.Column('module', sa.String(40), nullable=True),
        sa.Column('occurred_at', UTC_DATETIME, nullable=False),
        _fk('audit_logs', 'actor_id', 'users', 'SET NULL'),
        _check('audit_logs', 'actor_role', ACTOR_ROLES),
        _check('audit_logs', 'action_type', AUDIT_ACTION_TYPES),
        _check('audit_logs', 'severity', AUDIT_SEVERITIES),
    )
    _index('audit_logs', 'action')
    _index('audit_logs', 'actor_id', 'occurred_at', name='ix_audit_logs_actor_id_occurred_at')
    _index('audit_logs', 'entity_type', 'entity_id', name='ix_audit_logs_entity_type_entity_id')
    _index('audit_logs', 'module', 'action_type', name='ix_audit_logs_module_action_type')
    _index('audit_logs', 'severity', 'occurred_at', name='ix_audit_logs_severity_occurred_at')

    op.create_table('admin_activity_logs',
        *_base('admin_activity_logs', soft_delete=False),
        sa.Column('admin_id', sa.Uuid(), nullable=False),
        sa.Column('action', sa.String(100), nullable=False),
        _enum('action_type', ADMIN_ACTION_TYPES),
        sa.Column('entity_type', sa.String(60), nullable=False),
        sa.Column('entity_id', sa.Uuid(), nullable=True),
        sa.Column('changes', JSON, nullable=False, comment='{before, after}'),
        sa.Column('ip_address', sa.String(45), nullable=True),
        sa.Column('user_agent', sa.String(500), nullable=True),
        sa.Column('request_id', sa.String(64), nullable=True),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('module', sa.String(40), nullable=True),
        _enum('severity', ADMIN_SEVERITIES),
        _fk('admin_activity_logs', 'admin_id', 'users', 'RESTRICT'),
        _check('admin_activity_logs', 'action_type', ADMIN_ACTION_TYPES),
        _check('admin_activity_logs', 'severity', ADMIN_SEVERITIES),
    )
    _index('admin_activity_logs', 'action')
    _index('admin_activity_logs', 'admin_id', 'created_at', name='ix_admin_activity_logs_admin_id_created_at')
    _index(
        'admin_activity_logs', 'entity_type', 'entity_id',
        name='ix_admin_activity_logs_entity_type_entity_id',
    )
    _index('admin_activity_logs', 'module', 'action_type', name='ix_admin_activity_logs_module_action_type')
    _index('admin_activity_logs', 'severity', 'created_at', name='ix_admin_activity_logs_severity_created_at')

    op.create_table('notifications',
        *_base('notifications'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        _enum('role', USER_ROLES, nullable=True),
        _enum('type', NOTIFICATION_TYPES),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('action', JSON, nullable=True, comment='{url, data}'),
        sa.Column('channels', JSON, nullable=False, comment='{in_app, push, email, sms}'),
        sa.Column('is_read', sa.Boolean(), nullable=False),
        sa.Column('read_at', UTC_DATETIME, nullable=True),
        sa.Column('is_sent', sa.Boolean(), nullable=False),
        sa.Column('sent_at', UTC_DATETIME, nullable=True),
        sa.Column('scheduled_at', UTC_DATETIME, nullable=True),
        _enum('priority', NOTIFICATION_PRIORITIES),
        _fk('notifications', 'user_id', 'users'),
        _check('notifications', 'role', USER_ROLES),
        _check('notifications', 'type', NOTIFICATION_TYPES),
        _check('notifications', 'priority', NOTIFICATION_PRIORITIES),
    )
    _soft_delete_index('notifications')
    _index(
        'notifications', 'user_id', 'is_read', 'created_at',
        name='ix_notifications_user_id_is_read_created_at',
    )
    _index('notifications', 'role', 'type', name='ix_notifications_role_type')
    _index('notifications', 'scheduled_at', name='ix_notifications_scheduled_at')

    op.create_table('support_tickets',
        *_base('support_tickets'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('assigned_to', sa.Uuid(), nullable=True),
        _enum('role', USER_ROLES),
        _enum('category', TICKET_CATEGORIES),
        sa.Column('order_id', sa.Uuid(), nullable=True),
        sa.Column('booking_id', sa.Uuid(), nullable=True),
        sa.Column('payment_id', sa.Uuid(), nullable=True),
        sa.Column('subject', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('attachments', JSON, nullable=False, comment='[document_id]'),
        sa.Column('messages', JSON, nullable=False, comment='[{sender_id, message, attachments, created_at}]'),
        _enum('status', SUPPORT_TICKET_STATUSES),
        _enum('priority', SUPPORT_TICKET_PRIORITIES),
        sa.Column('first_response_at', UTC_DATETIME, nullable=True),
        sa.Column('resolved_at', UTC_DATETIME, nullable=True),
        sa.Column('closed_at', UTC_DATETIME, nullable=True),
        sa.Column('rating', sa.Integer(), nullable=True),
        sa.Column('feedback', sa.Text(), nullable=True),
        _fk('support_tickets', 'user_id', 'users'),
        _fk('support_tickets', 'assigned_to', 'users', 'SET NULL'),
        _fk('support_tickets', 'order_id', 'orders', 'SET NULL'),
        _fk('support_tickets', 'booking_id', 'bookings', 'SET NULL'),
        _fk('support_tickets', 'payment_id', 'payments', 'SET NULL'),
        _check('support_tickets', 'role', USER_ROLES),
        _check('support_tickets', 'category', TICKET_CATEGORIES),
        _check('support_tickets', 'status', SUPPORT_TICKET_STATUSES),
        _check('support_tickets', 'priority', SUPPORT_TICKET_PRIORITIES),
    )
    _soft_delete_index('support_tickets')
    _index('support_tickets', 'user_id')
    _index('support_tickets', 'order_id')
    _index('support_tickets', 'booking_id')
    _index('support_tickets', 'payment_id')
    _index('support_tickets', 'status', 'priority', name='ix_support_tickets_status_priority')
    _index('support_tickets', 'role', 'created_at', name='ix_support_tickets_role_created_at')
    _index('support_tickets', 'assigned_to', 'status', name='ix_support_tickets_assigned_to_status')

    op.create_table('documents',
        *_base('documents'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        _enum('role', USER_ROLES, nullable=True),
        _enum('type', DOCUMENT_TYPES),
        sa.Column('file_name', sa.String(255), nullable=False),
        sa.Column('original_name', sa.String(255), nullable=True),
        sa.Column('mime_type', sa.String(100), nullable=False),
        sa.Column('size', sa.BigInteger(), nullable=False),
        sa.Column('storage', JSON, nullable=False, comment='{provider, url, public_id, bucket, key}'),
        sa.Column('order_id', sa.Uuid(), nullable=True),
        sa.Column('booking_id', sa.Uuid(), nullable=True),
        sa.Column('support_ticket_id', sa.Uuid(), nullable=True),
        sa.Column('product_id', sa.Uuid(), nullable=True),
        sa.Column('verification', JSON, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        _fk('documents', 'user_id', 'users'),
        _fk('documents', 'order_id', 'orders', 'SET NULL'),
        _fk('documents', 'booking_id', 'bookings', 'SET NULL'),
        _fk('documents', 'support_ticket_id', 'support_tickets', 'SET NULL'),
        _fk('documents', 'product_id', 'products', 'SET NULL'),
        _check('documents', 'role', USER_ROLES),
        _check('documents', 'type', DOCUMENT_TYPES),
    )
    _soft_delete_index('documents')
    _index('documents', 'mime_type')
    _index('documents', 'is_active')
    _index('documents', 'user_id', 'type', name='ix_documents_user_id_type')
    _index('documents', 'type', 'created_at', name='ix_documents_type_created_at')

    op.create_table('settings',
        *_base('settings'),
        sa.Column('key', sa.String(150), nullable=False),
        sa.Column('value', JSON, nullable=False),
        _enum('value_type', SETTING_VALUE_TYPES),
        sa.Column('module', sa.String(40), nullable=True),
        _enum('scope', SETTING_SCOPES),
        _enum('environment', SETTING_ENVIRONMENTS),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_sensitive', sa.Boolean(), nullable=False),
        sa.Column('updated_by', sa.Uuid(), nullable=True),
        sa.Column('updated_at_by_admin', UTC_DATETIME, nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        _fk('settings', 'updated_by', 'users', 'SET NULL'),
        _check('settings', 'value_type', SETTING_VALUE_TYPES),
        _check('settings', 'scope', SETTING_SCOPES),
        _check('settings', 'environment', SETTING_ENVIRONMENTS),
    )
    _soft_delete_index('settings')
    _index('settings', 'key', unique=True)
    _index('settings', 'module', 'is_active', name='ix_settings_module_is_active')
    _index('settings', 'scope', 'environment', name='ix_settings_scope_environment')

    # 12. Reviews
    op.create_table('reviews',
        *_base('reviews'),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        _enum('target_type', REVIEW_TARGET_TYPES),
        sa.Column('target_id', sa.Uuid(), nullable=False),
        sa.Column('target_user_id', sa.Uuid(), nullable=True),
        sa.Column('order_id', sa.Uuid(), nullable=True),
        sa.Column('booking_id', sa.Uuid(), nullable=True),
        _enum('service_type', REVIEW_SERVICE_TYPES),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('comment', sa.String(1000), nullable=True),
        sa.Column('likes', sa.Integer(), nullable=False),
        sa.Column('dislikes', sa.Integer(), nullable=False),
        sa.Column('reply', JSON, nullable=True, comment='{message, replied_by, replied_at}'),
        _enum('status', REVIEW_STATUSES),
        sa.Column('rejected_reason', sa.String(500), nullable=True),
        sa.Column('is_reported', sa.Boolean(), nullable=False),
        sa.Column('reported_reason', sa.String(500), nullable=True),
        _fk('reviews', 'user_id', 'users'),
        _fk('reviews', 'target_user_id', 'users', 'SET NULL'),
        _fk('reviews', 'order_id', 'orders', 'SET NULL'),
        _fk('reviews', 'booking_id', 'bookings', 'SET NULL'),
        _check('reviews', 'target_type', REVIEW_TARGET_TYPES),
        _check('reviews', 'service_type', REVIEW_SERVICE_TYPES),
        _check('reviews', 'status', REVIEW_STATUSES),
        sa.CheckConstraint('rating >= 1 AND rating <= 5', name=op.f('ck_reviews_rating_range')),
    )
    _soft_delete_index('reviews')
    _index('reviews', 'user_id')
    _index('reviews', 'order_id')
    _index('reviews', 'booking_id')
    _index('reviews', 'status')
    _index('reviews', 'is_reported')
    _index(
        'reviews', 'target_type', 'target_id', 'status',
        name='ix_reviews_target_type_target_id_status',
    )
    _index('reviews', 'target_user_id', 'rating', name='ix_reviews_target_user_id_rating')
    _index('reviews', 'service_type', 'created_at', name='ix_reviews_service_type_created_at')

    # 13. Cyclic references
    for table, column, referred in DEFERRED_FOREIGN_KEYS:
        op.create_foreign_key(
            op.f(f'fk_{table}_{column}_{referred}'), table, referred,
            [column], ['id'], ondelete='SET NULL',
        )


def downgrade() -> None:
    """Drop all marketplace tables"""
    for table, column, referred in reversed(DEFERRED_FOREIGN_KEYS):
        op.drop_constraint(op.f(f'fk_{table}_{column}_{referred}'), table, type_='foreignkey')

    for table in (
        'reviews', 'settings', 'documents', 'support_tickets', 'notifications',
        'admin_activity_logs', 'audit_logs',
        'tickets', 'shows', 'seats', 'screens', 'movies', 'cinemas',
        'rides', 'vehicles',
        'table_bookings', 'menu_items', 'restaurant_tables', 'room_bookings', 'rooms',
        'restaurants', 'hotels',
        'invoices', 'refunds', 'cancellations', 'commission_rules', 'commissions',
        'wallet_transactions',
        'bookings',
        'order_items', 'shipments', 'orders', 'carts', 'coupons',
        'bulk_products', 'services', 'inventories', 'product_variants', 'products', 'categories',
        'home_service_profiles', 'b2b_seller_profiles', 'b2c_seller_profiles', 'business_profiles',
        'driver_profiles', 'advocate_profiles', 'doctor_profiles',
        'subscriptions', 'payments', 'wallets', 'subscription_plans',
        'sessions', 'otps', 'profiles', 'addresses', 'roles', 'users',
    ):
        op.drop_table(table)
