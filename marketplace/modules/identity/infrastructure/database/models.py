# 📄 File: marketplace/modules/identity/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how accounts, roles, profiles, addresses, one-time codes and login sessions are
# stored as database tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for identity entities with unique constraints, CHECK-guarded enum
# columns, foreign keys with explicit ON DELETE behaviour and a partial unique index that
# allows one default address per user.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - marketplace.shared.infrastructure.database (base, mixins, column types)
#
# 🔄 Connected Modules / Calls From:
# - identity_repository_impl.py (CRUD operations)
# - migrations (schema generation)

"""
SQLAlchemy Models for Identity

Models:
- UserModel: Account and authentication data
- RoleModel: Named permission sets
- ProfileModel: Personal details, one per user
- AddressModel: Postal addresses
- OTPModel: Hashed one-time codes
- AuthSessionModel: Per-device login sessions
"""

from sqlalchemy import Boolean, Column, Date, Index, Integer, String, Text, text

from marketplace.shared.infrastructure.database.base import (
    DatabaseBase,
    RatingMixin,
    SoftDeleteMixin,
    TimestampMixin,
)
from marketplace.shared.infrastructure.database.types import (
    JSONType,
    UTCDateTime,
    enum_check,
    enum_column,
    foreign_key,
)
from marketplace.modules.identity.domain.models import (
    AddressType,
    DeviceType,
    Gender,
    OTPPurpose,
    UserRole,
    UserStatus,
)


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    """
    SQLAlchemy model for marketplace accounts.

    Email is unique and stored lowercased; phone is unique when present
    (NULLs never collide in a unique constraint).
    """
    __tablename__ = "users"
    __table_args__ = (
        enum_check("role", UserRole),
        enum_check("status", UserStatus),
        Index("ix_users_role_is_active", "role", "is_active"),
    )

    name = Column(String(120), nullable=False, comment="Display name")
    email = Column(String(254), nullable=False, unique=True, index=True, comment="Lowercased email address")
    phone = Column(String(15), nullable=True, unique=True, index=True, comment="10-digit mobile number")
    password_hash = Column(String(255), nullable=False, comment="bcrypt hash")
    role = enum_column(UserRole, default=UserRole.CUSTOMER, index=True)
    status = enum_column(UserStatus, default=UserStatus.ACTIVE)

    is_active = Column(Boolean, nullable=False, default=True)
    is_blocked = Column(Boolean, nullable=False, default=False)
    is_email_verified = Column(Boolean, nullable=False, default=False)
    is_phone_verified = Column(Boolean, nullable=False, default=False)

    last_login_at = Column(UTCDateTime, nullable=True)
    password_changed_at = Column(UTCDateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, role={self.role})>"


class RoleModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "roles"

    name = Column(String(50), nullable=False, unique=True, index=True)
    display_name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    permissions = Column(JSONType, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)
    is_system_role = Column(Boolean, nullable=False, default=False)


# =============================================================================
# PROFILE & ADDRESS MODELS
# =============================================================================

class ProfileModel(TimestampMixin, SoftDeleteMixin, RatingMixin, DatabaseBase):
    """One row per user (unique user_id)."""
    __tablename__ = "profiles"
    __table_args__ = (
        enum_check("gender", Gender),
    )

    user_id = foreign_key("users.id", ondelete="CASCADE", unique=True)
    first_name = Column(String(60), nullable=True)
    last_name = Column(String(60), nullable=True)
    gender = enum_column(Gender, nullable=True)
    dob = Column(Date, nullable=True)
    avatar = Column(String(500), nullable=True, comment="Object storage URL")
    alternate_phone = Column(String(15), nullable=True)
    address_id = foreign_key("addresses.id", ondelete="SET NULL", nullable=True, index=False)
    location = Column(JSONType, nullable=True, comment="{latitude, longitude}")
    bio = Column(Text, nullable=True)
    is_completed = Column(Boolean, nullable=False, default=False)


class AddressModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    """
    Postal address. The partial unique index allows a single live
    default address per user.
    """
    __tablename__ = "addresses"
    __table_args__ = (
        enum_check("type", AddressType),
        Index("ix_addresses_user_id_is_deleted", "user_id", "is_deleted"),
        Index(
            "uq_addresses_user_default",
            "user_id",
            unique=True,
            postgresql_where=text("is_default = true AND is_deleted = false"),
            sqlite_where=text("is_default = 1 AND is_deleted = 0"),
        ),
    )

    user_id = foreign_key("users.id", ondelete="CASCADE", index=False)
    type = enum_column(AddressType, default=AddressType.HOME, index=True)
    name = Column(String(60), nullable=True)
    address_line1 = Column(String(200), nullable=False)
    address_line2 = Column(String(200), nullable=True)
    landmark = Column(String(120), nullable=True)
    city = Column(String(80), nullable=False, index=True)
    state = Column(String(80), nullable=False)
    country = Column(String(60), nullable=False, default="India")
    pincode = Column(String(6), nullable=False, index=True)
    contact_name = Column(String(120), nullable=True)
    contact_phone = Column(String(15), nullable=True)
    location = Column(JSONType, nullable=True)
    is_default = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)


# =============================================================================
# AUTHENTICATION MODELS
# =============================================================================

class OTPModel(TimestampMixin, DatabaseBase):
    __tablename__ = "otps"
    __table_args__ = (
        enum_check("purpose", OTPPurpose),
        Index("ix_otps_target_purpose", "target", "purpose"),
    )

    user_id = foreign_key("users.id", ondelete="CASCADE", nullable=True)
    target = Column(String(254), nullable=False, index=True, comment="Email or phone the code was sent to")
    code_hash = Column(String(64), nullable=False, comment="SHA-256 of the code")
    purpose = enum_column(OTPPurpose)
    expires_at = Column(UTCDateTime, nullable=False, index=True)
    attempts = Column(Integer, nullable=False, default=0)
    max_attempts = Column(Integer, nullable=False, default=5)
    is_used = Column(Boolean, nullable=False, default=False, index=True)
    used_at = Column(UTCDateTime, nullable=True)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(String(500), nullable=True)


class AuthSessionModel(TimestampMixin, DatabaseBase):
    __tablename__ = "sessions"
    __table_args__ = (
        enum_check("device_type", DeviceType),
        Index("ix_sessions_user_id_is_active", "user_id", "is_active"),
    )

    user_id = foreign_key("users.id", ondelete="CASCADE")
    access_token_hash = Column(String(64), nullable=False)
    refresh_token_hash = Column(String(64), nullable=False, index=True)
    device_type = enum_column(DeviceType, default=DeviceType.WEB)
    device_id = Column(String(255), nullable=True, index=True)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(String(500), nullable=True)
    access_token_expires_at = Column(UTCDateTime, nullable=False)
    refresh_token_expires_at = Column(UTCDateTime, nullable=False, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    is_revoked = Column(Boolean, nullable=False, default=False)
    revoked_at = Column(UTCDateTime, nullable=True)
    revoke_reason = Column(String(100), nullable=True)
