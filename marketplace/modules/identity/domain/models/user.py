# 📄 File: marketplace/modules/identity/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Describes a marketplace account (customer, seller, doctor, driver and so on) and the
# roles that group what each kind of account may do.
# 🧪 Purpose (Technical Summary):
# Domain models for User and Role: role/status enums, email and phone normalization,
# bcrypt password handling, login bookkeeping and a public serialization that never
# includes the password hash.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain.base, marketplace.shared.core.security,
# marketplace.shared.utils.validators
# 🔄 Connected Modules / Calls From:
# identity repositories, providers (one-to-one profiles), finance (wallet, subscription)

from enum import Enum
from typing import Any, Dict, List, Optional
from datetime import datetime

from pydantic import Field, field_validator

from marketplace.shared.core.exceptions import ValidationError
from marketplace.shared.core.security import get_password_hash, verify_password
from marketplace.shared.domain.base import SoftDeletableModel
from marketplace.shared.utils.helpers import utc_now
from marketplace.shared.utils.validators import normalize_email, normalize_phone

MIN_PASSWORD_LENGTH = 8


class UserRole(str, Enum):
    """Account role; each provider role owns a matching profile"""
    ADMIN = "admin"
    CUSTOMER = "customer"
    SERVICE_PROVIDER = "service-provider"
    SELLER_B2C = "seller-b2c"
    SELLER_B2B = "seller-b2b"
    RESTAURANT = "restaurant"
    DOCTOR = "doctor"
    ADVOCATE = "advocate"
    HOTEL = "hotel"
    DRIVER = "driver"
    BIKE_OWNER = "bike-owner"
    CINEMA_OWNER = "cinema-owner"
    PROPERTY_OWNER = "property-owner"
    HOME_SERVICE_PROVIDER = "home-service-provider"


class UserStatus(str, Enum):
    """Account lifecycle status"""
    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"


class User(SoftDeletableModel):
    """
    User domain model representing a marketplace account.

    The password hash is stored on the entity so repositories can persist it,
    but it is left out of repr and of to_public_dict().
    """

    name: str = Field(min_length=1, max_length=120)
    email: str
    phone: Optional[str] = None
    password_hash: str = Field(repr=False)
    role: UserRole = UserRole.CUSTOMER
    status: UserStatus = UserStatus.ACTIVE

    is_active: bool = True
    is_blocked: bool = False
    is_email_verified: bool = False
    is_phone_verified: bool = False

    last_login_at: Optional[datetime] = None
    password_changed_at: Optional[datetime] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be blank")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        return normalize_phone(v)

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.CUSTOMER,
        phone: Optional[str] = None,
        **kwargs: Any
    ) -> "User":
        """
        Create a new user with a bcrypt password hash.

        Args:
            name: Display name
            email: Email address (normalized to lowercase)
            password: Plain text password
            role: Account role
            phone: Optional mobile number

        Returns:
            New User entity

        Raises:
            ValidationError: If the password is too short
        """
        cls._check_password(password)
        return cls(
            name=name,
            email=email,
            phone=phone,
            role=role,
            password_hash=get_password_hash(password),
            password_changed_at=utc_now(),
            **kwargs
        )

    @staticmethod
    def _check_password(password: str) -> None:
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                field="password",
                constraint=f"min_length={MIN_PASSWORD_LENGTH}"
            )

    def verify_password(self, password: str) -> bool:
        return verify_password(password, self.password_hash)

    def set_password(self, password: str) -> None:
        """Replace the password hash and stamp password_changed_at."""
        self._check_password(password)
        self.password_hash = get_password_hash(password)
        self.password_changed_at = utc_now()
        self.touch()

    def record_login(self) -> None:
        self.last_login_at = utc_now()
        self.touch()

    def suspend(self) -> None:
        self.status = UserStatus.SUSPENDED
        self.is_active = False
        self.touch()

    def activate(self) -> None:
        self.status = UserStatus.ACTIVE
        self.is_active = True
        self.is_blocked = False
        self.touch()

    def block(self) -> None:
        self.is_blocked = True
        self.touch()

    def mark_email_verified(self) -> None:
        self.is_email_verified = True
        self.touch()

    def mark_phone_verified(self) -> None:
        self.is_phone_verified = True
        self.touch()

    @property
    def can_login(self) -> bool:
        return self.is_active and not self.is_blocked and not self.is_deleted

    def to_public_dict(self) -> Dict[str, Any]:
        """JSON-safe representation without the password hash."""
        return self.model_dump(mode="json", exclude={"password_hash"})


class Role(SoftDeletableModel):
    """Named permission set; system roles cannot be removed by admins."""

    name: str = Field(min_length=1, max_length=50)
    display_name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    permissions: List[str] = Field(default_factory=list)
    is_active: bool = True
    is_system_role: bool = False

    @field_validator("name")
    @classmethod
    def lowercase_name(cls, v: str) -> str:
        return v.strip().lower()

    def grant(self, permission: str) -> None:
        if permission not in self.permissions:
            self.permissions = [*self.permissions, permission]
            self.touch()

    def revoke(self, permission: str) -> None:
        if permission in self.permissions:
            self.permissions = [p for p in self.permissions if p != permission]
            self.touch()

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions
