# 📄 File: marketplace/modules/identity/domain/models/profile.py
# 🧭 Purpose (Layman Explanation):
# The personal details attached to an account (name, photo, birthday, bio) and the postal
# addresses a user ships orders to or receives services at.
# 🧪 Purpose (Technical Summary):
# Domain models for Profile (one per user, rating cache) and Address (typed postal address
# with PIN code validation and a single-default flag per user).
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.utils.validators
# 🔄 Connected Modules / Calls From:
# identity repositories, commerce (order shipping address), services (booking address),
# reviews (rating service)

import uuid
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from marketplace.shared.domain.base import RatedModel, SoftDeletableModel
from marketplace.shared.domain.value_objects import GeoPoint
from marketplace.shared.utils.validators import normalize_phone, normalize_pincode


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Profile(RatedModel):
    """
    Profile domain model representing extended user information.

    One profile per user; the rating cache is fed by reviews targeting the user.
    """

    user_id: uuid.UUID
    first_name: Optional[str] = Field(None, max_length=60)
    last_name: Optional[str] = Field(None, max_length=60)
    gender: Optional[Gender] = None
    dob: Optional[date] = None
    avatar: Optional[str] = None
    alternate_phone: Optional[str] = None
    address_id: Optional[uuid.UUID] = None
    location: Optional[GeoPoint] = None
    bio: Optional[str] = Field(None, max_length=500)
    is_completed: bool = False

    @field_validator("alternate_phone")
    @classmethod
    def validate_alternate_phone(cls, v: Optional[str]) -> Optional[str]:
        return normalize_phone(v)

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def mark_completed(self) -> None:
        self.is_completed = True
        self.touch()


class AddressType(str, Enum):
    HOME = "home"
    WORK = "work"
    OFFICE = "office"
    WAREHOUSE = "warehouse"
    PICKUP = "pickup"
    OTHER = "other"


class Address(SoftDeletableModel):
    """
    Postal address owned by a user.

    At most one address per user is the default; the repository clears
    the flag on the user's other addresses when a default one is saved.
    """

    user_id: uuid.UUID
    type: AddressType = AddressType.HOME
    name: Optional[str] = Field(None, max_length=60)
    address_line1: str = Field(min_length=1, max_length=200)
    address_line2: Optional[str] = Field(None, max_length=200)
    landmark: Optional[str] = Field(None, max_length=120)
    city: str = Field(min_length=1, max_length=80)
    state: str = Field(min_length=1, max_length=80)
    country: str = "India"
    pincode: str
    contact_name: Optional[str] = Field(None, max_length=120)
    contact_phone: Optional[str] = None
    location: Optional[GeoPoint] = None
    is_default: bool = False
    is_active: bool = True

    @field_validator("pincode")
    @classmethod
    def validate_pincode(cls, v: str) -> str:
        return normalize_pincode(v)

    @field_validator("contact_phone")
    @classmethod
    def validate_contact_phone(cls, v: Optional[str]) -> Optional[str]:
        return normalize_phone(v)

    def make_default(self) -> None:
        self.is_default = True
        self.touch()

    def one_line(self) -> str:
        """Single-line rendering used in snapshots and invoices."""
        parts = [self.address_line1, self.address_line2, self.landmark, self.city, self.state, self.pincode]
        return ", ".join(part for part in parts if part)
