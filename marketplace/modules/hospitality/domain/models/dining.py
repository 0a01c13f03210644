# 📄 File: marketplace/modules/hospitality/domain/models/dining.py
# 🧭 Purpose (Layman Explanation):
# Restaurant tables, the dishes on the menu and customers' table reservations.
# 🧪 Purpose (Technical Summary):
# RestaurantTable (status flags), MenuItem (variants, add-ons, availability window,
# ordered counter, rating cache) and TableBooking (guest count, slot, advance payment,
# status transitions).
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.utils
# 🔄 Connected Modules / Calls From:
# hospitality repositories, reviews

import uuid
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, field_validator

from marketplace.shared.core.exceptions import NotFoundError
from marketplace.shared.domain.base import RatedModel, SoftDeletableModel, ValueObject
from marketplace.shared.domain.value_objects import DEFAULT_CURRENCY, Amount, CancellationInfo
from marketplace.shared.utils.helpers import generate_slug, utc_now
from marketplace.shared.utils.validators import normalize_email, normalize_phone, normalize_time_slot

from .room import StayStatus


# =============================================================================
# TABLE
# =============================================================================

class TableStatus(str, Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    RESERVED = "reserved"
    OUT_OF_SERVICE = "out-of-service"


class TableFeatures(ValueObject):
    is_ac: bool = False
    is_smoking_allowed: bool = False
    is_vip: bool = False


class TableStats(ValueObject):
    total_bookings: int = Field(default=0, ge=0)


class RestaurantTable(SoftDeletableModel):
    """Dining table; the table number is unique within its restaurant."""

    restaurant_id: uuid.UUID
    table_number: str = Field(min_length=1, max_length=20)
    name: Optional[str] = Field(None, max_length=80)
    capacity: int = Field(ge=1)
    min_capacity: Optional[int] = Field(None, ge=1)
    section: Optional[str] = None
    qr_code: Optional[str] = None
    status: TableStatus = TableStatus.AVAILABLE
    is_active: bool = True
    features: TableFeatures = Field(default_factory=TableFeatures)
    stats: TableStats = Field(default_factory=TableStats)

    def mark_occupied(self) -> None:
        self.status = TableStatus.OCCUPIED
        self.touch()

    def mark_available(self) -> None:
        self.status = TableStatus.AVAILABLE
        self.touch()

    def mark_reserved(self) -> None:
        self.status = TableStatus.RESERVED
        self.stats = self.stats.model_copy(update={"total_bookings": self.stats.total_bookings + 1})
        self.touch()

    def mark_out_of_service(self) -> None:
        self.status = TableStatus.OUT_OF_SERVICE
        self.touch()

    def seats(self, guests: int) -> bool:
        return (self.min_capacity or 1) <= guests <= self.capacity


# =============================================================================
# MENU
# =============================================================================

class FoodType(str, Enum):
    VEG = "veg"
    NON_VEG = "non-veg"
    EGG = "egg"


class MenuTags(ValueObject):
    is_spicy: bool = False
    is_sweet: bool = False
    is_popular: bool = False
    is_chef_special: bool = False


class MenuVariant(ValueObject):
    name: str
    price: Amount
    is_default: bool = False


class MenuAddon(ValueObject):
    name: str
    price: Amount
    is_active: bool = True


class MenuAvailability(ValueObject):
    is_available: bool = True
    start_time: Optional[str] = None
    end_time: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, v: Optional[str]) -> Optional[str]:
        return normalize_time_slot(v)


class MenuStats(ValueObject):
    ordered_count: int = Field(default=0, ge=0)


class MenuItem(RatedModel):
    restaurant_id: uuid.UUID
    category_name: str = Field(min_length=1, max_length=80)
    name: str = Field(min_length=1, max_length=160)
    slug: str = Field(min_length=1, max_length=180)
    description: Optional[str] = None
    food_type: FoodType
    tags: MenuTags = Field(default_factory=MenuTags)
    base_price: Amount
    currency: str = DEFAULT_CURRENCY
    variants: List[MenuVariant] = Field(default_factory=list)
    addons: List[MenuAddon] = Field(default_factory=list)
    availability: MenuAvailability = Field(default_factory=MenuAvailability)
    image: Optional[str] = None
    gallery: List[str] = Field(default_factory=list)
    is_active: bool = True
    is_recommended: bool = False
    stats: MenuStats = Field(default_factory=MenuStats)

    @classmethod
    def create(cls, restaurant_id: uuid.UUID, category_name: str, name: str, **kwargs: Any) -> "MenuItem":
        return cls(
            restaurant_id=restaurant_id,
            category_name=category_name,
            name=name,
            slug=kwargs.pop("slug", None) or generate_slug(name),
            **kwargs
        )

    def increment_ordered_count(self, quantity: int = 1) -> None:
        self.stats = self.stats.model_copy(update={"ordered_count": self.stats.ordered_count + quantity})
        self.touch()

    def price_for(self, variant_name: Optional[str] = None) -> float:
        """Price of a named variant, else of the default variant, else the base price."""
        for variant in self.variants:
            if variant_name is not None and variant.name == variant_name:
                return variant.price
        if variant_name is not None:
            raise NotFoundError(
                f"No variant '{variant_name}' for menu item",
                resource_type="MenuVariant",
                resource_id=str(self.id)
            )
        default = next((v for v in self.variants if v.is_default), None)
        return default.price if default else self.base_price


# =============================================================================
# TABLE BOOKING
# =============================================================================

class TableBookingActor(str, Enum):
    CUSTOMER = "customer"
    RESTAURANT = "restaurant"
    ADMIN = "admin"


class TableBookingSource(str, Enum):
    APP = "app"
    WEB = "web"
    WALK_IN = "walk-in"


class PartySize(ValueObject):
    count: int = Field(ge=1)
    adults: Optional[int] = Field(None, ge=1)
    children: int = Field(default=0, ge=0)


class BookingContact(ValueObject):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        return normalize_phone(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        return normalize_email(v) if v else None


class AdvancePayment(ValueObject):
    amount: Amount = 0
    payment_id: Optional[uuid.UUID] = None
    is_refundable: bool = True


class TableBooking(SoftDeletableModel):
    restaurant_id: uuid.UUID
    table_id: uuid.UUID
    user_id: uuid.UUID
    guests: PartySize
    booking_date: date
    start_time: str
    end_time: str
    duration_minutes: int = Field(default=120, gt=0)
    contact: BookingContact = Field(default_factory=BookingContact)
    special_request: Optional[str] = Field(None, max_length=1000)
    status: StayStatus = StayStatus.PENDING
    cancellation: Optional[CancellationInfo] = None
    checked_in_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    advance_payment: Optional[AdvancePayment] = None
    source: TableBookingSource = TableBookingSource.APP

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        return normalize_time_slot(v)

    def confirm(self) -> None:
        self.status = StayStatus.CONFIRMED
        self.touch()

    def check_in(self) -> None:
        self.status = StayStatus.CHECKED_IN
        self.checked_in_at = utc_now()
        self.touch()

    def complete(self) -> None:
        self.status = StayStatus.COMPLETED
        self.completed_at = utc_now()
        self.touch()

    def mark_no_show(self) -> None:
        self.status = StayStatus.NO_SHOW
        self.touch()

    def cancel(self, reason: Optional[str] = None, by: TableBookingActor = TableBookingActor.CUSTOMER) -> None:
        self.status = StayStatus.CANCELLED
        self.cancellation = CancellationInfo(cancelled_by=TableBookingActor(by).value, reason=reason)
        self.touch()
