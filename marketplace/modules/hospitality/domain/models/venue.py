# 📄 File: marketplace/modules/hospitality/domain/models/venue.py
# 🧭 Purpose (Layman Explanation):
# Hotels and restaurants listed on the marketplace: where they are, when they are open,
# what they offer and how they are rated.
# 🧪 Purpose (Technical Summary):
# Venue listing base (owner, address, geo point, media, commission override) with Hotel
# and Restaurant specializations and their timing/policy/delivery value objects.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.utils
# 🔄 Connected Modules / Calls From:
# rooms, tables, menu items, reviews (rating cache), finance commission service

import uuid
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, field_validator

from marketplace.shared.domain.base import ListingModel, ValueObject
from marketplace.shared.domain.value_objects import Amount, GeoPoint, Percentage
from marketplace.shared.utils.helpers import generate_slug
from marketplace.shared.utils.validators import normalize_time_slot


class VenueStats(ValueObject):
    total_bookings: int = Field(default=0, ge=0)


class Venue(ListingModel):
    """
    Common fields of hotels and restaurants.

    commission_percentage overrides the platform commission for this venue
    when set.
    """

    owner_id: uuid.UUID
    name: str = Field(min_length=1, max_length=160)
    slug: str = Field(min_length=1, max_length=180)
    description: Optional[str] = None
    address_id: uuid.UUID
    location: Optional[GeoPoint] = None
    logo: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    commission_percentage: Optional[Percentage] = None

    @classmethod
    def create(cls, owner_id: uuid.UUID, name: str, address_id: uuid.UUID, **kwargs: Any):
        return cls(
            owner_id=owner_id,
            name=name,
            slug=kwargs.pop("slug", None) or generate_slug(name),
            address_id=address_id,
            **kwargs
        )


# =============================================================================
# HOTEL
# =============================================================================

class HotelType(str, Enum):
    HOTEL = "hotel"
    RESORT = "resort"
    HOMESTAY = "homestay"
    HOSTEL = "hostel"
    GUEST_HOUSE = "guest-house"


class HotelTiming(ValueObject):
    check_in: str = "12:00"
    check_out: str = "11:00"
    is_24x7: bool = False

    @field_validator("check_in", "check_out")
    @classmethod
    def validate_time(cls, v: str) -> str:
        return normalize_time_slot(v)


class HotelPolicies(ValueObject):
    cancellation: Optional[str] = None
    child_policy: Optional[str] = None
    pet_policy: Optional[str] = None
    id_proof_required: bool = True


class Hotel(Venue):
    hotel_type: HotelType = HotelType.HOTEL
    star_rating: Optional[int] = Field(None, ge=1, le=5)
    amenities: List[str] = Field(default_factory=list)
    timing: HotelTiming = Field(default_factory=HotelTiming)
    policies: HotelPolicies = Field(default_factory=HotelPolicies)
    stats: VenueStats = Field(default_factory=VenueStats)

    def record_booking(self) -> None:
        self.stats = self.stats.model_copy(update={"total_bookings": self.stats.total_bookings + 1})
        self.touch()


# =============================================================================
# RESTAURANT
# =============================================================================

class RestaurantType(str, Enum):
    DINE_IN = "dine-in"
    DELIVERY = "delivery"
    TAKEAWAY = "takeaway"
    CLOUD_KITCHEN = "cloud-kitchen"


class RestaurantTiming(ValueObject):
    opening_time: str
    closing_time: str
    is_24x7: bool = False
    weekly_off: List[str] = Field(default_factory=list)

    @field_validator("opening_time", "closing_time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        return normalize_time_slot(v)


class DeliverySettings(ValueObject):
    is_available: bool = True
    radius_km: float = Field(default=5, ge=0)
    min_order_amount: Amount = 0
    delivery_charge: Amount = 0


class DineInSettings(ValueObject):
    is_available: bool = False
    seating_capacity: Optional[int] = Field(None, ge=0)


class Restaurant(Venue):
    restaurant_type: RestaurantType = RestaurantType.DELIVERY
    cuisines: List[str] = Field(default_factory=list)
    timing: RestaurantTiming
    delivery: DeliverySettings = Field(default_factory=DeliverySettings)
    dine_in: DineInSettings = Field(default_factory=DineInSettings)

    def serves(self, cuisine: str) -> bool:
        return cuisine.strip().lower() in {c.lower() for c in self.cuisines}
