# 📄 File: marketplace/modules/hospitality/domain/models/room.py
# 🧭 Purpose (Layman Explanation):
# Hotel room types with how many rooms are still free, and guests' stays booked in them.
# 🧪 Purpose (Technical Summary):
# Room entity with guarded reserve/release of available rooms, and RoomBooking with
# HTL booking numbers, night/price computation and stay status transitions.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# hospitality repositories, finance (payments, cancellations, invoices)

import uuid
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, model_validator

from marketplace.shared.core.exceptions import BusinessRuleViolationError, InsufficientStockError
from marketplace.shared.domain.base import SoftDeletableModel, ValueObject, ensure_positive
from marketplace.shared.domain.value_objects import DEFAULT_CURRENCY, Amount, CancellationInfo, PaymentStatus
from marketplace.shared.utils.helpers import generate_reference_number, round_money, utc_now

ROOM_BOOKING_PREFIX = "HTL"


class RoomCapacity(ValueObject):
    adults: int = Field(ge=1)
    children: int = Field(default=0, ge=0)
    max_guests: int = Field(ge=1)


class SizeUnit(str, Enum):
    SQFT = "sqft"
    SQM = "sqm"


class RoomSize(ValueObject):
    value: Optional[float] = Field(None, gt=0)
    unit: SizeUnit = SizeUnit.SQFT


class RoomStats(ValueObject):
    total_bookings: int = Field(default=0, ge=0)


class Room(SoftDeletableModel):
    """
    Room type of a hotel (e.g. Deluxe) with its inventory of rooms.

    available_rooms never drops below zero nor exceeds total_rooms.
    """

    hotel_id: uuid.UUID
    room_number: Optional[str] = Field(None, max_length=20)
    room_type: str = Field(min_length=1, max_length=80)
    description: Optional[str] = None
    capacity: RoomCapacity
    bed_type: Optional[str] = None
    bed_count: int = Field(default=1, ge=1)
    amenities: List[str] = Field(default_factory=list)
    size: RoomSize = Field(default_factory=RoomSize)
    images: List[str] = Field(default_factory=list)
    total_rooms: int = Field(ge=1)
    available_rooms: int = Field(ge=0)
    is_active: bool = True
    is_bookable: bool = True
    extra_bed_allowed: bool = False
    extra_bed_charge: Optional[Amount] = None
    stats: RoomStats = Field(default_factory=RoomStats)

    @model_validator(mode="after")
    def check_available(self) -> "Room":
        if self.available_rooms > self.total_rooms:
            raise ValueError("available_rooms cannot exceed total_rooms")
        return self

    def reserve_room(self, count: int = 1) -> None:
        """
        Take rooms out of availability for a booking.

        Raises:
            InsufficientStockError: If fewer rooms are available
        """
        ensure_positive(count, field="count")
        if self.available_rooms < count:
            raise InsufficientStockError(
                "Not enough rooms available",
                resource_type="Room",
                available=self.available_rooms,
                requested=count
            )
        self.available_rooms -= count
        self.stats = self.stats.model_copy(update={"total_bookings": self.stats.total_bookings + 1})
        self.touch()

    def release_room(self, count: int = 1) -> None:
        ensure_positive(count, field="count")
        if self.available_rooms + count > self.total_rooms:
            raise BusinessRuleViolationError(
                "Cannot release more rooms than the room type has",
                rule="room_release_exceeds_total",
                context={"available": self.available_rooms, "total": self.total_rooms, "count": count}
            )
        self.available_rooms += count
        self.touch()

    def fits(self, guests: int) -> bool:
        return guests <= self.capacity.max_guests


# =============================================================================
# ROOM BOOKING
# =============================================================================

class StayStatus(str, Enum):
    """Status of room and table bookings"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked-in"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no-show"


class RoomBookingActor(str, Enum):
    USER = "user"
    HOTEL = "hotel"
    ADMIN = "admin"


class BookingSource(str, Enum):
    APP = "app"
    WEB = "web"
    ADMIN = "admin"


class GuestCount(ValueObject):
    adults: int = Field(ge=1)
    children: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.adults + self.children


class GuestDetail(ValueObject):
    full_name: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)
    id_proof_type: Optional[str] = None
    id_proof_number: Optional[str] = None


class StayPricing(ValueObject):
    price_per_night: Amount
    taxes: Amount = 0
    discount: Amount = 0
    extra_bed_charge: Amount = 0
    total_amount: Amount
    currency: str = DEFAULT_CURRENCY


class RoomBooking(SoftDeletableModel):
    """Guest stay in one room type of a hotel."""

    hotel_id: uuid.UUID
    room_id: uuid.UUID
    user_id: uuid.UUID
    booking_number: str = Field(min_length=1, max_length=32)
    check_in_date: date
    check_out_date: date
    nights: int = Field(ge=1)
    guests: GuestCount
    guest_details: List[GuestDetail] = Field(default_factory=list)
    rooms_booked: int = Field(default=1, ge=1)
    pricing: StayPricing
    coupon_id: Optional[uuid.UUID] = None
    payment_id: Optional[uuid.UUID] = None
    payment_status: PaymentStatus = PaymentStatus.PENDING
    status: StayStatus = StayStatus.PENDING
    checked_in_at: Optional[datetime] = None
    checked_out_at: Optional[datetime] = None
    cancellation: Optional[CancellationInfo] = None
    special_request: Optional[str] = Field(None, max_length=1000)
    source: BookingSource = BookingSource.APP

    @model_validator(mode="after")
    def check_dates(self) -> "RoomBooking":
        if self.check_out_date <= self.check_in_date:
            raise ValueError("check_out_date must be after check_in_date")
        return self

    @classmethod
    def create(
        cls,
        hotel_id: uuid.UUID,
        room_id: uuid.UUID,
        user_id: uuid.UUID,
        check_in_date: date,
        check_out_date: date,
        guests: GuestCount,
        price_per_night: float,
        rooms_booked: int = 1,
        taxes: float = 0,
        discount: float = 0,
        extra_bed_charge: float = 0,
        currency: str = DEFAULT_CURRENCY,
        **kwargs: Any
    ) -> "RoomBooking":
        """
        Create a pending room booking.

        nights is the number of days between the dates; the total is
        nightly price x nights x rooms + taxes + extra bed - discount.
        """
        nights = (check_out_date - check_in_date).days
        total = price_per_night * nights * rooms_booked + taxes + extra_bed_charge - discount
        pricing = StayPricing(
            price_per_night=price_per_night,
            taxes=taxes,
            discount=discount,
            extra_bed_charge=extra_bed_charge,
            total_amount=max(round_money(total), 0),
            currency=currency,
        )
        return cls(
            hotel_id=hotel_id,
            room_id=room_id,
            user_id=user_id,
            booking_number=kwargs.pop("booking_number", None) or generate_reference_number(ROOM_BOOKING_PREFIX),
            check_in_date=check_in_date,
            check_out_date=check_out_date,
            nights=nights,
            guests=guests,
            rooms_booked=rooms_booked,
            pricing=pricing,
            **kwargs
        )

    def confirm(self) -> None:
        self.status = StayStatus.CONFIRMED
        self.touch()

    def mark_paid(self, payment_id: Optional[uuid.UUID] = None) -> None:
        if payment_id is not None:
            self.payment_id = payment_id
        self.payment_status = PaymentStatus.PAID
        self.touch()

    def check_in(self) -> None:
        self.status = StayStatus.CHECKED_IN
        self.checked_in_at = utc_now()
        self.touch()

    def check_out(self) -> None:
        self.status = StayStatus.COMPLETED
        self.checked_out_at = utc_now()
        self.touch()

    def mark_no_show(self) -> None:
        self.status = StayStatus.NO_SHOW
        self.touch()

    def cancel(self, reason: Optional[str] = None, by: RoomBookingActor = RoomBookingActor.USER, refund_amount: float = 0) -> None:
        self.status = StayStatus.CANCELLED
        self.cancellation = CancellationInfo(
            cancelled_by=RoomBookingActor(by).value,
            reason=reason,
            refund_amount=refund_amount,
        )
        self.touch()
