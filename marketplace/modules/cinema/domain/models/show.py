# 📄 File: marketplace/modules/cinema/domain/models/show.py
# 🧭 Purpose (Layman Explanation):
# A screening of a movie at a set time, with its ticket prices and how many seats are
# still free, and the tickets people buy for it.
# 🧪 Purpose (Technical Summary):
# Show entity (pricing tiers, seat counters, seat-lock TTL, status transitions) and
# Ticket entity (BMS ticket number, seat snapshots, pricing, payment/refund lifecycle).
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.config
# 🔄 Connected Modules / Calls From:
# cinema repositories, finance (payments, refunds)

import uuid
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, field_validator, model_validator

from marketplace.shared.config.settings import get_settings
from marketplace.shared.core.exceptions import NotFoundError
from marketplace.shared.domain.base import SoftDeletableModel, ValueObject
from marketplace.shared.domain.value_objects import (
    DEFAULT_CURRENCY,
    Amount,
    CancellationInfo,
    GstRate,
    PaymentStatus,
    RefundInfo,
)
from marketplace.shared.utils.helpers import generate_reference_number, percentage_of, round_money, sum_money, utc_now
from marketplace.shared.utils.validators import normalize_time_slot

from .venue import ScreenFormat

TICKET_NUMBER_PREFIX = "BMS"


def _default_lock_ttl() -> int:
    return get_settings().SHOW_SEAT_LOCK_TTL_SECONDS


# =============================================================================
# SHOW
# =============================================================================

class ShowStatus(str, Enum):
    SCHEDULED = "scheduled"
    OPEN = "open"
    SOLD_OUT = "sold-out"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class ShowActor(str, Enum):
    CINEMA = "cinema"
    ADMIN = "admin"


class PricingTier(ValueObject):
    category: str = Field(min_length=1)
    base_price: Amount
    convenience_fee: Amount = 0
    tax_percentage: GstRate = 0

    @property
    def total_price(self) -> float:
        """Price of one seat including convenience fee and tax on the base price."""
        return round_money(self.base_price + self.convenience_fee + percentage_of(self.base_price, self.tax_percentage))


class SeatCounters(ValueObject):
    total: int = Field(ge=1)
    available: int = Field(ge=0)
    blocked: int = Field(default=0, ge=0)
    sold: int = Field(default=0, ge=0)


class Show(SoftDeletableModel):
    """
    A screening. Seat counters are aggregate numbers; individual seat
    locks live outside this model, only their TTL is recorded here.
    """

    cinema_id: uuid.UUID
    screen_id: uuid.UUID
    movie_id: uuid.UUID
    format: ScreenFormat = ScreenFormat.TWO_D
    language: str = Field(min_length=1, max_length=40)
    show_date: date
    start_time: str
    end_time: str
    pricing: List[PricingTier] = Field(min_length=1)
    seats: SeatCounters
    lock_ttl_seconds: int = Field(default_factory=_default_lock_ttl, gt=0)
    status: ShowStatus = ShowStatus.SCHEDULED
    cancellation: Optional[CancellationInfo] = None
    notes: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        return normalize_time_slot(v)

    @classmethod
    def schedule(cls, total_seats: int, **kwargs: Any) -> "Show":
        """New show with every seat available."""
        return cls(seats=SeatCounters(total=total_seats, available=total_seats), **kwargs)

    def open_booking(self) -> None:
        self.status = ShowStatus.OPEN
        self.touch()

    def mark_sold_out(self) -> None:
        self.status = ShowStatus.SOLD_OUT
        self.touch()

    def complete(self) -> None:
        self.status = ShowStatus.COMPLETED
        self.touch()

    def cancel_show(self, reason: Optional[str] = None, by: ShowActor = ShowActor.CINEMA) -> None:
        self.status = ShowStatus.CANCELLED
        self.cancellation = CancellationInfo(cancelled_by=ShowActor(by).value, reason=reason)
        self.touch()

    def increment_counters(self, sold: int = 0, blocked: int = 0) -> None:
        """
        Adjust sold and blocked seats and recompute availability.

        Negative values release seats; available is clamped at zero.
        """
        new_sold = max(0, self.seats.sold + sold)
        new_blocked = max(0, self.seats.blocked + blocked)
        self.seats = SeatCounters(
            total=self.seats.total,
            sold=new_sold,
            blocked=new_blocked,
            available=max(0, self.seats.total - new_sold - new_blocked),
        )
        self.touch()

    def price_for(self, category: str) -> PricingTier:
        """
        Pricing tier of a seat category (case-insensitive).

        Raises:
            NotFoundError: If the show has no tier for the category
        """
        wanted = category.strip().lower()
        for tier in self.pricing:
            if tier.category.lower() == wanted:
                return tier
        raise NotFoundError(
            f"No pricing tier '{category}' for show",
            resource_type="PricingTier",
            resource_id=str(self.id)
        )


# =============================================================================
# TICKET
# =============================================================================

class TicketStatus(str, Enum):
    RESERVED = "reserved"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"
    USED = "used"
    EXPIRED = "expired"


class TicketActor(str, Enum):
    USER = "user"
    CINEMA = "cinema"
    ADMIN = "admin"


class TicketSource(str, Enum):
    APP = "app"
    WEB = "web"
    ADMIN = "admin"


class SeatSnapshot(ValueObject):
    seat_id: uuid.UUID
    seat_number: str
    row: Optional[str] = None
    column: Optional[int] = None
    category: str
    price: Amount


class TicketPricing(ValueObject):
    sub_total: Amount
    convenience_fee: Amount = 0
    tax: Amount = 0
    discount: Amount = 0
    total_amount: Amount
    currency: str = DEFAULT_CURRENCY


class Ticket(SoftDeletableModel):
    user_id: uuid.UUID
    cinema_id: uuid.UUID
    screen_id: uuid.UUID
    show_id: uuid.UUID
    movie_id: uuid.UUID
    ticket_number: str = Field(min_length=1, max_length=32)
    seats: List[SeatSnapshot] = Field(min_length=1)
    seat_count: int = Field(ge=1)
    pricing: TicketPricing
    coupon_id: Optional[uuid.UUID] = None
    payment_id: Optional[uuid.UUID] = None
    payment_status: PaymentStatus = PaymentStatus.PENDING
    status: TicketStatus = TicketStatus.RESERVED
    qr_code: Optional[str] = None
    checked_in_at: Optional[datetime] = None
    cancellation: Optional[CancellationInfo] = None
    refund: Optional[RefundInfo] = None
    source: TicketSource = TicketSource.APP
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_seat_count(self) -> "Ticket":
        if self.seat_count != len(self.seats):
            raise ValueError("seat_count must equal the number of seats")
        return self

    @classmethod
    def create(
        cls,
        user_id: uuid.UUID,
        show: Show,
        seats: List[SeatSnapshot],
        convenience_fee: float = 0,
        tax: float = 0,
        discount: float = 0,
        currency: str = DEFAULT_CURRENCY,
        ticket_number: Optional[str] = None,
        **kwargs: Any
    ) -> "Ticket":
        """
        Reserve seats of a show for a user.

        sub_total is the sum of seat prices; the total adds the fee and tax
        and subtracts the discount, never going below zero.
        """
        sub_total = sum_money(seat.price for seat in seats)
        pricing = TicketPricing(
            sub_total=sub_total,
            convenience_fee=convenience_fee,
            tax=tax,
            discount=discount,
            total_amount=max(round_money(sub_total + convenience_fee + tax - discount), 0),
            currency=currency,
        )
        return cls(
            user_id=user_id,
            cinema_id=show.cinema_id,
            screen_id=show.screen_id,
            show_id=show.id,
            movie_id=show.movie_id,
            ticket_number=ticket_number or generate_reference_number(TICKET_NUMBER_PREFIX),
            seats=seats,
            seat_count=len(seats),
            pricing=pricing,
            **kwargs
        )

    def confirm(self, payment_id: Optional[uuid.UUID] = None) -> None:
        if payment_id is not None:
            self.payment_id = payment_id
        self.status = TicketStatus.CONFIRMED
        self.payment_status = PaymentStatus.PAID
        self.touch()

    def mark_used(self) -> None:
        self.status = TicketStatus.USED
        self.checked_in_at = utc_now()
        self.touch()

    def expire(self) -> None:
        self.status = TicketStatus.EXPIRED
        self.touch()

    def cancel(self, reason: Optional[str] = None, by: TicketActor = TicketActor.USER) -> None:
        self.status = TicketStatus.CANCELLED
        self.cancellation = CancellationInfo(cancelled_by=TicketActor(by).value, reason=reason)
        self.touch()

    def mark_refunded(self, amount: float, payment_id: Optional[uuid.UUID] = None) -> None:
        self.status = TicketStatus.REFUNDED
        self.payment_status = PaymentStatus.REFUNDED
        self.refund = RefundInfo(amount=amount, payment_id=payment_id)
        self.touch()
