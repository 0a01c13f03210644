# 📄 File: marketplace/modules/services/domain/models/booking.py
# 🧭 Purpose (Layman Explanation):
# An appointment for a home service (plumber, cleaner, beautician) at the customer's
# address on a chosen date and time slot.
# 🧪 Purpose (Technical Summary):
# Home-service Booking entity: schedule slot, price breakdown, payment status, status
# transitions, cancellation block and rescheduling into a linked booking.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain
# 🔄 Connected Modules / Calls From:
# services repositories, finance (payments, cancellations), reviews

import uuid
from datetime import date
from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator

from marketplace.shared.domain.base import SoftDeletableModel, ValueObject
from marketplace.shared.domain.value_objects import DEFAULT_CURRENCY, Amount, CancellationInfo, PaymentStatus
from marketplace.shared.utils.helpers import round_money
from marketplace.shared.utils.validators import normalize_time_slot


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no-show"


class BookingActor(str, Enum):
    """Who cancelled or changed a home-service booking"""
    CUSTOMER = "customer"
    PROVIDER = "provider"
    ADMIN = "admin"
    SYSTEM = "system"


class BookingPricing(ValueObject):
    base_price: Amount
    option_name: Optional[str] = None
    option_price: Optional[Amount] = None
    tax_amount: Amount = 0
    discount_amount: Amount = 0
    total_amount: Amount
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def compute(
        cls,
        base_price: float,
        option_price: Optional[float] = None,
        tax_amount: float = 0,
        discount_amount: float = 0,
        **kwargs: Any
    ) -> "BookingPricing":
        """Price block with total = (option price or base) + tax - discount."""
        price = option_price if option_price is not None else base_price
        return cls(
            base_price=base_price,
            option_price=option_price,
            tax_amount=tax_amount,
            discount_amount=discount_amount,
            total_amount=max(round_money(price + tax_amount - discount_amount), 0),
            **kwargs
        )


class Booking(SoftDeletableModel):
    """Home-service booking"""

    user_id: uuid.UUID
    provider_id: uuid.UUID
    service_id: uuid.UUID
    category_id: Optional[uuid.UUID] = None
    address_id: uuid.UUID
    scheduled_date: date
    start_time: str
    end_time: str
    timezone: str = "Asia/Kolkata"
    pricing: BookingPricing
    payment_id: Optional[uuid.UUID] = None
    payment_status: PaymentStatus = PaymentStatus.PENDING
    status: BookingStatus = BookingStatus.PENDING
    cancellation: Optional[CancellationInfo] = None
    invoice_id: Optional[uuid.UUID] = None
    customer_notes: Optional[str] = Field(None, max_length=1000)
    provider_notes: Optional[str] = Field(None, max_length=1000)
    is_rescheduled: bool = False
    rescheduled_from: Optional[uuid.UUID] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_slot(cls, v: str) -> str:
        return normalize_time_slot(v)

    def confirm(self) -> None:
        self.status = BookingStatus.CONFIRMED
        self.touch()

    def assign(self, provider_id: Optional[uuid.UUID] = None) -> None:
        if provider_id is not None:
            self.provider_id = provider_id
        self.status = BookingStatus.ASSIGNED
        self.touch()

    def start(self) -> None:
        self.status = BookingStatus.IN_PROGRESS
        self.touch()

    def complete(self) -> None:
        self.status = BookingStatus.COMPLETED
        self.touch()

    def mark_no_show(self) -> None:
        self.status = BookingStatus.NO_SHOW
        self.touch()

    def mark_paid(self, payment_id: Optional[uuid.UUID] = None) -> None:
        if payment_id is not None:
            self.payment_id = payment_id
        self.payment_status = PaymentStatus.PAID
        self.touch()

    def cancel(self, by: BookingActor, reason: Optional[str] = None, refund_amount: float = 0) -> None:
        """
        Cancel the booking.

        Args:
            by: customer, provider or admin
            reason: Free-text reason
            refund_amount: Amount to refund to the customer
        """
        self.status = BookingStatus.CANCELLED
        self.cancellation = CancellationInfo(
            cancelled_by=BookingActor(by).value,
            reason=reason,
            refund_amount=refund_amount,
        )
        self.touch()

    def reschedule(self, scheduled_date: date, start_time: str, end_time: str) -> "Booking":
        """
        Move the booking to a new slot.

        The current booking is cancelled by the customer and a new pending
        booking pointing back to it is returned.
        """
        data = self.model_dump(exclude={"id", "created_at", "updated_at", "status", "cancellation"})
        data.update(
            scheduled_date=scheduled_date,
            start_time=start_time,
            end_time=end_time,
            is_rescheduled=True,
            rescheduled_from=self.id,
        )
        rescheduled = Booking(**data)
        self.cancel(BookingActor.CUSTOMER, reason="rescheduled")
        return rescheduled
