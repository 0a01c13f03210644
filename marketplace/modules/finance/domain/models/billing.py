# 📄 File: marketplace/modules/finance/domain/models/billing.py
# 🧭 Purpose (Layman Explanation):
# Paperwork around money: booking cancellations and what gets refunded, GST invoices,
# and the subscription plans providers pay for.
# 🧪 Purpose (Technical Summary):
# Cancellation (refund policy arithmetic), Invoice (INV numbers, GST split into
# CGST/SGST or IGST), SubscriptionPlan catalogue entries and Subscription windows.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# services bookings, commerce orders, finance commission service, providers onboarding

import uuid
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator, model_validator

from marketplace.modules.identity.domain.models import UserRole
from marketplace.shared.core.exceptions import BusinessRuleViolationError
from marketplace.shared.domain.base import SoftDeletableModel, ValueObject
from marketplace.shared.domain.value_objects import DEFAULT_CURRENCY, Amount, PaymentStatus, Percentage
from marketplace.shared.utils.helpers import (
    generate_reference_number,
    percentage_of,
    round_money,
    sum_money,
    utc_now,
)

from .commission import PlanCode

INVOICE_NUMBER_PREFIX = "INV"


# =============================================================================
# CANCELLATION
# =============================================================================

class CancelledBy(str, Enum):
    CUSTOMER = "customer"
    PROVIDER = "provider"
    ADMIN = "admin"
    SYSTEM = "system"


class CancellationStatus(str, Enum):
    PENDING = "pending"
    PROCESSED = "processed"
    REJECTED = "rejected"


class RefundPolicy(ValueObject):
    is_refundable: bool = True
    refund_percentage: Percentage = 100
    penalty_amount: Amount = 0


class CancellationAmounts(ValueObject):
    booking_amount: Amount
    refundable_amount: Amount = 0
    refunded_amount: Amount = 0
    currency: str = DEFAULT_CURRENCY


class Cancellation(SoftDeletableModel):
    booking_id: uuid.UUID
    cancelled_by: CancelledBy
    user_id: uuid.UUID
    reason: Optional[str] = Field(None, max_length=500)
    cancelled_at: datetime = Field(default_factory=utc_now)
    hours_before_service: Optional[float] = Field(None, ge=0)
    refund_policy: RefundPolicy = Field(default_factory=RefundPolicy)
    amounts: CancellationAmounts
    payment_id: Optional[uuid.UUID] = None
    wallet_transaction_id: Optional[uuid.UUID] = None
    status: CancellationStatus = CancellationStatus.PENDING
    processed_at: Optional[datetime] = None
    processed_by: Optional[uuid.UUID] = None
    notes: Optional[str] = None

    @classmethod
    def create(
        cls,
        booking_id: uuid.UUID,
        user_id: uuid.UUID,
        cancelled_by: CancelledBy,
        booking_amount: float,
        refund_policy: Optional[RefundPolicy] = None,
        currency: str = DEFAULT_CURRENCY,
        **kwargs
    ) -> "Cancellation":
        """
        Record a cancellation and work out how much can be refunded.

        refundable = booking_amount * refund_percentage / 100 - penalty_amount,
        floored at 0, and 0 when the policy is not refundable.
        """
        policy = refund_policy or RefundPolicy()
        refundable = 0.0
        if policy.is_refundable:
            refundable = max(
                percentage_of(booking_amount, policy.refund_percentage) - policy.penalty_amount, 0
            )
        return cls(
            booking_id=booking_id,
            user_id=user_id,
            cancelled_by=cancelled_by,
            refund_policy=policy,
            amounts=CancellationAmounts(
                booking_amount=booking_amount,
                refundable_amount=round_money(refundable),
                currency=currency,
            ),
            **kwargs
        )

    def mark_processed(
        self,
        refunded_amount: Optional[float] = None,
        wallet_transaction_id: Optional[uuid.UUID] = None,
        processed_by: Optional[uuid.UUID] = None
    ) -> None:
        """Mark the refund as paid out; defaults to the full refundable amount."""
        if self.status != CancellationStatus.PENDING.value:
            raise BusinessRuleViolationError(
                f"Cannot process a cancellation in status {self.status}",
                rule="cancellation_process_requires_pending",
                context={"cancellation_id": str(self.id)}
            )
        amount = self.amounts.refundable_amount if refunded_amount is None else refunded_amount
        if amount > self.amounts.refundable_amount:
            raise BusinessRuleViolationError(
                "Refunded amount exceeds refundable amount",
                rule="refund_within_refundable",
                context={"refundable": self.amounts.refundable_amount, "requested": amount}
            )
        self.amounts = self.amounts.model_copy(update={"refunded_amount": round_money(amount)})
        self.wallet_transaction_id = wallet_transaction_id
        self.processed_by = processed_by
        self.status = CancellationStatus.PROCESSED
        self.processed_at = utc_now()
        self.touch()

    def reject(self, reason: str, processed_by: Optional[uuid.UUID] = None) -> None:
        self.status = CancellationStatus.REJECTED
        self.notes = reason
        self.processed_by = processed_by
        self.processed_at = utc_now()
        self.touch()


# =============================================================================
# INVOICE
# =============================================================================

class InvoiceLine(ValueObject):
    name: str
    description: Optional[str] = None
    quantity: int = Field(1, ge=1)
    unit_price: Amount
    total_price: Amount = 0

    @model_validator(mode="before")
    @classmethod
    def fill_total(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("total_price"):
            quantity = data.get("quantity", 1)
            data = {**data, "total_price": round_money(float(data.get("unit_price", 0)) * quantity)}
        return data


class InvoiceTax(ValueObject):
    cgst: Amount = 0
    sgst: Amount = 0
    igst: Amount = 0


class InvoiceAmounts(ValueObject):
    sub_total: Amount
    discount: Amount = 0
    tax: InvoiceTax = Field(default_factory=InvoiceTax)
    total_tax: Amount = 0
    grand_total: Amount
    currency: str = DEFAULT_CURRENCY


class SellerDetails(ValueObject):
    name: str
    gst_number: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class Invoice(SoftDeletableModel):
    invoice_number: str
    invoice_date: datetime = Field(default_factory=utc_now)
    user_id: uuid.UUID
    provider_id: Optional[uuid.UUID] = None
    order_id: Optional[uuid.UUID] = None
    booking_id: Optional[uuid.UUID] = None
    items: List[InvoiceLine] = Field(min_length=1)
    amounts: InvoiceAmounts
    seller_details: Optional[SellerDetails] = None
    billing_address: Optional[Dict[str, Any]] = None
    payment_id: Optional[uuid.UUID] = None
    payment_status: PaymentStatus = PaymentStatus.PAID
    notes: Optional[str] = None

    @field_validator("invoice_number")
    @classmethod
    def normalize_number(cls, v: str) -> str:
        return v.strip().upper()

    @classmethod
    def create(
        cls,
        user_id: uuid.UUID,
        items: List[InvoiceLine],
        gst_percentage: float = 0,
        inter_state: bool = False,
        discount: float = 0,
        currency: str = DEFAULT_CURRENCY,
        invoice_number: Optional[str] = None,
        **kwargs
    ) -> "Invoice":
        """
        Build an invoice and its totals.

        GST is charged on the discounted sub total. Intra-state supply splits
        it equally into CGST and SGST; inter-state supply charges IGST.
        """
        sub_total = sum_money(item.total_price for item in items)
        taxable = max(sub_total - discount, 0)
        total_tax = percentage_of(taxable, gst_percentage)
        if inter_state:
            tax = InvoiceTax(igst=total_tax)
        else:
            half = round_money(total_tax / 2)
            tax = InvoiceTax(cgst=half, sgst=round_money(total_tax - half))
        return cls(
            invoice_number=invoice_number or generate_reference_number(INVOICE_NUMBER_PREFIX),
            user_id=user_id,
            items=items,
            amounts=InvoiceAmounts(
                sub_total=sub_total,
                discount=discount,
                tax=tax,
                total_tax=total_tax,
                grand_total=round_money(taxable + total_tax),
                currency=currency,
            ),
            **kwargs
        )


# =============================================================================
# SUBSCRIPTIONS
# =============================================================================

class BillingCycle(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class SubscriptionStatus(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    CANCELLED = "cancelled"
    PENDING = "pending"


class PlanLimits(ValueObject):
    """None means unlimited"""
    listings: Optional[int] = Field(None, ge=0)
    bookings_per_month: Optional[int] = Field(None, ge=0)
    team_members: Optional[int] = Field(None, ge=0)


class SubscriptionPlan(SoftDeletableModel):
    code: PlanCode
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    price: Amount = 0
    currency: str = DEFAULT_CURRENCY
    duration_days: int = Field(30, ge=1)
    billing_cycle: BillingCycle = BillingCycle.MONTHLY
    applicable_roles: List[UserRole] = Field(default_factory=list)
    features: List[str] = Field(default_factory=list)
    limits: PlanLimits = Field(default_factory=PlanLimits)
    commission_percentage: Optional[Percentage] = None
    is_active: bool = True

    def applies_to(self, role: str) -> bool:
        return not self.applicable_roles or role in self.applicable_roles


class Subscription(SoftDeletableModel):
    user_id: uuid.UUID
    plan_id: uuid.UUID
    plan_name: str
    plan_code: PlanCode
    price: Amount
    currency: str = DEFAULT_CURRENCY
    billing_cycle: BillingCycle = BillingCycle.MONTHLY
    start_date: datetime
    end_date: datetime
    auto_renew: bool = False
    renewed_from: Optional[uuid.UUID] = None
    features: List[str] = Field(default_factory=list)
    limits: PlanLimits = Field(default_factory=PlanLimits)
    commission_percentage: Optional[Percentage] = None
    payment_id: Optional[uuid.UUID] = None
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE
    cancelled_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_window(self) -> "Subscription":
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self

    @classmethod
    def start(
        cls,
        plan: SubscriptionPlan,
        user_id: uuid.UUID,
        start_date: Optional[datetime] = None,
        payment_id: Optional[uuid.UUID] = None,
        auto_renew: bool = False,
        renewed_from: Optional[uuid.UUID] = None
    ) -> "Subscription":
        """Subscribe a user to a plan, copying the plan's terms at this moment."""
        begins = start_date or utc_now()
        return cls(
            user_id=user_id,
            plan_id=plan.id,
            plan_name=plan.name,
            plan_code=plan.code,
            price=plan.price,
            currency=plan.currency,
            billing_cycle=plan.billing_cycle,
            start_date=begins,
            end_date=begins + timedelta(days=plan.duration_days),
            auto_renew=auto_renew,
            renewed_from=renewed_from,
            features=list(plan.features),
            limits=plan.limits,
            commission_percentage=plan.commission_percentage,
            payment_id=payment_id,
        )

    def is_active(self, now: Optional[datetime] = None) -> bool:
        return self.status == SubscriptionStatus.ACTIVE.value and self.end_date > (now or utc_now())

    def days_remaining(self, today: Optional[date] = None) -> int:
        today = today or utc_now().date()
        return max((self.end_date.date() - today).days, 0)

    def cancel(self) -> None:
        self.status = SubscriptionStatus.CANCELLED
        self.auto_renew = False
        self.cancelled_at = utc_now()
        self.touch()

    def expire(self) -> None:
        self.status = SubscriptionStatus.EXPIRED
        self.touch()

    def renew(self, plan: SubscriptionPlan, payment_id: Optional[uuid.UUID] = None) -> "Subscription":
        """Expire this subscription and return its successor starting at the current end date."""
        if self.status == SubscriptionStatus.CANCELLED.value:
            raise BusinessRuleViolationError(
                "Cancelled subscriptions cannot be renewed",
                rule="subscription_renew_not_cancelled",
                context={"subscription_id": str(self.id)}
            )
        successor = Subscription.start(
            plan,
            user_id=self.user_id,
            start_date=max(self.end_date, utc_now()),
            payment_id=payment_id,
            auto_renew=self.auto_renew,
            renewed_from=self.id,
        )
        self.expire()
        return successor
