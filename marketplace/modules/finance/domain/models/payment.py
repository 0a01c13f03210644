# 📄 File: marketplace/modules/finance/domain/models/payment.py
# 🧭 Purpose (Layman Explanation):
# Money coming in through a payment gateway or the wallet, and money going back to
# customers as refunds.
# 🧪 Purpose (Technical Summary):
# Payment (gateway ids, purpose, status, refund block) and Refund (method, status,
# completion/failure) entities. Both point at what they pay for through a generic
# reference (type + id) instead of one foreign key per vertical.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain
# 🔄 Connected Modules / Calls From:
# commerce orders, services/hospitality/mobility/cinema bookings, wallet service

import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field

from marketplace.shared.domain.base import SoftDeletableModel, ValueObject, ensure_positive
from marketplace.shared.domain.value_objects import DEFAULT_CURRENCY, Amount
from marketplace.shared.utils.helpers import utc_now


class ReferenceType(str, Enum):
    """What a payment, refund, commission or ledger line belongs to"""
    ORDER = "order"
    ORDER_ITEM = "order-item"
    BOOKING = "booking"
    ROOM_BOOKING = "room-booking"
    TABLE_BOOKING = "table-booking"
    RIDE = "ride"
    TICKET = "ticket"
    SUBSCRIPTION = "subscription"
    WALLET = "wallet"


class PaymentGateway(str, Enum):
    RAZORPAY = "razorpay"
    STRIPE = "stripe"
    PAYPAL = "paypal"
    WALLET = "wallet"


class PaymentPurpose(str, Enum):
    ORDER_PAYMENT = "order_payment"
    BOOKING_PAYMENT = "booking_payment"
    SUBSCRIPTION_PAYMENT = "subscription_payment"
    WALLET_TOPUP = "wallet_topup"
    PENALTY = "penalty"
    OTHER = "other"


class GatewayStatus(str, Enum):
    CREATED = "created"
    PENDING = "pending"
    AUTHORIZED = "authorized"
    CAPTURED = "captured"
    SUCCESS = "success"
    FAILED = "failed"
    REFUNDED = "refunded"


class PaymentRefund(ValueObject):
    is_refunded: bool = False
    refund_amount: Amount = 0
    refund_at: Optional[datetime] = None
    refund_gateway_id: Optional[str] = None


class Payment(SoftDeletableModel):
    user_id: uuid.UUID
    wallet_id: Optional[uuid.UUID] = None
    reference_type: Optional[ReferenceType] = None
    reference_id: Optional[uuid.UUID] = None
    amount: Amount
    currency: str = DEFAULT_CURRENCY
    gateway: PaymentGateway
    gateway_order_id: Optional[str] = None
    gateway_payment_id: Optional[str] = None
    gateway_signature: Optional[str] = Field(None, repr=False)
    purpose: PaymentPurpose
    status: GatewayStatus = GatewayStatus.CREATED
    refund: PaymentRefund = Field(default_factory=PaymentRefund)
    webhook_payload: Optional[Dict[str, Any]] = None
    failure_reason: Optional[str] = None
    is_settled: bool = False
    settled_at: Optional[datetime] = None

    @property
    def is_successful(self) -> bool:
        return self.status in (GatewayStatus.SUCCESS.value, GatewayStatus.CAPTURED.value)

    def mark_success(self, gateway_payment_id: Optional[str] = None) -> None:
        if gateway_payment_id is not None:
            self.gateway_payment_id = gateway_payment_id
        self.status = GatewayStatus.SUCCESS
        self.failure_reason = None
        self.touch()

    def mark_failed(self, reason: Optional[str] = None) -> None:
        self.status = GatewayStatus.FAILED
        self.failure_reason = reason
        self.touch()

    def mark_refunded(self, amount: float, refund_gateway_id: Optional[str] = None) -> None:
        ensure_positive(amount, field="amount")
        self.status = GatewayStatus.REFUNDED
        self.refund = PaymentRefund(
            is_refunded=True,
            refund_amount=amount,
            refund_at=utc_now(),
            refund_gateway_id=refund_gateway_id,
        )
        self.touch()

    def settle(self) -> None:
        self.is_settled = True
        self.settled_at = utc_now()
        self.touch()


# =============================================================================
# REFUND
# =============================================================================

class RefundMethod(str, Enum):
    ORIGINAL = "original"
    WALLET = "wallet"


class RefundStatus(str, Enum):
    INITIATED = "initiated"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class Refund(SoftDeletableModel):
    """
    Money returned to a customer, either to the original payment method
    or to their wallet.
    """

    user_id: uuid.UUID
    reference_type: Optional[ReferenceType] = None
    reference_id: Optional[uuid.UUID] = None
    cancellation_id: Optional[uuid.UUID] = None
    payment_id: Optional[uuid.UUID] = None
    amount: Amount
    currency: str = DEFAULT_CURRENCY
    method: RefundMethod = RefundMethod.ORIGINAL
    gateway: Optional[PaymentGateway] = None
    gateway_refund_id: Optional[str] = None
    status: RefundStatus = RefundStatus.INITIATED
    initiated_at: datetime = Field(default_factory=utc_now)
    processed_at: Optional[datetime] = None
    wallet_transaction_id: Optional[uuid.UUID] = None
    failure_reason: Optional[str] = None
    notes: Optional[str] = None
    processed_by: Optional[uuid.UUID] = None

    def mark_processing(self) -> None:
        self.status = RefundStatus.PROCESSING
        self.touch()

    def mark_completed(
        self,
        gateway_refund_id: Optional[str] = None,
        wallet_transaction_id: Optional[uuid.UUID] = None,
        processed_by: Optional[uuid.UUID] = None
    ) -> None:
        """Complete the refund, keeping previously stored ids when none are given."""
        self.status = RefundStatus.COMPLETED
        self.gateway_refund_id = gateway_refund_id or self.gateway_refund_id
        self.wallet_transaction_id = wallet_transaction_id or self.wallet_transaction_id
        if processed_by is not None:
            self.processed_by = processed_by
        self.processed_at = utc_now()
        self.touch()

    def mark_failed(self, reason: str) -> None:
        self.status = RefundStatus.FAILED
        self.failure_reason = reason
        self.processed_at = utc_now()
        self.touch()
