# 📄 File: marketplace/modules/commerce/domain/models/order.py
# 🧭 Purpose (Layman Explanation):
# A customer's order: what was bought at which price, the bill totals, payment and
# delivery progress, plus one line per seller item that can be cancelled or refunded.
# 🧪 Purpose (Technical Summary):
# Order aggregate with price/tax snapshots and a totals invariant (sub total equals the
# sum of line totals, grand total = sub total - discount + tax + shipping), and the
# per-seller OrderItem with refund and commission flags.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# commerce repositories, finance (payments, invoices, commissions), reviews

import uuid
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, model_validator

from marketplace.shared.domain.base import SoftDeletableModel, ValueObject, ensure_positive
from marketplace.shared.domain.value_objects import (
    DEFAULT_CURRENCY,
    Amount,
    CancellationInfo,
    PaymentStatus,
    PriceSnapshot,
    RefundInfo,
    TaxInfo,
)
from marketplace.shared.utils.helpers import generate_reference_number, round_money, sum_money, utc_now

ORDER_NUMBER_PREFIX = "ORD"

# Tolerance when comparing stored monetary totals
MONEY_EPSILON = 0.01


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PACKED = "packed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    RETURNED = "returned"


class OrderItemStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PACKED = "packed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    RETURNED = "returned"
    REFUNDED = "refunded"


class ReturnStatus(str, Enum):
    REQUESTED = "requested"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"


class ReturnRequest(ValueObject):
    reason: Optional[str] = None
    requested_at: datetime = Field(default_factory=utc_now)
    status: ReturnStatus = ReturnStatus.REQUESTED


# =============================================================================
# ORDER
# =============================================================================

class OrderLine(ValueObject):
    """Item snapshot stored inside the order."""

    product_id: uuid.UUID
    variant_id: Optional[uuid.UUID] = None
    seller_id: uuid.UUID
    quantity: int = Field(ge=1)
    pricing: PriceSnapshot
    tax: TaxInfo = Field(default_factory=TaxInfo)
    total_price: Amount

    @classmethod
    def create(
        cls,
        product_id: uuid.UUID,
        seller_id: uuid.UUID,
        quantity: int,
        pricing: PriceSnapshot,
        **kwargs: Any
    ) -> "OrderLine":
        """Snapshot a line; total_price is selling price x quantity."""
        return cls(
            product_id=product_id,
            seller_id=seller_id,
            quantity=quantity,
            pricing=pricing,
            total_price=round_money(pricing.selling_price * quantity),
            **kwargs
        )


class OrderTotals(ValueObject):
    sub_total: Amount
    discount: Amount = 0
    tax: Amount = 0
    shipping: Amount = 0
    grand_total: Amount
    currency: str = DEFAULT_CURRENCY

    @model_validator(mode="after")
    def check_grand_total(self) -> "OrderTotals":
        expected = round_money(self.sub_total - self.discount + self.tax + self.shipping)
        if abs(self.grand_total - expected) > MONEY_EPSILON:
            raise ValueError(
                f"grand_total {self.grand_total} does not equal sub_total - discount + tax + shipping ({expected})"
            )
        return self


class Order(SoftDeletableModel):
    """
    Customer order.

    Invariant: totals.sub_total equals the sum of the item total prices.
    """

    order_number: str = Field(min_length=1, max_length=32)
    user_id: uuid.UUID
    shipping_address_id: uuid.UUID
    items: List[OrderLine] = Field(min_length=1)
    totals: OrderTotals
    payment_id: Optional[uuid.UUID] = None
    payment_status: PaymentStatus = PaymentStatus.PENDING
    shipment_id: Optional[uuid.UUID] = None
    status: OrderStatus = OrderStatus.PENDING
    cancellation: Optional[CancellationInfo] = None
    return_request: Optional[ReturnRequest] = None
    invoice_id: Optional[uuid.UUID] = None

    @model_validator(mode="after")
    def check_sub_total(self) -> "Order":
        items_total = sum_money(item.total_price for item in self.items)
        if abs(self.totals.sub_total - items_total) > MONEY_EPSILON:
            raise ValueError(
                f"sub_total {self.totals.sub_total} does not equal the sum of item totals ({items_total})"
            )
        return self

    @classmethod
    def create(
        cls,
        user_id: uuid.UUID,
        shipping_address_id: uuid.UUID,
        items: List[OrderLine],
        discount: float = 0,
        tax: float = 0,
        shipping: float = 0,
        currency: str = DEFAULT_CURRENCY,
        order_number: Optional[str] = None,
        **kwargs: Any
    ) -> "Order":
        """
        Create an order with computed totals.

        Args:
            user_id: Ordering customer
            shipping_address_id: Delivery address
            items: Line snapshots
            discount: Coupon discount
            tax: Tax charged on top of the item prices
            shipping: Shipping charge
            currency: Order currency
            order_number: Explicit order number, generated when omitted

        Returns:
            New pending order
        """
        sub_total = sum_money(item.total_price for item in items)
        totals = OrderTotals(
            sub_total=sub_total,
            discount=discount,
            tax=tax,
            shipping=shipping,
            grand_total=round_money(sub_total - discount + tax + shipping),
            currency=currency,
        )
        return cls(
            order_number=order_number or generate_reference_number(ORDER_NUMBER_PREFIX),
            user_id=user_id,
            shipping_address_id=shipping_address_id,
            items=items,
            totals=totals,
            **kwargs
        )

    def confirm(self) -> None:
        self.status = OrderStatus.CONFIRMED
        self.touch()

    def mark_paid(self, payment_id: Optional[uuid.UUID] = None) -> None:
        if payment_id is not None:
            self.payment_id = payment_id
        self.payment_status = PaymentStatus.PAID
        self.touch()

    def mark_payment_failed(self) -> None:
        self.payment_status = PaymentStatus.FAILED
        self.touch()

    def update_status(self, status: OrderStatus) -> None:
        self.status = status
        self.touch()

    def cancel(self, reason: Optional[str] = None, by: str = "user", refund_amount: float = 0) -> None:
        self.status = OrderStatus.CANCELLED
        self.cancellation = CancellationInfo(cancelled_by=by, reason=reason, refund_amount=refund_amount)
        self.touch()

    def request_return(self, reason: Optional[str] = None) -> None:
        self.return_request = ReturnRequest(reason=reason)
        self.touch()

    @property
    def seller_ids(self) -> List[uuid.UUID]:
        return list(dict.fromkeys(item.seller_id for item in self.items))


# =============================================================================
# ORDER ITEM
# =============================================================================

class OrderItemPricing(PriceSnapshot):
    tax_amount: Amount = 0


class OrderItem(SoftDeletableModel):
    """Per-seller order line tracked through fulfilment, refund and commission."""

    order_id: uuid.UUID
    user_id: uuid.UUID
    seller_id: uuid.UUID
    product_id: uuid.UUID
    variant_id: Optional[uuid.UUID] = None
    product_name: str = Field(min_length=1, max_length=200)
    sku: Optional[str] = Field(None, max_length=64)
    quantity: int = Field(ge=1)
    pricing: OrderItemPricing
    total_price: Amount
    tax: TaxInfo = Field(default_factory=TaxInfo)
    status: OrderItemStatus = OrderItemStatus.PENDING
    shipment_id: Optional[uuid.UUID] = None
    cancellation: Optional[CancellationInfo] = None
    return_request: Optional[ReturnRequest] = None
    refund: Optional[RefundInfo] = None
    invoice_id: Optional[uuid.UUID] = None
    is_commission_applied: bool = False

    @classmethod
    def from_line(cls, order: Order, line: OrderLine, product_name: str, **kwargs: Any) -> "OrderItem":
        """Split an order line into its own trackable record."""
        return cls(
            order_id=order.id,
            user_id=order.user_id,
            seller_id=line.seller_id,
            product_id=line.product_id,
            variant_id=line.variant_id,
            product_name=product_name,
            quantity=line.quantity,
            pricing=OrderItemPricing(**line.pricing.model_dump()),
            total_price=line.total_price,
            tax=line.tax,
            **kwargs
        )

    def update_status(self, status: OrderItemStatus) -> None:
        self.status = status
        self.touch()

    def mark_delivered(self) -> None:
        self.status = OrderItemStatus.DELIVERED
        self.touch()

    def cancel(self, reason: Optional[str] = None, by: str = "user") -> None:
        self.status = OrderItemStatus.CANCELLED
        self.cancellation = CancellationInfo(cancelled_by=by, reason=reason)
        self.touch()

    def request_return(self, reason: Optional[str] = None) -> None:
        self.status = OrderItemStatus.RETURNED
        self.return_request = ReturnRequest(reason=reason)
        self.touch()

    def mark_refunded(self, amount: float, payment_id: Optional[uuid.UUID] = None) -> None:
        ensure_positive(amount, field="amount")
        self.status = OrderItemStatus.REFUNDED
        self.refund = RefundInfo(amount=amount, payment_id=payment_id)
        self.touch()

    def mark_commission_applied(self) -> None:
        self.is_commission_applied = True
        self.touch()
