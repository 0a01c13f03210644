# 📄 File: marketplace/modules/commerce/domain/models/cart.py
# 🧭 Purpose (Layman Explanation):
# The shopping cart each customer fills before checking out, and the discount coupons
# they can apply to it.
# 🧪 Purpose (Technical Summary):
# Cart (one per user) with price-snapshot items and total calculation, and Coupon with
# validity window, usage limits and flat/percentage discount computation.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# commerce repositories, order creation by the embedding application

import uuid
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from marketplace.shared.core.exceptions import BusinessRuleViolationError
from marketplace.shared.domain.base import SoftDeletableModel, ValueObject, ensure_positive
from marketplace.shared.domain.value_objects import DEFAULT_CURRENCY, Amount, PriceSnapshot
from marketplace.shared.utils.helpers import ensure_utc, percentage_of, round_money, sum_money, utc_now


# =============================================================================
# COUPON
# =============================================================================

class CouponScope(str, Enum):
    """What a coupon can be redeemed against"""
    ORDER = "order"
    BOOKING = "booking"
    SUBSCRIPTION = "subscription"
    WALLET = "wallet"


class DiscountType(str, Enum):
    FLAT = "flat"
    PERCENTAGE = "percentage"


class UsageLimit(ValueObject):
    total: Optional[int] = Field(None, ge=1)
    per_user: int = Field(default=1, ge=1)


class Coupon(SoftDeletableModel):
    """
    Discount coupon.

    A coupon is valid while active, not deleted, inside its date window,
    above the minimum order amount and below its total usage limit.
    """

    code: str = Field(min_length=3, max_length=32)
    title: Optional[str] = None
    description: Optional[str] = None
    applicable_on: CouponScope
    discount_type: DiscountType
    discount_value: Amount
    max_discount_amount: Optional[Amount] = None
    min_order_amount: Amount = 0
    usage_limit: UsageLimit = Field(default_factory=UsageLimit)
    used_count: int = Field(default=0, ge=0)
    allowed_roles: List[str] = Field(default_factory=list)
    category_id: Optional[uuid.UUID] = None
    service_id: Optional[uuid.UUID] = None
    start_date: datetime
    end_date: datetime
    is_active: bool = True
    is_public: bool = True
    created_by: Optional[uuid.UUID] = None
    terms: Optional[str] = None

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("start_date", "end_date")
    @classmethod
    def as_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    def is_valid(self, order_amount: float = 0, now: Optional[datetime] = None) -> bool:
        now = now or utc_now()
        if not self.is_active or self.is_deleted:
            return False
        if now < self.start_date or now > self.end_date:
            return False
        if order_amount < self.min_order_amount:
            return False
        if self.usage_limit.total and self.used_count >= self.usage_limit.total:
            return False
        return True

    def discount_for(self, amount: float) -> float:
        """Discount granted on an amount, capped by max discount and the amount itself."""
        if self.discount_type == DiscountType.PERCENTAGE:
            discount = percentage_of(amount, self.discount_value)
            if self.max_discount_amount is not None:
                discount = min(discount, self.max_discount_amount)
        else:
            discount = self.discount_value
        return round_money(min(discount, amount))

    def redeem(self) -> None:
        if self.usage_limit.total and self.used_count >= self.usage_limit.total:
            raise BusinessRuleViolationError(
                "Coupon usage limit reached",
                rule="coupon_usage_limit",
                context={"code": self.code, "used_count": self.used_count}
            )
        self.used_count += 1
        self.touch()


# =============================================================================
# CART
# =============================================================================

class CartItem(ValueObject):
    product_id: uuid.UUID
    variant_id: Optional[uuid.UUID] = None
    quantity: int = Field(ge=1)
    pricing: PriceSnapshot

    @property
    def line_total(self) -> float:
        return round_money(self.pricing.selling_price * self.quantity)


class CartTotals(ValueObject):
    sub_total: Amount = 0
    tax: Amount = 0
    grand_total: Amount = 0
    currency: str = DEFAULT_CURRENCY


class Cart(SoftDeletableModel):
    """Shopping cart; each user owns exactly one."""

    user_id: uuid.UUID
    items: List[CartItem] = Field(default_factory=list)
    coupon_id: Optional[uuid.UUID] = None
    discount_amount: Amount = 0
    totals: CartTotals = Field(default_factory=CartTotals)
    is_active: bool = True
    last_updated_at: datetime = Field(default_factory=utc_now)

    def _find(self, product_id: uuid.UUID, variant_id: Optional[uuid.UUID]) -> Optional[int]:
        for index, item in enumerate(self.items):
            if item.product_id == product_id and item.variant_id == variant_id:
                return index
        return None

    def add_item(
        self,
        product_id: uuid.UUID,
        quantity: int,
        pricing: PriceSnapshot,
        variant_id: Optional[uuid.UUID] = None
    ) -> None:
        """
        Add units of a product (variant) to the cart.

        Adding an item already in the cart increases its quantity and
        refreshes its price snapshot.
        """
        ensure_positive(quantity)
        items = list(self.items)
        index = self._find(product_id, variant_id)
        if index is None:
            items.append(CartItem(product_id=product_id, variant_id=variant_id, quantity=quantity, pricing=pricing))
        else:
            items[index] = CartItem(
                product_id=product_id,
                variant_id=variant_id,
                quantity=items[index].quantity + quantity,
                pricing=pricing
            )
        self.items = items
        self.calculate_totals()

    def remove_item(
        self,
        product_id: uuid.UUID,
        variant_id: Optional[uuid.UUID] = None,
        coupon: Optional[Coupon] = None
    ) -> bool:
        """
        Remove a line from the cart.

        An attached coupon is re-checked against the new sub total: its
        discount is recomputed while it still applies, otherwise the coupon
        and its discount are dropped. Without the attached coupon to check
        against, it is dropped.
        """
        index = self._find(product_id, variant_id)
        if index is None:
            return False
        self.items = [item for i, item in enumerate(self.items) if i != index]
        if self.coupon_id is not None:
            self._recheck_coupon(coupon)
        self.calculate_totals()
        return True

    def _recheck_coupon(self, coupon: Optional[Coupon]) -> None:
        sub_total = sum_money(item.line_total for item in self.items)
        if coupon is not None and coupon.id == self.coupon_id and coupon.is_valid(sub_total):
            self.discount_amount = coupon.discount_for(sub_total)
        else:
            self.coupon_id = None
            self.discount_amount = 0

    def apply_coupon(self, coupon: Coupon) -> float:
        """
        Attach a coupon and store its discount.

        Raises:
            BusinessRuleViolationError: If the coupon is not valid for the cart
        """
        sub_total = sum_money(item.line_total for item in self.items)
        if coupon.applicable_on != CouponScope.ORDER.value or not coupon.is_valid(sub_total):
            raise BusinessRuleViolationError(
                "Coupon is not applicable to this cart",
                rule="coupon_not_applicable",
                context={"code": coupon.code, "sub_total": sub_total}
            )
        self.coupon_id = coupon.id
        self.discount_amount = coupon.discount_for(sub_total)
        self.calculate_totals()
        return self.discount_amount

    def clear(self) -> None:
        self.items = []
        self.coupon_id = None
        self.discount_amount = 0
        self.calculate_totals()

    def calculate_totals(self) -> CartTotals:
        """Recompute sub total (selling price x quantity) and grand total (sub total - discount)."""
        sub_total = sum_money(item.line_total for item in self.items)
        self.totals = CartTotals(
            sub_total=sub_total,
            tax=self.totals.tax,
            grand_total=max(round_money(sub_total - self.discount_amount), 0),
            currency=self.totals.currency,
        )
        self.last_updated_at = utc_now()
        self.touch()
        return self.totals

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)
