# 📄 File: marketplace/modules/finance/domain/models/commission.py
# 🧭 Purpose (Layman Explanation):
# The platform's cut of every sale or booking, and the table of default cut
# percentages per business type and plan.
# 🧪 Purpose (Technical Summary):
# Commission entity (gross/percentage/commission/net, pending -> applied -> reversed)
# and CommissionRule (percentage per module and plan code).
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# finance commission service, commerce order items, bookings

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import model_validator

from marketplace.shared.core.exceptions import BusinessRuleViolationError
from marketplace.shared.domain.base import SoftDeletableModel
from marketplace.shared.domain.value_objects import DEFAULT_CURRENCY, Amount, Percentage
from marketplace.shared.utils.helpers import percentage_of, round_money, utc_now

from .payment import ReferenceType


class PlanCode(str, Enum):
    FREE = "FREE"
    PRO = "PRO"
    ENTERPRISE = "ENTERPRISE"


class CommissionModule(str, Enum):
    """Business lines with configurable commission rules"""
    B2C = "b2c"
    B2B = "b2b"
    HOME_SERVICE = "home-service"


class ServiceType(str, Enum):
    B2C = "b2c"
    B2B = "b2b"
    SERVICE = "service"
    RESTAURANT = "restaurant"
    HOTEL = "hotel"
    DOCTOR = "doctor"
    ADVOCATE = "advocate"
    DRIVER = "driver"
    CINEMA = "cinema"
    SUBSCRIPTION = "subscription"


class CommissionStatus(str, Enum):
    PENDING = "pending"
    APPLIED = "applied"
    REVERSED = "reversed"


class CommissionSource(str, Enum):
    """Where the percentage came from"""
    DEFAULT = "default"
    SUBSCRIPTION = "subscription"
    RULE = "rule"
    MANUAL = "manual"


class Commission(SoftDeletableModel):
    """
    Platform commission on one transaction.

    commission_amount = gross_amount * commission_percentage / 100 and
    net_amount = gross_amount - commission_amount.
    """

    user_id: uuid.UUID
    service_type: ServiceType
    reference_type: Optional[ReferenceType] = None
    reference_id: Optional[uuid.UUID] = None
    gross_amount: Amount
    commission_percentage: Percentage
    commission_amount: Amount
    net_amount: Amount
    currency: str = DEFAULT_CURRENCY
    status: CommissionStatus = CommissionStatus.PENDING
    source: CommissionSource = CommissionSource.DEFAULT
    applied_at: Optional[datetime] = None
    reversed_at: Optional[datetime] = None
    reversed_reason: Optional[str] = None
    payment_id: Optional[uuid.UUID] = None
    wallet_transaction_id: Optional[uuid.UUID] = None

    @model_validator(mode="after")
    def check_split(self) -> "Commission":
        if abs(self.commission_amount + self.net_amount - self.gross_amount) > 0.01:
            raise ValueError("commission_amount + net_amount must equal gross_amount")
        return self

    @classmethod
    def calculate(
        cls,
        user_id: uuid.UUID,
        service_type: ServiceType,
        gross_amount: float,
        commission_percentage: float,
        source: CommissionSource = CommissionSource.DEFAULT,
        reference_type: Optional[ReferenceType] = None,
        reference_id: Optional[uuid.UUID] = None,
        **kwargs
    ) -> "Commission":
        commission_amount = percentage_of(gross_amount, commission_percentage)
        return cls(
            user_id=user_id,
            service_type=service_type,
            reference_type=reference_type,
            reference_id=reference_id,
            gross_amount=round_money(gross_amount),
            commission_percentage=commission_percentage,
            commission_amount=commission_amount,
            net_amount=round_money(gross_amount - commission_amount),
            source=source,
            **kwargs
        )

    def apply(self, wallet_transaction_id: Optional[uuid.UUID] = None) -> None:
        if self.status != CommissionStatus.PENDING.value:
            raise BusinessRuleViolationError(
                f"Cannot apply a commission in status {self.status}",
                rule="commission_apply_requires_pending",
                context={"commission_id": str(self.id)}
            )
        self.status = CommissionStatus.APPLIED
        self.applied_at = utc_now()
        self.wallet_transaction_id = wallet_transaction_id or self.wallet_transaction_id
        self.touch()

    def reverse(self, reason: str) -> None:
        if self.status == CommissionStatus.REVERSED.value:
            raise BusinessRuleViolationError(
                "Commission is already reversed",
                rule="commission_reverse_once",
                context={"commission_id": str(self.id)}
            )
        self.status = CommissionStatus.REVERSED
        self.reversed_at = utc_now()
        self.reversed_reason = reason
        self.touch()


class CommissionRule(SoftDeletableModel):
    """Commission percentage for one module and plan; unique per pair."""

    module: CommissionModule
    plan: PlanCode = PlanCode.FREE
    percentage: Percentage
    is_active: bool = True
    description: Optional[str] = None
