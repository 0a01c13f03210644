# 📄 File: marketplace/shared/domain/value_objects.py
# 🧭 Purpose (Layman Explanation):
# Small building blocks reused by many records: a map location, a price tag, tax details,
# who verified something, and the note left when a booking is cancelled.
# 🧪 Purpose (Technical Summary):
# Shared enums and pydantic value objects embedded in entities and persisted as JSON
# columns (location, price snapshots, GST info, verification and cancellation blocks).
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain.base
# 🔄 Connected Modules / Calls From:
# identity, providers, catalog, commerce, services, hospitality, mobility, cinema, finance

import uuid
from datetime import datetime
from enum import Enum
from typing import Annotated, Optional

from pydantic import Field, field_validator

from marketplace.shared.domain.base import ValueObject
from marketplace.shared.utils.helpers import utc_now
from marketplace.shared.utils.validators import normalize_ifsc

DEFAULT_CURRENCY = "INR"

# Non-negative monetary amount
Amount = Annotated[float, Field(ge=0)]
Percentage = Annotated[float, Field(ge=0, le=100)]
GstRate = Annotated[float, Field(ge=0, le=28)]


class PaymentStatus(str, Enum):
    """Payment state of a transactional record"""
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class ApprovalStatus(str, Enum):
    """Moderation state for listings and reviews"""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class GeoPoint(ValueObject):
    """WGS84 coordinate"""
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class PriceSnapshot(ValueObject):
    """
    Price copied into a transactional record at purchase time so later
    catalog changes never alter historical orders.
    """
    mrp: Amount = 0
    selling_price: Amount = 0
    currency: str = DEFAULT_CURRENCY


class TaxInfo(ValueObject):
    hsn_code: Optional[str] = None
    gst_percentage: GstRate = 0


class Verification(ValueObject):
    """Admin verification block shared by profiles, documents and vehicles"""
    is_verified: bool = False
    verified_by: Optional[uuid.UUID] = None
    verified_at: Optional[datetime] = None
    rejected_reason: Optional[str] = None

    @classmethod
    def approved(cls, admin_id: uuid.UUID) -> "Verification":
        return cls(is_verified=True, verified_by=admin_id, verified_at=utc_now())

    @classmethod
    def rejected(cls, reason: str) -> "Verification":
        return cls(is_verified=False, rejected_reason=reason)


class CancellationInfo(ValueObject):
    """Who cancelled a booking, why and when"""
    cancelled_by: Optional[str] = None
    reason: Optional[str] = None
    cancelled_at: datetime = Field(default_factory=utc_now)
    refund_amount: Amount = 0


class RefundInfo(ValueObject):
    """Refund recorded against a paid line, ticket or payment"""
    amount: Amount = 0
    payment_id: Optional[uuid.UUID] = None
    refunded_at: datetime = Field(default_factory=utc_now)
    reason: Optional[str] = None


class BankAccount(ValueObject):
    """Payout / settlement bank account"""
    account_holder_name: Optional[str] = None
    account_number: Optional[str] = Field(None, min_length=6, max_length=20)
    ifsc_code: Optional[str] = None
    bank_name: Optional[str] = None
    upi_id: Optional[str] = None

    @field_validator("ifsc_code")
    @classmethod
    def validate_ifsc(cls, v: Optional[str]) -> Optional[str]:
        return normalize_ifsc(v)
