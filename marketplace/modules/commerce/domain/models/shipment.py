# 📄 File: marketplace/modules/commerce/domain/models/shipment.py
# 🧭 Purpose (Layman Explanation):
# The parcel sent to (or returned by) a customer: courier, tracking number, package size
# and a history of where it has been.
# 🧪 Purpose (Technical Summary):
# Shipment entity with address snapshot, courier, COD and package value objects and an
# append-only tracking history written by update_status.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain
# 🔄 Connected Modules / Calls From:
# commerce repositories, orders (shipment_id)

import uuid
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from marketplace.shared.domain.base import SoftDeletableModel, ValueObject
from marketplace.shared.domain.value_objects import DEFAULT_CURRENCY, Amount
from marketplace.shared.utils.helpers import round_money, utc_now


class ShipmentType(str, Enum):
    FORWARD = "forward"
    REVERSE = "reverse"


class ShipmentStatus(str, Enum):
    CREATED = "created"
    LABEL_GENERATED = "label_generated"
    PICKED_UP = "picked_up"
    IN_TRANSIT = "in_transit"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    FAILED = "failed"
    RTO = "rto"
    RETURNED = "returned"


class ShippingAddress(ValueObject):
    """Address copied at dispatch time"""
    name: Optional[str] = None
    phone: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    country: str = "India"


class Courier(ValueObject):
    name: Optional[str] = None
    service_type: Optional[str] = None
    awb: Optional[str] = None
    tracking_url: Optional[str] = None


class CashOnDelivery(ValueObject):
    is_cod: bool = False
    amount: Amount = 0


class PackageInfo(ValueObject):
    weight_grams: Optional[float] = Field(None, ge=0)
    length_cm: Optional[float] = Field(None, ge=0)
    width_cm: Optional[float] = Field(None, ge=0)
    height_cm: Optional[float] = Field(None, ge=0)


class TrackingEvent(ValueObject):
    status: ShipmentStatus
    location: Optional[str] = None
    message: Optional[str] = None
    time: datetime = Field(default_factory=utc_now)


class ShippingCharges(ValueObject):
    shipping: Amount = 0
    cod: Amount = 0
    total: Amount = 0
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def of(cls, shipping: float, cod: float = 0, currency: str = DEFAULT_CURRENCY) -> "ShippingCharges":
        return cls(shipping=shipping, cod=cod, total=round_money(shipping + cod), currency=currency)


class Shipment(SoftDeletableModel):
    order_id: uuid.UUID
    order_item_ids: List[uuid.UUID] = Field(default_factory=list)
    user_id: uuid.UUID
    seller_id: uuid.UUID
    shipping_address: ShippingAddress = Field(default_factory=ShippingAddress)
    courier: Courier = Field(default_factory=Courier)
    shipment_type: ShipmentType = ShipmentType.FORWARD
    cod: CashOnDelivery = Field(default_factory=CashOnDelivery)
    package: PackageInfo = Field(default_factory=PackageInfo)
    status: ShipmentStatus = ShipmentStatus.CREATED
    shipped_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    returned_at: Optional[datetime] = None
    tracking_history: List[TrackingEvent] = Field(default_factory=list)
    charges: ShippingCharges = Field(default_factory=ShippingCharges)

    def update_status(self, status: ShipmentStatus, message: Optional[str] = None, location: Optional[str] = None) -> None:
        """
        Move the shipment to a new status and append a tracking event.

        Pickup stamps shipped_at, delivery stamps delivered_at and a
        completed return stamps returned_at.
        """
        status = ShipmentStatus(status)
        now = utc_now()
        self.status = status
        self.tracking_history = [
            *self.tracking_history,
            TrackingEvent(status=status, location=location, message=message, time=now),
        ]
        if status == ShipmentStatus.PICKED_UP and self.shipped_at is None:
            self.shipped_at = now
        elif status == ShipmentStatus.DELIVERED:
            self.delivered_at = now
        elif status == ShipmentStatus.RETURNED:
            self.returned_at = now
        self.touch()

    @property
    def latest_event(self) -> Optional[TrackingEvent]:
        return self.tracking_history[-1] if self.tracking_history else None
