# 📄 File: marketplace/modules/mobility/domain/models/ride.py
# 🧭 Purpose (Layman Explanation):
# A single taxi/bike ride: who asked for it, which driver and vehicle took it, where it
# goes, what it costs and how far along it is.
# 🧪 Purpose (Technical Summary):
# Ride entity with pickup/drop points, fare snapshot, lifecycle timestamps and status
# transitions from request to completion or cancellation.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, vehicle.py
# 🔄 Connected Modules / Calls From:
# mobility repositories, finance (payments, commissions), reviews

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from marketplace.shared.domain.base import SoftDeletableModel, ValueObject
from marketplace.shared.domain.value_objects import DEFAULT_CURRENCY, Amount, CancellationInfo, GeoPoint, PaymentStatus
from marketplace.shared.utils.helpers import round_money, utc_now

from .vehicle import VehicleCategory, VehicleType


class RideStatus(str, Enum):
    REQUESTED = "requested"
    ACCEPTED = "accepted"
    ARRIVED = "arrived"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no-show"


class RideActor(str, Enum):
    USER = "user"
    DRIVER = "driver"
    ADMIN = "admin"


class RideSource(str, Enum):
    APP = "app"
    WEB = "web"
    ADMIN = "admin"


class RideLocation(ValueObject):
    address: Optional[str] = None
    point: Optional[GeoPoint] = None


class Fare(ValueObject):
    base_fare: Amount = 0
    per_km_fare: Amount = 0
    per_minute_fare: Amount = 0
    surge_multiplier: float = Field(default=1, ge=1)
    waiting_charge: Amount = 0
    tax: Amount = 0
    discount: Amount = 0
    total_amount: Amount
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def estimate(
        cls,
        base_fare: float,
        per_km_fare: float,
        distance_km: float,
        per_minute_fare: float = 0,
        duration_minutes: float = 0,
        surge_multiplier: float = 1,
        waiting_charge: float = 0,
        tax: float = 0,
        discount: float = 0,
    ) -> "Fare":
        """
        Build a fare where
        total = (base + km x rate + minutes x rate) x surge + waiting + tax - discount.
        """
        ride_cost = (base_fare + per_km_fare * distance_km + per_minute_fare * duration_minutes) * surge_multiplier
        total = ride_cost + waiting_charge + tax - discount
        return cls(
            base_fare=base_fare,
            per_km_fare=per_km_fare,
            per_minute_fare=per_minute_fare,
            surge_multiplier=surge_multiplier,
            waiting_charge=waiting_charge,
            tax=tax,
            discount=discount,
            total_amount=max(round_money(total), 0),
        )


class RideCancellation(CancellationInfo):
    penalty_amount: Amount = 0


class RideFeedback(ValueObject):
    rating: Optional[int] = Field(None, ge=1, le=5)
    comment: Optional[str] = Field(None, max_length=500)


class RideRatings(ValueObject):
    user_to_driver: Optional[RideFeedback] = None
    driver_to_user: Optional[RideFeedback] = None


class Ride(SoftDeletableModel):
    user_id: uuid.UUID
    driver_id: Optional[uuid.UUID] = None
    driver_profile_id: Optional[uuid.UUID] = None
    vehicle_id: Optional[uuid.UUID] = None
    ride_type: VehicleType
    category: Optional[VehicleCategory] = None
    pickup: RideLocation
    drop: RideLocation
    requested_at: datetime = Field(default_factory=utc_now)
    accepted_at: Optional[datetime] = None
    arrived_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    distance_km: Optional[float] = Field(None, ge=0)
    duration_minutes: Optional[float] = Field(None, ge=0)
    fare: Fare
    coupon_id: Optional[uuid.UUID] = None
    payment_id: Optional[uuid.UUID] = None
    payment_status: PaymentStatus = PaymentStatus.PENDING
    status: RideStatus = RideStatus.REQUESTED
    cancellation: Optional[RideCancellation] = None
    ratings: RideRatings = Field(default_factory=RideRatings)
    notes: Optional[str] = None
    source: RideSource = RideSource.APP

    def accept(self, driver_id: uuid.UUID, vehicle_id: uuid.UUID, driver_profile_id: Optional[uuid.UUID] = None) -> None:
        self.driver_id = driver_id
        self.vehicle_id = vehicle_id
        if driver_profile_id is not None:
            self.driver_profile_id = driver_profile_id
        self.status = RideStatus.ACCEPTED
        self.accepted_at = utc_now()
        self.touch()

    def mark_arrived(self) -> None:
        self.status = RideStatus.ARRIVED
        self.arrived_at = utc_now()
        self.touch()

    def start_ride(self) -> None:
        self.status = RideStatus.IN_PROGRESS
        self.started_at = utc_now()
        self.touch()

    def complete_ride(self, distance_km: Optional[float] = None, duration_minutes: Optional[float] = None) -> None:
        if distance_km is not None:
            self.distance_km = distance_km
        if duration_minutes is not None:
            self.duration_minutes = duration_minutes
        self.status = RideStatus.COMPLETED
        self.completed_at = utc_now()
        self.touch()

    def mark_no_show(self) -> None:
        self.status = RideStatus.NO_SHOW
        self.touch()

    def mark_paid(self, payment_id: Optional[uuid.UUID] = None) -> None:
        if payment_id is not None:
            self.payment_id = payment_id
        self.payment_status = PaymentStatus.PAID
        self.touch()

    def cancel_ride(self, reason: Optional[str] = None, by: RideActor = RideActor.USER, penalty_amount: float = 0) -> None:
        self.status = RideStatus.CANCELLED
        self.cancellation = RideCancellation(
            cancelled_by=RideActor(by).value,
            reason=reason,
            penalty_amount=penalty_amount,
        )
        self.touch()

    def rate_driver(self, rating: int, comment: Optional[str] = None) -> None:
        self.ratings = self.ratings.model_copy(
            update={"user_to_driver": RideFeedback(rating=rating, comment=comment)}
        )
        self.touch()

    def rate_user(self, rating: int, comment: Optional[str] = None) -> None:
        self.ratings = self.ratings.model_copy(
            update={"driver_to_user": RideFeedback(rating=rating, comment=comment)}
        )
        self.touch()
