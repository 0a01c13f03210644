# 📄 File: marketplace/modules/mobility/domain/models/vehicle.py
# 🧭 Purpose (Layman Explanation):
# A bike, auto, car or van registered by a driver: its papers, whether it can take rides
# right now and whether an admin has checked it.
# 🧪 Purpose (Technical Summary):
# Vehicle entity with registration number normalization, document value objects,
# availability toggle, admin verification and trip statistics.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain
# 🔄 Connected Modules / Calls From:
# mobility repositories, rides, providers (driver profiles)

import re
import uuid
from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from marketplace.shared.domain.base import SoftDeletableModel, ValueObject
from marketplace.shared.domain.value_objects import Verification
from marketplace.shared.utils.helpers import round_money


class VehicleType(str, Enum):
    BIKE = "bike"
    AUTO = "auto"
    CAR = "car"
    VAN = "van"


class VehicleCategory(str, Enum):
    """Fare category"""
    BIKE = "bike"
    MINI = "mini"
    SEDAN = "sedan"
    SUV = "suv"
    LUXURY = "luxury"
    ELECTRIC = "electric"


class FuelType(str, Enum):
    PETROL = "petrol"
    DIESEL = "diesel"
    CNG = "cng"
    ELECTRIC = "electric"


class VehicleDocument(ValueObject):
    """RC, insurance, fitness certificate or permit"""
    number: Optional[str] = None
    provider: Optional[str] = None
    permit_type: Optional[str] = None
    expiry_date: Optional[date] = None
    document_id: Optional[uuid.UUID] = None

    def is_expired(self, on: date) -> bool:
        return self.expiry_date is not None and self.expiry_date < on


class VehicleStats(ValueObject):
    total_trips: int = Field(default=0, ge=0)
    total_distance_km: float = Field(default=0, ge=0)


class Vehicle(SoftDeletableModel):
    owner_id: uuid.UUID
    driver_profile_id: Optional[uuid.UUID] = None
    vehicle_type: VehicleType
    category: Optional[VehicleCategory] = None
    brand: Optional[str] = Field(None, max_length=60)
    model: Optional[str] = Field(None, max_length=60)
    year: Optional[int] = Field(None, ge=1950, le=2100)
    color: Optional[str] = Field(None, max_length=30)
    registration_number: str = Field(min_length=4, max_length=20)
    rc: Optional[VehicleDocument] = None
    insurance: Optional[VehicleDocument] = None
    fitness_certificate: Optional[VehicleDocument] = None
    permit: Optional[VehicleDocument] = None
    seating_capacity: Optional[int] = Field(None, ge=1)
    fuel_type: Optional[FuelType] = None
    is_active: bool = True
    is_available: bool = True
    verification: Verification = Field(default_factory=Verification)
    stats: VehicleStats = Field(default_factory=VehicleStats)

    @field_validator("registration_number")
    @classmethod
    def normalize_registration(cls, v: str) -> str:
        # "ka 01 ab-1234" -> "KA01AB1234"
        return re.sub(r"[\s-]", "", v).upper()

    def set_availability(self, status: bool) -> None:
        self.is_available = status
        self.touch()

    def verify(self, admin_id: uuid.UUID) -> None:
        self.verification = Verification.approved(admin_id)
        self.touch()

    def reject(self, reason: str) -> None:
        self.verification = Verification.rejected(reason)
        self.is_available = False
        self.touch()

    def record_trip(self, distance_km: float) -> None:
        self.stats = VehicleStats(
            total_trips=self.stats.total_trips + 1,
            total_distance_km=round_money(self.stats.total_distance_km + distance_km),
        )
        self.touch()

    def expired_documents(self, on: date) -> List[str]:
        """Names of documents whose expiry date is before the given day."""
        documents = {
            "rc": self.rc,
            "insurance": self.insurance,
            "fitness_certificate": self.fitness_certificate,
            "permit": self.permit,
        }
        return [name for name, doc in documents.items() if doc is not None and doc.is_expired(on)]
