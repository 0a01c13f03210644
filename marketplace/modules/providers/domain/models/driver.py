# 📄 File: marketplace/modules/providers/domain/models/driver.py
# 🧭 Purpose (Layman Explanation):
# A ride-hailing driver's profile: licence, shift, whether they are online right now and
# where they are, plus trip totals.
# 🧪 Purpose (Technical Summary):
# DriverProfile domain model with licence value object, online toggle, live location and
# cumulative trip statistics.
# 🔗 Dependencies:
# pydantic, provider.py
# 🔄 Connected Modules / Calls From:
# mobility (vehicle/ride assignment), providers repositories, reviews

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from marketplace.modules.identity.domain.models import Gender
from marketplace.shared.domain.base import ValueObject
from marketplace.shared.domain.value_objects import GeoPoint
from marketplace.shared.utils.helpers import round_money
from marketplace.shared.utils.validators import normalize_phone

from .provider import ProviderProfile


class DriverShift(str, Enum):
    DAY = "day"
    NIGHT = "night"
    FLEXIBLE = "flexible"


class DrivingLicense(ValueObject):
    number: str = Field(min_length=4, max_length=30)
    issuing_authority: Optional[str] = None
    expiry_date: Optional[date] = None


class DriverStats(ValueObject):
    total_rides: int = Field(default=0, ge=0)
    total_distance_km: float = Field(default=0, ge=0)
    total_earnings: float = Field(default=0, ge=0)


class DriverProfile(ProviderProfile):
    """Driver listing; is_online gates ride matching."""

    full_name: str = Field(min_length=1, max_length=120)
    phone: Optional[str] = None
    gender: Optional[Gender] = None
    experience_years: int = Field(default=0, ge=0)
    about: Optional[str] = None
    license: DrivingLicense
    is_online: bool = False
    shift: DriverShift = DriverShift.FLEXIBLE
    current_location: Optional[GeoPoint] = None
    is_blocked: bool = False
    stats: DriverStats = Field(default_factory=DriverStats)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        return normalize_phone(v)

    def set_online(self, status: bool) -> None:
        self.is_online = status
        self.touch()

    def update_location(self, latitude: float, longitude: float) -> None:
        self.current_location = GeoPoint(latitude=latitude, longitude=longitude)
        self.touch()

    def record_trip(self, distance_km: float, earnings: float) -> None:
        """Add a completed ride to the driver's totals."""
        self.stats = DriverStats(
            total_rides=self.stats.total_rides + 1,
            total_distance_km=round_money(self.stats.total_distance_km + distance_km),
            total_earnings=round_money(self.stats.total_earnings + earnings),
        )
        self.touch()
