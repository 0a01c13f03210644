# 📄 File: marketplace/modules/catalog/domain/models/listing.py
# 🧭 Purpose (Layman Explanation):
# Two other kinds of catalog entries: services a professional offers (a haircut, an AC
# repair) and wholesale products a business sells in bulk with a minimum order.
# 🧪 Purpose (Technical Summary):
# Service and BulkProduct listing models with nested pricing, duration, coverage,
# supply and export value objects plus view/inquiry counters.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain
# 🔄 Connected Modules / Calls From:
# services (home-service bookings), reviews, catalog repositories

import uuid
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, model_validator

from marketplace.shared.core.exceptions import NotFoundError
from marketplace.shared.domain.base import ListingModel, ValueObject
from marketplace.shared.domain.value_objects import DEFAULT_CURRENCY, Amount, TaxInfo
from marketplace.shared.utils.helpers import generate_slug


# =============================================================================
# SERVICE
# =============================================================================

class ServiceType(str, Enum):
    HOME_SERVICE = "home-service"
    PROFESSIONAL = "professional"
    HEALTH = "health"
    LEGAL = "legal"
    REPAIR = "repair"
    CLEANING = "cleaning"
    BEAUTY = "beauty"
    OTHER = "other"


class PriceType(str, Enum):
    FIXED = "fixed"
    STARTING_FROM = "starting-from"
    HOURLY = "hourly"
    PER_UNIT = "per-unit"


class DurationUnit(str, Enum):
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"


class ServiceLocation(str, Enum):
    AT_HOME = "at-home"
    AT_CENTER = "at-center"
    ONLINE = "online"


class ServicePricing(ValueObject):
    price_type: PriceType = PriceType.FIXED
    base_price: Amount
    max_price: Optional[Amount] = None
    currency: str = DEFAULT_CURRENCY
    tax_included: bool = True

    @model_validator(mode="after")
    def check_range(self) -> "ServicePricing":
        if self.max_price is not None and self.max_price < self.base_price:
            raise ValueError("max_price cannot be lower than base_price")
        return self


class ServiceDuration(ValueObject):
    value: int = Field(gt=0)
    unit: DurationUnit = DurationUnit.MINUTES

    @property
    def minutes(self) -> int:
        factor = {"minutes": 1, "hours": 60, "days": 1440}[self.unit]
        return self.value * factor


class Coverage(ValueObject):
    cities: List[str] = Field(default_factory=list)
    pincodes: List[str] = Field(default_factory=list)

    def covers(self, pincode: str) -> bool:
        return not self.pincodes or pincode in self.pincodes


class ServiceOption(ValueObject):
    name: str
    price: Amount = 0
    duration_minutes: Optional[int] = Field(None, gt=0)


class BookingSettings(ValueObject):
    instant_booking: bool = True
    cancellation_allowed: bool = True
    cancellation_window_hours: int = Field(default=24, ge=0)


class Service(ListingModel):
    """Bookable service offered by a provider."""

    provider_id: uuid.UUID
    category_id: uuid.UUID
    name: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=220)
    description: Optional[str] = None
    service_type: ServiceType = ServiceType.OTHER
    pricing: ServicePricing
    duration: ServiceDuration
    service_location: ServiceLocation = ServiceLocation.AT_HOME
    service_area: Coverage = Field(default_factory=Coverage)
    images: List[str] = Field(default_factory=list)
    options: List[ServiceOption] = Field(default_factory=list)
    booking_settings: BookingSettings = Field(default_factory=BookingSettings)

    @classmethod
    def create(cls, provider_id: uuid.UUID, category_id: uuid.UUID, name: str, **kwargs: Any) -> "Service":
        return cls(
            provider_id=provider_id,
            category_id=category_id,
            name=name,
            slug=kwargs.pop("slug", None) or generate_slug(name),
            **kwargs
        )

    def price_for(self, option_name: Optional[str] = None) -> float:
        """Base price, or the price of a named option."""
        if option_name is None:
            return self.pricing.base_price
        for option in self.options:
            if option.name == option_name:
                return option.price
        raise NotFoundError(
            f"No option '{option_name}' for service",
            resource_type="ServiceOption",
            resource_id=str(self.id)
        )


# =============================================================================
# BULK PRODUCT (B2B)
# =============================================================================

class BulkPricingType(str, Enum):
    FIXED = "fixed"
    RANGE = "range"
    NEGOTIABLE = "negotiable"


class DeliveryUnit(str, Enum):
    DAYS = "days"
    WEEKS = "weeks"


class Specification(ValueObject):
    key: str
    value: str


class PriceRange(ValueObject):
    min: Amount = 0
    max: Amount = 0

    @model_validator(mode="after")
    def check_bounds(self) -> "PriceRange":
        if self.max < self.min:
            raise ValueError("Price range max cannot be lower than min")
        return self


class SupplyAbility(ValueObject):
    """Monthly supply capacity"""
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None


class DeliveryTime(ValueObject):
    value: Optional[int] = Field(None, ge=0)
    unit: DeliveryUnit = DeliveryUnit.DAYS


class ExportDetails(ValueObject):
    is_exportable: bool = False
    ports: List[str] = Field(default_factory=list)
    countries: List[str] = Field(default_factory=list)


class ListingStats(ValueObject):
    views: int = Field(default=0, ge=0)
    inquiries: int = Field(default=0, ge=0)


class BulkProduct(ListingModel):
    """Wholesale listing of a B2B business."""

    business_profile_id: uuid.UUID
    seller_id: uuid.UUID
    category_id: uuid.UUID
    name: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=220)
    description: Optional[str] = None
    specifications: List[Specification] = Field(default_factory=list)
    moq: int = Field(ge=1)
    pricing_type: BulkPricingType = BulkPricingType.NEGOTIABLE
    price: Optional[Amount] = None
    price_range: Optional[PriceRange] = None
    currency: str = DEFAULT_CURRENCY
    tax: TaxInfo = Field(default_factory=TaxInfo)
    images: List[str] = Field(default_factory=list)
    supply_ability: SupplyAbility = Field(default_factory=SupplyAbility)
    delivery_time: DeliveryTime = Field(default_factory=DeliveryTime)
    export_details: ExportDetails = Field(default_factory=ExportDetails)
    stats: ListingStats = Field(default_factory=ListingStats)

    @classmethod
    def create(
        cls,
        business_profile_id: uuid.UUID,
        seller_id: uuid.UUID,
        category_id: uuid.UUID,
        name: str,
        moq: int,
        **kwargs: Any
    ) -> "BulkProduct":
        return cls(
            business_profile_id=business_profile_id,
            seller_id=seller_id,
            category_id=category_id,
            name=name,
            slug=kwargs.pop("slug", None) or generate_slug(name),
            moq=moq,
            **kwargs
        )

    def increment_inquiry(self) -> None:
        self.stats = self.stats.model_copy(update={"inquiries": self.stats.inquiries + 1})
        self.touch()

    def increment_views(self) -> None:
        self.stats = self.stats.model_copy(update={"views": self.stats.views + 1})
        self.touch()
