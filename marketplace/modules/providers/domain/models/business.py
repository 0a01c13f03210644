# 📄 File: marketplace/modules/providers/domain/models/business.py
# 🧭 Purpose (Layman Explanation):
# Profiles for businesses that sell on the marketplace: wholesale companies, online shops,
# B2B suppliers and home-service providers, with their tax numbers and payout accounts.
# 🧪 Purpose (Technical Summary):
# BusinessProfile, B2CSellerProfile, B2BSellerProfile and HomeServiceProfile domain models
# with GSTIN validation, bank account, service area and onboarding status.
# 🔗 Dependencies:
# pydantic, provider.py, marketplace.shared.utils.validators
# 🔄 Connected Modules / Calls From:
# catalog (product and bulk listings), finance (subscriptions, commission), reviews

import uuid
from enum import Enum
from typing import ClassVar, List, Optional

from pydantic import Field, field_validator

from marketplace.shared.domain.base import ValueObject
from marketplace.shared.domain.value_objects import BankAccount
from marketplace.shared.utils.validators import (
    normalize_email,
    normalize_gstin,
    normalize_phone,
    normalize_pincode,
)

from .provider import OnboardedProviderProfile, ProviderProfile


class BusinessType(str, Enum):
    MANUFACTURER = "manufacturer"
    WHOLESALER = "wholesaler"
    TRADER = "trader"
    EXPORTER = "exporter"
    IMPORTER = "importer"
    SERVICE_PROVIDER = "service-provider"


class BusinessContact(ValueObject):
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        return normalize_phone(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        return normalize_email(v) if v else None


class BusinessReach(ValueObject):
    domestic: bool = True
    international: bool = False
    countries: List[str] = Field(default_factory=list)


class BusinessRegistration(ValueObject):
    gstin: Optional[str] = None
    pan: Optional[str] = None
    iec: Optional[str] = None  # import export code

    @field_validator("gstin")
    @classmethod
    def validate_gstin(cls, v: Optional[str]) -> Optional[str]:
        return normalize_gstin(v)


class ServiceArea(ValueObject):
    city: Optional[str] = None
    state: Optional[str] = None
    pincodes: List[str] = Field(default_factory=list)

    @field_validator("pincodes")
    @classmethod
    def validate_pincodes(cls, v: List[str]) -> List[str]:
        return [normalize_pincode(pincode) for pincode in v]

    def covers(self, pincode: str) -> bool:
        return not self.pincodes or pincode in self.pincodes


class BusinessProfile(ProviderProfile):
    """B2B trade profile shown in supplier directories."""

    display_field: ClassVar[str] = "business_name"

    business_name: str = Field(min_length=1, max_length=160)
    slug: str = Field(min_length=1, max_length=180)
    business_type: BusinessType
    year_established: Optional[int] = Field(None, ge=1800, le=2100)
    description: Optional[str] = None
    category_ids: List[uuid.UUID] = Field(default_factory=list)
    address_id: uuid.UUID
    contact: BusinessContact = Field(default_factory=BusinessContact)
    reach: BusinessReach = Field(default_factory=BusinessReach)
    registration: BusinessRegistration = Field(default_factory=BusinessRegistration)
    employees: Optional[int] = Field(None, ge=1)
    annual_turnover: Optional[str] = None
    is_featured: bool = False


class B2CSellerProfile(OnboardedProviderProfile):
    """Retail storefront for consumer product listings."""

    display_field: ClassVar[str] = "store_name"

    store_name: str = Field(min_length=1, max_length=160)
    gst_number: Optional[str] = None
    pickup_address_id: uuid.UUID
    bank_details: BankAccount = Field(default_factory=BankAccount)
    logo: Optional[str] = None
    subscription_id: Optional[uuid.UUID] = None

    @field_validator("gst_number")
    @classmethod
    def validate_gst_number(cls, v: Optional[str]) -> Optional[str]:
        return normalize_gstin(v)


class B2BSellerProfile(OnboardedProviderProfile):
    """Wholesale seller for bulk listings; trust_score ranks suppliers."""

    display_field: ClassVar[str] = "company_name"

    company_name: str = Field(min_length=1, max_length=160)
    business_type: Optional[str] = None
    gst_number: Optional[str] = None
    company_address_id: uuid.UUID
    certifications: List[str] = Field(default_factory=list)
    subscription_id: Optional[uuid.UUID] = None
    trust_score: float = Field(default=0, ge=0, le=100)

    @field_validator("gst_number")
    @classmethod
    def validate_gst_number(cls, v: Optional[str]) -> Optional[str]:
        return normalize_gstin(v)


class HomeServiceProfile(OnboardedProviderProfile):
    """Home-service provider (cleaning, repairs, salon at home ...)."""

    display_field: ClassVar[str] = "provider_name"

    provider_name: str = Field(min_length=1, max_length=160)
    service_category_ids: List[uuid.UUID] = Field(default_factory=list)
    service_area: ServiceArea = Field(default_factory=ServiceArea)
    experience_years: int = Field(default=0, ge=0)
    documents: List[str] = Field(default_factory=list)
    subscription_id: Optional[uuid.UUID] = None
