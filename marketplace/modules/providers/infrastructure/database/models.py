# 📄 File: marketplace/modules/providers/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how doctor, advocate, driver, business, seller and home-service profiles are
# stored as database tables, one profile of each kind per account.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for provider profiles sharing a mixin with the unique user link,
# rating cache, JSON verification block and active flag.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - marketplace.shared.infrastructure.database (base, mixins, column types)
#
# 🔄 Connected Modules / Calls From:
# - provider_repository_impl.py
# - migrations

from sqlalchemy import Boolean, Column, Float, Integer, String, Text
from sqlalchemy.orm import declared_attr

from marketplace.modules.identity.domain.models import Gender
from marketplace.modules.providers.domain.models import BusinessType, DriverShift, OnboardingStatus
from marketplace.shared.infrastructure.database.base import (
    DatabaseBase,
    RatingMixin,
    SoftDeleteMixin,
    TimestampMixin,
)
from marketplace.shared.infrastructure.database.types import (
    JSONType,
    enum_check,
    enum_column,
    foreign_key,
)


class ProviderProfileMixin(TimestampMixin, SoftDeleteMixin, RatingMixin):
    """Columns shared by every role-specific profile table."""

    @declared_attr
    def user_id(cls):
        return foreign_key("users.id", ondelete="CASCADE", unique=True)

    verification = Column(JSONType, nullable=False, default=dict, comment="{is_verified, verified_by, verified_at, rejected_reason}")
    is_active = Column(Boolean, nullable=False, default=True, index=True)


class OnboardingMixin:
    """Seller / home-service onboarding status and plan link."""

    status = enum_column(OnboardingStatus, default=OnboardingStatus.PENDING, index=True)

    @declared_attr
    def subscription_id(cls):
        return foreign_key("subscriptions.id", ondelete="SET NULL", nullable=True)


# =============================================================================
# PROFESSIONALS
# =============================================================================

class DoctorProfileModel(ProviderProfileMixin, DatabaseBase):
    __tablename__ = "doctor_profiles"
    __table_args__ = (
        enum_check("gender", Gender),
    )

    full_name = Column(String(120), nullable=False, index=True)
    slug = Column(String(140), nullable=False, index=True)
    gender = enum_column(Gender, nullable=True)
    experience_years = Column(Integer, nullable=False, default=0)
    about = Column(Text, nullable=True)
    specializations = Column(JSONType, nullable=False, default=list)
    qualifications = Column(JSONType, nullable=False, default=list)
    registrations = Column(JSONType, nullable=False, default=list)
    consultation_modes = Column(JSONType, nullable=False, default=list)
    fees = Column(JSONType, nullable=False, default=dict, comment="Fee per consultation mode")
    currency = Column(String(3), nullable=False, default="INR")
    is_featured = Column(Boolean, nullable=False, default=False)
    total_appointments = Column(Integer, nullable=False, default=0)


class AdvocateProfileModel(ProviderProfileMixin, DatabaseBase):
    __tablename__ = "advocate_profiles"
    __table_args__ = (
        enum_check("gender", Gender),
    )

    full_name = Column(String(120), nullable=False, index=True)
    slug = Column(String(140), nullable=False, index=True)
    gender = enum_column(Gender, nullable=True)
    experience_years = Column(Integer, nullable=False, default=0)
    about = Column(Text, nullable=True)
    practice_areas = Column(JSONType, nullable=False, default=list)
    courts = Column(JSONType, nullable=False, default=list)
    qualifications = Column(JSONType, nullable=False, default=list)
    registration = Column(JSONType, nullable=True, comment="{council, registration_number, year}")
    consultation_modes = Column(JSONType, nullable=False, default=list)
    fees = Column(JSONType, nullable=False, default=dict)
    currency = Column(String(3), nullable=False, default="INR")
    is_featured = Column(Boolean, nullable=False, default=False)
    total_cases = Column(Integer, nullable=False, default=0)


# =============================================================================
# DRIVERS
# =============================================================================

class DriverProfileModel(ProviderProfileMixin, DatabaseBase):
    __tablename__ = "driver_profiles"
    __table_args__ = (
        enum_check("gender", Gender),
        enum_check("shift", DriverShift),
    )

    full_name = Column(String(120), nullable=False, index=True)
    phone = Column(String(15), nullable=True, index=True)
    gender = enum_column(Gender, nullable=True)
    experience_years = Column(Integer, nullable=False, default=0)
    about = Column(Text, nullable=True)
    license = Column(JSONType, nullable=False, comment="{number, issuing_authority, expiry_date}")
    is_online = Column(Boolean, nullable=False, default=False, index=True)
    shift = enum_column(DriverShift, default=DriverShift.FLEXIBLE)
    current_location = Column(JSONType, nullable=True)
    is_blocked = Column(Boolean, nullable=False, default=False, index=True)
    stats = Column(JSONType, nullable=False, default=dict)


# =============================================================================
# BUSINESSES & SELLERS
# =============================================================================

class BusinessProfileModel(ProviderProfileMixin, DatabaseBase):
    __tablename__ = "business_profiles"
    __table_args__ = (
        enum_check("business_type", BusinessType),
    )

    business_name = Column(String(160), nullable=False, index=True)
    slug = Column(String(180), nullable=False, index=True)
    business_type = enum_column(BusinessType, index=True)
    year_established = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    category_ids = Column(JSONType, nullable=False, default=list)
    address_id = foreign_key("addresses.id", ondelete="RESTRICT")
    contact = Column(JSONType, nullable=False, default=dict)
    reach = Column(JSONType, nullable=False, default=dict)
    registration = Column(JSONType, nullable=False, default=dict, comment="{gstin, pan, iec}")
    employees = Column(Integer, nullable=True)
    annual_turnover = Column(String(60), nullable=True)
    is_featured = Column(Boolean, nullable=False, default=False)


class B2CSellerProfileModel(ProviderProfileMixin, OnboardingMixin, DatabaseBase):
    __tablename__ = "b2c_seller_profiles"
    __table_args__ = (
        enum_check("status", OnboardingStatus),
    )

    store_name = Column(String(160), nullable=False)
    gst_number = Column(String(15), nullable=True, index=True)
    pickup_address_id = foreign_key("addresses.id", ondelete="RESTRICT", index=False)
    bank_details = Column(JSONType, nullable=False, default=dict)
    logo = Column(String(500), nullable=True)


class B2BSellerProfileModel(ProviderProfileMixin, OnboardingMixin, DatabaseBase):
    __tablename__ = "b2b_seller_profiles"
    __table_args__ = (
        enum_check("status", OnboardingStatus),
    )

    company_name = Column(String(160), nullable=False)
    business_type = Column(String(60), nullable=True)
    gst_number = Column(String(15), nullable=True, index=True)
    company_address_id = foreign_key("addresses.id", ondelete="RESTRICT", index=False)
    certifications = Column(JSONType, nullable=False, default=list)
    trust_score = Column(Float, nullable=False, default=0)


class HomeServiceProfileModel(ProviderProfileMixin, OnboardingMixin, DatabaseBase):
    __tablename__ = "home_service_profiles"
    __table_args__ = (
        enum_check("status", OnboardingStatus),
    )

    provider_name = Column(String(160), nullable=False)
    service_category_ids = Column(JSONType, nullable=False, default=list)
    service_area = Column(JSONType, nullable=False, default=dict, comment="{city, state, pincodes}")
    experience_years = Column(Integer, nullable=False, default=0)
    documents = Column(JSONType, nullable=False, default=list)
