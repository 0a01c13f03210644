# 📄 File: marketplace/modules/providers/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gathers the role-specific profile types (doctor, advocate, driver, sellers, businesses).
# 🧪 Purpose (Technical Summary):
# Exports provider profile entities, their value objects and enums.
# 🔗 Dependencies:
# provider.py, professional.py, driver.py, business.py
# 🔄 Connected Modules / Calls From:
# providers repositories, mobility, catalog, reviews

from .business import (
    B2BSellerProfile,
    B2CSellerProfile,
    BusinessContact,
    BusinessProfile,
    BusinessReach,
    BusinessRegistration,
    BusinessType,
    HomeServiceProfile,
    ServiceArea,
)
from .driver import DriverProfile, DriverShift, DriverStats, DrivingLicense
from .professional import (
    AdvocateConsultationMode,
    AdvocateProfile,
    Court,
    DoctorConsultationMode,
    DoctorProfile,
    Qualification,
    Registration,
)
from .provider import OnboardedProviderProfile, OnboardingStatus, ProviderProfile

__all__ = [
    "AdvocateConsultationMode",
    "AdvocateProfile",
    "B2BSellerProfile",
    "B2CSellerProfile",
    "BusinessContact",
    "BusinessProfile",
    "BusinessReach",
    "BusinessRegistration",
    "BusinessType",
    "Court",
    "DoctorConsultationMode",
    "DoctorProfile",
    "DriverProfile",
    "DriverShift",
    "DriverStats",
    "DrivingLicense",
    "HomeServiceProfile",
    "OnboardedProviderProfile",
    "OnboardingStatus",
    "ProviderProfile",
    "Qualification",
    "Registration",
    "ServiceArea",
]
