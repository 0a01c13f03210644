# 📄 File: marketplace/modules/providers/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the storage contracts for role-specific profiles.
# 🧪 Purpose (Technical Summary):
# Exports provider profile repository interfaces.
# 🔗 Dependencies:
# provider_repository.py
# 🔄 Connected Modules / Calls From:
# providers infrastructure, reviews

from .provider_repository import (
    AdvocateProfileRepository,
    B2BSellerProfileRepository,
    B2CSellerProfileRepository,
    BusinessProfileRepository,
    DoctorProfileRepository,
    DriverProfileRepository,
    HomeServiceProfileRepository,
    ProviderProfileRepository,
)

__all__ = [
    "AdvocateProfileRepository",
    "B2BSellerProfileRepository",
    "B2CSellerProfileRepository",
    "BusinessProfileRepository",
    "DoctorProfileRepository",
    "DriverProfileRepository",
    "HomeServiceProfileRepository",
    "ProviderProfileRepository",
]
