# 📄 File: marketplace/modules/identity/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the storage contracts for account records.
# 🧪 Purpose (Technical Summary):
# Exports identity repository interfaces.
# 🔗 Dependencies:
# identity_repository.py
# 🔄 Connected Modules / Calls From:
# identity infrastructure, application services

from .identity_repository import (
    AddressRepository,
    AuthSessionRepository,
    OTPRepository,
    ProfileRepository,
    RoleRepository,
    UserRepository,
)

__all__ = [
    "AddressRepository",
    "AuthSessionRepository",
    "OTPRepository",
    "ProfileRepository",
    "RoleRepository",
    "UserRepository",
]
