# 📄 File: marketplace/modules/identity/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gathers the account-related record types in one place.
# 🧪 Purpose (Technical Summary):
# Exports identity domain entities and enums.
# 🔗 Dependencies:
# user.py, profile.py, auth.py
# 🔄 Connected Modules / Calls From:
# identity repositories, other modules referencing users

from .auth import OTP, AuthSession, DeviceType, OTPPurpose
from .profile import Address, AddressType, Gender, Profile
from .user import Role, User, UserRole, UserStatus

__all__ = [
    "Address",
    "AddressType",
    "AuthSession",
    "DeviceType",
    "Gender",
    "OTP",
    "OTPPurpose",
    "Profile",
    "Role",
    "User",
    "UserRole",
    "UserStatus",
]
