# 📄 File: marketplace/modules/identity/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for accounts: passwords, verification, default addresses and sign-in codes.
#
# 🧪 Purpose (Technical Summary):
# Domain layer of the identity module: pydantic models and abstract repositories.
#
# 🔗 Dependencies:
# - pydantic, marketplace.shared.domain
#
# 🔄 Connected Modules / Calls From:
# - identity.infrastructure.database

"""
Identity Domain Layer

Pydantic entities (User, Role, Profile, Address, OTP, AuthSession) and the
repository interfaces used to store them.
"""
