# 📄 File: marketplace/modules/services/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for home-service bookings.
#
# 🧪 Purpose (Technical Summary):
# Domain layer of the services module: pydantic models and abstract repositories.
#
# 🔗 Dependencies:
# - pydantic, marketplace.shared.domain
#
# 🔄 Connected Modules / Calls From:
# - services.infrastructure.database

"""
Services Domain Layer
"""
