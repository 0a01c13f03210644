# 📄 File: marketplace/modules/commerce/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for carts, orders and deliveries.
#
# 🧪 Purpose (Technical Summary):
# Domain layer of the commerce module: pydantic models and abstract repositories.
#
# 🔗 Dependencies:
# - pydantic, marketplace.shared.domain
#
# 🔄 Connected Modules / Calls From:
# - commerce.infrastructure.database

"""
Commerce Domain Layer
"""
