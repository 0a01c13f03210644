# 📄 File: marketplace/modules/hospitality/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for hotels and restaurants.
#
# 🧪 Purpose (Technical Summary):
# Domain layer of the hospitality module: pydantic models and abstract repositories.
#
# 🔗 Dependencies:
# - pydantic, marketplace.shared.domain
#
# 🔄 Connected Modules / Calls From:
# - hospitality.infrastructure.database

"""
Hospitality Domain Layer
"""
