# 📄 File: marketplace/modules/catalog/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for listings: pricing limits, stock counts and creation rules.
#
# 🧪 Purpose (Technical Summary):
# Domain layer of the catalog module: pydantic models and abstract repositories.
#
# 🔗 Dependencies:
# - pydantic, marketplace.shared.domain
#
# 🔄 Connected Modules / Calls From:
# - catalog.infrastructure.database

"""
Catalog Domain Layer
"""
