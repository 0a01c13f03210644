# 📄 File: marketplace/modules/mobility/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for vehicles and rides.
#
# 🧪 Purpose (Technical Summary):
# Domain layer of the mobility module: pydantic models and abstract repositories.
#
# 🔗 Dependencies:
# - pydantic, marketplace.shared.domain
#
# 🔄 Connected Modules / Calls From:
# - mobility.infrastructure.database

"""
Mobility Domain Layer
"""
