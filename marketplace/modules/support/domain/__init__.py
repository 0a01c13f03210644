# 📄 File: marketplace/modules/support/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for audit logs, notifications, tickets, documents and settings.
#
# 🧪 Purpose (Technical Summary):
# Domain layer of the support module: pydantic models and abstract repositories.
#
# 🔗 Dependencies:
# - pydantic, marketplace.shared.domain
#
# 🔄 Connected Modules / Calls From:
# - support.infrastructure.database

"""
Support Domain Layer
"""
