# 📄 File: marketplace/modules/providers/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for provider profiles such as verification and fees.
#
# 🧪 Purpose (Technical Summary):
# Domain layer of the providers module: pydantic profile models and abstract repositories.
#
# 🔗 Dependencies:
# - pydantic, marketplace.shared.domain
#
# 🔄 Connected Modules / Calls From:
# - providers.infrastructure.database

"""
Providers Domain Layer
"""
