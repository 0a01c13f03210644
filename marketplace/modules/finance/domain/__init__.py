# 📄 File: marketplace/modules/finance/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for payments, wallets and subscriptions.
#
# 🧪 Purpose (Technical Summary):
# Domain layer of the finance module: pydantic models and abstract repositories.
#
# 🔗 Dependencies:
# - pydantic, marketplace.shared.domain
#
# 🔄 Connected Modules / Calls From:
# - finance.infrastructure.database

"""
Finance Domain Layer
"""
