# 📄 File: marketplace/modules/finance/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database tables and storage code for payments, wallets and subscriptions.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for finance entities.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, marketplace.shared.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - migrations, tests

"""
Finance Database Layer

- models: SQLAlchemy tables
- finance_repository_impl: repository implementations
"""
