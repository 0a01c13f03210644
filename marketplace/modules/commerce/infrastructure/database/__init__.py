# 📄 File: marketplace/modules/commerce/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database tables and storage code for carts, orders and deliveries.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for commerce entities.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, marketplace.shared.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - migrations, tests

"""
Commerce Database Layer

- models: SQLAlchemy tables
- commerce_repository_impl: repository implementations
"""
