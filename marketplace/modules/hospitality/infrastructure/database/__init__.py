# 📄 File: marketplace/modules/hospitality/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database tables and storage code for hotels and restaurants.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for hospitality entities.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, marketplace.shared.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - migrations, tests

"""
Hospitality Database Layer

- models: SQLAlchemy tables
- hospitality_repository_impl: repository implementations
"""
