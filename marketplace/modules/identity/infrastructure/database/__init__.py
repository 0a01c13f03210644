# 📄 File: marketplace/modules/identity/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database tables and storage code for accounts.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for identity entities.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, marketplace.shared.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - migrations, tests, embedding application services

"""
Identity Database Layer

- models: SQLAlchemy tables (users, roles, profiles, addresses, otps, sessions)
- identity_repository_impl: repository implementations
"""
