# 📄 File: marketplace/modules/providers/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database tables and storage code for provider profiles.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for provider profiles.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, marketplace.shared.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - migrations, tests

"""
Providers Database Layer

- models: one SQLAlchemy table per profile kind
- provider_repository_impl: generic profile repository and its subclasses
"""
