# 📄 File: marketplace/modules/services/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database tables and storage code for home-service bookings.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for services entities.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, marketplace.shared.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - migrations, tests

"""
Services Database Layer

- models: SQLAlchemy tables
- booking_repository_impl: repository implementation
"""
