# 📄 File: marketplace/modules/support/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database tables and storage code for audit logs, notifications, tickets, documents and settings.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for support entities.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, marketplace.shared.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - migrations, tests

"""
Support Database Layer

- models: SQLAlchemy tables
- support_repository_impl: repository implementations
"""
