# 📄 File: marketplace/modules/cinema/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database tables and storage code for cinemas, shows and tickets.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for cinema entities.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, marketplace.shared.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - migrations, tests

"""
Cinema Database Layer

- models: SQLAlchemy tables
- cinema_repository_impl: repository implementations
"""
