# 📄 File: marketplace/modules/mobility/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database tables and storage code for vehicles and rides.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for mobility entities.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, marketplace.shared.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - migrations, tests

"""
Mobility Database Layer

- models: SQLAlchemy tables
- mobility_repository_impl: repository implementations
"""
