# 📄 File: marketplace/modules/reviews/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database tables and storage code for reviews and ratings.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for reviews entities.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, marketplace.shared.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - migrations, tests

"""
Reviews Database Layer

- models: SQLAlchemy tables
- review_repository_impl: repository implementations
"""
