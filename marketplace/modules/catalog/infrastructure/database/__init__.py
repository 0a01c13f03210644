# 📄 File: marketplace/modules/catalog/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database tables and storage code for the catalog.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for catalog entities.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, marketplace.shared.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - migrations, tests

"""
Catalog Database Layer

- models: SQLAlchemy tables for categories, products, variants, inventories,
  services and bulk products
- catalog_repository_impl: repository implementations
"""
