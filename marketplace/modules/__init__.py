# 📄 File: marketplace/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# The list of all business areas (users, catalog, orders, bookings, hotels, rides,
# cinemas, money, support, reviews) and a helper that loads every table they define.
#
# 🧪 Purpose (Technical Summary):
# Bounded-context package. load_all_models() imports every module's ORM models so
# DatabaseBase.metadata is complete before create_all or Alembic autogenerate.
#
# 🔗 Dependencies:
# - importlib, each module's infrastructure.database.models
#
# 🔄 Connected Modules / Calls From:
# - migrations/env.py, migrations/versions
# - tests/conftest.py

"""
Marketplace Modules

Each module follows the same layering:
- domain/models: pydantic entities and value objects
- domain/repositories: abstract repositories
- domain/services: cross-entity rules (where needed)
- infrastructure/database: SQLAlchemy models and repository implementations
"""

import importlib
import logging

logger = logging.getLogger(__name__)

# Order matters only for readability; foreign keys resolve by table name
MODULES = (
    "identity",
    "providers",
    "catalog",
    "commerce",
    "services",
    "hospitality",
    "mobility",
    "cinema",
    "finance",
    "support",
    "reviews",
)


def load_all_models() -> None:
    """Import every module's ORM models so their tables register on the shared metadata."""
    for name in MODULES:
        importlib.import_module(f"marketplace.modules.{name}.infrastructure.database.models")
    logger.debug(f"Loaded ORM models for {len(MODULES)} modules")


__all__ = ["MODULES", "load_all_models"]
