# 📄 File: marketplace/modules/catalog/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the storage contracts for catalog records.
# 🧪 Purpose (Technical Summary):
# Exports catalog repository interfaces.
# 🔗 Dependencies:
# catalog_repository.py
# 🔄 Connected Modules / Calls From:
# catalog infrastructure, application services

from .catalog_repository import (
    BulkProductRepository,
    CategoryRepository,
    InventoryRepository,
    ProductRepository,
    ProductVariantRepository,
    ServiceRepository,
)

__all__ = [
    "BulkProductRepository",
    "CategoryRepository",
    "InventoryRepository",
    "ProductRepository",
    "ProductVariantRepository",
    "ServiceRepository",
]
