# 📄 File: marketplace/modules/catalog/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# One place to import every catalog record type from.
# 🧪 Purpose (Technical Summary):
# Re-exports catalog domain entities, value objects and enums.
# 🔗 Dependencies:
# category.py, product.py, listing.py
# 🔄 Connected Modules / Calls From:
# catalog repositories, commerce, reviews

from .category import Category, CategoryType
from .listing import (
    BookingSettings,
    BulkPricingType,
    BulkProduct,
    Coverage,
    DeliveryTime,
    DeliveryUnit,
    DurationUnit,
    ExportDetails,
    ListingStats,
    PriceRange,
    PriceType,
    Service,
    ServiceDuration,
    ServiceLocation,
    ServiceOption,
    ServicePricing,
    ServiceType,
    Specification,
    SupplyAbility,
)
from .product import (
    Inventory,
    InventoryReason,
    Product,
    ProductAttribute,
    ProductPricing,
    ProductStatus,
    ProductType,
    ProductVariant,
    ShippingInfo,
    StockLevels,
    VariantAttribute,
    Warehouse,
)

__all__ = [
    "BookingSettings",
    "BulkPricingType",
    "BulkProduct",
    "Category",
    "CategoryType",
    "Coverage",
    "DeliveryTime",
    "DeliveryUnit",
    "DurationUnit",
    "ExportDetails",
    "Inventory",
    "InventoryReason",
    "ListingStats",
    "PriceRange",
    "PriceType",
    "Product",
    "ProductAttribute",
    "ProductPricing",
    "ProductStatus",
    "ProductType",
    "ProductVariant",
    "Service",
    "ServiceDuration",
    "ServiceLocation",
    "ServiceOption",
    "ServicePricing",
    "ServiceType",
    "ShippingInfo",
    "Specification",
    "StockLevels",
    "SupplyAbility",
    "VariantAttribute",
    "Warehouse",
]
