# 📄 File: marketplace/modules/catalog/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how categories, products, variants, warehouse stock, services and wholesale
# listings are stored as database tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the catalog: listing mixin columns, JSON value objects,
# unique slugs/SKUs and a partial unique index keeping one default variant per product.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - marketplace.shared.infrastructure.database (base, mixins, column types)
#
# 🔄 Connected Modules / Calls From:
# - catalog_repository_impl.py
# - migrations

from sqlalchemy import Boolean, Column, Index, Integer, String, Text, UniqueConstraint, text

from marketplace.modules.catalog.domain.models import (
    BulkPricingType,
    CategoryType,
    InventoryReason,
    ProductStatus,
    ProductType,
    ServiceLocation,
    ServiceType,
)
from marketplace.shared.infrastructure.database.base import (
    DatabaseBase,
    ListingMixin,
    SoftDeleteMixin,
    TimestampMixin,
)
from marketplace.shared.infrastructure.database.types import (
    JSONType,
    Money,
    enum_check,
    enum_column,
    foreign_key,
)


class CategoryModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    """Category tree node; slugs are unique within a category type."""
    __tablename__ = "categories"
    __table_args__ = (
        enum_check("type", CategoryType),
        UniqueConstraint("type", "slug", name="uq_categories_type_slug"),
    )

    name = Column(String(120), nullable=False)
    slug = Column(String(140), nullable=False, index=True)
    type = enum_column(CategoryType, index=True)
    parent_id = foreign_key("categories.id", ondelete="SET NULL", nullable=True)
    description = Column(Text, nullable=True)
    icon = Column(String(500), nullable=True)
    sort_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)


# =============================================================================
# PRODUCTS
# =============================================================================

class ProductModel(TimestampMixin, SoftDeleteMixin, ListingMixin, DatabaseBase):
    __tablename__ = "products"
    __table_args__ = (
        enum_check("product_type", ProductType),
        enum_check("status", ProductStatus),
        Index("ix_products_category_id_is_active", "category_id", "is_active"),
        Index("ix_products_seller_id_status", "seller_id", "status"),
    )

    seller_id = foreign_key("users.id", ondelete="CASCADE")
    category_id = foreign_key("categories.id", ondelete="RESTRICT")
    name = Column(String(200), nullable=False, index=True)
    slug = Column(String(220), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    brand = Column(String(100), nullable=True, index=True)
    images = Column(JSONType, nullable=False, default=list)
    product_type = enum_column(ProductType, default=ProductType.B2C, index=True)
    status = enum_column(ProductStatus, default=ProductStatus.DRAFT)
    pricing = Column(JSONType, nullable=False, comment="{mrp, selling_price, currency, tax_included}")
    attributes = Column(JSONType, nullable=False, default=list)
    stock = Column(Integer, nullable=False, default=0)
    moq = Column(Integer, nullable=False, default=1)
    shipping = Column(JSONType, nullable=False, default=dict)
    tax = Column(JSONType, nullable=False, default=dict, comment="{hsn_code, gst_percentage}")
    return_policy_days = Column(Integer, nullable=False, default=7)


class ProductVariantModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    """
    Product variant. The partial unique index allows a single live
    default variant per product.
    """
    __tablename__ = "product_variants"
    __table_args__ = (
        Index(
            "uq_product_variants_product_default",
            "product_id",
            unique=True,
            postgresql_where=text("is_default = true AND is_deleted = false"),
            sqlite_where=text("is_default = 1 AND is_deleted = 0"),
        ),
    )

    product_id = foreign_key("products.id", ondelete="CASCADE")
    seller_id = foreign_key("users.id", ondelete="CASCADE")
    sku = Column(String(64), nullable=False, unique=True, index=True)
    attributes = Column(JSONType, nullable=False, default=list)
    pricing = Column(JSONType, nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    low_stock_threshold = Column(Integer, nullable=False, default=5)
    images = Column(JSONType, nullable=False, default=list)
    shipping = Column(JSONType, nullable=False, default=dict)
    tax = Column(JSONType, nullable=False, default=dict)
    is_active = Column(Boolean, nullable=False, default=True)
    is_default = Column(Boolean, nullable=False, default=False)


class InventoryModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "inventories"
    __table_args__ = (
        enum_check("last_updated_reason", InventoryReason),
        Index("ix_inventories_product_id_variant_id", "product_id", "variant_id"),
    )

    product_id = foreign_key("products.id", ondelete="CASCADE", index=False)
    variant_id = foreign_key("product_variants.id", ondelete="CASCADE", nullable=True, index=False)
    seller_id = foreign_key("users.id", ondelete="CASCADE")
    warehouse = Column(JSONType, nullable=False, comment="{name, code, address_id}")
    stock = Column(JSONType, nullable=False, default=dict, comment="{available, reserved, damaged}")
    low_stock_threshold = Column(Integer, nullable=False, default=5)
    last_updated_reason = enum_column(InventoryReason, default=InventoryReason.INITIAL)
    is_active = Column(Boolean, nullable=False, default=True)


# =============================================================================
# SERVICES & BULK PRODUCTS
# =============================================================================

class ServiceModel(TimestampMixin, SoftDeleteMixin, ListingMixin, DatabaseBase):
    __tablename__ = "services"
    __table_args__ = (
        enum_check("service_type", ServiceType),
        enum_check("service_location", ServiceLocation),
        Index("ix_services_category_id_is_active", "category_id", "is_active"),
        Index("ix_services_provider_id_is_approved", "provider_id", "is_approved"),
    )

    provider_id = foreign_key("users.id", ondelete="CASCADE", index=False)
    category_id = foreign_key("categories.id", ondelete="RESTRICT", index=False)
    name = Column(String(200), nullable=False, index=True)
    slug = Column(String(220), nullable=False, index=True)
    description = Column(Text, nullable=True)
    service_type = enum_column(ServiceType, default=ServiceType.OTHER, index=True)
    pricing = Column(JSONType, nullable=False, comment="{price_type, base_price, max_price, currency, tax_included}")
    duration = Column(JSONType, nullable=False, comment="{value, unit}")
    service_location = enum_column(ServiceLocation, default=ServiceLocation.AT_HOME, index=True)
    service_area = Column(JSONType, nullable=False, default=dict)
    images = Column(JSONType, nullable=False, default=list)
    options = Column(JSONType, nullable=False, default=list)
    booking_settings = Column(JSONType, nullable=False, default=dict)


class BulkProductModel(TimestampMixin, SoftDeleteMixin, ListingMixin, DatabaseBase):
    __tablename__ = "bulk_products"
    __table_args__ = (
        enum_check("pricing_type", BulkPricingType),
        Index("ix_bulk_products_category_id_is_approved", "category_id", "is_approved"),
        Index("ix_bulk_products_moq_pricing_type", "moq", "pricing_type"),
    )

    business_profile_id = foreign_key("business_profiles.id", ondelete="CASCADE")
    seller_id = foreign_key("users.id", ondelete="CASCADE")
    category_id = foreign_key("categories.id", ondelete="RESTRICT", index=False)
    name = Column(String(200), nullable=False, index=True)
    slug = Column(String(220), nullable=False, index=True)
    description = Column(Text, nullable=True)
    specifications = Column(JSONType, nullable=False, default=list)
    moq = Column(Integer, nullable=False)
    pricing_type = enum_column(BulkPricingType, default=BulkPricingType.NEGOTIABLE)
    price = Column(Money, nullable=True)
    price_range = Column(JSONType, nullable=True, comment="{min, max}")
    currency = Column(String(3), nullable=False, default="INR")
    tax = Column(JSONType, nullable=False, default=dict)
    images = Column(JSONType, nullable=False, default=list)
    supply_ability = Column(JSONType, nullable=False, default=dict)
    delivery_time = Column(JSONType, nullable=False, default=dict)
    export_details = Column(JSONType, nullable=False, default=dict)
    stats = Column(JSONType, nullable=False, default=dict, comment="{views, inquiries}")
