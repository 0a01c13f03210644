# 📄 File: marketplace/modules/commerce/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how carts, coupons, orders, order lines and shipments are stored as tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for commerce: one cart per user, unique coupon codes and order
# numbers, JSON snapshots for items/totals/tracking, RESTRICT foreign keys on order
# history.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - marketplace.shared.infrastructure.database (base, mixins, column types)
#
# 🔄 Connected Modules / Calls From:
# - commerce_repository_impl.py
# - migrations

from sqlalchemy import Boolean, Column, Index, Integer, String, Text

from marketplace.modules.commerce.domain.models import (
    CouponScope,
    DiscountType,
    OrderItemStatus,
    OrderStatus,
    ShipmentStatus,
    ShipmentType,
)
from marketplace.shared.domain.value_objects import PaymentStatus
from marketplace.shared.infrastructure.database.base import DatabaseBase, SoftDeleteMixin, TimestampMixin
from marketplace.shared.infrastructure.database.types import (
    JSONType,
    Money,
    UTCDateTime,
    enum_check,
    enum_column,
    foreign_key,
)


class CartModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    """One cart per user (unique user_id)."""
    __tablename__ = "carts"
    __table_args__ = (
        Index("ix_carts_user_id_is_active", "user_id", "is_active"),
    )

    user_id = foreign_key("users.id", ondelete="CASCADE", unique=True, index=False)
    items = Column(JSONType, nullable=False, default=list)
    coupon_id = foreign_key("coupons.id", ondelete="SET NULL", nullable=True, index=False)
    discount_amount = Column(Money, nullable=False, default=0)
    totals = Column(JSONType, nullable=False, default=dict, comment="{sub_total, tax, grand_total, currency}")
    is_active = Column(Boolean, nullable=False, default=True)
    last_updated_at = Column(UTCDateTime, nullable=False)


class CouponModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "coupons"
    __table_args__ = (
        enum_check("applicable_on", CouponScope),
        enum_check("discount_type", DiscountType),
        Index("ix_coupons_applicable_on_window", "applicable_on", "start_date", "end_date"),
    )

    code = Column(String(32), nullable=False, unique=True, index=True, comment="Uppercase coupon code")
    title = Column(String(120), nullable=True)
    description = Column(Text, nullable=True)
    applicable_on = enum_column(CouponScope)
    discount_type = enum_column(DiscountType)
    discount_value = Column(Money, nullable=False)
    max_discount_amount = Column(Money, nullable=True)
    min_order_amount = Column(Money, nullable=False, default=0)
    usage_limit = Column(JSONType, nullable=False, default=dict, comment="{total, per_user}")
    used_count = Column(Integer, nullable=False, default=0)
    allowed_roles = Column(JSONType, nullable=False, default=list)
    category_id = foreign_key("categories.id", ondelete="SET NULL", nullable=True, index=False)
    service_id = foreign_key("services.id", ondelete="SET NULL", nullable=True, index=False)
    start_date = Column(UTCDateTime, nullable=False)
    end_date = Column(UTCDateTime, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    is_public = Column(Boolean, nullable=False, default=True)
    created_by = foreign_key("users.id", ondelete="SET NULL", nullable=True, index=False)
    terms = Column(Text, nullable=True)


# =============================================================================
# ORDERS
# =============================================================================

class OrderModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "orders"
    __table_args__ = (
        enum_check("status", OrderStatus),
        enum_check("payment_status", PaymentStatus),
        Index("ix_orders_user_id_created_at", "user_id", "created_at"),
        Index("ix_orders_status_payment_status", "status", "payment_status"),
    )

    order_number = Column(String(32), nullable=False, unique=True, index=True, comment="ORD-YYYY-NNNNNN")
    user_id = foreign_key("users.id", ondelete="RESTRICT", index=False)
    shipping_address_id = foreign_key("addresses.id", ondelete="RESTRICT", index=False)
    items = Column(JSONType, nullable=False, comment="Line snapshots")
    totals = Column(JSONType, nullable=False, comment="{sub_total, discount, tax, shipping, grand_total, currency}")
    payment_id = foreign_key("payments.id", ondelete="SET NULL", nullable=True)
    payment_status = enum_column(PaymentStatus, default=PaymentStatus.PENDING)
    shipment_id = foreign_key("shipments.id", ondelete="SET NULL", nullable=True, index=False, use_alter=True)
    status = enum_column(OrderStatus, default=OrderStatus.PENDING)
    cancellation = Column(JSONType, nullable=True)
    return_request = Column(JSONType, nullable=True)
    invoice_id = foreign_key("invoices.id", ondelete="SET NULL", nullable=True, index=False, use_alter=True)


class OrderItemModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "order_items"
    __table_args__ = (
        enum_check("status", OrderItemStatus),
        Index("ix_order_items_seller_id_status", "seller_id", "status"),
        Index("ix_order_items_user_id_created_at", "user_id", "created_at"),
    )

    order_id = foreign_key("orders.id", ondelete="CASCADE")
    user_id = foreign_key("users.id", ondelete="RESTRICT", index=False)
    seller_id = foreign_key("users.id", ondelete="RESTRICT", index=False)
    product_id = foreign_key("products.id", ondelete="RESTRICT", index=False)
    variant_id = foreign_key("product_variants.id", ondelete="SET NULL", nullable=True, index=False)
    product_name = Column(String(200), nullable=False)
    sku = Column(String(64), nullable=True, index=True)
    quantity = Column(Integer, nullable=False)
    pricing = Column(JSONType, nullable=False, comment="{mrp, selling_price, tax_amount, currency}")
    total_price = Column(Money, nullable=False)
    tax = Column(JSONType, nullable=False, default=dict)
    status = enum_column(OrderItemStatus, default=OrderItemStatus.PENDING)
    shipment_id = foreign_key("shipments.id", ondelete="SET NULL", nullable=True, index=False)
    cancellation = Column(JSONType, nullable=True)
    return_request = Column(JSONType, nullable=True)
    refund = Column(JSONType, nullable=True, comment="{amount, payment_id, refunded_at, reason}")
    invoice_id = foreign_key("invoices.id", ondelete="SET NULL", nullable=True, index=False, use_alter=True)
    is_commission_applied = Column(Boolean, nullable=False, default=False, index=True)


class ShipmentModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "shipments"
    __table_args__ = (
        enum_check("shipment_type", ShipmentType),
        enum_check("status", ShipmentStatus),
        Index("ix_shipments_seller_id_status", "seller_id", "status"),
        Index("ix_shipments_shipment_type_status", "shipment_type", "status"),
    )

    order_id = foreign_key("orders.id", ondelete="CASCADE")
    order_item_ids = Column(JSONType, nullable=False, default=list)
    user_id = foreign_key("users.id", ondelete="RESTRICT")
    seller_id = foreign_key("users.id", ondelete="RESTRICT", index=False)
    shipping_address = Column(JSONType, nullable=False, default=dict)
    courier = Column(JSONType, nullable=False, default=dict, comment="{name, service_type, awb, tracking_url}")
    shipment_type = enum_column(ShipmentType, default=ShipmentType.FORWARD)
    cod = Column(JSONType, nullable=False, default=dict)
    package = Column(JSONType, nullable=False, default=dict)
    status = enum_column(ShipmentStatus, default=ShipmentStatus.CREATED)
    shipped_at = Column(UTCDateTime, nullable=True)
    delivered_at = Column(UTCDateTime, nullable=True)
    returned_at = Column(UTCDateTime, nullable=True)
    tracking_history = Column(JSONType, nullable=False, default=list)
    charges = Column(JSONType, nullable=False, default=dict)
