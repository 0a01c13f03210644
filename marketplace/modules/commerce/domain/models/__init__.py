# 📄 File: marketplace/modules/commerce/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# One place to import every shopping record type from.
# 🧪 Purpose (Technical Summary):
# Re-exports commerce domain entities, value objects and enums.
# 🔗 Dependencies:
# cart.py, order.py, shipment.py
# 🔄 Connected Modules / Calls From:
# commerce repositories, finance, reviews

from .cart import Cart, CartItem, CartTotals, Coupon, CouponScope, DiscountType, UsageLimit
from .order import (
    ORDER_NUMBER_PREFIX,
    Order,
    OrderItem,
    OrderItemPricing,
    OrderItemStatus,
    OrderLine,
    OrderStatus,
    OrderTotals,
    ReturnRequest,
    ReturnStatus,
)
from .shipment import (
    CashOnDelivery,
    Courier,
    PackageInfo,
    Shipment,
    ShipmentStatus,
    ShipmentType,
    ShippingAddress,
    ShippingCharges,
    TrackingEvent,
)

__all__ = [
    "ORDER_NUMBER_PREFIX",
    "Cart",
    "CartItem",
    "CartTotals",
    "CashOnDelivery",
    "Coupon",
    "CouponScope",
    "Courier",
    "DiscountType",
    "Order",
    "OrderItem",
    "OrderItemPricing",
    "OrderItemStatus",
    "OrderLine",
    "OrderStatus",
    "OrderTotals",
    "PackageInfo",
    "ReturnRequest",
    "ReturnStatus",
    "Shipment",
    "ShipmentStatus",
    "ShipmentType",
    "ShippingAddress",
    "ShippingCharges",
    "TrackingEvent",
    "UsageLimit",
]
