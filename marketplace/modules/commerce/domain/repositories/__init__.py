# 📄 File: marketplace/modules/commerce/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the storage contracts for shopping records.
# 🧪 Purpose (Technical Summary):
# Exports commerce repository interfaces.
# 🔗 Dependencies:
# commerce_repository.py
# 🔄 Connected Modules / Calls From:
# commerce infrastructure, application services

from .commerce_repository import (
    CartRepository,
    CouponRepository,
    OrderItemRepository,
    OrderRepository,
    ShipmentRepository,
)

__all__ = [
    "CartRepository",
    "CouponRepository",
    "OrderItemRepository",
    "OrderRepository",
    "ShipmentRepository",
]
