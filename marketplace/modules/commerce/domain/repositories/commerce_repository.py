# 📄 File: marketplace/modules/commerce/domain/repositories/commerce_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how carts, coupons, orders and parcels are found and saved.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for commerce entities on top of the shared BaseRepository.
# 🔗 Dependencies:
# abc, marketplace.shared.domain.repository, commerce domain models
# 🔄 Connected Modules / Calls From:
# commerce infrastructure implementations, embedding application services

import uuid
from abc import abstractmethod
from typing import List, Optional

from marketplace.shared.domain.repository import BaseRepository

from ..models import Cart, Coupon, Order, OrderItem, OrderItemStatus, OrderStatus, Shipment


class CartRepository(BaseRepository[Cart]):

    @abstractmethod
    async def get_by_user(self, user_id: uuid.UUID, include_deleted: bool = False) -> Optional[Cart]:
        pass

    @abstractmethod
    async def get_or_create_for_user(self, user_id: uuid.UUID) -> Cart:
        """
        Return the user's cart, creating an empty one on first use.

        A soft deleted cart is restored empty rather than re-inserted.
        """
        pass


class CouponRepository(BaseRepository[Coupon]):

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[Coupon]:
        """Case-insensitive lookup (codes are stored uppercase)."""
        pass

    @abstractmethod
    async def list_public_active(self) -> List[Coupon]:
        pass


class OrderRepository(BaseRepository[Order]):
    """
    Repository interface for orders.

    Implementation Notes:
    - Order numbers are unique
    - User listings are newest first
    """

    @abstractmethod
    async def get_by_order_number(self, order_number: str) -> Optional[Order]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[Order]:
        pass

    @abstractmethod
    async def list_by_status(self, status: OrderStatus, limit: int = 100) -> List[Order]:
        pass


class OrderItemRepository(BaseRepository[OrderItem]):

    @abstractmethod
    async def list_for_order(self, order_id: uuid.UUID) -> List[OrderItem]:
        pass

    @abstractmethod
    async def list_for_seller(
        self,
        seller_id: uuid.UUID,
        status: Optional[OrderItemStatus] = None,
        limit: int = 100
    ) -> List[OrderItem]:
        pass

    @abstractmethod
    async def list_pending_commission(self, limit: int = 100) -> List[OrderItem]:
        """Delivered lines whose platform commission has not been applied yet."""
        pass


class ShipmentRepository(BaseRepository[Shipment]):

    @abstractmethod
    async def get_by_awb(self, awb: str) -> Optional[Shipment]:
        pass

    @abstractmethod
    async def list_for_order(self, order_id: uuid.UUID) -> List[Shipment]:
        pass
